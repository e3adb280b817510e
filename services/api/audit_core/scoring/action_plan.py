"""
Action plan generator.

Findings are emitted bucket by bucket (critical, high, medium, low). Inside a
bucket the cheapest fixes come first, then category name. Priorities are
assigned densely from 1 in emission order and the plan is capped.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from audit_core.models import (
    EFFORT_RANK,
    SEVERITY_ORDER,
    SEVERITY_RANK,
    ActionItem,
    Effort,
    Finding,
    Severity,
)

from .findings import group_findings_by_severity
from .rules import checklist_steps, expected_impact

MAX_ACTION_ITEMS = 15

_HOURS_BY_EFFORT = {
    Effort.LOW: 0.5,
    Effort.MEDIUM: 2.0,
    Effort.HIGH: 4.0,
}


def generate_action_plan(
    findings: Iterable[Finding],
    platform: str,
    business_type: Optional[str] = None,
    limit: int = MAX_ACTION_ITEMS,
) -> List[ActionItem]:
    """
    Turn findings into prioritized action items. No findings gives an empty plan.

    ``business_type`` is accepted for callers that carry it; it does not change
    the ordering or the text.
    """
    by_severity = group_findings_by_severity(findings)
    items: List[ActionItem] = []
    priority = 1

    for severity in SEVERITY_ORDER:
        bucket = sorted(
            by_severity.get(severity, []),
            key=lambda f: (EFFORT_RANK[f.effort], f.category),
        )
        for finding in bucket:
            items.append(create_action_item(finding, priority, platform, business_type))
            priority += 1

    return items[:limit]


def create_action_item(
    finding: Finding,
    priority: int,
    platform: str,
    business_type: Optional[str] = None,
) -> ActionItem:
    title = finding.title
    if finding.severity == Severity.CRITICAL:
        title = "🚨 " + title
    description = finding.recommendation or f"{finding.current_state} → Target: {finding.target_state}"

    return ActionItem(
        priority=priority,
        title=title,
        description=description,
        category=finding.category,
        severity=finding.severity,
        estimated_effort=finding.effort,
        expected_impact=expected_impact(finding),
        checklist=create_action_checklist(finding, platform),
        platform=platform,
    )


def create_action_checklist(finding: Finding, platform: str) -> tuple:
    return ("Review current state: " + finding.current_state,) + tuple(checklist_steps(finding, platform))


def identify_dependencies(action_items: Sequence[ActionItem]) -> Dict[int, List[int]]:
    """
    Map item index -> priorities it waits on. Tracking items depend on the
    first conversion item, which has to be fixed before tracking data is usable.
    """
    dependencies: Dict[int, List[int]] = {}
    conversion_index = next(
        (idx for idx, item in enumerate(action_items) if "conversion" in item.title.lower()),
        -1,
    )
    if conversion_index < 0:
        return dependencies

    blocker = action_items[conversion_index].priority
    for idx, item in enumerate(action_items):
        if idx != conversion_index and "Tracking" in item.category:
            dependencies.setdefault(idx, []).append(blocker)
    return dependencies


def estimate_implementation_time(action_items: Iterable[ActionItem]) -> float:
    """Total hours for the plan."""
    return sum(_HOURS_BY_EFFORT.get(item.estimated_effort, 1.0) for item in action_items)


def get_high_impact_items(action_items: Sequence[ActionItem], limit: int = 5) -> List[ActionItem]:
    ranked = sorted(
        action_items,
        key=lambda item: (SEVERITY_RANK[item.severity], EFFORT_RANK[item.estimated_effort]),
    )
    return ranked[:limit]
