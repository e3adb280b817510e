"""
Quick-win extractor.

A quick win is a finding that is cheap to fix: any low-effort finding, or a
medium-effort finding of high/medium severity. High-effort findings never
qualify.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from audit_core.models import AuditCheck, Effort, Finding, QuickWin, Severity

from .rules import catalog_effort, quick_win_impact

MAX_QUICK_WINS = 5

_MINUTES_BY_EFFORT = {
    Effort.LOW: 15,
    Effort.MEDIUM: 45,
}


def _qualifies(finding: Finding) -> bool:
    if finding.effort == Effort.LOW:
        return True
    return finding.effort == Effort.MEDIUM and finding.severity in (Severity.HIGH, Severity.MEDIUM)


def extract_quick_wins(
    findings: Iterable[Finding],
    checks: Union[Iterable[AuditCheck], Mapping[str, AuditCheck]],
    limit: int = MAX_QUICK_WINS,
) -> List[QuickWin]:
    """
    Select up to ``limit`` quick wins from ranked findings.

    Deduplicates by check id (first occurrence wins) and moves low-effort items
    ahead of medium-effort ones, keeping the findings order within each group.
    """
    check_map = checks if isinstance(checks, Mapping) else {check.id: check for check in checks}
    quick_wins: List[QuickWin] = []
    processed: set = set()

    for finding in findings:
        if finding.check_id in processed or not _qualifies(finding):
            continue
        quick_win = create_quick_win(finding, check_map)
        if quick_win is not None:
            quick_wins.append(quick_win)
            processed.add(finding.check_id)

    quick_wins.sort(key=lambda win: 0 if win.effort == Effort.LOW else 1)
    return quick_wins[:limit]


def create_quick_win(finding: Finding, check_map: Mapping[str, AuditCheck]) -> Optional[QuickWin]:
    if not finding.recommendation or finding.effort == Effort.HIGH:
        return None
    if finding.check_id not in check_map:
        return None

    return QuickWin(
        id=f"qw-{finding.check_id.lower()}",
        title=finding.title,
        description=finding.reason,
        estimated_impact=quick_win_impact(finding),
        effort=finding.effort,
        category=finding.category,
        check_ids=(finding.check_id,),
    )


def format_quick_win(quick_win: QuickWin) -> str:
    return f"{quick_win.description} (Est. effort: {quick_win.effort.value})"


def estimate_effort(check: AuditCheck) -> Effort:
    """Effort estimate from the check text and category alone, before any response exists."""
    return catalog_effort(check)


def get_quick_wins_for_category(
    findings: Iterable[Finding],
    category: str,
    checks: Union[Iterable[AuditCheck], Mapping[str, AuditCheck]],
) -> List[QuickWin]:
    return extract_quick_wins([f for f in findings if f.category == category], checks)


def categorize_quick_wins(quick_wins: Iterable[QuickWin]) -> Dict[str, List[QuickWin]]:
    categorized: Dict[str, List[QuickWin]] = {}
    for win in quick_wins:
        categorized.setdefault(win.category, []).append(win)
    return categorized


def estimate_completion_time(quick_wins: Sequence[QuickWin]) -> int:
    """Rough total in minutes."""
    return sum(_MINUTES_BY_EFFORT.get(win.effort, 15) for win in quick_wins)
