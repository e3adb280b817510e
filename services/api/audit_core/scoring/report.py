"""
Multi-platform report generation.

Runs category scoring, platform scoring, findings, quick wins and the action
plan for every selected platform, then merges the platform reports.

Known limitations kept as-is:
- the overall score is the unweighted mean of platform scores;
- the merged action plan is sorted by each platform's own priority numbers,
  which restart at 1 per platform, so it is not a true cross-platform
  severity ordering.
"""
from __future__ import annotations

import logging
from fractions import Fraction
from typing import Iterable, List, Mapping, Optional, Sequence

from audit_core.models import (
    ActionItem,
    AuditResponse,
    MultiPlatformReport,
    PlatformChecklist,
    PlatformReport,
    Severity,
    TopIssue,
)
from audit_core.rounding import round_half_up
from audit_core.telemetry import log_audit_event

from .action_plan import MAX_ACTION_ITEMS, generate_action_plan
from .algorithms import index_responses, pair_checks_with_responses, score_platform, score_to_grade
from .findings import count_findings_by_severity, generate_findings, get_top_findings
from .quick_wins import extract_quick_wins, format_quick_win

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5
MAX_TOP_ISSUES_PER_PLATFORM = 5
NO_RESPONSES_MESSAGE = "No responses provided for this platform"


def generate_platform_report(
    checklist: PlatformChecklist,
    responses: Sequence[AuditResponse],
    business_type: Optional[str] = None,
    weights: Optional[Mapping[str, float]] = None,
) -> PlatformReport:
    """Build the report for one platform. Zero responses gives score 0, grade F."""
    platform = checklist.platform
    if not responses:
        return PlatformReport(
            platform=platform,
            score=0,
            grade="F",
            recommendations=(NO_RESPONSES_MESSAGE,),
        )

    response_map = index_responses(responses)
    check_map = checklist.check_by_id()
    unknown = [check_id for check_id in response_map if check_id not in check_map]
    if unknown:
        logger.debug("%s: ignoring %d responses without a catalog entry: %s", platform, len(unknown), unknown)

    pairs = pair_checks_with_responses(checklist.checks, response_map)
    platform_score = score_platform(checklist.categories, pairs, weights)

    findings = generate_findings(response_map.values(), check_map)
    quick_wins = extract_quick_wins(findings, check_map)
    action_plan = generate_action_plan(findings, platform, business_type)

    return PlatformReport(
        platform=platform,
        score=platform_score.score,
        grade=platform_score.grade,
        findings=count_findings_by_severity(findings),
        recommendations=tuple(item.description or item.title for item in action_plan[:MAX_RECOMMENDATIONS]),
        quick_wins=tuple(format_quick_win(win) for win in quick_wins),
        category_scores=platform_score.category_scores,
        finding_details=tuple(findings),
        quick_win_details=tuple(quick_wins),
        action_plan=tuple(action_plan),
        results=tuple(response_map.values()),
    )


def _top_issues(report: PlatformReport) -> List[TopIssue]:
    severe = [f for f in report.finding_details if f.severity in (Severity.CRITICAL, Severity.HIGH)]
    return [
        TopIssue(platform=report.platform, check_id=f.check_id, issue=f.current_state, priority=f.severity)
        for f in get_top_findings(severe, MAX_TOP_ISSUES_PER_PLATFORM)
    ]


def merge_action_plans(reports: Iterable[PlatformReport], limit: int = MAX_ACTION_ITEMS) -> List[ActionItem]:
    """Concatenate platform plans and stable-sort by raw priority number."""
    merged: List[ActionItem] = []
    for report in reports:
        merged.extend(report.action_plan)
    merged.sort(key=lambda item: item.priority)
    return merged[:limit]


def generate_report(
    selected_platforms: Sequence[str],
    checklists_by_platform: Mapping[str, PlatformChecklist],
    responses_by_platform: Mapping[str, Sequence[AuditResponse]],
    business_type: Optional[str] = None,
    weights: Optional[Mapping[str, float]] = None,
) -> MultiPlatformReport:
    """
    Generate the combined report for the selected platforms.

    Platforms without a checklist (missing or empty) are left out entirely.
    Calling this twice with the same inputs returns equal reports.
    """
    platform_reports: List[PlatformReport] = []
    top_issues: List[TopIssue] = []

    for platform in selected_platforms:
        checklist = checklists_by_platform.get(platform)
        if checklist is None or checklist.is_empty():
            logger.debug("Skipping %s: no checklist", platform)
            continue

        report = generate_platform_report(
            checklist,
            list(responses_by_platform.get(platform) or []),
            business_type=business_type,
            weights=weights,
        )
        platform_reports.append(report)
        top_issues.extend(_top_issues(report))

    if platform_reports:
        overall_score = round_half_up(Fraction(sum(r.score for r in platform_reports), len(platform_reports)))
    else:
        overall_score = 0

    result = MultiPlatformReport(
        overall_score=overall_score,
        overall_grade=score_to_grade(overall_score),
        platform_reports=tuple(platform_reports),
        top_issues=tuple(top_issues),
        action_plan=tuple(merge_action_plans(platform_reports)),
    )

    log_audit_event(
        "generate_report",
        {
            "platforms": [r.platform for r in platform_reports],
            "overall_score": result.overall_score,
            "overall_grade": result.overall_grade,
            "action_items": len(result.action_plan),
        },
    )
    return result
