"""
Findings generator: one finding per warning or failing response.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Mapping, Sequence, Union

from audit_core.models import (
    SEVERITY_RANK,
    AuditCheck,
    AuditResponse,
    CheckStatus,
    Finding,
    Severity,
    SeverityCounts,
)

from .rules import finding_effort

logger = logging.getLogger(__name__)

_FINDING_STATUSES = (CheckStatus.WARNING, CheckStatus.FAIL)


def _as_check_map(checks: Union[Iterable[AuditCheck], Mapping[str, AuditCheck]]) -> Mapping[str, AuditCheck]:
    if isinstance(checks, Mapping):
        return checks
    return {check.id: check for check in checks}


def _slug(text: str) -> str:
    return re.sub(r"\s+", "-", text.lower())


def finding_sort_key(finding: Finding):
    return (SEVERITY_RANK[finding.severity], finding.category)


def generate_findings(
    results: Iterable[AuditResponse],
    checks: Union[Iterable[AuditCheck], Mapping[str, AuditCheck]],
) -> List[Finding]:
    """
    Build findings for every warning/fail response with a catalog entry.

    Responses for unknown check ids are skipped. Output is ordered by severity
    (critical first) and then category name; the sort is stable so responses
    in the same bucket keep their input order.
    """
    check_map = _as_check_map(checks)
    findings: List[Finding] = []

    for result in results:
        if result.status not in _FINDING_STATUSES:
            continue
        check = check_map.get(result.check_id)
        if check is None:
            logger.debug("Skipping response for unknown check id %s", result.check_id)
            continue
        findings.append(enrich_finding_with_context(check, result))

    findings.sort(key=finding_sort_key)
    return findings


def enrich_finding_with_context(check: AuditCheck, result: AuditResponse) -> Finding:
    """Map a check and its non-passing response to current/target state and a recommendation."""
    target_state = check.pass_criteria or "Expected state"
    if result.status == CheckStatus.FAIL:
        current_state = check.fail_criteria or "Issue detected"
        reason = result.notes or check.fail_criteria or "Check not passing"
    else:
        current_state = check.warning_criteria or "Partial compliance"
        reason = result.notes or check.warning_criteria or "Needs attention"

    return Finding(
        id=f"{_slug(check.category)}-{check.id}",
        check_id=check.id,
        category=check.category,
        title=check.check,
        severity=check.severity,
        status=result.status,
        current_state=current_state,
        target_state=target_state,
        reason=reason,
        impact=result.impact or check.severity.value,
        effort=finding_effort(check),
        recommendation=create_recommendation(check, result.status),
        check_description=check.description,
    )


def create_recommendation(check: AuditCheck, status: CheckStatus) -> str:
    if status == CheckStatus.FAIL:
        return check.fail_criteria or f"This check is failing. Review the pass criteria: {check.pass_criteria}"
    return check.warning_criteria or f"This check is showing a warning. Target: {check.pass_criteria}"


def group_findings_by_category(findings: Iterable[Finding]) -> Dict[str, List[Finding]]:
    grouped: Dict[str, List[Finding]] = {}
    for finding in findings:
        grouped.setdefault(finding.category, []).append(finding)
    return grouped


def group_findings_by_severity(findings: Iterable[Finding]) -> Dict[Severity, List[Finding]]:
    grouped: Dict[Severity, List[Finding]] = {}
    for finding in findings:
        grouped.setdefault(finding.severity, []).append(finding)
    return grouped


def count_findings_by_severity(findings: Iterable[Finding]) -> SeverityCounts:
    counts = {severity: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity] += 1
    return SeverityCounts(
        critical=counts[Severity.CRITICAL],
        high=counts[Severity.HIGH],
        medium=counts[Severity.MEDIUM],
        low=counts[Severity.LOW],
    )


def get_top_findings(findings: Sequence[Finding], limit: int = 5) -> List[Finding]:
    """Most severe findings first; failures outrank warnings of the same severity."""
    ranked = sorted(
        findings,
        key=lambda f: (SEVERITY_RANK[f.severity], 0 if f.status == CheckStatus.FAIL else 1),
    )
    return ranked[:limit]
