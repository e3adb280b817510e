"""
Questionnaire response processing: parsing raw payloads, indexing,
coverage and completion checks.

Completion counts not-applicable answers as answered. Scoring does not;
see scoring.algorithms.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from audit_core.catalog import Catalog, get_platform_checklist
from audit_core.config import get_min_coverage_percent
from audit_core.models import AuditCheck, AuditResponse, CheckStatus, PlatformChecklist
from audit_core.rounding import round_half_up
from audit_core.scoring.algorithms import index_responses

logger = logging.getLogger(__name__)

_VALID_STATUSES = {status.value for status in CheckStatus}


@dataclass(frozen=True)
class ResponseSummary:
    total_checks: int
    answered: int
    not_applicable: int
    passed: int
    warned: int
    failed: int
    completion_percentage: int


@dataclass(frozen=True)
class CoverageResult:
    is_valid: bool
    coverage: int
    message: str


@dataclass
class SubmissionValidation:
    valid: bool
    errors: List[str] = field(default_factory=list)


def parse_response(raw: Mapping[str, Any]) -> Optional[AuditResponse]:
    """Normalize one raw answer. Returns None when the check id or status is unusable."""
    check_id = str(raw.get("check_id") or raw.get("checkId") or "").strip()
    if not check_id:
        return None
    status = str(raw.get("status") or "").strip().lower()
    if status not in _VALID_STATUSES:
        return None
    notes = str(raw.get("notes") or "").strip() or None
    impact = raw.get("impact") or None
    return AuditResponse(check_id=check_id, status=CheckStatus(status), notes=notes, impact=impact)


def parse_responses(raw_responses: Iterable[Mapping[str, Any]]) -> List[AuditResponse]:
    parsed: List[AuditResponse] = []
    for raw in raw_responses or []:
        response = parse_response(raw)
        if response is None:
            logger.debug("Dropping malformed response: %r", raw)
            continue
        parsed.append(response)
    return parsed


def process_audit_responses(
    selected_platforms: Sequence[str],
    responses_by_platform: Mapping[str, Iterable[Any]],
) -> Dict[str, List[AuditResponse]]:
    """Normalize the responses of each selected platform; unselected platforms are dropped."""
    processed: Dict[str, List[AuditResponse]] = {}
    for platform in selected_platforms:
        raw = list(responses_by_platform.get(platform) or [])
        processed[platform] = [
            item if isinstance(item, AuditResponse) else parse_response(item)
            for item in raw
        ]
        processed[platform] = [item for item in processed[platform] if item is not None]
    return processed


def map_responses_with_checks(
    responses: Iterable[AuditResponse],
    checks: Iterable[AuditCheck],
) -> List[Dict[str, Any]]:
    response_map = index_responses(responses)
    return [{"check": check, "response": response_map.get(check.id)} for check in checks]


def get_response_summary(responses: Iterable[AuditResponse], checks: Sequence[AuditCheck]) -> ResponseSummary:
    total_checks = len(checks)
    answered = not_applicable = passed = warned = failed = 0

    for response in responses:
        if response.status == CheckStatus.NOT_APPLICABLE:
            not_applicable += 1
            continue
        answered += 1
        if response.status == CheckStatus.PASS:
            passed += 1
        elif response.status == CheckStatus.WARNING:
            warned += 1
        elif response.status == CheckStatus.FAIL:
            failed += 1

    completion = round_half_up(Fraction((answered + not_applicable) * 100, total_checks)) if total_checks > 0 else 0
    return ResponseSummary(
        total_checks=total_checks,
        answered=answered,
        not_applicable=not_applicable,
        passed=passed,
        warned=warned,
        failed=failed,
        completion_percentage=completion,
    )


def get_response_stats(responses: Sequence[AuditResponse]) -> Dict[str, int]:
    stats = {status.value: 0 for status in CheckStatus}
    for response in responses:
        stats[response.status.value] += 1
    return {
        "pass": stats["pass"],
        "warning": stats["warning"],
        "fail": stats["fail"],
        "not_applicable": stats["not-applicable"],
        "total": len(responses),
    }


def filter_responses_by_status(responses: Iterable[AuditResponse], status: CheckStatus) -> List[AuditResponse]:
    return [response for response in responses if response.status == status]


def get_responses_for_category(
    responses: Iterable[AuditResponse],
    checks: Iterable[AuditCheck],
    category: str,
) -> List[AuditResponse]:
    category_ids = {check.id for check in checks if check.category == category}
    return [response for response in responses if response.check_id in category_ids]


def merge_responses(*response_sets: Iterable[AuditResponse]) -> List[AuditResponse]:
    """Concatenate response sets, keeping the first answer seen for each check id."""
    merged: List[AuditResponse] = []
    seen: set = set()
    for responses in response_sets:
        for response in responses:
            if response.check_id not in seen:
                merged.append(response)
                seen.add(response.check_id)
    return merged


def validate_responses_coverage(
    checklist: PlatformChecklist,
    responses: Sequence[AuditResponse],
    min_coverage: Optional[int] = None,
) -> CoverageResult:
    """Coverage of scored answers (not-applicable excluded) against the checklist size."""
    threshold = get_min_coverage_percent() if min_coverage is None else min_coverage
    if checklist.is_empty():
        return CoverageResult(True, 100, "No checks for this platform")

    applicable = sum(1 for response in responses if response.status != CheckStatus.NOT_APPLICABLE)
    coverage = round_half_up(Fraction(applicable * 100, checklist.total_checks))

    if coverage >= 100:
        return CoverageResult(True, coverage, "All checks answered")
    if coverage >= threshold:
        return CoverageResult(True, coverage, f"{coverage}% of checks answered (recommended: 100%)")
    return CoverageResult(
        False,
        coverage,
        f"Only {coverage}% of checks answered. Please answer at least {threshold}% of checks.",
    )


def is_questionnaire_complete(
    selected_platforms: Sequence[str],
    catalog: Catalog,
    responses_by_platform: Mapping[str, Sequence[AuditResponse]],
    min_coverage: Optional[int] = None,
) -> bool:
    """Every selected platform with checks has at least ``min_coverage``% of them answered."""
    threshold = get_min_coverage_percent() if min_coverage is None else min_coverage
    for platform in selected_platforms:
        checklist = get_platform_checklist(catalog, platform)
        if checklist.is_empty():
            continue
        responses = responses_by_platform.get(platform) or []
        coverage = round_half_up(Fraction(len(responses) * 100, checklist.total_checks))
        if coverage < threshold:
            return False
    return True


def validate_response_submission(
    responses: Sequence[AuditResponse],
    checks: Sequence[AuditCheck],
    min_completion: int = 50,
) -> SubmissionValidation:
    if not responses:
        return SubmissionValidation(False, ["No responses provided"])

    errors: List[str] = []
    summary = get_response_summary(responses, checks)
    if summary.completion_percentage < min_completion:
        errors.append(
            f"Completion level too low. Minimum {min_completion}%, got {summary.completion_percentage}%"
        )
    if summary.answered == 0:
        errors.append("Must have at least some answered checks")
    return SubmissionValidation(valid=not errors, errors=errors)
