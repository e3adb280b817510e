"""
Scoring algorithms: per-check contributions, category scores and the
platform health score.

Per check:   responseValue * severityWeight * categoryWeight * 100
    pass=1.0, warning=0.5, fail=0.0, not-applicable excluded entirely.
Category %:  round(100 * total / max), 0 when nothing was answered.
Platform:    round(sum(percentage_i * weight_i) / sum(weight_i)).

Percentages are computed on exact fractions of the configured weights so a
true .5 always rounds up. The category weight cancels out of total / max and
is left out of the percentage; it only scales the reported ``score``.

The platform score weights categories by their configured weight, not by
how many checks were answered. A category with no answers still counts
with its full weight and contributes 0, so an incomplete questionnaire
scores lower than a complete one.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from audit_core.config import GRADE_THRESHOLDS, get_severity_weights
from audit_core.models import (
    AuditCategory,
    AuditCheck,
    AuditResponse,
    CategoryScore,
    CheckStatus,
    CheckWithResponse,
    PlatformScore,
    Severity,
    SeverityCounts,
)
from audit_core.rounding import exact, round_half_up

RESPONSE_VALUES: Dict[CheckStatus, float] = {
    CheckStatus.PASS: 1.0,
    CheckStatus.WARNING: 0.5,
    CheckStatus.FAIL: 0.0,
}


def index_responses(responses: Iterable[AuditResponse]) -> Dict[str, AuditResponse]:
    """Key responses by check id. A repeated check id keeps the last answer."""
    indexed: Dict[str, AuditResponse] = {}
    for response in responses:
        indexed[response.check_id] = response
    return indexed


def _severity_weight(severity: Severity, weights: Optional[Mapping[str, float]] = None) -> float:
    table = weights if weights is not None else get_severity_weights()
    return float(table.get(Severity(severity).value, 0.0))


def calculate_response_score(
    status: CheckStatus,
    severity: Severity,
    category_weight: float,
    weights: Optional[Mapping[str, float]] = None,
) -> float:
    """Contribution of one answered check. Not-applicable contributes 0 and is excluded upstream."""
    if status == CheckStatus.NOT_APPLICABLE:
        return 0.0
    response_value = RESPONSE_VALUES.get(CheckStatus(status), 0.0)
    return response_value * _severity_weight(severity, weights) * category_weight * 100


def calculate_max_response_score(
    severity: Severity,
    category_weight: float,
    weights: Optional[Mapping[str, float]] = None,
) -> float:
    return _severity_weight(severity, weights) * category_weight * 100


def score_category(
    category_checks: Iterable[CheckWithResponse],
    category: AuditCategory,
    weights: Optional[Mapping[str, float]] = None,
) -> CategoryScore:
    """
    Score one category from its (check, response) pairs.

    Pairs whose check sits in another category should already be filtered out
    by the caller. Returns percentage 0 with zero counts when nothing scorable
    was answered; check ``CategoryScore.has_data`` before treating it as failing.
    """
    table = weights if weights is not None else get_severity_weights()
    total_score = 0.0
    max_score = 0.0
    earned = Fraction(0)
    possible = Fraction(0)
    passed = warned = failed = 0

    for pair in category_checks:
        status = pair.response.status
        if status == CheckStatus.NOT_APPLICABLE:
            continue

        total_score += calculate_response_score(status, pair.check.severity, category.weight, table)
        max_score += calculate_max_response_score(pair.check.severity, category.weight, table)
        severity_weight = exact(_severity_weight(pair.check.severity, table))
        earned += exact(RESPONSE_VALUES.get(CheckStatus(status), 0.0)) * severity_weight
        possible += severity_weight

        if status == CheckStatus.PASS:
            passed += 1
        elif status == CheckStatus.WARNING:
            warned += 1
        elif status == CheckStatus.FAIL:
            failed += 1

    percentage = round_half_up(100 * earned / possible) if possible > 0 else 0

    return CategoryScore(
        name=category.name,
        weight=category.weight,
        total_checks=category.check_count,
        passed_checks=passed,
        warning_checks=warned,
        failed_checks=failed,
        score=total_score if max_score > 0 else 0.0,
        percentage=percentage,
    )


def calculate_platform_health_score(category_scores: Sequence[CategoryScore]) -> int:
    """Weighted average of category percentages by configured category weight."""
    if not category_scores:
        return 0

    weighted_sum = Fraction(0)
    total_weight = Fraction(0)
    for category in category_scores:
        weight = exact(category.weight)
        weighted_sum += category.percentage * weight
        total_weight += weight

    return round_half_up(weighted_sum / total_weight) if total_weight > 0 else 0


def score_to_grade(score: float) -> str:
    """Map a 0-100 score to a letter grade; thresholds are inclusive lower bounds."""
    for grade in ("A", "B", "C", "D"):
        if score >= GRADE_THRESHOLDS[grade]:
            return grade
    return "F"


def pair_checks_with_responses(
    checks: Iterable[AuditCheck],
    responses: Mapping[str, AuditResponse],
) -> List[CheckWithResponse]:
    """Pair each answered check with its response; unanswered checks are left out."""
    pairs: List[CheckWithResponse] = []
    for check in checks:
        response = responses.get(check.id)
        if response is not None:
            pairs.append(CheckWithResponse(check=check, response=response))
    return pairs


def score_platform(
    categories: Sequence[AuditCategory],
    checks_and_responses: Iterable[CheckWithResponse],
    weights: Optional[Mapping[str, float]] = None,
) -> PlatformScore:
    """
    Score every category of a platform and combine them.

    ``checks_and_responses`` may span all categories; pairs are routed by
    ``check.category``. Pairs for categories not listed in ``categories`` are
    ignored.
    """
    table = weights if weights is not None else get_severity_weights()
    by_category: Dict[str, List[CheckWithResponse]] = {}
    for pair in checks_and_responses:
        by_category.setdefault(pair.check.category, []).append(pair)

    category_scores = tuple(
        score_category(by_category.get(category.name, []), category, table)
        for category in categories
    )
    score = calculate_platform_health_score(category_scores)
    return PlatformScore(score=score, grade=score_to_grade(score), category_scores=category_scores)


def count_findings_by_severity(
    responses: Iterable[AuditResponse],
    checks: Iterable[AuditCheck],
) -> SeverityCounts:
    """Count warning/fail responses per severity straight from responses."""
    check_map = {check.id: check for check in checks}
    counts = {severity: 0 for severity in Severity}
    for response in responses:
        if response.status not in (CheckStatus.FAIL, CheckStatus.WARNING):
            continue
        check = check_map.get(response.check_id)
        if check is not None:
            counts[check.severity] += 1
    return SeverityCounts(
        critical=counts[Severity.CRITICAL],
        high=counts[Severity.HIGH],
        medium=counts[Severity.MEDIUM],
        low=counts[Severity.LOW],
    )
