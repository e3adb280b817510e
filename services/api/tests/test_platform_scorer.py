from __future__ import annotations

from pathlib import Path
import sys

import pytest

API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.append(str(API_ROOT))

from audit_core.models import (
    AuditCategory,
    AuditCheck,
    AuditResponse,
    CategoryScore,
    CheckStatus,
    CheckWithResponse,
    Severity,
)
from audit_core.scoring.algorithms import (
    calculate_platform_health_score,
    count_findings_by_severity,
    pair_checks_with_responses,
    score_platform,
    score_to_grade,
)


def _category_score(name: str, weight: float, percentage: int) -> CategoryScore:
    return CategoryScore(
        name=name,
        weight=weight,
        total_checks=1,
        passed_checks=0,
        warning_checks=0,
        failed_checks=0,
        score=0.0,
        percentage=percentage,
    )


def _pair(check_id: str, category: str, severity: str, status: str) -> CheckWithResponse:
    check = AuditCheck(id=check_id, check=check_id, severity=Severity(severity), category=category)
    return CheckWithResponse(check=check, response=AuditResponse(check_id=check_id, status=CheckStatus(status)))


@pytest.mark.parametrize(
    "score,grade",
    [
        (100, "A"),
        (90, "A"),
        (89, "B"),
        (75, "B"),
        (74, "C"),
        (60, "C"),
        (59, "D"),
        (40, "D"),
        (39, "F"),
        (0, "F"),
    ],
)
def test_grade_boundaries(score: int, grade: str) -> None:
    assert score_to_grade(score) == grade


def test_two_category_scenario_scores_60_grade_c() -> None:
    categories = [
        AuditCategory(name="Category A", weight=0.6, check_count=2),
        AuditCategory(name="Category B", weight=0.4, check_count=2),
    ]
    pairs = [
        _pair("A1", "Category A", "critical", "pass"),
        _pair("A2", "Category A", "low", "pass"),
        _pair("B1", "Category B", "high", "fail"),
        _pair("B2", "Category B", "medium", "fail"),
    ]
    result = score_platform(categories, pairs)
    assert [c.percentage for c in result.category_scores] == [100, 0]
    assert result.score == 60
    assert result.grade == "C"


def test_unanswered_category_still_carries_its_weight() -> None:
    categories = [
        AuditCategory(name="Answered", weight=0.5, check_count=1),
        AuditCategory(name="Skipped", weight=0.5, check_count=1),
    ]
    result = score_platform(categories, [_pair("X1", "Answered", "high", "pass")])
    assert result.category_scores[1].has_data is False
    assert result.score == 50
    assert result.grade == "D"


def test_platform_score_handles_empty_and_zero_weight() -> None:
    assert calculate_platform_health_score([]) == 0
    assert calculate_platform_health_score([_category_score("A", 0.0, 100)]) == 0


def test_weighted_average_of_percentages() -> None:
    scores = [_category_score("A", 0.25, 80), _category_score("B", 0.75, 40)]
    assert calculate_platform_health_score(scores) == 50


def test_pairs_for_unlisted_categories_are_ignored() -> None:
    categories = [AuditCategory(name="Listed", weight=1.0, check_count=1)]
    pairs = [_pair("L1", "Listed", "low", "pass"), _pair("U1", "Unlisted", "critical", "fail")]
    assert score_platform(categories, pairs).score == 100


def test_pair_checks_skips_unanswered() -> None:
    checks = [
        AuditCheck(id="A", check="a", severity=Severity.LOW, category="X"),
        AuditCheck(id="B", check="b", severity=Severity.LOW, category="X"),
    ]
    responses = {"B": AuditResponse(check_id="B", status=CheckStatus.FAIL)}
    pairs = pair_checks_with_responses(checks, responses)
    assert [p.check.id for p in pairs] == ["B"]


def test_count_findings_by_severity_from_responses() -> None:
    checks = [
        AuditCheck(id="A", check="a", severity=Severity.CRITICAL, category="X"),
        AuditCheck(id="B", check="b", severity=Severity.LOW, category="X"),
        AuditCheck(id="C", check="c", severity=Severity.LOW, category="X"),
    ]
    responses = [
        AuditResponse(check_id="A", status=CheckStatus.WARNING),
        AuditResponse(check_id="B", status=CheckStatus.FAIL),
        AuditResponse(check_id="C", status=CheckStatus.PASS),
        AuditResponse(check_id="missing", status=CheckStatus.FAIL),
    ]
    counts = count_findings_by_severity(responses, checks)
    assert (counts.critical, counts.high, counts.medium, counts.low) == (1, 0, 0, 1)
