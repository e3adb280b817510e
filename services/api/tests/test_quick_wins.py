from __future__ import annotations

from pathlib import Path
import sys

API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.append(str(API_ROOT))

from audit_core.models import AuditCheck, AuditResponse, CheckStatus, Effort, Severity
from audit_core.scoring.findings import generate_findings
from audit_core.scoring.quick_wins import (
    categorize_quick_wins,
    estimate_completion_time,
    estimate_effort,
    extract_quick_wins,
    format_quick_win,
    get_quick_wins_for_category,
)


def _check(check_id: str, severity: str, category: str = "General", title: str = "") -> AuditCheck:
    return AuditCheck(
        id=check_id,
        check=title or f"Check {check_id}",
        severity=Severity(severity),
        category=category,
        pass_criteria="Healthy",
        warning_criteria="Partially healthy",
        fail_criteria=f"{check_id} is broken",
    )


def _findings(checks, status: str = "fail"):
    responses = [AuditResponse(check_id=c.id, status=CheckStatus(status)) for c in checks]
    return generate_findings(responses, checks)


def test_ten_qualifying_findings_cap_at_five_low_effort_first() -> None:
    checks = [_check(f"H{i}", "high") for i in range(6)] + [_check(f"L{i}", "low") for i in range(4)]
    findings = _findings(checks)
    wins = extract_quick_wins(findings, checks)
    assert len(wins) == 5
    assert [w.effort for w in wins] == [Effort.LOW] * 4 + [Effort.MEDIUM]
    assert [w.check_ids[0] for w in wins] == ["L0", "L1", "L2", "L3", "H0"]


def test_selection_rules() -> None:
    checks = [
        _check("CRIT_MED", "critical", "Account Structure"),  # medium effort, critical -> excluded
        _check("CRIT_HIGH", "critical", "Conversion Tracking"),  # high effort -> excluded
        _check("CRIT_LOW", "critical", "Wasted Spend & Negatives"),  # low effort -> included
        _check("MED", "medium"),
    ]
    wins = extract_quick_wins(_findings(checks), checks)
    assert {w.check_ids[0] for w in wins} == {"CRIT_LOW", "MED"}


def test_duplicate_check_ids_keep_first_occurrence() -> None:
    checks = [_check("A", "low")]
    findings = _findings(checks)
    wins = extract_quick_wins(findings + findings, checks)
    assert len(wins) == 1
    assert wins[0].id == "qw-a"


def test_impact_sentences_by_category_then_severity() -> None:
    checks = [
        _check("N", "low", "Wasted Spend & Negatives"),
        _check("C", "low", "Conversion Tracking"),
        _check("Q", "low", "Keywords & Quality Score"),
        _check("A", "low", "Audience & Targeting"),
        _check("G", "medium", "Ads & Assets"),
    ]
    wins = {w.check_ids[0]: w for w in extract_quick_wins(_findings(checks), checks)}
    assert wins["N"].estimated_impact == "Reduce wasted spend by eliminating irrelevant search terms"
    assert wins["C"].estimated_impact == "Enable proper conversion tracking and smart bidding"
    assert wins["Q"].estimated_impact == "Improve keyword quality scores and lower costs"
    assert wins["A"].estimated_impact == "Improve targeting accuracy and conversion rates"
    assert wins["G"].estimated_impact == "Resolving this will improve account health and performance"


def test_format_and_helpers() -> None:
    checks = [_check("A", "low", "X"), _check("B", "high", "Y")]
    wins = extract_quick_wins(_findings(checks), checks)
    assert format_quick_win(wins[0]) == "A is broken (Est. effort: low)"
    assert estimate_completion_time(wins) == 15 + 45
    assert sorted(categorize_quick_wins(wins)) == ["X", "Y"]
    only_y = get_quick_wins_for_category(_findings(checks), "Y", checks)
    assert [w.check_ids[0] for w in only_y] == ["B"]


def test_no_findings_no_quick_wins() -> None:
    assert extract_quick_wins([], []) == []


def test_catalog_effort_heuristic() -> None:
    assert estimate_effort(_check("a", "critical", "Bidding", title="Add negative keyword lists")) == Effort.LOW
    assert estimate_effort(_check("b", "medium", "Settings & Targeting")) == Effort.LOW
    assert estimate_effort(_check("c", "high", "Settings & Targeting")) == Effort.MEDIUM
    assert estimate_effort(_check("d", "high", "Wasted Spend & Negatives")) == Effort.LOW
    assert estimate_effort(_check("e", "critical", "Conversion Tracking")) == Effort.HIGH
    assert estimate_effort(_check("f", "low", "UET & Conversion Tracking")) == Effort.MEDIUM
    assert estimate_effort(_check("g", "low", "Account Structure")) == Effort.MEDIUM
    assert estimate_effort(_check("h", "critical", "Creative Strategy")) == Effort.HIGH
    assert estimate_effort(_check("i", "low", "Creative Strategy")) == Effort.LOW
