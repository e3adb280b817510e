from __future__ import annotations

from pathlib import Path
import sys

import pytest

API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.append(str(API_ROOT))

from audit_core.models import AuditCheck, AuditResponse, CheckStatus, Effort, Severity
from audit_core.scoring.action_plan import (
    estimate_implementation_time,
    generate_action_plan,
    get_high_impact_items,
    identify_dependencies,
)
from audit_core.scoring.findings import generate_findings


def _check(check_id: str, severity: str, category: str = "General", title: str = "") -> AuditCheck:
    return AuditCheck(
        id=check_id,
        check=title or f"Check {check_id}",
        severity=Severity(severity),
        category=category,
        pass_criteria="Target met",
        fail_criteria=f"{check_id} failing",
    )


def _findings(checks):
    responses = [AuditResponse(check_id=c.id, status=CheckStatus.FAIL) for c in checks]
    return generate_findings(responses, checks)


def test_twenty_findings_cap_at_fifteen_dense_priorities() -> None:
    severities = ["critical", "high", "medium", "low"]
    checks = [_check(f"C{i:02d}", severities[i % 4], f"Category {i % 3}") for i in range(20)]
    plan = generate_action_plan(_findings(checks), "meta-ads")
    assert len(plan) == 15
    assert [item.priority for item in plan] == list(range(1, 16))


def test_severity_buckets_then_effort_then_category() -> None:
    checks = [
        _check("LOW1", "low", "Alpha"),
        _check("HIGH_B", "high", "Beta"),
        _check("CRIT_STRUCT", "critical", "Account Structure"),
        _check("CRIT_NEG", "critical", "Wasted Spend & Negatives"),
        _check("CRIT_CONV", "critical", "Conversion Tracking"),
        _check("HIGH_A", "high", "Alpha"),
    ]
    plan = generate_action_plan(_findings(checks), "google-ads")
    order = [item.description.split(" ")[0] for item in plan]
    # critical: low effort (negatives), medium (structure), high (conversion)
    assert order == ["CRIT_NEG", "CRIT_STRUCT", "CRIT_CONV", "HIGH_A", "HIGH_B", "LOW1"]
    assert plan[0].title.startswith("🚨 ")
    assert not plan[3].title.startswith("🚨")
    assert all(item.platform == "google-ads" for item in plan)


def test_empty_findings_give_empty_plan() -> None:
    assert generate_action_plan([], "google-ads") == []


def test_checklists_follow_category_rules() -> None:
    checks = [
        _check("CONV", "high", "Conversion Tracking"),
        _check("NEG", "high", "Wasted Spend & Negatives"),
        _check("AUD", "high", "Audience & Targeting"),
        _check("KW", "high", "Keywords & Quality Score"),
        _check("STRUCT", "high", "Account Structure"),
        _check("OTHER", "high", "Ads & Assets"),
    ]
    google = {item.description.split(" ")[0]: item for item in generate_action_plan(_findings(checks), "google-ads")}

    conversion_steps = google["CONV"].checklist
    assert conversion_steps[0] == "Review current state: CONV failing"
    assert conversion_steps[2] == "Navigate to Tools > Conversions"
    assert len(conversion_steps) == 6
    assert google["NEG"].checklist[1] == "Create negative keyword list"
    assert google["AUD"].checklist[1] == "Review current audience settings"
    assert google["KW"].checklist[1] == "Pull quality score report"
    assert google["STRUCT"].checklist[1] == "Audit current structure"
    assert list(google["OTHER"].checklist[1:]) == [
        "Access account settings",
        "Make necessary changes",
        "Test and verify",
        "Monitor results",
    ]

    linkedin = generate_action_plan(_findings([checks[0]]), "linkedin-ads")
    assert linkedin[0].checklist[1] == "Access account settings"


def test_expected_impact_lookup() -> None:
    checks = [
        _check("A", "critical", "Conversion Tracking"),
        _check("B", "critical", "Pixel / CAPI Health"),
        _check("C", "high", "Audience & Targeting"),
        _check("D", "medium", "Anything"),
        _check("E", "low", "Anything"),
    ]
    impacts = {item.description.split(" ")[0]: item.expected_impact for item in generate_action_plan(_findings(checks), "meta-ads")}
    assert impacts["A"] == "Enable smart bidding and accurate ROI measurement"
    assert impacts["B"] == "Eliminate critical blocking issue and enable core functionality"
    assert impacts["C"] == "Increase conversion rates by targeting better"
    assert impacts["D"] == "Improve account health and performance metrics"
    assert impacts["E"] == "Minor optimization to account settings"


def test_description_uses_generated_recommendation() -> None:
    check = AuditCheck(id="X", check="X", severity=Severity.LOW, category="Cat")
    findings = generate_findings([AuditResponse(check_id="X", status=CheckStatus.FAIL)], [check])
    plan = generate_action_plan(findings, "tiktok-ads")
    assert plan[0].description == "This check is failing. Review the pass criteria: "
    assert plan[0].checklist[0] == "Review current state: Issue detected"


def test_plan_helpers() -> None:
    checks = [
        _check("CONV", "critical", "Conversion Tracking", title="Conversion actions configured"),
        _check("UET", "high", "UET & Conversion Tracking"),
        _check("LOW", "low", "Ads"),
    ]
    plan = generate_action_plan(_findings(checks), "microsoft-ads")
    assert estimate_implementation_time(plan) == pytest.approx(4.0 + 2.0 + 0.5)
    deps = identify_dependencies(plan)
    assert deps == {1: [1]}
    top = get_high_impact_items(plan, limit=2)
    assert [item.severity for item in top] == [Severity.CRITICAL, Severity.HIGH]
    assert top[0].estimated_effort == Effort.HIGH
