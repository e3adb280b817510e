from __future__ import annotations

import io
import json
from pathlib import Path
import sys

import pandas as pd
from openpyxl import load_workbook

API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.append(str(API_ROOT))

from audit_core.catalog import build_default_catalog
from audit_core.export import (
    RESPONSE_COLUMNS,
    action_plan_frame,
    category_breakdown_frame,
    report_to_workbook,
    responses_to_csv,
    responses_to_frame,
    responses_to_json,
    summary_frame,
)
from audit_core.models import AuditResponse, CheckStatus
from audit_core.scoring import generate_report


def _google_report():
    catalog = build_default_catalog()
    checks = catalog["google-ads"].checks
    responses = [
        AuditResponse(check.id, CheckStatus.FAIL if idx % 3 == 0 else CheckStatus.PASS)
        for idx, check in enumerate(checks)
    ]
    return generate_report(["google-ads"], catalog, {"google-ads": responses}), responses, checks


def test_response_frame_and_csv() -> None:
    _, responses, checks = _google_report()
    noisy = list(responses) + [AuditResponse("NOPE", CheckStatus.FAIL, notes="ignored")]
    frame = responses_to_frame(noisy, checks)
    assert list(frame.columns) == RESPONSE_COLUMNS
    assert len(frame) == len(checks)
    assert frame.iloc[0]["Status"] == "fail"

    csv_text = responses_to_csv(noisy, checks)
    assert csv_text.splitlines()[0] == "Check ID,Category,Check Name,Status,Notes,Impact"
    assert len(pd.read_csv(io.StringIO(csv_text))) == len(checks)


def test_empty_response_frame_keeps_columns() -> None:
    frame = responses_to_frame([], [])
    assert frame.empty
    assert list(frame.columns) == RESPONSE_COLUMNS


def test_responses_json_payload() -> None:
    text = responses_to_json(
        [AuditResponse("G42", CheckStatus.FAIL, notes="No tag")],
        "google-ads",
        "Acme Café",
        exported_at="2024-01-01T00:00:00Z",
    )
    payload = json.loads(text)
    assert payload["business_name"] == "Acme Café"
    assert payload["responses"] == [{"check_id": "G42", "status": "fail", "notes": "No tag"}]
    assert payload["exported_at"] == "2024-01-01T00:00:00Z"
    assert "exported_at" not in json.loads(responses_to_json([], "meta-ads", "Acme"))


def test_report_frames() -> None:
    report, _, _ = _google_report()
    summary = summary_frame(report)
    assert summary.iloc[0]["Platform"] == "Overall"
    assert summary.iloc[1]["Score"] == report.platform_reports[0].score

    categories = category_breakdown_frame(report)
    assert len(categories) == 6

    plan = action_plan_frame(report)
    assert len(plan) == len(report.action_plan)
    assert plan.iloc[0]["Priority"] == 1


def test_workbook_has_styled_sheets() -> None:
    report, _, _ = _google_report()
    content = report_to_workbook(report)
    assert content[:2] == b"PK"

    workbook = load_workbook(io.BytesIO(content))
    assert workbook.sheetnames == ["Summary", "Categories", "Findings", "Action Plan"]
    summary = workbook["Summary"]
    assert summary["A1"].value == "Platform"
    assert summary["A1"].font.bold is True
    assert summary.freeze_panes == "A2"
    assert workbook["Findings"].max_row == 1 + sum(len(r.finding_details) for r in report.platform_reports)
