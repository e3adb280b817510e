"""
Report and response exports.

Everything here builds in memory (DataFrames, CSV/JSON strings, xlsx bytes);
writing to disk or streaming is the caller's job.
"""
from __future__ import annotations

import io
import json
from typing import Iterable, List, Optional, Sequence

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from audit_core.models import AuditCheck, AuditResponse, MultiPlatformReport

RESPONSE_COLUMNS = ["Check ID", "Category", "Check Name", "Status", "Notes", "Impact"]

_HEADER_FONT = Font(name="Calibri", size=11, bold=True, color="FFFFFF")
_HEADER_FILL = PatternFill(start_color="2E75B6", end_color="2E75B6", fill_type="solid")


def responses_to_frame(responses: Iterable[AuditResponse], checks: Iterable[AuditCheck]) -> pd.DataFrame:
    """One row per response with a catalog entry; unknown check ids are left out."""
    check_map = {check.id: check for check in checks}
    rows = []
    for response in responses:
        check = check_map.get(response.check_id)
        if check is None:
            continue
        rows.append(
            {
                "Check ID": response.check_id,
                "Category": check.category,
                "Check Name": check.check,
                "Status": response.status.value,
                "Notes": response.notes or "",
                "Impact": response.impact or "",
            }
        )
    return pd.DataFrame(rows, columns=RESPONSE_COLUMNS)


def responses_to_csv(responses: Iterable[AuditResponse], checks: Iterable[AuditCheck]) -> str:
    return responses_to_frame(responses, checks).to_csv(index=False)


def responses_to_json(
    responses: Sequence[AuditResponse],
    platform: str,
    business_name: str,
    exported_at: Optional[str] = None,
) -> str:
    payload = {
        "platform": platform,
        "business_name": business_name,
        "responses": [
            {"check_id": r.check_id, "status": r.status.value, "notes": r.notes}
            for r in responses
        ],
    }
    if exported_at:
        payload["exported_at"] = exported_at
    return json.dumps(payload, indent=2, ensure_ascii=False)


def summary_frame(report: MultiPlatformReport) -> pd.DataFrame:
    rows = [
        {
            "Platform": "Overall",
            "Score": report.overall_score,
            "Grade": report.overall_grade,
            "Critical": None,
            "High": None,
            "Medium": None,
            "Low": None,
        }
    ]
    for platform_report in report.platform_reports:
        counts = platform_report.findings
        rows.append(
            {
                "Platform": platform_report.platform,
                "Score": platform_report.score,
                "Grade": platform_report.grade,
                "Critical": counts.critical,
                "High": counts.high,
                "Medium": counts.medium,
                "Low": counts.low,
            }
        )
    return pd.DataFrame(rows)


def category_breakdown_frame(report: MultiPlatformReport) -> pd.DataFrame:
    columns = ["Platform", "Category", "Weight", "Passed", "Warning", "Failed", "Percentage", "Has Data"]
    rows = []
    for platform_report in report.platform_reports:
        for category in platform_report.category_scores:
            rows.append(
                {
                    "Platform": platform_report.platform,
                    "Category": category.name,
                    "Weight": category.weight,
                    "Passed": category.passed_checks,
                    "Warning": category.warning_checks,
                    "Failed": category.failed_checks,
                    "Percentage": category.percentage,
                    "Has Data": category.has_data,
                }
            )
    return pd.DataFrame(rows, columns=columns)


def findings_frame(report: MultiPlatformReport) -> pd.DataFrame:
    columns = ["Platform", "Check ID", "Severity", "Category", "Title", "Status", "Current State", "Target State", "Effort"]
    rows = []
    for platform_report in report.platform_reports:
        for finding in platform_report.finding_details:
            rows.append(
                {
                    "Platform": platform_report.platform,
                    "Check ID": finding.check_id,
                    "Severity": finding.severity.value,
                    "Category": finding.category,
                    "Title": finding.title,
                    "Status": finding.status.value,
                    "Current State": finding.current_state,
                    "Target State": finding.target_state,
                    "Effort": finding.effort.value,
                }
            )
    return pd.DataFrame(rows, columns=columns)


def action_plan_frame(report: MultiPlatformReport) -> pd.DataFrame:
    columns = ["Priority", "Platform", "Title", "Severity", "Effort", "Expected Impact", "Checklist"]
    rows = [
        {
            "Priority": item.priority,
            "Platform": item.platform,
            "Title": item.title,
            "Severity": item.severity.value,
            "Effort": item.estimated_effort.value,
            "Expected Impact": item.expected_impact,
            "Checklist": "\n".join(item.checklist),
        }
        for item in report.action_plan
    ]
    return pd.DataFrame(rows, columns=columns)


def _style_sheet(ws, frame: pd.DataFrame) -> None:
    for cell in ws[1]:
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.alignment = Alignment(horizontal="left", vertical="center")
    for idx, column in enumerate(frame.columns, 1):
        longest = max([len(str(column))] + [len(str(v)) for v in frame[column].tolist()])
        ws.column_dimensions[get_column_letter(idx)].width = min(max(12, longest + 2), 80)
    ws.freeze_panes = "A2"


def report_to_workbook(report: MultiPlatformReport) -> bytes:
    """Render the report as an xlsx workbook (Summary, Categories, Findings, Action Plan)."""
    sheets: List[tuple] = [
        ("Summary", summary_frame(report)),
        ("Categories", category_breakdown_frame(report)),
        ("Findings", findings_frame(report)),
        ("Action Plan", action_plan_frame(report)),
    ]
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for name, frame in sheets:
            frame.to_excel(writer, index=False, sheet_name=name)
            _style_sheet(writer.sheets[name], frame)
    return buffer.getvalue()
