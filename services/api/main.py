"""
FastAPI backend for the ad account audit.
Serves checklists and turns questionnaire responses into scored reports.
"""
from __future__ import annotations

import io
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

# Add service root to path before local imports
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from audit_core.catalog import (
    PLATFORM_INFO,
    SUPPORTED_PLATFORMS,
    build_default_catalog,
    get_platform_checklist,
    validate_catalog,
)
from audit_core.config import get_min_coverage_percent, get_severity_scale, is_debug_logging
from audit_core.export import report_to_workbook
from audit_core.google_ads_fetcher import fetch_google_ads_metrics
from audit_core.models import AuditResponse
from audit_core.responses import (
    get_response_summary,
    is_questionnaire_complete,
    parse_responses,
    process_audit_responses,
    validate_responses_coverage,
)
from audit_core.scoring import generate_report
from utils.telemetry import log_event, set_request_id, timed_event

logging.basicConfig(level=logging.DEBUG if is_debug_logging() else logging.INFO)
logger = logging.getLogger(__name__)

CATALOG = build_default_catalog()

for _platform, _checklist in CATALOG.items():
    for _issue in validate_catalog(_checklist):
        logger.warning("Checklist %s: %s", _platform, _issue)

# Initialize FastAPI app
app = FastAPI(
    title="Ad Audit API",
    description="Multi-platform advertising account health audit",
    version="1.0.0",
)

# CORS middleware for the questionnaire frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_telemetry(request: Request, call_next):
    start = datetime.now(timezone.utc)
    request_id = request.headers.get("x-request-id") or str(uuid4())
    set_request_id(request_id)
    request.state.request_id = request_id

    response = None
    try:
        response = await call_next(request)
        if response is not None:
            response.headers["X-Request-ID"] = request_id
        return response
    finally:
        duration_ms = (datetime.now(timezone.utc) - start).total_seconds() * 1000
        log_event(
            "request",
            path=request.url.path,
            method=request.method,
            status=getattr(response, "status_code", 500),
            duration_ms=round(duration_ms, 2),
        )


# Pydantic models
class ResponseItem(BaseModel):
    check_id: str
    status: str
    notes: str | None = None
    impact: str | None = None


class AuditReportRequest(BaseModel):
    selected_platforms: list[str]
    responses: dict[str, list[ResponseItem]] = {}
    business_type: str | None = None
    business_name: str | None = None


class CoverageRequest(BaseModel):
    selected_platforms: list[str]
    responses: dict[str, list[ResponseItem]] = {}
    min_coverage: int | None = None


def _require_known_platforms(platforms: list[str]) -> None:
    unknown = [p for p in platforms if p not in SUPPORTED_PLATFORMS]
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported platforms: {', '.join(unknown)}",
        )


def _parsed_responses(req_responses: dict[str, list[ResponseItem]], platforms: list[str]) -> dict[str, list[AuditResponse]]:
    raw = {
        platform: parse_responses(item.model_dump() for item in items)
        for platform, items in req_responses.items()
    }
    return process_audit_responses(platforms, raw)


def _build_report(req: AuditReportRequest):
    _require_known_platforms(req.selected_platforms)
    responses = _parsed_responses(req.responses, req.selected_platforms)
    with timed_event("audit_report", platforms=req.selected_platforms) as extra:
        report = generate_report(
            req.selected_platforms,
            CATALOG,
            responses,
            business_type=req.business_type,
        )
        extra["overall_score"] = report.overall_score
    return report


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "Ad Audit API",
        "severity_scale": get_severity_scale(),
        "platforms": len(CATALOG),
    }


@app.get("/api/platforms")
async def list_platforms():
    return {"platforms": list(PLATFORM_INFO)}


@app.get("/api/checklists/{platform}")
async def get_checklist(platform: str):
    if platform not in CATALOG:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown platform: {platform}")
    checklist = get_platform_checklist(CATALOG, platform)
    payload = checklist.to_dict()
    payload["total_checks"] = checklist.total_checks
    return payload


@app.post("/api/audit/generate")
async def generate_audit(req: AuditReportRequest):
    """Score the submitted responses and return the combined report."""
    report = _build_report(req)
    payload = report.to_dict()
    payload["generated_at"] = datetime.now(timezone.utc).isoformat()
    payload["business_type"] = req.business_type or "generic"
    return payload


@app.post("/api/audit/coverage")
async def audit_coverage(req: CoverageRequest):
    """Per-platform answer coverage and whether the questionnaire can be submitted."""
    _require_known_platforms(req.selected_platforms)
    responses = _parsed_responses(req.responses, req.selected_platforms)
    threshold = req.min_coverage if req.min_coverage is not None else get_min_coverage_percent()

    platforms = {}
    for platform in req.selected_platforms:
        checklist = get_platform_checklist(CATALOG, platform)
        platform_responses = responses.get(platform, [])
        coverage = validate_responses_coverage(checklist, platform_responses, threshold)
        summary = get_response_summary(platform_responses, checklist.checks)
        platforms[platform] = {
            "is_valid": coverage.is_valid,
            "coverage": coverage.coverage,
            "message": coverage.message,
            "completion_percentage": summary.completion_percentage,
            "answered": summary.answered,
            "not_applicable": summary.not_applicable,
        }

    return {
        "complete": is_questionnaire_complete(req.selected_platforms, CATALOG, responses, threshold),
        "min_coverage": threshold,
        "platforms": platforms,
    }


@app.post("/api/audit/export")
async def export_audit(req: AuditReportRequest):
    """Download the report as an Excel workbook."""
    report = _build_report(req)
    try:
        content = report_to_workbook(report)
    except Exception as exc:
        logger.exception("Workbook export failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Export failed: {str(exc)}",
        )
    name = (req.business_name or "audit").strip().replace(" ", "_") or "audit"
    return StreamingResponse(
        io.BytesIO(content),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{name}_audit.xlsx"'},
    )


@app.get("/api/google-ads/metrics/{customer_id}")
async def google_ads_metrics(customer_id: str):
    try:
        return fetch_google_ads_metrics(customer_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
