from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

from fastapi.testclient import TestClient
import pytest

API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.append(str(API_ROOT))

import main
from audit_core.google_ads_fetcher import fetch_google_ads_metrics, normalize_customer_id
from utils.telemetry import build_event, get_request_id, set_request_id

client = TestClient(main.app)


def _google_answers(status: str = "pass") -> list:
    return [{"check_id": check.id, "status": status} for check in main.CATALOG["google-ads"].checks]


def test_health_and_platforms() -> None:
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["platforms"] == 5
    assert resp.headers["X-Request-ID"]

    platforms = client.get("/api/platforms").json()["platforms"]
    assert [p["value"] for p in platforms] == [
        "google-ads",
        "meta-ads",
        "linkedin-ads",
        "tiktok-ads",
        "microsoft-ads",
    ]


def test_request_id_header_is_echoed() -> None:
    resp = client.get("/api/health", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"


def test_checklist_endpoint() -> None:
    body = client.get("/api/checklists/meta-ads").json()
    assert body["platform"] == "meta-ads"
    assert body["total_checks"] == 15
    assert body["checks"][0]["severity"] in {"critical", "high", "medium", "low"}

    missing = client.get("/api/checklists/snap-ads")
    assert missing.status_code == 404


def test_generate_report_endpoint() -> None:
    answers = _google_answers()
    answers[0]["status"] = "fail"
    resp = client.post(
        "/api/audit/generate",
        json={
            "selected_platforms": ["google-ads", "meta-ads"],
            "responses": {"google-ads": answers},
            "business_type": "saas",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["business_type"] == "saas"
    assert "generated_at" in body
    reports = {r["platform"]: r for r in body["platform_reports"]}
    assert reports["meta-ads"]["score"] == 0
    assert reports["meta-ads"]["recommendations"] == ["No responses provided for this platform"]
    assert reports["google-ads"]["findings"]["critical"] == 1
    assert body["overall_score"] == int(reports["google-ads"]["score"] / 2 + 0.5)
    assert body["action_plan"][0]["title"].startswith("🚨 ")


def test_generate_rejects_unknown_platform() -> None:
    resp = client.post("/api/audit/generate", json={"selected_platforms": ["snap-ads"]})
    assert resp.status_code == 400
    assert "snap-ads" in resp.json()["detail"]


def test_generate_validates_payload_shape() -> None:
    resp = client.post("/api/audit/generate", json={"responses": {}})
    assert resp.status_code == 422


def test_coverage_endpoint() -> None:
    tiktok_first = main.CATALOG["tiktok-ads"].checks[0].id
    resp = client.post(
        "/api/audit/coverage",
        json={
            "selected_platforms": ["google-ads", "tiktok-ads"],
            "responses": {
                "google-ads": _google_answers(),
                "tiktok-ads": [{"check_id": tiktok_first, "status": "pass"}],
            },
            "min_coverage": 80,
        },
    )
    body = resp.json()
    assert body["complete"] is False
    assert body["min_coverage"] == 80
    assert body["platforms"]["google-ads"]["message"] == "All checks answered"
    assert body["platforms"]["tiktok-ads"]["is_valid"] is False
    # 1 of 9 checks
    assert body["platforms"]["tiktok-ads"]["coverage"] == 11


def test_export_endpoint_streams_workbook() -> None:
    resp = client.post(
        "/api/audit/export",
        json={
            "selected_platforms": ["google-ads"],
            "responses": {"google-ads": _google_answers("warning")},
            "business_name": "Acme Corp",
        },
    )
    assert resp.status_code == 200
    assert resp.content[:2] == b"PK"
    assert 'filename="Acme_Corp_audit.xlsx"' in resp.headers["content-disposition"]


def test_google_ads_metrics_endpoint() -> None:
    body = client.get("/api/google-ads/metrics/123-456-7890").json()
    assert body["customer_id"] == "1234567890"
    assert body["source"] == "sample"
    assert body["metrics"]["clicks"] == 12500
    assert "LAST_30_DAYS" in body["query"]


def test_fetcher_rejects_blank_customer_id() -> None:
    assert normalize_customer_id(" 111 222-3333 ") == "1112223333"
    with pytest.raises(ValueError, match="customer_id"):
        fetch_google_ads_metrics("  ")


def test_telemetry_events_carry_request_id(caplog) -> None:
    set_request_id("abc")
    try:
        event = build_event("unit", value=1)
        assert get_request_id() == "abc"
        assert event["request_id"] == "abc"
        assert event["value"] == 1
        assert event["ts"].endswith("Z")
    finally:
        set_request_id(None)

    with caplog.at_level(logging.INFO, logger="audit_api.events"):
        client.get("/api/health")
    records = [json.loads(r.getMessage()) for r in caplog.records if r.name == "audit_api.events"]
    assert any(r["event"] == "request" and r["path"] == "/api/health" for r in records)
