"""
Google Ads account metrics fetcher.

Live API access is not wired up: without a developer token this returns a
fixed 30-day snapshot so the rest of the flow can be exercised end to end.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict

logger = logging.getLogger(__name__)

GOOGLE_ADS_SEARCH_URL = "https://googleads.googleapis.com/v16/customers/{customer_id}/googleAds:search"

ACCOUNT_METRICS_QUERY = """
SELECT
  metrics.clicks,
  metrics.impressions,
  metrics.cost_micros,
  metrics.conversions,
  metrics.ctr,
  metrics.average_cpc
FROM customer
WHERE segments.date DURING LAST_30_DAYS
""".strip()

_SAMPLE_METRICS = {
    "clicks": 12500,
    "impressions": 450000,
    "spend": 5400.00,
    "conversions": 320,
    "ctr": 0.027,
    "cpc": 0.43,
}


def normalize_customer_id(customer_id: str) -> str:
    """Strip dashes/spaces from a customer id such as 123-456-7890."""
    cleaned = re.sub(r"[\s\-]", "", str(customer_id or ""))
    if not cleaned:
        raise ValueError("customer_id is required")
    return cleaned


def fetch_google_ads_metrics(customer_id: str) -> Dict[str, Any]:
    """Return last-30-day account metrics for ``customer_id`` (fixed sample values)."""
    cid = normalize_customer_id(customer_id)
    logger.info("Returning sample Google Ads metrics for customer %s", cid)
    return {
        "customer_id": cid,
        "source": "sample",
        "endpoint": GOOGLE_ADS_SEARCH_URL.format(customer_id=cid),
        "query": ACCOUNT_METRICS_QUERY,
        "metrics": dict(_SAMPLE_METRICS),
    }
