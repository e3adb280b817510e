"""
Telemetry helpers for the audit core.

Emits one structured log line per generated report. With no log handler
configured this is effectively a no-op.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("audit_core.telemetry")


def log_audit_event(source: str, metadata: Optional[Dict[str, Any]] = None) -> None:
    """
    Lightweight telemetry hook for scoring runs. Never raises.
    """
    payload = {
        "source": source,
        "metadata": metadata or {},
    }
    try:
        logger.info("[telemetry] %s", json.dumps(payload, sort_keys=True, default=str))
    except (TypeError, ValueError):
        logger.info("[telemetry] %s", payload)
