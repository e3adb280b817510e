from __future__ import annotations

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

logger = logging.getLogger("audit_api.events")

_request_id_var = contextvars.ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> None:
    _request_id_var.set(request_id)


def get_request_id() -> str | None:
    return _request_id_var.get()


def build_event(event: str, **fields: Any) -> dict:
    record = {"event": event, "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")}
    request_id = get_request_id()
    if request_id:
        record["request_id"] = request_id
    record.update(fields)
    return record


def log_event(event: str, **fields: Any) -> None:
    """Emit one JSON line per event."""
    record = build_event(event, **fields)
    try:
        logger.info(json.dumps(record, default=str))
    except (TypeError, ValueError):
        logger.info("%s", record)


@contextmanager
def timed_event(event: str, **fields: Any) -> Iterator[dict]:
    """Log ``event`` with duration_ms once the block finishes; callers may add fields to the yielded dict."""
    start = time.perf_counter()
    extra: dict = {}
    try:
        yield extra
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        log_event(event, duration_ms=round(duration_ms, 2), **fields, **extra)
