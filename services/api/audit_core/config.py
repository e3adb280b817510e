"""
Audit configuration helpers.

Resolution order: built-in defaults, then an optional settings.json next to
the package, then environment variables. Accessors read the environment on
every call so tests and deployments can flip values without a restart.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Literal

logger = logging.getLogger(__name__)

SeverityScale = Literal["standard", "legacy"]

_ROOT = Path(__file__).resolve().parents[1]
_SETTINGS_PATH = _ROOT / "settings.json"

SEVERITY_WEIGHTS: Dict[str, float] = {
    "critical": 5.0,
    "high": 3.0,
    "medium": 1.5,
    "low": 0.5,
}

# Older scorer scale. Only used when severity_scale is "legacy".
LEGACY_SEVERITY_WEIGHTS: Dict[str, float] = {
    "critical": 1.0,
    "high": 0.7,
    "medium": 0.4,
    "low": 0.2,
}

GRADE_THRESHOLDS: Dict[str, int] = {
    "A": 90,
    "B": 75,
    "C": 60,
    "D": 40,
    "F": 0,
}

_DEFAULTS = {
    "severity_scale": "standard",
    "min_coverage_percent": 80,
    "debug_logging": False,
}


def _load_settings(path: Path = _SETTINGS_PATH) -> dict:
    settings = dict(_DEFAULTS)
    try:
        if path.exists():
            loaded = json.loads(path.read_text(encoding="utf-8"))
            settings.update({k: loaded.get(k, v) for k, v in settings.items()})
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
    return settings


_SETTINGS = _load_settings()


def reload_settings(path: Path | None = None) -> dict:
    global _SETTINGS
    _SETTINGS = _load_settings(path or _SETTINGS_PATH)
    return dict(_SETTINGS)


def get_settings() -> dict:
    return dict(_SETTINGS)


_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _bool_env(name: str, default: bool | None = None) -> bool | None:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _BOOL_TRUE:
        return True
    if value in _BOOL_FALSE:
        return False
    return default


def get_severity_scale() -> SeverityScale:
    """
    Return the active severity weight scale.
    Defaults to "standard"; anything unrecognised falls back to it.
    """
    raw_env = (os.environ.get("AUDIT_SEVERITY_SCALE") or "").strip().lower()
    if raw_env in {"standard", "legacy"}:
        return "legacy" if raw_env == "legacy" else "standard"
    if str(_SETTINGS.get("severity_scale") or "").strip().lower() == "legacy":
        return "legacy"
    return "standard"


def get_severity_weights() -> Dict[str, float]:
    if get_severity_scale() == "legacy":
        return dict(LEGACY_SEVERITY_WEIGHTS)
    return dict(SEVERITY_WEIGHTS)


def get_min_coverage_percent() -> int:
    raw = os.environ.get("AUDIT_MIN_COVERAGE")
    if raw is not None:
        try:
            return max(0, min(100, int(raw.strip())))
        except ValueError:
            logger.warning("AUDIT_MIN_COVERAGE=%r is not an integer; using settings value", raw)
    try:
        return max(0, min(100, int(_SETTINGS.get("min_coverage_percent", 80))))
    except (TypeError, ValueError):
        return 80


def is_debug_logging() -> bool:
    override = _bool_env("AUDIT_DEBUG_LOGGING")
    if override is not None:
        return override
    return bool(_SETTINGS.get("debug_logging"))
