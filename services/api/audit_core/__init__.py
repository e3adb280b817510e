"""
Audit Core Package
Checklist catalog, scoring pipeline and report exports for ad account audits.
"""
__version__ = "1.0.0"

from audit_core.models import (
    ActionItem,
    AuditCategory,
    AuditCheck,
    AuditResponse,
    CategoryScore,
    CheckStatus,
    Effort,
    Finding,
    MultiPlatformReport,
    PlatformChecklist,
    PlatformReport,
    QuickWin,
    Severity,
)
from audit_core.catalog import build_default_catalog, get_platform_checklist
from audit_core.scoring import generate_report, score_category, score_platform
from audit_core.responses import parse_responses

__all__ = [
    "ActionItem",
    "AuditCategory",
    "AuditCheck",
    "AuditResponse",
    "CategoryScore",
    "CheckStatus",
    "Effort",
    "Finding",
    "MultiPlatformReport",
    "PlatformChecklist",
    "PlatformReport",
    "QuickWin",
    "Severity",
    "build_default_catalog",
    "generate_report",
    "get_platform_checklist",
    "parse_responses",
    "score_category",
    "score_platform",
]
