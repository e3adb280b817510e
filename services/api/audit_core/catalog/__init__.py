"""
CHECKLIST CATALOG
Per-platform audit checks and categories.

The scorer never imports these modules directly: callers build a catalog
(``build_default_catalog()`` or ``build_checklist()`` for custom data) and pass
it into the pipeline. The catalog is a read-only mapping of frozen values.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from audit_core.models import AuditCategory, AuditCheck, PlatformChecklist, Severity

from . import google_ads, linkedin_ads, meta_ads, microsoft_ads, tiktok_ads

logger = logging.getLogger(__name__)

Catalog = Mapping[str, PlatformChecklist]

_PLATFORM_MODULES = (google_ads, meta_ads, linkedin_ads, tiktok_ads, microsoft_ads)

SUPPORTED_PLATFORMS = tuple(module.PLATFORM for module in _PLATFORM_MODULES)

PLATFORM_INFO = (
    {
        "value": "google-ads",
        "label": "Google Ads",
        "description": "Search, Display, YouTube, Performance Max",
        "checks": 74,
    },
    {
        "value": "meta-ads",
        "label": "Meta Ads",
        "description": "Facebook, Instagram, Advantage+",
        "checks": 46,
    },
    {
        "value": "linkedin-ads",
        "label": "LinkedIn Ads",
        "description": "B2B targeting, Lead Gen, Sponsored Content",
        "checks": 25,
    },
    {
        "value": "tiktok-ads",
        "label": "TikTok Ads",
        "description": "Creative-first, Smart+, TikTok Shop",
        "checks": 25,
    },
    {
        "value": "microsoft-ads",
        "label": "Microsoft Ads",
        "description": "Bing Search, Copilot integration",
        "checks": 20,
    },
)

BUSINESS_TYPES = {
    "saas": "Software as a Service with trial/demo focus",
    "ecommerce": "Online retail with product catalog",
    "local-service": "Service-based business with local targeting",
    "b2b-enterprise": "Business-to-business with long sales cycle",
    "info-products": "Courses, webinars, educational content",
    "mobile-app": "App installs and in-app conversions",
    "real-estate": "Property listings and lead generation",
    "healthcare": "Medical services with HIPAA compliance",
    "finance": "Financial services with regulatory requirements",
    "agency": "Managing multiple client accounts",
    "generic": "General business type",
}

# Placeholder criteria used in the source checklists to mean "no warning tier".
_BLANK_MARKERS = {"", "—", "-", "n/a"}


def _clean_text(value: Any) -> str:
    text = str(value or "").strip()
    return "" if text.lower() in _BLANK_MARKERS else text


def build_check(raw: Mapping[str, Any]) -> AuditCheck:
    return AuditCheck(
        id=str(raw["id"]).strip(),
        check=str(raw.get("check") or "").strip(),
        severity=Severity(str(raw["severity"]).strip().lower()),
        category=str(raw["category"]).strip(),
        pass_criteria=_clean_text(raw.get("pass")),
        warning_criteria=_clean_text(raw.get("warning")),
        fail_criteria=_clean_text(raw.get("fail")),
        description=raw.get("description") or None,
    )


def build_category(raw: Mapping[str, Any]) -> AuditCategory:
    return AuditCategory(
        name=str(raw["name"]).strip(),
        weight=float(raw.get("weight") or 0.0),
        check_count=int(raw.get("check_count", raw.get("checkCount", 0)) or 0),
        description=raw.get("description") or None,
    )


def build_checklist(
    platform: str,
    label: str,
    categories: Iterable[Mapping[str, Any]],
    checks: Iterable[Mapping[str, Any]],
) -> PlatformChecklist:
    """Build a frozen checklist from plain dict rows (same keys as the built-in modules)."""
    return PlatformChecklist(
        platform=platform,
        label=label,
        categories=tuple(build_category(row) for row in categories),
        checks=tuple(build_check(row) for row in checks),
    )


def build_default_catalog() -> Catalog:
    catalog: Dict[str, PlatformChecklist] = {}
    for module in _PLATFORM_MODULES:
        catalog[module.PLATFORM] = build_checklist(
            module.PLATFORM, module.LABEL, module.CATEGORIES, module.CHECKS
        )
    return MappingProxyType(catalog)


def get_platform_checklist(catalog: Catalog, platform: str) -> PlatformChecklist:
    """Return the checklist for ``platform``; unknown platforms get an empty checklist."""
    checklist = catalog.get(platform)
    if checklist is None:
        logger.debug("No checklist for platform %s", platform)
        return PlatformChecklist(platform=platform, label=platform)
    return checklist


def get_platform_label(platform: str) -> str:
    for info in PLATFORM_INFO:
        if info["value"] == platform:
            return info["label"]
    return platform


def validate_catalog(checklist: PlatformChecklist, tolerance: float = 0.001) -> List[str]:
    """
    Report consistency problems in a checklist. Never raises; the scorer
    accepts inconsistent data, this is for catalog authors.
    """
    issues: List[str] = []
    total_weight = sum(category.weight for category in checklist.categories)
    if checklist.categories and abs(total_weight - 1.0) > tolerance:
        issues.append(f"Category weights sum to {total_weight:.3f}, expected 1.0")

    seen: set = set()
    for check in checklist.checks:
        if check.id in seen:
            issues.append(f"Duplicate check id: {check.id}")
        seen.add(check.id)

    category_names = {category.name for category in checklist.categories}
    for check in checklist.checks:
        if check.category not in category_names:
            issues.append(f"Check {check.id} references unknown category: {check.category}")

    for category in checklist.categories:
        defined = sum(1 for check in checklist.checks if check.category == category.name)
        if defined != category.check_count:
            issues.append(
                f"Category {category.name} expects {category.check_count} checks, found {defined}"
            )
    return issues


def describe_business_type(business_type: Optional[str]) -> str:
    return BUSINESS_TYPES.get(business_type or "generic", BUSINESS_TYPES["generic"])


__all__ = [
    "BUSINESS_TYPES",
    "Catalog",
    "PLATFORM_INFO",
    "SUPPORTED_PLATFORMS",
    "build_category",
    "build_check",
    "build_checklist",
    "build_default_catalog",
    "describe_business_type",
    "get_platform_checklist",
    "get_platform_label",
    "validate_catalog",
]
