"""
HEURISTIC RULE TABLES
Ordered (predicate, result) pairs matched over category names and check text.

Order is precedence: the first predicate that returns True wins. Keep new rules
in the table rather than in the calling code so the precedence stays testable.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence, Tuple, TypeVar

from audit_core.models import AuditCheck, Effort, Finding, Severity

T = TypeVar("T")
Rule = Tuple[Callable[..., bool], T]


def first_match(rules: Sequence[Rule], *args, default: Optional[T] = None) -> Optional[T]:
    for predicate, result in rules:
        if predicate(*args):
            return result
    return default


def _category_has(token: str) -> Callable[..., bool]:
    def predicate(item, *_args) -> bool:
        return token in item.category
    return predicate


# ============================================================================
# FINDING EFFORT
# ============================================================================

def _critical_negative(check: AuditCheck) -> bool:
    return check.severity == Severity.CRITICAL and (
        "Negative" in check.category or "negative" in check.check.lower()
    )


def _critical_conversion(check: AuditCheck) -> bool:
    return check.severity == Severity.CRITICAL and (
        "Conversion" in check.category or "conversion" in check.check.lower()
    )


FINDING_EFFORT_RULES: Tuple[Rule, ...] = (
    (_critical_negative, Effort.LOW),
    (_critical_conversion, Effort.HIGH),
    (lambda check: check.severity == Severity.CRITICAL, Effort.MEDIUM),
    (lambda check: check.severity == Severity.HIGH, Effort.MEDIUM),
    (lambda check: check.severity == Severity.MEDIUM, Effort.MEDIUM),
)


def finding_effort(check: AuditCheck) -> Effort:
    return first_match(FINDING_EFFORT_RULES, check, default=Effort.LOW)


# ============================================================================
# CATALOG EFFORT (broader heuristic used when planning quick wins up front)
# ============================================================================

def _check_text_has(*tokens: str) -> Callable[[AuditCheck], bool]:
    def predicate(check: AuditCheck) -> bool:
        text = check.check.lower()
        return any(token in text for token in tokens)
    return predicate


def _category_lower_has(*tokens: str) -> Callable[[AuditCheck], bool]:
    def predicate(check: AuditCheck) -> bool:
        text = check.category.lower()
        return any(token in text for token in tokens)
    return predicate


def _settings_category(check: AuditCheck) -> bool:
    return _category_lower_has("setting", "configuration")(check)


def _is(*severities: Severity) -> Callable[[AuditCheck], bool]:
    def predicate(check: AuditCheck) -> bool:
        return check.severity in severities
    return predicate


def _both(*predicates: Callable[[AuditCheck], bool]) -> Callable[[AuditCheck], bool]:
    def predicate(check: AuditCheck) -> bool:
        return all(p(check) for p in predicates)
    return predicate


_tracking_category = _category_lower_has("conversion", "tracking")

CATALOG_EFFORT_RULES: Tuple[Rule, ...] = (
    (_check_text_has("negative keyword", "add exclusion", "review and update"), Effort.LOW),
    (_both(_settings_category, _is(Severity.LOW, Severity.MEDIUM)), Effort.LOW),
    (_settings_category, Effort.MEDIUM),
    (_category_lower_has("negative"), Effort.LOW),
    (_both(_tracking_category, _is(Severity.CRITICAL)), Effort.HIGH),
    (_tracking_category, Effort.MEDIUM),
    (_category_lower_has("structure"), Effort.MEDIUM),
    (_is(Severity.CRITICAL), Effort.HIGH),
    (_is(Severity.HIGH, Severity.MEDIUM), Effort.MEDIUM),
)


def catalog_effort(check: AuditCheck) -> Effort:
    return first_match(CATALOG_EFFORT_RULES, check, default=Effort.LOW)


# ============================================================================
# QUICK-WIN IMPACT
# ============================================================================

QUICK_WIN_IMPACT_RULES: Tuple[Rule, ...] = (
    (_category_has("Negative"), "Reduce wasted spend by eliminating irrelevant search terms"),
    (_category_has("Conversion"), "Enable proper conversion tracking and smart bidding"),
    (_category_has("Quality Score"), "Improve keyword quality scores and lower costs"),
    (_category_has("Audience"), "Improve targeting accuracy and conversion rates"),
)

QUICK_WIN_SEVERITY_IMPACT: Dict[Severity, str] = {
    Severity.CRITICAL: "Resolving this will eliminate a critical blocking issue",
    Severity.HIGH: "Resolving this will eliminate a major issue affecting performance",
    Severity.MEDIUM: "Resolving this will improve account health and performance",
    Severity.LOW: "Resolving this will optimize account settings",
}


def quick_win_impact(finding: Finding) -> str:
    fallback = QUICK_WIN_SEVERITY_IMPACT.get(finding.severity, "Improve account performance")
    return first_match(QUICK_WIN_IMPACT_RULES, finding, default=fallback)


# ============================================================================
# ACTION CHECKLISTS
# ============================================================================

GOOGLE_ADS_PLATFORM = "google-ads"


def _google_conversion(finding: Finding, platform: str) -> bool:
    return "Conversion" in finding.category and platform == GOOGLE_ADS_PLATFORM


def _quality_or_keywords(finding: Finding, _platform: str) -> bool:
    return "Quality" in finding.category or "Keywords" in finding.category


CHECKLIST_RULES: Tuple[Rule, ...] = (
    (
        _google_conversion,
        (
            "Access Google Ads account settings",
            "Navigate to Tools > Conversions",
            "Create or verify conversion action",
            "Implement conversion tracking code",
            "Test and verify conversion tracking",
        ),
    ),
    (
        _category_has("Negative"),
        (
            "Create negative keyword list",
            "Add relevant negative keywords",
            "Apply to campaigns or ad groups",
            "Monitor for search term reports",
        ),
    ),
    (
        _category_has("Audience"),
        (
            "Review current audience settings",
            "Identify correct audience segments",
            "Create audience lists if needed",
            "Apply to campaigns",
        ),
    ),
    (
        _quality_or_keywords,
        (
            "Pull quality score report",
            "Identify underperforming keywords",
            "Pause or remove low-quality keywords",
            "Create new higher-quality keyword groups",
        ),
    ),
    (
        _category_has("Account Structure"),
        (
            "Audit current structure",
            "Identify restructuring needs",
            "Create new campaigns/ad groups",
            "Migrate keywords and ads",
        ),
    ),
)

GENERIC_CHECKLIST = (
    "Access account settings",
    "Make necessary changes",
    "Test and verify",
    "Monitor results",
)


def checklist_steps(finding: Finding, platform: str) -> Tuple[str, ...]:
    return first_match(CHECKLIST_RULES, finding, platform, default=GENERIC_CHECKLIST)


# ============================================================================
# EXPECTED IMPACT
# ============================================================================

EXPECTED_IMPACT_BY_SEVERITY: Dict[Severity, Tuple[Tuple[str, str], ...]] = {
    Severity.CRITICAL: (
        ("Conversion Tracking", "Enable smart bidding and accurate ROI measurement"),
        ("Negative Keywords", "Reduce wasted spend by 10-20% immediately"),
        ("Account Structure", "Improve campaign performance by 15-25%"),
        ("Quality Score", "Reduce CPC by 10-15% on average"),
        ("Creative Diversity", "Increase CTR and reduce ad fatigue"),
    ),
    Severity.HIGH: (
        ("Settings & Targeting", "Improve account efficiency and relevance"),
        ("Audience & Targeting", "Increase conversion rates by targeting better"),
        ("Account Structure", "Optimize budget allocation"),
    ),
}

SEVERITY_DEFAULT_IMPACT: Dict[Severity, str] = {
    Severity.MEDIUM: "Improve account health and performance metrics",
    Severity.LOW: "Minor optimization to account settings",
}

GENERIC_IMPACT: Dict[Severity, str] = {
    Severity.CRITICAL: "Eliminate critical blocking issue and enable core functionality",
    Severity.HIGH: "Resolve major issue affecting account performance",
    Severity.MEDIUM: "Improve account health and optimization opportunities",
    Severity.LOW: "Minor optimization to enhance account efficiency",
}


def expected_impact(finding: Finding) -> str:
    for token, impact in EXPECTED_IMPACT_BY_SEVERITY.get(finding.severity, ()):
        if token in finding.category:
            return impact
    if finding.severity in SEVERITY_DEFAULT_IMPACT:
        return SEVERITY_DEFAULT_IMPACT[finding.severity]
    return GENERIC_IMPACT.get(finding.severity, "Improve overall account performance")
