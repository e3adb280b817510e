"""
Audit data models.

Catalog entries (checks, categories) are static and never mutated. Everything
derived from responses (scores, findings, quick wins, action items, reports)
is rebuilt on every report generation, so all of it is frozen as well.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Severity(str, Enum):
    """Check severity levels, most severe first."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CheckStatus(str, Enum):
    """Questionnaire answer for one check."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"
    NOT_APPLICABLE = "not-applicable"


class Effort(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


SEVERITY_ORDER: Tuple[Severity, ...] = (
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
)
SEVERITY_RANK: Dict[Severity, int] = {sev: idx for idx, sev in enumerate(SEVERITY_ORDER)}
EFFORT_RANK: Dict[Effort, int] = {Effort.LOW: 0, Effort.MEDIUM: 1, Effort.HIGH: 2}


def _plain(value: Any) -> Any:
    """Convert nested records, enums and tuples into JSON-friendly values."""
    if isinstance(value, _Serializable):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return _plain(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


class _Serializable:
    # Nested records serialize through their own to_dict().
    def to_dict(self) -> Dict[str, Any]:
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AuditCheck(_Serializable):
    """One checklist entry; pass/warning/fail hold the criteria text shown to the auditor."""
    id: str
    check: str
    severity: Severity
    category: str
    pass_criteria: str = ""
    warning_criteria: str = ""
    fail_criteria: str = ""
    description: Optional[str] = None


@dataclass(frozen=True)
class AuditCategory(_Serializable):
    """Weights across a platform's categories are expected to sum to 1.0 (not enforced)."""
    name: str
    weight: float
    check_count: int
    description: Optional[str] = None


@dataclass(frozen=True)
class PlatformChecklist(_Serializable):
    platform: str
    label: str
    categories: Tuple[AuditCategory, ...] = ()
    checks: Tuple[AuditCheck, ...] = ()

    @property
    def total_checks(self) -> int:
        return len(self.checks)

    def is_empty(self) -> bool:
        return not self.checks

    def check_by_id(self) -> Dict[str, AuditCheck]:
        return {check.id: check for check in self.checks}


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AuditResponse(_Serializable):
    check_id: str
    status: CheckStatus
    notes: Optional[str] = None
    impact: Optional[str] = None


@dataclass(frozen=True)
class CheckWithResponse:
    check: AuditCheck
    response: AuditResponse


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryScore(_Serializable):
    """
    Score for one category.

    ``answered`` is the number of scored (non N/A) checks. A category with
    ``answered == 0`` has percentage 0 but means "no data", not "failing".
    """
    name: str
    weight: float
    total_checks: int
    passed_checks: int
    warning_checks: int
    failed_checks: int
    score: float
    percentage: int

    @property
    def answered(self) -> int:
        return self.passed_checks + self.warning_checks + self.failed_checks

    @property
    def has_data(self) -> bool:
        return self.answered > 0

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["answered"] = self.answered
        payload["has_data"] = self.has_data
        return payload


@dataclass(frozen=True)
class PlatformScore(_Serializable):
    score: int
    grade: str
    category_scores: Tuple[CategoryScore, ...] = ()


@dataclass(frozen=True)
class Finding(_Serializable):
    id: str
    check_id: str
    category: str
    title: str
    severity: Severity
    status: CheckStatus
    current_state: str
    target_state: str
    reason: str
    impact: str
    effort: Effort
    recommendation: str
    check_description: Optional[str] = None


@dataclass(frozen=True)
class QuickWin(_Serializable):
    id: str
    title: str
    description: str
    estimated_impact: str
    effort: Effort
    category: str
    check_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ActionItem(_Serializable):
    priority: int
    title: str
    description: str
    category: str
    severity: Severity
    estimated_effort: Effort
    expected_impact: str
    checklist: Tuple[str, ...] = ()
    platform: str = ""


@dataclass(frozen=True)
class SeverityCounts(_Serializable):
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.high + self.medium + self.low


@dataclass(frozen=True)
class TopIssue(_Serializable):
    platform: str
    check_id: str
    issue: str
    priority: Severity


@dataclass(frozen=True)
class PlatformReport(_Serializable):
    platform: str
    score: int
    grade: str
    findings: SeverityCounts = field(default_factory=SeverityCounts)
    recommendations: Tuple[str, ...] = ()
    quick_wins: Tuple[str, ...] = ()
    category_scores: Tuple[CategoryScore, ...] = ()
    finding_details: Tuple[Finding, ...] = ()
    quick_win_details: Tuple[QuickWin, ...] = ()
    action_plan: Tuple[ActionItem, ...] = ()
    results: Tuple[AuditResponse, ...] = ()


@dataclass(frozen=True)
class MultiPlatformReport(_Serializable):
    overall_score: int
    overall_grade: str
    platform_reports: Tuple[PlatformReport, ...] = ()
    top_issues: Tuple[TopIssue, ...] = ()
    action_plan: Tuple[ActionItem, ...] = ()

    def platform_report(self, platform: str) -> Optional[PlatformReport]:
        for report in self.platform_reports:
            if report.platform == platform:
                return report
        return None

    def platforms(self) -> List[str]:
        return [report.platform for report in self.platform_reports]
