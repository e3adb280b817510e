"""
Audit scoring pipeline.

algorithms -> findings -> quick_wins / action_plan -> report
"""
from __future__ import annotations

from .algorithms import score_category, score_platform, score_to_grade
from .action_plan import generate_action_plan
from .findings import generate_findings
from .quick_wins import extract_quick_wins
from .report import generate_platform_report, generate_report

__all__ = [
    "extract_quick_wins",
    "generate_action_plan",
    "generate_findings",
    "generate_platform_report",
    "generate_report",
    "score_category",
    "score_platform",
    "score_to_grade",
]
