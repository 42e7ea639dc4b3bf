"""Rule-based quality scoring for translated Markdown."""

from .checker import DEFAULT_MIN_SCORE, QualityChecker
from .checks import (
    calculate_score,
    check_formatting_errors,
    check_incomplete_sentences,
    check_inconsistent_terminology,
    check_missing_translations,
    run_checks,
)
from .report import generate_report, sort_by_score
from .terminology import DEFAULT_TERMINOLOGY, freeze_terminology
from .types import IssueType, QualityCheckResult, QualityIssue, Severity

__all__ = [
    "QualityChecker",
    "DEFAULT_MIN_SCORE",
    "QualityCheckResult",
    "QualityIssue",
    "IssueType",
    "Severity",
    "DEFAULT_TERMINOLOGY",
    "freeze_terminology",
    "check_missing_translations",
    "check_inconsistent_terminology",
    "check_formatting_errors",
    "check_incomplete_sentences",
    "calculate_score",
    "run_checks",
    "generate_report",
    "sort_by_score",
]
