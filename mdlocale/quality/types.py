"""Quality check data types."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, List, Optional


class IssueType(str, Enum):
    MISSING_TRANSLATION = "missing_translation"
    INCONSISTENT_TERMINOLOGY = "inconsistent_terminology"
    FORMATTING_ERROR = "formatting_error"
    INCOMPLETE_SENTENCE = "incomplete_sentence"
    OTHER = "other"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class QualityIssue:
    """A single defect reported by one rule."""

    type: IssueType
    severity: Severity
    message: str
    line: Optional[int] = None  # 1-based
    suggestion: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.line,
            "suggestion": self.suggestion,
        }


@dataclass
class QualityCheckResult:
    """Outcome of checking one file (or one piece of content)."""

    file: str
    language: str
    issues: List[QualityIssue] = field(default_factory=list)
    score: int = 100
    passed: bool = True

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["issues"] = [issue.to_dict() for issue in self.issues]
        return data
