"""Quality checking of translated Markdown files."""
from __future__ import annotations

import concurrent.futures
import logging
from pathlib import Path
from typing import List

from mdlocale.languages import Languages

from .checks import calculate_score, run_checks
from .terminology import DEFAULT_TERMINOLOGY, TerminologyTable
from .types import IssueType, QualityCheckResult, QualityIssue, Severity

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 70
DEFAULT_FILE_PATTERN = "**/*.md"


class QualityChecker:
    """
    Score translated content against the rule checks.

    The checker holds only read-only configuration; it keeps no state
    between calls.
    """

    def __init__(
        self,
        min_score: int = DEFAULT_MIN_SCORE,
        terminology: TerminologyTable = DEFAULT_TERMINOLOGY,
    ) -> None:
        self.min_score = min_score
        self._terminology = terminology

    def check_content(
        self,
        content: str,
        language: str,
        file: str = "<content>",
    ) -> QualityCheckResult:
        """Run every rule on ``content`` and score the result."""
        issues = run_checks(content, language, self._terminology)
        score = calculate_score(issues)
        return QualityCheckResult(
            file=file,
            language=language,
            issues=issues,
            score=score,
            passed=score >= self.min_score,
        )

    def check_file(self, file_path: str | Path, language: str) -> QualityCheckResult:
        """Check a single file; unsupported languages and IO errors give a failed result."""
        path = Path(file_path)
        if not Languages.is_supported(language):
            return self._failure(str(path), language, f"Unsupported language: {language}")

        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error("File not found: %s", path)
            return self._failure(str(path), language, f"File not found: {path}")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error checking file quality for %s: %s", path, exc)
            return self._failure(str(path), language, f"Failed to read {path}: {exc}")

        result = self.check_content(content, language, file=str(path))
        logger.debug("%s scored %d (%d issues)", path, result.score, len(result.issues))
        return result

    def check_directory(
        self,
        directory: str | Path,
        language: str,
        pattern: str = DEFAULT_FILE_PATTERN,
        *,
        max_workers: int = 1,
    ) -> List[QualityCheckResult]:
        """
        Check every file under ``directory`` matching ``pattern``.

        Returns:
            Results ordered by file path regardless of ``max_workers``.
        """
        root = Path(directory)
        if not Languages.is_supported(language):
            return [self._failure(str(root), language, f"Unsupported language: {language}")]
        if not root.is_dir():
            logger.error("Directory not found: %s", root)
            return [self._failure(str(root), language, f"Directory not found: {root}")]

        files = sorted(path for path in root.glob(pattern) if path.is_file())
        if not files:
            logger.warning("No files found matching pattern: %s in directory: %s", pattern, root)
            return []

        if max_workers <= 1 or len(files) == 1:
            return [self.check_file(path, language) for path in files]

        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda path: self.check_file(path, language), files))

    @staticmethod
    def _failure(file: str, language: str, message: str) -> QualityCheckResult:
        return QualityCheckResult(
            file=file,
            language=language,
            issues=[QualityIssue(type=IssueType.OTHER, severity=Severity.ERROR, message=message)],
            score=0,
            passed=False,
        )
