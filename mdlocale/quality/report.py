"""Markdown quality report generation."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from mdlocale.languages import Languages

from .types import QualityCheckResult


def sort_by_score(results: Sequence[QualityCheckResult]) -> list[QualityCheckResult]:
    """Lowest score first; ties keep their input order."""
    return sorted(results, key=lambda result: result.score)


def _relative(file: str, directory: str | Path) -> str:
    try:
        return os.path.relpath(file, directory)
    except ValueError:  # different drive on Windows
        return file


def _cell(value: object) -> str:
    if value is None or value == "":
        return "-"
    return str(value).replace("|", "\\|").replace("\n", " ")


def generate_report(
    results: Sequence[QualityCheckResult],
    directory: str | Path,
    language: str,
) -> str:
    """
    Render check results as a Markdown report.

    The summary is followed by one section per file, sorted by ascending score.
    """
    if not results:
        return f"No files found for quality check in {directory}"

    total_files = len(results)
    passed_files = sum(1 for result in results if result.passed)
    failed_files = total_files - passed_files
    average_score = sum(result.score for result in results) / total_files
    language_name = Languages.get_info(language).name if Languages.is_supported(language) else "Unknown"

    lines = [
        f"# Quality Report for {language}",
        "",
        "## Summary",
        "",
        f"- **Directory:** {directory}",
        f"- **Language:** {language} ({language_name})",
        f"- **Files Checked:** {total_files}",
        f"- **Files Passed:** {passed_files} ({round(passed_files / total_files * 100)}%)",
        f"- **Files Failed:** {failed_files} ({round(failed_files / total_files * 100)}%)",
        f"- **Average Score:** {average_score:.2f}/100",
        "",
        "## File Details",
        "",
    ]

    for result in sort_by_score(results):
        lines.append(f"### {_relative(result.file, directory)}")
        lines.append("")
        lines.append(f"- **Score:** {result.score}/100 ({'PASSED' if result.passed else 'FAILED'})")
        lines.append(f"- **Issues:** {len(result.issues)}")
        lines.append("")

        if result.issues:
            lines.append("| Type | Severity | Message | Line | Suggestion |")
            lines.append("| ---- | -------- | ------- | ---- | ---------- |")
            for issue in result.issues:
                lines.append(
                    f"| {issue.type.value} | {issue.severity.value} | {_cell(issue.message)} "
                    f"| {_cell(issue.line)} | {_cell(issue.suggestion)} |"
                )
            lines.append("")

    return "\n".join(lines) + "\n"
