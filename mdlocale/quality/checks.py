"""Rule checks for translated Markdown and the score they reduce to.

Every check is a pure function of its input; running a check twice on the
same content yields the same issues in the same order.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

from .terminology import DEFAULT_TERMINOLOGY, TerminologyTable
from .types import IssueType, QualityIssue, Severity

PLACEHOLDER_PATTERN = re.compile(r"\{\{.*?\}\}")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]*)\)")
CODE_BLOCK_PATTERN = re.compile(r"```[\s\S]*?```")
PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
LIST_MARKER = re.compile(r"^\s*[*+-]\s+")
ORDERED_ITEM = re.compile(r"^\d+\.")
SENTENCE_END = re.compile(r"[.!?]$")

MIN_SENTENCE_LENGTH = 5

SEVERITY_DEDUCTIONS = {
    Severity.ERROR: 10,
    Severity.WARNING: 3,
    Severity.INFO: 1,
}


def _symmetric(marker: str) -> re.Pattern[str]:
    # the marker itself, not adjacent to the same character (``*`` inside ``**``)
    char = re.escape(marker[0])
    return re.compile(rf"(?<!{char}){re.escape(marker)}(?!{char})")


# (name, open pattern, close pattern); ``None`` close means the marker is symmetric
FORMATTING_PAIRS: Tuple[Tuple[str, re.Pattern[str], Optional[re.Pattern[str]]], ...] = (
    ("bold", re.compile(r"\*\*"), None),
    ("italic", _symmetric("*"), None),
    ("inline code", _symmetric("`"), None),
    ("link text", re.compile(r"\["), re.compile(r"\]")),
)


def _lines_outside_code(content: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` for lines outside fenced code blocks."""
    in_fence = False
    for number, line in enumerate(content.split("\n"), start=1):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            continue
        if not in_fence:
            yield number, line


def count_markers(
    line: str,
    open_pattern: re.Pattern[str],
    close_pattern: Optional[re.Pattern[str]] = None,
) -> Tuple[int, int]:
    """
    Count opening and closing markers on a line.

    Symmetric markers alternate: the first occurrence opens, the next closes.
    """
    if close_pattern is None:
        occurrences = len(open_pattern.findall(line))
        return (occurrences + 1) // 2, occurrences // 2
    return len(open_pattern.findall(line)), len(close_pattern.findall(line))


def check_missing_translations(content: str) -> List[QualityIssue]:
    """Flag untranslated ``{{...}}`` template placeholders, one issue per match."""
    issues: List[QualityIssue] = []
    for number, line in enumerate(content.split("\n"), start=1):
        for match in PLACEHOLDER_PATTERN.finditer(line):
            issues.append(
                QualityIssue(
                    type=IssueType.MISSING_TRANSLATION,
                    severity=Severity.ERROR,
                    message=f"Untranslated placeholder found: {match.group(0)}",
                    line=number,
                    suggestion="Translate the placeholder content",
                )
            )
    return issues


def check_inconsistent_terminology(
    content: str,
    language: str,
    terminology: TerminologyTable = DEFAULT_TERMINOLOGY,
) -> List[QualityIssue]:
    """
    Flag terms written with more than one accepted variant in the same document.

    Matching is a case-insensitive substring search. A variant that only
    occurs inside a longer variant of the same term (``cadena de bloque`` in
    ``cadena de bloques``) is not counted separately.
    """
    terms = terminology.get(language)
    if not terms:
        return []

    issues: List[QualityIssue] = []
    lowered = content.lower()

    for standard_term, variations in terms.items():
        remaining = lowered
        found = set()
        for variation in sorted(variations, key=len, reverse=True):
            needle = variation.lower()
            if needle in remaining:
                found.add(variation)
                remaining = remaining.replace(needle, "\x00")

        if len(found) > 1:
            used = [variation for variation in variations if variation in found]
            issues.append(
                QualityIssue(
                    type=IssueType.INCONSISTENT_TERMINOLOGY,
                    severity=Severity.WARNING,
                    message=f'Inconsistent terminology for "{standard_term}": {", ".join(used)}',
                    suggestion=f'Use "{variations[0]}" consistently',
                )
            )
    return issues


def check_formatting_errors(content: str) -> List[QualityIssue]:
    """
    Flag unbalanced inline Markdown formatting and links with an empty URL.

    Lines inside fenced code blocks are not inspected. A leading list marker
    (``* item``) is not counted as emphasis.
    """
    lines = list(_lines_outside_code(content))
    issues: List[QualityIssue] = []

    for name, open_pattern, close_pattern in FORMATTING_PAIRS:
        for number, line in lines:
            text = LIST_MARKER.sub("", line, count=1)
            opens, closes = count_markers(text, open_pattern, close_pattern)
            if opens != closes:
                issues.append(
                    QualityIssue(
                        type=IssueType.FORMATTING_ERROR,
                        severity=Severity.ERROR,
                        message=f"Unbalanced {name} formatting ({opens} opens, {closes} closes)",
                        line=number,
                        suggestion=f"Ensure {name} formatting is properly closed",
                    )
                )

    for number, line in lines:
        for match in LINK_PATTERN.finditer(line):
            link_text, link_url = match.group(1), match.group(2)
            if not link_url.strip():
                issues.append(
                    QualityIssue(
                        type=IssueType.FORMATTING_ERROR,
                        severity=Severity.ERROR,
                        message=f'Empty link URL for text "{link_text}"',
                        line=number,
                        suggestion="Add a valid URL to the link",
                    )
                )
    return issues


def _is_structural(paragraph: str) -> bool:
    stripped = paragraph.strip()
    return (
        stripped.startswith("#")
        or stripped[:1] in ("*", "-")
        or ORDERED_ITEM.match(stripped) is not None
    )


def check_incomplete_sentences(content: str) -> List[QualityIssue]:
    """Flag prose sentences that do not end in terminal punctuation."""
    issues: List[QualityIssue] = []
    prose = CODE_BLOCK_PATTERN.sub("", content)

    for paragraph in PARAGRAPH_SPLIT.split(prose):
        if _is_structural(paragraph):
            continue

        for sentence in SENTENCE_SPLIT.split(paragraph):
            candidate = sentence.strip()
            if len(candidate) < MIN_SENTENCE_LENGTH:
                continue
            if not SENTENCE_END.search(candidate):
                issues.append(
                    QualityIssue(
                        type=IssueType.INCOMPLETE_SENTENCE,
                        severity=Severity.WARNING,
                        message=f'Possible incomplete sentence: "{candidate}"',
                        suggestion="Add appropriate punctuation or complete the sentence",
                    )
                )
    return issues


def calculate_score(issues: List[QualityIssue]) -> int:
    """
    Reduce issues to a 0-100 score.

    Each error costs 10 points, each warning 3 and each info 1.
    """
    if not issues:
        return 100

    deduction = sum(SEVERITY_DEDUCTIONS.get(issue.severity, 0) for issue in issues)
    return max(0, min(100, 100 - deduction))


def run_checks(
    content: str,
    language: str,
    terminology: TerminologyTable = DEFAULT_TERMINOLOGY,
) -> List[QualityIssue]:
    """Run every rule in order and concatenate their issues."""
    return [
        *check_missing_translations(content),
        *check_inconsistent_terminology(content, language, terminology),
        *check_formatting_errors(content),
        *check_incomplete_sentences(content),
    ]
