"""Extraction and restoration of spans that must survive translation unchanged."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Tuple

CODE_BLOCK_PATTERN = re.compile(r"```[\s\S]*?```")
CODE_BLOCK_PLACEHOLDER = "__CODE_BLOCK_{index}__"

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(?:[\s\S]*?\r?\n)?---[ \t]*(?:\r?\n|\Z)")


@dataclass(slots=True)
class ExtractedSpans:
    """Working text with placeholders plus the original spans, indexed by position."""

    text: str
    spans: List[str] = field(default_factory=list)

    def __iter__(self):
        # allows ``working, spans = extract_code_blocks(text)``
        return iter((self.text, self.spans))


def placeholder(index: int) -> str:
    return CODE_BLOCK_PLACEHOLDER.format(index=index)


def extract_code_blocks(content: str) -> ExtractedSpans:
    """
    Replace every fenced code block with a positional placeholder.

    Blocks are matched non-greedily, so each pair of triple-backtick delimiters
    forms one span.
    """
    spans: List[str] = []

    def _substitute(match: re.Match[str]) -> str:
        spans.append(match.group(0))
        return placeholder(len(spans) - 1)

    working = CODE_BLOCK_PATTERN.sub(_substitute, content)
    return ExtractedSpans(text=working, spans=spans)


def restore_code_blocks(content: str, spans: List[str]) -> str:
    """
    Put extracted spans back in place of their placeholders.

    Indices are processed in ascending order and only the first remaining
    occurrence of each placeholder is replaced. A placeholder the translator
    dropped is skipped, which loses that span.
    """
    restored = content
    for index, span in enumerate(spans):
        restored = restored.replace(placeholder(index), span, 1)
    return restored


def split_front_matter(content: str) -> Tuple[str, str]:
    """
    Split a leading YAML front matter block from the document body.

    Returns:
        ``(front_matter, body)``; ``front_matter`` is empty when the document
        does not start with a ``---`` fenced block.
    """
    match = FRONT_MATTER_PATTERN.match(content)
    if not match:
        return "", content
    return match.group(0), content[match.end():]
