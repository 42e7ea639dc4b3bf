"""Span-preserving Markdown translation."""

from .processor import (
    DEFAULT_FILE_PATTERN,
    FileTranslationResult,
    MarkdownTranslator,
    list_files,
)
from .spans import (
    CODE_BLOCK_PATTERN,
    ExtractedSpans,
    extract_code_blocks,
    placeholder,
    restore_code_blocks,
    split_front_matter,
)

__all__ = [
    "MarkdownTranslator",
    "FileTranslationResult",
    "DEFAULT_FILE_PATTERN",
    "list_files",
    "ExtractedSpans",
    "CODE_BLOCK_PATTERN",
    "extract_code_blocks",
    "restore_code_blocks",
    "split_front_matter",
    "placeholder",
]
