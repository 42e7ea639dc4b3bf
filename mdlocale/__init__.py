"""mdlocale: Markdown documentation translation with quality scoring.

Public API surface:
- Languages, Region, LanguageInfo: language registry
- MarkdownTranslator: span-preserving translation of content, files and directories
- TranslationOptions, TranslationResult, TranslatorFactory: provider plugin system
- QualityChecker, QualityCheckResult, QualityIssue: rule-based quality scoring
"""

from .languages import LanguageInfo, Languages, Region
from .markdown import FileTranslationResult, MarkdownTranslator
from .quality import (
    IssueType,
    QualityChecker,
    QualityCheckResult,
    QualityIssue,
    Severity,
    generate_report,
)
from .translation import (
    BaseTranslator,
    TranslationError,
    TranslationOptions,
    TranslationResult,
    TranslatorFactory,
    translate_text,
)

__version__ = "0.1.0"

__all__ = [
    "Languages",
    "LanguageInfo",
    "Region",
    "MarkdownTranslator",
    "FileTranslationResult",
    "BaseTranslator",
    "TranslationError",
    "TranslationOptions",
    "TranslationResult",
    "TranslatorFactory",
    "translate_text",
    "QualityChecker",
    "QualityCheckResult",
    "QualityIssue",
    "IssueType",
    "Severity",
    "generate_report",
]
