"""TypedDict definitions for the mdlocale configuration."""

from __future__ import annotations

from typing import Literal, Optional, TypedDict

__all__ = [
    "TranslationConfig",
    "QualityConfig",
    "LoggingConfig",
    "MdlocaleConfig",
]


class TranslationConfig(TypedDict, total=False):
    service: Literal["azure", "google", "deepl", "openai"]
    source_language: str
    target_language: Optional[str]
    preserve_code_blocks: bool
    preserve_front_matter: bool
    file_pattern: str
    max_workers: int


class QualityConfig(TypedDict, total=False):
    min_score: int
    file_pattern: str
    max_workers: int


class LoggingConfig(TypedDict, total=False):
    console_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MdlocaleConfig(TypedDict):
    translation: TranslationConfig
    quality: QualityConfig
    logging: LoggingConfig
