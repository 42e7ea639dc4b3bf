"""
翻訳プラグインシステム

複数の翻訳プロバイダ（Azure Translator, Google Translate）をサポートする
プラグイン可能な翻訳システムを提供する。DeepL / OpenAI は登録済みだが未実装。

Usage:
    from mdlocale.translation import TranslationOptions, translate_text

    result = translate_text("Hello", TranslationOptions(target_language="es"))
    if result.success:
        print(result.translated)  # "Hola"
    else:
        print(result.error)
"""

from __future__ import annotations

from .base import BaseTranslator
from .exceptions import (
    MissingCredentialsError,
    TranslationError,
    TranslationNetworkError,
    UnsupportedLanguageError,
)
from .factory import TranslatorFactory
from .lang_codes import normalize_for_azure, normalize_for_google, to_iso639_1
from .metadata import TranslatorInfo, TranslatorMetadata
from .result import TranslationResult
from .service import TranslationOptions, create_translator, translate_text

__all__ = [
    # Core classes
    "BaseTranslator",
    "TranslationOptions",
    "TranslationResult",
    "TranslatorFactory",
    "TranslatorMetadata",
    "TranslatorInfo",
    # Service boundary
    "create_translator",
    "translate_text",
    # Exceptions
    "TranslationError",
    "TranslationNetworkError",
    "UnsupportedLanguageError",
    "MissingCredentialsError",
    # Language code utilities
    "to_iso639_1",
    "normalize_for_azure",
    "normalize_for_google",
]
