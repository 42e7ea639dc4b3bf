"""
翻訳サービスの呼び出し境界

設定エラー・プロバイダエラーを全て TranslationResult(success=False) に変換し、
呼び出し元には例外を送出しない。リトライは行わない（1 回の失敗 = 1 件の失敗結果）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mdlocale.languages import Languages

from .base import BaseTranslator
from .exceptions import TranslationError, UnsupportedLanguageError
from .factory import TranslatorFactory
from .result import TranslationResult

logger = logging.getLogger(__name__)

DEFAULT_SERVICE = "azure"


@dataclass(frozen=True)
class TranslationOptions:
    """翻訳リクエストのオプション"""

    target_language: str
    source_language: Optional[str] = None  # 省略時は Languages.default_source_language()
    service: str = DEFAULT_SERVICE
    api_key: Optional[str] = None
    preserve_code_blocks: bool = True
    preserve_front_matter: bool = True

    @property
    def resolved_source_language(self) -> str:
        return self.source_language or Languages.default_source_language()


def create_translator(options: TranslationOptions) -> BaseTranslator:
    """オプションに従って翻訳プロバイダを作成（失敗時は例外を送出）"""
    return TranslatorFactory.create_translator(options.service, api_key=options.api_key)


def translate_text(
    text: str,
    options: TranslationOptions,
    translator: Optional[BaseTranslator] = None,
) -> TranslationResult:
    """
    テキストを翻訳（fail-soft）

    Args:
        text: 翻訳対象テキスト
        options: 翻訳オプション
        translator: 使用するプロバイダ。省略時は options.service から作成

    Returns:
        TranslationResult。失敗時は translated == original、error が設定される
    """
    source_lang = options.resolved_source_language
    target_lang = options.target_language

    try:
        if not Languages.is_supported(target_lang):
            raise UnsupportedLanguageError(target_lang)

        if translator is None:
            translator = create_translator(options)

        translated = translator.translate(text, source_lang, target_lang)
    except (TranslationError, NotImplementedError, ValueError) as e:
        logger.error("Translation error: %s", e)
        return TranslationResult.failure(
            original=text,
            language=target_lang,
            error=str(e) or type(e).__name__,
            source_language=source_lang,
        )
    except Exception as e:
        logger.error("Unexpected translation failure", exc_info=True)
        return TranslationResult.failure(
            original=text,
            language=target_lang,
            error=str(e) or "Unknown error",
            source_language=source_lang,
        )

    return TranslationResult(
        original=text,
        translated=translated,
        language=target_lang,
        success=True,
        source_language=source_lang,
    )
