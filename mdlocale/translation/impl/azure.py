"""
Azure Translator 実装

deep-translator ライブラリの MicrosoftTranslator を使用した Azure Translator API のラッパー。
API キーが必要（AZURE_TRANSLATOR_KEY）。
"""

from __future__ import annotations

import logging
import os

from deep_translator import MicrosoftTranslator
from deep_translator.exceptions import (
    RequestError,
    TooManyRequests,
    TranslationNotFound,
)

from ..base import BaseTranslator
from ..exceptions import TranslationError, TranslationNetworkError
from ..lang_codes import normalize_for_azure

logger = logging.getLogger(__name__)


class AzureTranslator(BaseTranslator):
    """
    Azure Translator (via deep-translator)

    Examples:
        >>> translator = AzureTranslator(api_key="...")
        >>> translator.translate("Hello", "en", "es")
        'Hola'
    """

    def __init__(self, api_key: str | None = None, region: str | None = None, **kwargs):
        """
        AzureTranslator を初期化

        Args:
            api_key: Azure Translator のサブスクリプションキー
            region: リソースのリージョン（省略時は AZURE_TRANSLATOR_REGION または "global"）
        """
        super().__init__(api_key=api_key, **kwargs)
        self.region = region or os.environ.get("AZURE_TRANSLATOR_REGION", "global")

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        テキストを翻訳

        Raises:
            TranslationNetworkError: API リクエスト失敗、レート制限
            TranslationError: 翻訳結果なし、その他のエラー
        """
        if not text or not text.strip():
            return text

        try:
            translator = MicrosoftTranslator(
                api_key=self._api_key,
                region=self.region,
                source=self.map_language_code(source_lang),
                target=self.map_language_code(target_lang),
            )
            result = translator.translate(text)
        except TooManyRequests as e:
            raise TranslationNetworkError(f"Rate limited: {e}") from e
        except RequestError as e:
            raise TranslationNetworkError(f"API request failed: {e}") from e
        except TranslationNotFound as e:
            raise TranslationError(f"Translation not found: {e}") from e
        except Exception as e:
            raise TranslationError(f"Unexpected error: {e}") from e

        if not result:
            raise TranslationError("No translation returned from Azure")

        logger.debug("Azure translated %d chars (%s -> %s)", len(text), source_lang, target_lang)
        return result

    def map_language_code(self, code: str) -> str:
        return normalize_for_azure(code)

    def get_translator_name(self) -> str:
        """翻訳プロバイダ名を取得"""
        return "azure"
