"""
Google Translate 実装

deep-translator ライブラリを使用した Google Translate のラッパー。
API キー不要で、ほぼ全言語ペアに対応。
"""

from __future__ import annotations

from deep_translator import GoogleTranslator as DeepGoogleTranslator
from deep_translator.exceptions import (
    RequestError,
    TooManyRequests,
    TranslationNotFound,
)

from ..base import BaseTranslator
from ..exceptions import TranslationError, TranslationNetworkError
from ..lang_codes import normalize_for_google


class GoogleTranslator(BaseTranslator):
    """
    Google Translate (via deep-translator)

    Examples:
        >>> translator = GoogleTranslator()
        >>> translator.translate("Hello", "en", "ja")
        'こんにちは'
    """

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        テキストを翻訳

        Raises:
            TranslationNetworkError: API リクエスト失敗、レート制限
            TranslationError: その他の翻訳エラー
        """
        if not text or not text.strip():
            return text

        try:
            translator = DeepGoogleTranslator(
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
            raise TranslationError("No translation returned from Google")
        return result

    def map_language_code(self, code: str) -> str:
        return normalize_for_google(code)

    def get_translator_name(self) -> str:
        """翻訳プロバイダ名を取得"""
        return "google"
