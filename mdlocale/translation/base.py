"""
翻訳エンジンの抽象基底クラス

全ての翻訳プロバイダ実装はこの基底クラスを継承する。
プロバイダは翻訳済みテキストを返すか、TranslationError を送出する。
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseTranslator(ABC):
    """翻訳プロバイダの抽象基底クラス"""

    # プロバイダ固有の言語コード（小文字の標準コード → プロバイダのコード）
    LANGUAGE_CODE_MAP: dict[str, str] = {}

    def __init__(self, api_key: str | None = None, **kwargs):
        """
        翻訳プロバイダを初期化

        Args:
            api_key: API キー（クラウド API の場合）
            **kwargs: サブクラス固有のパラメータ
        """
        self._api_key = api_key

    @abstractmethod
    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        テキストを翻訳

        Args:
            text: 翻訳対象テキスト
            source_lang: ソース言語コード
            target_lang: ターゲット言語コード

        Returns:
            翻訳済みテキスト

        Raises:
            TranslationNetworkError: API リクエスト失敗、レート制限
            TranslationError: その他の翻訳エラー（空の応答を含む）
        """
        ...

    async def translate_async(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        非同期翻訳（デフォルト実装）

        同期メソッドを asyncio.to_thread でラップ。
        """
        import asyncio

        return await asyncio.to_thread(self.translate, text, source_lang, target_lang)

    @abstractmethod
    def get_translator_name(self) -> str:
        """
        翻訳プロバイダ名を取得

        Returns:
            識別子（例: "azure", "google"）
        """
        ...

    def map_language_code(self, code: str) -> str:
        """
        標準言語コードをプロバイダ固有のコードに変換

        デフォルトでは LANGUAGE_CODE_MAP に無いコードをそのまま返す。
        """
        return self.LANGUAGE_CODE_MAP.get(code.lower(), code)
