"""
翻訳プロバイダのファクトリー

設定値（プロバイダID）から翻訳プロバイダを生成する。
実装が存在しないプロバイダは NotImplementedError で明示的に拒否する。
"""

from __future__ import annotations

import importlib
import os
from typing import TYPE_CHECKING, Optional

from .exceptions import MissingCredentialsError
from .metadata import TranslatorMetadata

if TYPE_CHECKING:
    from .base import BaseTranslator


class TranslatorFactory:
    """翻訳プロバイダを作成するファクトリークラス"""

    @classmethod
    def create_translator(
        cls,
        translator_type: str,
        api_key: Optional[str] = None,
        **translator_options,
    ) -> BaseTranslator:
        """
        指定されたタイプの翻訳プロバイダを作成

        Args:
            translator_type: プロバイダID（azure, google, deepl, openai）
            api_key: API キー。省略時はメタデータの環境変数から取得
            **translator_options: プロバイダ固有のパラメータ

        Returns:
            BaseTranslator のインスタンス

        Raises:
            ValueError: 不明なプロバイダIDが指定された場合
            NotImplementedError: 登録済みだが未実装のプロバイダの場合
            MissingCredentialsError: API キーが見つからない場合

        Examples:
            >>> translator = TranslatorFactory.create_translator("azure", api_key="...")
            >>> translator.translate("Hello", "en", "es")
            'Hola'
        """
        metadata = TranslatorMetadata.get(translator_type)
        if metadata is None:
            available = TranslatorMetadata.list_translator_ids()
            raise ValueError(
                f"Unknown translator type: {translator_type}. " f"Available: {available}"
            )

        try:
            module = importlib.import_module(metadata.module, package="mdlocale.translation")
            translator_class = getattr(module, metadata.class_name)
        except ModuleNotFoundError as e:
            raise NotImplementedError(
                f"{translator_type} translation service not implemented yet. "
                f"Currently available: {cls._get_implemented_translators()}"
            ) from e

        params = {**metadata.default_params, **translator_options}

        if metadata.requires_credentials:
            key = api_key or os.environ.get(metadata.credentials_env or "")
            if not key:
                raise MissingCredentialsError(translator_type, metadata.credentials_env or "")
            params["api_key"] = key
        elif api_key:
            params["api_key"] = api_key

        return translator_class(**params)

    @classmethod
    def _get_implemented_translators(cls) -> list[str]:
        """実装済みのプロバイダIDのリストを取得"""
        implemented = []
        for translator_id in TranslatorMetadata.list_translator_ids():
            metadata = TranslatorMetadata.get(translator_id)
            if metadata is None:
                continue
            try:
                importlib.import_module(metadata.module, package="mdlocale.translation")
                implemented.append(translator_id)
            except ModuleNotFoundError:
                pass
        return implemented

    @classmethod
    def list_available_translators(cls) -> list[str]:
        """登録済みプロバイダIDのリスト"""
        return TranslatorMetadata.list_translator_ids()

    @classmethod
    def list_implemented_translators(cls) -> list[str]:
        """実装済みプロバイダIDのリスト"""
        return cls._get_implemented_translators()
