"""
TranslatorMetadata のテスト
"""

from __future__ import annotations

import dataclasses

import pytest

from mdlocale.translation.metadata import TranslatorInfo, TranslatorMetadata


class TestTranslatorMetadata:
    """TranslatorMetadata のテスト"""

    def test_get_azure(self):
        """Azure のメタデータ"""
        info = TranslatorMetadata.get("azure")
        assert info is not None
        assert info.display_name == "Azure Translator"
        assert info.requires_credentials is True
        assert info.credentials_env == "AZURE_TRANSLATOR_KEY"
        assert info.default_params == {"region": "global"}

    def test_get_google(self):
        """Google は認証不要"""
        info = TranslatorMetadata.get("google")
        assert info is not None
        assert info.requires_credentials is False
        assert info.credentials_env is None

    def test_credentials_env(self):
        """認証情報の環境変数"""
        assert TranslatorMetadata.get("deepl").credentials_env == "DEEPL_API_KEY"
        assert TranslatorMetadata.get("openai").credentials_env == "OPENAI_API_KEY"

    def test_get_unknown(self):
        """不明な ID は None"""
        assert TranslatorMetadata.get("babelfish") is None

    def test_get_all_returns_copy(self):
        """get_all はコピーを返す"""
        all_translators = TranslatorMetadata.get_all()
        all_translators.pop("azure")
        assert TranslatorMetadata.get("azure") is not None

    def test_list_translator_ids(self):
        """登録済み ID のリスト"""
        assert TranslatorMetadata.list_translator_ids() == ["azure", "google", "deepl", "openai"]

    def test_info_is_frozen(self):
        """TranslatorInfo はイミュータブル"""
        info = TranslatorMetadata.get("google")
        assert isinstance(info, TranslatorInfo)
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.module = ".impl.other"  # type: ignore[misc]
