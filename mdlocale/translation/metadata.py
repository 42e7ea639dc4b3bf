"""
翻訳プロバイダのメタデータ管理

プロバイダの登録情報とファクトリー生成用メタデータを管理する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TranslatorInfo:
    """翻訳プロバイダのメタデータ"""

    translator_id: str
    display_name: str
    description: str
    module: str  # e.g., ".impl.azure"
    class_name: str  # e.g., "AzureTranslator"
    requires_credentials: bool = False
    credentials_env: Optional[str] = None  # API キーを読む環境変数
    default_params: Dict[str, Any] = field(default_factory=dict)


class TranslatorMetadata:
    """翻訳プロバイダのメタデータ管理"""

    _TRANSLATORS: Dict[str, TranslatorInfo] = {
        "azure": TranslatorInfo(
            translator_id="azure",
            display_name="Azure Translator",
            description="Microsoft Azure Translator API (via deep-translator)",
            module=".impl.azure",
            class_name="AzureTranslator",
            requires_credentials=True,
            credentials_env="AZURE_TRANSLATOR_KEY",
            default_params={"region": "global"},
        ),
        "google": TranslatorInfo(
            translator_id="google",
            display_name="Google Translate",
            description="Google Translate web API (via deep-translator)",
            module=".impl.google",
            class_name="GoogleTranslator",
        ),
        "deepl": TranslatorInfo(
            translator_id="deepl",
            display_name="DeepL",
            description="DeepL API",
            module=".impl.deepl",
            class_name="DeeplTranslator",
            requires_credentials=True,
            credentials_env="DEEPL_API_KEY",
        ),
        "openai": TranslatorInfo(
            translator_id="openai",
            display_name="OpenAI",
            description="OpenAI chat completion based translation",
            module=".impl.openai",
            class_name="OpenAITranslator",
            requires_credentials=True,
            credentials_env="OPENAI_API_KEY",
        ),
    }

    @classmethod
    def get(cls, translator_id: str) -> Optional[TranslatorInfo]:
        """
        翻訳プロバイダのメタデータを取得

        Args:
            translator_id: プロバイダID

        Returns:
            TranslatorInfo、見つからない場合は None
        """
        return cls._TRANSLATORS.get(translator_id)

    @classmethod
    def get_all(cls) -> Dict[str, TranslatorInfo]:
        """全てのプロバイダメタデータを取得"""
        return cls._TRANSLATORS.copy()

    @classmethod
    def list_translator_ids(cls) -> List[str]:
        """登録済みプロバイダIDのリスト"""
        return list(cls._TRANSLATORS.keys())
