"""
言語定義の一元管理

ドキュメント翻訳で扱う言語コードと、その表示名・地域・書字方向を一元管理する。
テーブルはインポート時に一度だけ構築され、以降は読み取り専用。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set

logger = logging.getLogger(__name__)


class Region(str, Enum):
    """言語をまとめる地域区分"""

    AMERICAS = "Americas"
    ASIA = "Asia"
    EUROPEAN_UNION = "European Union"
    MIDDLE_EAST_NORTH_AFRICA = "Middle East & North Africa"
    SOUTHERN_AFRICA = "Southern Africa (SADC)"


@dataclass(frozen=True)
class LanguageInfo:
    """言語情報"""

    code: str  # 標準言語コード（例: "en", "zh-cn", "pt-br"）
    name: str  # 英語表示名（例: "Mandarin Chinese"）
    region: Region
    rtl: bool = False  # 右から左に書く言語か


def _build_table(*infos: LanguageInfo) -> Mapping[str, LanguageInfo]:
    return MappingProxyType({info.code: info for info in infos})


class Languages:
    """
    サポート言語のマスタークラス

    全てのメソッドは副作用を持たない。未知のコードに対しては None / False を返し、
    例外は送出しない。
    """

    DEFAULT_SOURCE = "en"
    _UNKNOWN_WARNING_LIMIT = 5
    _unknown_codes_logged: Set[str] = set()
    _unknown_log_suppressed = False

    # ========== マスター定義 ==========
    _LANGUAGES: Mapping[str, LanguageInfo] = _build_table(
        # Americas
        LanguageInfo("en", "English", Region.AMERICAS),
        LanguageInfo("es", "Spanish", Region.AMERICAS),
        LanguageInfo("pt-br", "Portuguese (Brazil)", Region.AMERICAS),
        LanguageInfo("fr-ca", "French Canadian", Region.AMERICAS),
        # Asia
        LanguageInfo("th", "Thai", Region.ASIA),
        LanguageInfo("ko", "Korean", Region.ASIA),
        LanguageInfo("ja", "Japanese", Region.ASIA),
        LanguageInfo("tl", "Filipino/Tagalog", Region.ASIA),
        LanguageInfo("zh-cn", "Mandarin Chinese", Region.ASIA),
        LanguageInfo("hi", "Hindi", Region.ASIA),
        LanguageInfo("vi", "Vietnamese", Region.ASIA),
        LanguageInfo("id", "Indonesian", Region.ASIA),
        # European Union
        LanguageInfo("fr", "French", Region.EUROPEAN_UNION),
        LanguageInfo("de", "German", Region.EUROPEAN_UNION),
        LanguageInfo("it", "Italian", Region.EUROPEAN_UNION),
        LanguageInfo("nl", "Dutch", Region.EUROPEAN_UNION),
        LanguageInfo("pl", "Polish", Region.EUROPEAN_UNION),
        LanguageInfo("pt", "Portuguese", Region.EUROPEAN_UNION),
        # Middle East & North Africa
        LanguageInfo("ar", "Arabic", Region.MIDDLE_EAST_NORTH_AFRICA, rtl=True),
        LanguageInfo("he", "Hebrew", Region.MIDDLE_EAST_NORTH_AFRICA, rtl=True),
        LanguageInfo("tr", "Turkish", Region.MIDDLE_EAST_NORTH_AFRICA),
        LanguageInfo("fa", "Persian/Farsi", Region.MIDDLE_EAST_NORTH_AFRICA, rtl=True),
        LanguageInfo("ku", "Kurdish", Region.MIDDLE_EAST_NORTH_AFRICA, rtl=True),
        # Southern Africa (SADC)
        LanguageInfo("sw", "Swahili", Region.SOUTHERN_AFRICA),
        LanguageInfo("zu", "Zulu", Region.SOUTHERN_AFRICA),
    )

    # ========== エイリアス定義（正規化用、小文字で定義） ==========
    _ALIASES: Mapping[str, str] = MappingProxyType(
        {
            "zh": "zh-cn",
            "zh-hans": "zh-cn",
            "cmn": "zh-cn",
            "iw": "he",  # Hebrew: 旧コード
            "fil": "tl",
            "en-us": "en",
            "en-gb": "en",
        }
    )

    # ==================== パブリックAPI ====================

    @classmethod
    def normalize(cls, code: Optional[str]) -> Optional[str]:
        """
        言語コードを正規化する

        Args:
            code: 入力言語コード（"EN", "pt_BR", "zh" 等）

        Returns:
            正規化された言語コード、または None

        Examples:
            >>> Languages.normalize("PT_BR")
            'pt-br'
            >>> Languages.normalize("zh")
            'zh-cn'
        """
        if not code or not isinstance(code, str):
            return None

        code_lower = code.strip().lower().replace("_", "-")
        if code_lower in cls._LANGUAGES:
            return code_lower
        if code_lower in cls._ALIASES:
            return cls._ALIASES[code_lower]

        cls._log_unknown(code)
        return None

    @classmethod
    def is_supported(cls, code: Optional[str]) -> bool:
        """サポート対象の言語コードかチェック"""
        return isinstance(code, str) and code in cls._LANGUAGES

    @classmethod
    def get_info(cls, code: Optional[str]) -> Optional[LanguageInfo]:
        """
        言語情報を取得

        Args:
            code: 言語コード

        Returns:
            LanguageInfo、未知のコードの場合は None
        """
        if not isinstance(code, str):
            return None
        return cls._LANGUAGES.get(code)

    @classmethod
    def get_display_name(cls, code: str) -> str:
        """表示名を取得（見つからない場合は元のコードを返す）"""
        info = cls.get_info(code)
        return info.name if info else code

    @classmethod
    def get_languages_by_region(cls, region: Region) -> List[str]:
        """
        地域に属する言語コードを取得

        Args:
            region: 地域区分

        Returns:
            言語コードのリスト（定義順、重複なし）
        """
        return [info.code for info in cls._LANGUAGES.values() if info.region == region]

    @classmethod
    def default_source_language(cls) -> str:
        """デフォルトのソース言語"""
        return cls.DEFAULT_SOURCE

    @classmethod
    def is_right_to_left(cls, code: Optional[str]) -> bool:
        """右から左に書く言語かチェック（未知のコードは False）"""
        info = cls.get_info(code)
        return info.rtl if info else False

    @classmethod
    def list_codes(cls) -> List[str]:
        """サポート対象の全言語コード"""
        return list(cls._LANGUAGES.keys())

    @classmethod
    def get_all(cls) -> Dict[str, LanguageInfo]:
        """全ての言語情報を取得"""
        return dict(cls._LANGUAGES)

    # ==================== 内部ヘルパー ====================

    @classmethod
    def _log_unknown(cls, code: str) -> None:
        # 未知コードのログは最初の数件のみ warning、それ以降は debug
        key = code.lower()
        if key in cls._unknown_codes_logged:
            logger.debug("Unknown language code repeated: %s", code)
            return

        cls._unknown_codes_logged.add(key)
        if len(cls._unknown_codes_logged) <= cls._UNKNOWN_WARNING_LIMIT:
            logger.warning("Unknown language code: %s", code)
        elif not cls._unknown_log_suppressed:
            logger.warning(
                "Unknown language code detected (example: %s). "
                "Further messages will be suppressed.",
                code,
            )
            cls._unknown_log_suppressed = True
        else:
            logger.debug("Unknown language code suppressed: %s", code)
