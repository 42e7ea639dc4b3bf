"""
言語コード変換ユーティリティ

標準言語コード（"zh-cn", "pt-br" 等）を各翻訳プロバイダ向けのコードに変換する。
langcodes ライブラリで BCP-47 を解釈する。
"""

import langcodes

# Azure は簡体字を zh-Hans で受け付ける
AZURE_CODES = {
    "zh-cn": "zh-Hans",
    "pt-br": "pt",
    "fr-ca": "fr-CA",
}

# Google は中国語のみ地域付きコードを要求する
GOOGLE_CODES = {
    "zh-cn": "zh-CN",
    "he": "iw",  # Hebrew: Google レガシーコード
}


def to_iso639_1(code: str) -> str:
    """
    BCP-47 言語コードを ISO 639-1 に変換

    Args:
        code: 言語コード（"pt-br", "FR-CA", "zh-cn" など）

    Returns:
        ISO 639-1 言語コード（"pt", "fr", "zh" など）

    Examples:
        >>> to_iso639_1("pt-br")
        'pt'
        >>> to_iso639_1("ZH-CN")
        'zh'
    """
    return langcodes.Language.get(code).language


def normalize_for_azure(lang: str) -> str:
    """
    Azure Translator 用に正規化

    Examples:
        >>> normalize_for_azure("zh-cn")
        'zh-Hans'
        >>> normalize_for_azure("pt-br")
        'pt'
        >>> normalize_for_azure("de")
        'de'
    """
    key = lang.lower()
    if key in AZURE_CODES:
        return AZURE_CODES[key]
    return to_iso639_1(lang)


def normalize_for_google(lang: str) -> str:
    """
    Google Translate 用に正規化

    Examples:
        >>> normalize_for_google("zh-cn")
        'zh-CN'
        >>> normalize_for_google("fr-ca")
        'fr'
    """
    key = lang.lower()
    if key in GOOGLE_CODES:
        return GOOGLE_CODES[key]
    return to_iso639_1(lang)
