"""
翻訳結果のデータクラス

翻訳は失敗しても例外を送出せず、success=False の結果として呼び出し元に返す。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class TranslationResult:
    """翻訳結果"""

    original: str  # 原文
    translated: str  # 翻訳テキスト（失敗時は原文と同じ）
    language: str  # ターゲット言語
    success: bool = True
    error: Optional[str] = None
    source_language: Optional[str] = None

    @classmethod
    def failure(
        cls,
        original: str,
        language: str,
        error: str,
        source_language: Optional[str] = None,
    ) -> TranslationResult:
        """失敗結果を作成（翻訳テキストは原文のまま）"""
        return cls(
            original=original,
            translated=original,
            language=language,
            success=False,
            error=error,
            source_language=source_language,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
