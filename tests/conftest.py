"""Shared fixtures: an in-memory translator so no test touches the network."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import pytest

from mdlocale.translation.base import BaseTranslator


class FakeTranslator(BaseTranslator):
    """Records calls and returns ``transform(text)``, or raises ``error`` when set."""

    def __init__(
        self,
        transform: Optional[Callable[[str], str]] = None,
        error: Optional[Exception] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.transform = transform or (lambda text: text.upper())
        self.error = error
        self.calls: List[Tuple[str, str, str]] = []

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append((text, source_lang, target_lang))
        if self.error is not None:
            raise self.error
        return self.transform(text)

    def get_translator_name(self) -> str:
        return "fake"


@pytest.fixture
def fake_translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def make_translator() -> Callable[..., FakeTranslator]:
    return FakeTranslator
