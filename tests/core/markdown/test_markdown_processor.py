"""Tests for the Markdown translation pipeline."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from unittest.mock import patch

import pytest

from mdlocale.markdown import FileTranslationResult, MarkdownTranslator
from mdlocale.translation import TranslationOptions
from mdlocale.translation.exceptions import MissingCredentialsError, TranslationNetworkError

OPTIONS = TranslationOptions(target_language="es")

HAS_DEEP_TRANSLATOR = importlib.util.find_spec("deep_translator") is not None


class TestTranslateContent:
    def test_code_blocks_preserved(self, fake_translator):
        content = "Hello world.\n```python\nprint('hi')\n```\nBye."
        result = MarkdownTranslator(fake_translator).translate_content(content, OPTIONS)

        assert result.success is True
        assert result.translated == "HELLO WORLD.\n```python\nprint('hi')\n```\nBYE."
        assert result.original == content
        assert result.language == "es"
        assert result.source_language == "en"

    def test_provider_sees_placeholders(self, fake_translator):
        content = "A\n```\nx\n```\nB\n```\ny\n```"
        MarkdownTranslator(fake_translator).translate_content(content, OPTIONS)

        assert len(fake_translator.calls) == 1
        text, source, target = fake_translator.calls[0]
        assert text == "A\n__CODE_BLOCK_0__\nB\n__CODE_BLOCK_1__"
        assert "```" not in text
        assert (source, target) == ("en", "es")

    def test_code_blocks_translated_when_disabled(self, fake_translator):
        options = TranslationOptions(target_language="es", preserve_code_blocks=False)
        result = MarkdownTranslator(fake_translator).translate_content("a\n```\nx\n```", options)

        assert fake_translator.calls[0][0] == "a\n```\nx\n```"
        assert result.translated == "A\n```\nX\n```"

    def test_front_matter_preserved(self, fake_translator):
        content = "---\ntitle: Guide\n---\nBody text."
        result = MarkdownTranslator(fake_translator).translate_content(content, OPTIONS)

        assert fake_translator.calls[0][0] == "Body text."
        assert result.translated == "---\ntitle: Guide\n---\nBODY TEXT."

    def test_front_matter_translated_when_disabled(self, fake_translator):
        options = TranslationOptions(target_language="es", preserve_front_matter=False)
        result = MarkdownTranslator(fake_translator).translate_content("---\na: b\n---\nx", options)
        assert result.translated == "---\nA: B\n---\nX"

    def test_unsupported_language_skips_provider(self, fake_translator):
        options = TranslationOptions(target_language="xx")
        result = MarkdownTranslator(fake_translator).translate_content("Hello.", options)

        assert result.success is False
        assert result.translated == "Hello."
        assert result.error == "Unsupported target language: xx"
        assert fake_translator.calls == []

    def test_provider_failure_returns_original(self, make_translator):
        translator = make_translator(error=TranslationNetworkError("API request failed: boom"))
        content = "Hi\n```\ncode\n```"
        result = MarkdownTranslator(translator).translate_content(content, OPTIONS)

        assert result.success is False
        assert result.translated == content
        assert result.error == "Translation failed: API request failed: boom"
        assert len(translator.calls) == 1

    def test_dropped_placeholder_is_logged(self, make_translator, caplog):
        translator = make_translator(transform=lambda text: "translated without code")
        with caplog.at_level("WARNING", logger="mdlocale.markdown.processor"):
            result = MarkdownTranslator(translator).translate_content("x\n```\nc\n```", OPTIONS)

        assert result.success is True
        assert result.translated == "translated without code"
        assert "placeholders lost" in caplog.text

    def test_source_language_override(self, fake_translator):
        options = TranslationOptions(target_language="en", source_language="de")
        result = MarkdownTranslator(fake_translator).translate_content("Hallo.", options)

        assert fake_translator.calls[0][1:] == ("de", "en")
        assert result.source_language == "de"


class TestTranslateFile:
    def test_writes_output(self, tmp_path: Path, fake_translator):
        source = tmp_path / "in" / "doc.md"
        source.parent.mkdir()
        source.write_text("Hello.", encoding="utf-8")
        target = tmp_path / "out" / "nested" / "doc.md"

        item = MarkdownTranslator(fake_translator).translate_file(source, target, OPTIONS)

        assert isinstance(item, FileTranslationResult)
        assert item.success is True
        assert item.output_path == target
        assert target.read_text(encoding="utf-8") == "HELLO."

    def test_missing_input(self, tmp_path: Path, fake_translator):
        source = tmp_path / "missing.md"
        item = MarkdownTranslator(fake_translator).translate_file(source, tmp_path / "o.md", OPTIONS)

        assert item.success is False
        assert item.error == f"Input file not found: {source}"
        assert item.output_path is None
        assert fake_translator.calls == []

    def test_failure_writes_nothing(self, tmp_path: Path, make_translator):
        source = tmp_path / "doc.md"
        source.write_text("Hello.", encoding="utf-8")
        target = tmp_path / "out" / "doc.md"
        translator = make_translator(error=TranslationNetworkError("down"))

        item = MarkdownTranslator(translator).translate_file(source, target, OPTIONS)

        assert item.success is False
        assert not target.exists()

    def test_to_dict(self, tmp_path: Path, fake_translator):
        source = tmp_path / "doc.md"
        source.write_text("Hi.", encoding="utf-8")
        target = tmp_path / "out.md"

        data = MarkdownTranslator(fake_translator).translate_file(source, target, OPTIONS).to_dict()

        assert data["source_path"] == str(source)
        assert data["output_path"] == str(target)
        assert data["translated"] == "HI."
        assert data["success"] is True


class TestTranslateDirectory:
    @pytest.fixture
    def docs(self, tmp_path: Path) -> Path:
        root = tmp_path / "docs"
        (root / "guide").mkdir(parents=True)
        (root / "b.md").write_text("Second.", encoding="utf-8")
        (root / "a.md").write_text("First.", encoding="utf-8")
        (root / "guide" / "c.md").write_text("Third.", encoding="utf-8")
        (root / "image.png").write_bytes(b"\x89PNG")
        return root

    def test_mirrors_layout(self, docs: Path, tmp_path: Path, fake_translator):
        out = tmp_path / "es"
        results = MarkdownTranslator(fake_translator).translate_directory(docs, out, OPTIONS)

        assert [item.source_path.relative_to(docs).as_posix() for item in results] == [
            "a.md",
            "b.md",
            "guide/c.md",
        ]
        assert all(item.success for item in results)
        assert (out / "guide" / "c.md").read_text(encoding="utf-8") == "THIRD."
        assert not (out / "image.png").exists()

    def test_parallel_keeps_order(self, docs: Path, tmp_path: Path, fake_translator):
        sequential = MarkdownTranslator(fake_translator).translate_directory(
            docs, tmp_path / "seq", OPTIONS
        )
        parallel = MarkdownTranslator(fake_translator).translate_directory(
            docs, tmp_path / "par", OPTIONS, max_workers=3
        )
        assert [i.source_path for i in parallel] == [i.source_path for i in sequential]
        assert [i.result.translated for i in parallel] == [i.result.translated for i in sequential]

    def test_callback_called_per_file(self, docs: Path, tmp_path: Path, fake_translator):
        seen = []
        MarkdownTranslator(fake_translator).translate_directory(
            docs, tmp_path / "out", OPTIONS, result_callback=seen.append
        )
        assert len(seen) == 3

    def test_one_failure_does_not_stop_batch(self, docs: Path, tmp_path: Path, make_translator):
        def transform(text: str) -> str:
            if text == "Second.":
                raise TranslationNetworkError("Rate limited")
            return text.upper()

        translator = make_translator(transform=transform)
        results = MarkdownTranslator(translator).translate_directory(docs, tmp_path / "out", OPTIONS)

        assert [item.success for item in results] == [True, False, True]
        assert results[1].error == "Translation failed: Rate limited"

    def test_missing_directory(self, tmp_path: Path, fake_translator):
        results = MarkdownTranslator(fake_translator).translate_directory(
            tmp_path / "nope", tmp_path / "out", OPTIONS
        )
        assert len(results) == 1
        assert results[0].success is False
        assert results[0].error.startswith("Input directory not found")

    def test_empty_directory(self, tmp_path: Path, fake_translator):
        assert MarkdownTranslator(fake_translator).translate_directory(
            tmp_path, tmp_path / "out", OPTIONS
        ) == []

    def test_translator_created_once_per_batch(self, docs: Path, tmp_path: Path, fake_translator):
        with patch(
            "mdlocale.markdown.processor.create_translator", return_value=fake_translator
        ) as factory:
            results = MarkdownTranslator().translate_directory(docs, tmp_path / "out", OPTIONS)

        factory.assert_called_once_with(OPTIONS)
        assert all(item.success for item in results)
        assert len(fake_translator.calls) == 3

    @pytest.mark.skipif(not HAS_DEEP_TRANSLATOR, reason="deep-translator not installed")
    def test_missing_credentials_fail_every_file(self, docs: Path, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("AZURE_TRANSLATOR_KEY", raising=False)
        results = MarkdownTranslator().translate_directory(docs, tmp_path / "out", OPTIONS)

        assert len(results) == 3
        assert not any(item.success for item in results)
        expected = str(MissingCredentialsError("azure", "AZURE_TRANSLATOR_KEY"))
        assert all(item.error == expected for item in results)
        assert not (tmp_path / "out").exists()
