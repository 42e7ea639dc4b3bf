"""Markdown translation pipeline: span preservation around a single provider call."""
from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from mdlocale.languages import Languages
from mdlocale.translation.base import BaseTranslator
from mdlocale.translation.exceptions import TranslationError, UnsupportedLanguageError
from mdlocale.translation.result import TranslationResult
from mdlocale.translation.service import TranslationOptions, create_translator, translate_text

from .spans import extract_code_blocks, restore_code_blocks, split_front_matter

logger = logging.getLogger(__name__)

DEFAULT_FILE_PATTERN = "**/*.md"


# === Data models ================================================================================


@dataclass(slots=True)
class FileTranslationResult:
    """Result produced for each translated file."""

    source_path: Path
    output_path: Optional[Path]
    result: TranslationResult

    @property
    def success(self) -> bool:
        return self.result.success

    @property
    def error(self) -> Optional[str]:
        return self.result.error

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_path": str(self.source_path),
            "output_path": str(self.output_path) if self.output_path else None,
            **self.result.to_dict(),
        }


FileResultCallback = Callable[[FileTranslationResult], None]


def list_files(directory: str | Path, pattern: str = DEFAULT_FILE_PATTERN) -> list[Path]:
    """Return files under ``directory`` matching ``pattern``, sorted by path."""
    return sorted(path for path in Path(directory).glob(pattern) if path.is_file())


# === Pipeline implementation ====================================================================


class MarkdownTranslator:
    """
    Translate Markdown while keeping code blocks and front matter verbatim.

    Responsibilities handled here:
        * front matter and fenced code block preservation
        * file and directory IO, mirrored output layout
        * fail-soft aggregation of per-file results

    Responsibilities deliberately excluded (caller supplied):
        * the translation itself (`BaseTranslator` provider)
        * report formatting
    """

    def __init__(self, translator: Optional[BaseTranslator] = None) -> None:
        self._translator = translator

    # --------------------------------------------------------------------- public API ------------
    def translate_content(self, content: str, options: TranslationOptions) -> TranslationResult:
        """
        Translate a Markdown document.

        The provider is called exactly once. On failure the original content
        is returned untouched and no span restoration is attempted.
        """
        target_lang = options.target_language
        if not Languages.is_supported(target_lang):
            error = UnsupportedLanguageError(target_lang)
            logger.error("Error translating markdown content: %s", error)
            return TranslationResult.failure(
                original=content,
                language=target_lang,
                error=str(error),
                source_language=options.resolved_source_language,
            )

        front_matter, body = "", content
        if options.preserve_front_matter:
            front_matter, body = split_front_matter(content)

        spans: list[str] = []
        if options.preserve_code_blocks:
            body, spans = extract_code_blocks(body)

        result = translate_text(body, options, translator=self._translator)
        if not result.success:
            return TranslationResult.failure(
                original=content,
                language=target_lang,
                error=f"Translation failed: {result.error}",
                source_language=result.source_language,
            )

        translated = result.translated
        if spans:
            translated = restore_code_blocks(translated, spans)
            missing = [i for i, span in enumerate(spans) if span not in translated]
            if missing:
                logger.warning("Code block placeholders lost during translation: %s", missing)

        return TranslationResult(
            original=content,
            translated=front_matter + translated,
            language=target_lang,
            success=True,
            source_language=result.source_language,
        )

    def translate_file(
        self,
        input_file: str | Path,
        output_file: str | Path,
        options: TranslationOptions,
    ) -> FileTranslationResult:
        """Translate a single file and write the output, creating directories as needed."""
        source = Path(input_file)
        destination = Path(output_file)

        try:
            content = source.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error("Input file not found: %s", source)
            return self._io_failure(source, options, f"Input file not found: {source}")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read %s: %s", source, exc)
            return self._io_failure(source, options, f"Failed to read {source}: {exc}")

        result = self.translate_content(content, options)
        if not result.success:
            return FileTranslationResult(source_path=source, output_path=None, result=result)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(result.translated, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write %s: %s", destination, exc)
            return FileTranslationResult(
                source_path=source,
                output_path=None,
                result=TranslationResult.failure(
                    original=content,
                    language=options.target_language,
                    error=f"Failed to write {destination}: {exc}",
                    source_language=result.source_language,
                ),
            )

        logger.info("Translated %s -> %s", source, destination)
        return FileTranslationResult(source_path=source, output_path=destination, result=result)

    def translate_files(
        self,
        pairs: Sequence[tuple[Path, Path]],
        options: TranslationOptions,
        *,
        max_workers: int = 1,
        result_callback: Optional[FileResultCallback] = None,
    ) -> list[FileTranslationResult]:
        """
        Translate ``(input, output)`` pairs.

        Returns:
            List of FileTranslationResult in the same order as ``pairs``.
        """
        pipeline = self
        if self._translator is None and pairs and Languages.is_supported(options.target_language):
            # one provider instance per batch; a configuration error fails every file
            try:
                pipeline = MarkdownTranslator(create_translator(options))
            except (TranslationError, NotImplementedError, ValueError) as exc:
                logger.error("Failed to create translator %s: %s", options.service, exc)
                return [
                    self._io_failure(source, options, str(exc) or type(exc).__name__)
                    for source, _ in pairs
                ]

        def _run(pair: tuple[Path, Path]) -> FileTranslationResult:
            item = pipeline.translate_file(pair[0], pair[1], options)
            if result_callback:
                result_callback(item)
            return item

        if max_workers <= 1 or len(pairs) <= 1:
            return [_run(pair) for pair in pairs]

        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(_run, pairs))

    def translate_directory(
        self,
        input_dir: str | Path,
        output_dir: str | Path,
        options: TranslationOptions,
        *,
        pattern: str = DEFAULT_FILE_PATTERN,
        max_workers: int = 1,
        result_callback: Optional[FileResultCallback] = None,
    ) -> list[FileTranslationResult]:
        """
        Translate every file under ``input_dir`` matching ``pattern``.

        Output files keep their path relative to ``input_dir``. Results are
        ordered by input path regardless of ``max_workers``.
        """
        source_root = Path(input_dir)
        target_root = Path(output_dir)

        if not source_root.is_dir():
            logger.error("Input directory not found: %s", source_root)
            return [self._io_failure(source_root, options, f"Input directory not found: {source_root}")]

        files = list_files(source_root, pattern)
        if not files:
            logger.warning(
                "No files found matching pattern: %s in directory: %s", pattern, source_root
            )
            return []

        pairs = [(path, target_root / path.relative_to(source_root)) for path in files]
        return self.translate_files(
            pairs,
            options,
            max_workers=max_workers,
            result_callback=result_callback,
        )

    # ---------------------------------------------------------------- utilities ------------------
    @staticmethod
    def _io_failure(source: Path, options: TranslationOptions, error: str) -> FileTranslationResult:
        return FileTranslationResult(
            source_path=source,
            output_path=None,
            result=TranslationResult.failure(
                original="",
                language=options.target_language,
                error=error,
                source_language=options.resolved_source_language,
            ),
        )
