"""CLI for mdlocale - Markdown documentation translation and quality checks."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from .config import ConfigValidator, get_default_config, merge_config
from .languages import Languages, Region

__all__ = ["build_config", "main", "setup_logging"]


def setup_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Configure logging for CLI output.

    Args:
        verbose: If True, enable DEBUG level logging
        level: Level name used when not verbose
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    raise argparse.ArgumentTypeError(f"Expected true or false, got {value!r}")


def build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Merge defaults, environment and command-line overrides."""
    translation: dict[str, Any] = {}
    quality: dict[str, Any] = {}

    env_service = os.environ.get("MDLOCALE_TRANSLATOR")
    if env_service:
        translation["service"] = env_service

    for key in ("service", "source_language", "preserve_code_blocks", "preserve_front_matter"):
        value = getattr(args, key, None)
        if value is not None:
            translation[key] = value
    if getattr(args, "command", None) == "translate":
        translation["target_language"] = args.lang
        if args.pattern is not None:
            translation["file_pattern"] = args.pattern
        if args.workers is not None:
            translation["max_workers"] = args.workers
    elif getattr(args, "command", None) == "check":
        if args.min_score is not None:
            quality["min_score"] = args.min_score
        if args.pattern is not None:
            quality["file_pattern"] = args.pattern
        if args.workers is not None:
            quality["max_workers"] = args.workers

    config = merge_config(get_default_config(), {"translation": translation, "quality": quality})
    ConfigValidator.validate_or_raise(config)
    return config


# =============================================================================
# Subcommand: languages
# =============================================================================

def cmd_languages(args: argparse.Namespace) -> int:
    """List supported languages."""
    if args.region:
        try:
            region = Region(args.region)
        except ValueError:
            choices = ", ".join(r.value for r in Region)
            print(f"Error: Unknown region '{args.region}'. Choices: {choices}", file=sys.stderr)
            return 1
        codes = Languages.get_languages_by_region(region)
    else:
        codes = Languages.list_codes()

    infos = [Languages.get_info(code) for code in codes]
    if args.as_json:
        payload = [
            {"code": info.code, "name": info.name, "region": info.region.value, "rtl": info.rtl}
            for info in infos
            if info is not None
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    for info in infos:
        if info is None:
            continue
        rtl = " (RTL)" if info.rtl else ""
        print(f"{info.code}: {info.name} [{info.region.value}]{rtl}")
    return 0


# =============================================================================
# Subcommand: translators
# =============================================================================

def cmd_translators(args: argparse.Namespace) -> int:
    """List translation providers."""
    from .translation import TranslatorFactory, TranslatorMetadata

    implemented = set(TranslatorFactory.list_implemented_translators())
    for tid, info in TranslatorMetadata.get_all().items():
        status = "" if tid in implemented else " (not available)"
        credentials = f" [{info.credentials_env}]" if info.credentials_env else ""
        print(f"{tid}: {info.display_name}{credentials}{status}")
    return 0


# =============================================================================
# Subcommand: translate
# =============================================================================

def cmd_translate(args: argparse.Namespace) -> int:
    """Translate a directory of Markdown files."""
    from .markdown import MarkdownTranslator
    from .translation import TranslationOptions

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings = config["translation"]
    options = TranslationOptions(
        target_language=settings["target_language"],
        source_language=settings["source_language"],
        service=settings["service"],
        api_key=args.api_key,
        preserve_code_blocks=settings["preserve_code_blocks"],
        preserve_front_matter=settings["preserve_front_matter"],
    )

    print(
        f"Translating markdown files from {args.input} to {args.output} ({options.target_language})",
        file=sys.stderr,
    )
    results = MarkdownTranslator().translate_directory(
        args.input,
        args.output,
        options,
        pattern=settings["file_pattern"],
        max_workers=settings["max_workers"],
    )

    failed = [item for item in results if not item.success]
    print("\nTranslation complete. Results:")
    print(f"- Files processed: {len(results)}")
    print(f"- Successful translations: {len(results) - len(failed)}")
    print(f"- Failed translations: {len(failed)}")

    if failed:
        print("\nErrors:", file=sys.stderr)
        for item in failed:
            print(f"- {item.source_path}: {item.error}", file=sys.stderr)
        return 1
    return 0


# =============================================================================
# Subcommand: check
# =============================================================================

def cmd_check(args: argparse.Namespace) -> int:
    """Check quality of translated Markdown files."""
    from .quality import QualityChecker, generate_report

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings = config["quality"]
    checker = QualityChecker(min_score=settings["min_score"])

    print(f"Checking quality of translations in {args.dir} ({args.lang})", file=sys.stderr)
    results = checker.check_directory(
        args.dir,
        args.lang,
        settings["file_pattern"],
        max_workers=settings["max_workers"],
    )

    if args.as_json:
        print(json.dumps([result.to_dict() for result in results], ensure_ascii=False, indent=2))
    else:
        passed = sum(1 for result in results if result.passed)
        print("\nQuality check complete. Results:")
        print(f"- Files checked: {len(results)}")
        print(f"- Files passed: {passed}")
        print(f"- Files failed: {len(results) - passed}")

    if args.report:
        report = generate_report(results, args.dir, args.lang)
        try:
            report_path = Path(args.report)
            report_path.parent.mkdir(parents=True, exist_ok=True)
            report_path.write_text(report, encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not write report: {e}", file=sys.stderr)
            return 1
        print(f"\nQuality report saved to {args.report}", file=sys.stderr)

    return 1 if any(not result.passed for result in results) else 0


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mdlocale",
        description="Translate Markdown documentation and check translation quality.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # languages command
    languages_parser = subparsers.add_parser("languages", help="List supported languages")
    languages_parser.add_argument(
        "--region",
        help="Only list languages in this region (e.g. 'Asia')",
    )
    languages_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output as JSON",
    )
    languages_parser.set_defaults(func=cmd_languages)

    # translators command
    translators_parser = subparsers.add_parser("translators", help="List translation providers")
    translators_parser.set_defaults(func=cmd_translators)

    # translate command
    translate_parser = subparsers.add_parser("translate", help="Translate markdown files")
    translate_parser.add_argument("--input", required=True, help="Source directory")
    translate_parser.add_argument("--output", required=True, help="Target directory")
    translate_parser.add_argument("--lang", required=True, help="Target language code (e.g. es, fr, de)")
    translate_parser.add_argument(
        "--source",
        dest="source_language",
        help="Source language code (default: en)",
    )
    translate_parser.add_argument(
        "--service",
        help="Translation service (azure, google, deepl, openai; default: azure)",
    )
    translate_parser.add_argument(
        "--api-key",
        help="Provider API key (default: read from the provider's environment variable)",
    )
    translate_parser.add_argument(
        "--preserve-code",
        dest="preserve_code_blocks",
        type=_parse_bool,
        help="Preserve code blocks in translation (default: true)",
    )
    translate_parser.add_argument(
        "--preserve-front-matter",
        dest="preserve_front_matter",
        type=_parse_bool,
        help="Preserve front matter in translation (default: true)",
    )
    translate_parser.add_argument("--pattern", help="File glob (default: **/*.md)")
    translate_parser.add_argument("--workers", type=int, help="Parallel workers (default: 1)")
    translate_parser.set_defaults(func=cmd_translate)

    # check command
    check_parser = subparsers.add_parser("check", help="Check quality of translated files")
    check_parser.add_argument("--dir", required=True, help="Directory containing translated files")
    check_parser.add_argument("--lang", required=True, help="Language code of the translations")
    check_parser.add_argument("--min-score", type=int, help="Minimum score to pass (default: 70)")
    check_parser.add_argument("--report", help="Output file for the quality report")
    check_parser.add_argument("--pattern", help="File glob (default: **/*.md)")
    check_parser.add_argument("--workers", type=int, help="Parallel workers (default: 1)")
    check_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output results as JSON",
    )
    check_parser.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(args.verbose, get_default_config()["logging"]["console_log_level"])

    # Execute the command
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
