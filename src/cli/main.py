"""langsift CLI entry points.

This module exposes detection commands for single texts, script
classification and the supported language table. It maps argparse
commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Sequence

from cli.batch_command import add_batch_command, run_batch_command
from cli.output import format_result
from core.config import LangsiftConfig
from core.constants import SUPPORTED_LOG_LEVELS, UNDETERMINED_MARKER
from core.errors import LangsiftConfigError, LangsiftOptionsError
from core.logging_config import configure_logging
from core.options_file import load_options_file, parse_language_codes
from detection.detector import detect_script, detect_with_options
from detection.filter_list import FilterList
from detection.query import Options
from profiles.languages import Language


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="langsift", description="langsift language detection CLI")
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override LANGSIFT_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_detect_command(subparsers)
    _add_script_command(subparsers)
    _add_languages_command(subparsers)
    add_batch_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the langsift CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = LangsiftConfig.from_env()
        configure_logging(args.log_level or config.log_level)
    except LangsiftConfigError as error:
        print(f"config_error={error}")
        return 2
    if args.command == "languages":
        return _run_languages_command()
    try:
        options = build_options(config, args)
    except LangsiftOptionsError as error:
        print(f"options_error={error}")
        return 2
    if args.command == "detect":
        return _run_detect_command(config, options, args)
    if args.command == "script":
        return _run_script_command(options, args)
    if args.command == "batch":
        return run_batch_command(config, options, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def build_options(config: LangsiftConfig, args: argparse.Namespace) -> Options:
    """Build detection options from config, options file and flags.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Detection options.

    Raises:
        LangsiftOptionsError: If the options file or language flags are invalid.
    """
    options_file = getattr(args, "options_file", None)
    if options_file:
        options = load_options_file(options_file, config.min_text_length)
    else:
        options = Options(min_text_length=config.min_text_length)
    allow_codes = _split_codes(getattr(args, "allow", None))
    deny_codes = _split_codes(getattr(args, "deny", None))
    if allow_codes or deny_codes:
        filter_list = FilterList(
            allowed=frozenset(parse_language_codes(allow_codes, "--allow")),
            denied=frozenset(parse_language_codes(deny_codes, "--deny")),
        )
        options = options.with_filter_list(filter_list)
    return options


def _split_codes(raw_value: str | None) -> list[str]:
    if not raw_value:
        return []
    return [code.strip() for code in raw_value.split(",") if code.strip()]


def _run_detect_command(
    config: LangsiftConfig,
    options: Options,
    args: argparse.Namespace,
) -> int:
    """Handle detect command.

    Args:
        config: Runtime config.
        options: Detection options.
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when the language is undetermined.
    """
    info = detect_with_options(args.text, options)
    if args.json:
        payload: dict[str, object] = (
            info.to_dict(config.reliable_confidence) if info is not None else {"language": None}
        )
        print(json.dumps(payload, ensure_ascii=False, sort_keys=True))
    else:
        print(format_result(info))
    return 0 if info is not None else 1


def _run_script_command(options: Options, args: argparse.Namespace) -> int:
    """Handle script command.

    Args:
        options: Detection options.
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when no script is found.
    """
    script = detect_script(args.text, options)
    print(script.value if script is not None else UNDETERMINED_MARKER)
    return 0 if script is not None else 1


def _run_languages_command() -> int:
    """Handle languages command."""
    for language in Language:
        print(
            f"{language.code}\t"
            f"{language.eng_name}\t"
            f"{language.native_name}\t"
            f"{language.script.value}"
        )
    return 0


def _add_filter_arguments(parser: Any) -> None:
    parser.add_argument("--allow", help="Comma-separated ISO 639-3 codes to allow, e.g. eng,fra")
    parser.add_argument("--deny", help="Comma-separated ISO 639-3 codes to exclude")
    parser.add_argument("--options-file", help="YAML options file")


def _add_detect_command(subparsers: Any) -> None:
    """Register detect subcommand."""
    parser = subparsers.add_parser("detect", help="Detect the language of a text")
    parser.add_argument("text", help="Text to classify")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    _add_filter_arguments(parser)


def _add_script_command(subparsers: Any) -> None:
    """Register script subcommand."""
    parser = subparsers.add_parser("script", help="Detect the dominant script of a text")
    parser.add_argument("text", help="Text to classify")
    parser.add_argument("--options-file", help="YAML options file")


def _add_languages_command(subparsers: Any) -> None:
    """Register languages subcommand."""
    subparsers.add_parser("languages", help="List supported languages")
