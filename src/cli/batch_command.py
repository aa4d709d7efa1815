"""Batch detection command wiring for langsift CLI."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from cli.output import format_result
from core.config import LangsiftConfig
from core.logging_config import get_logger
from detection.detector import detect_many
from detection.query import Options

_LOGGER = get_logger(__name__)


def add_batch_command(subparsers: Any) -> None:
    """Register batch subcommand."""
    parser = subparsers.add_parser(
        "batch",
        help="Detect the language of every line in a UTF-8 text file",
    )
    parser.add_argument("source", help="Input file with one text per line")
    parser.add_argument("--allow", help="Comma-separated ISO 639-3 codes to allow, e.g. eng,fra")
    parser.add_argument("--deny", help="Comma-separated ISO 639-3 codes to exclude")
    parser.add_argument("--options-file", help="YAML options file")


def run_batch_command(
    config: LangsiftConfig,
    options: Options,
    args: argparse.Namespace,
) -> int:
    """Detect every line of a file and print one row per line."""
    source_file = Path(args.source).expanduser().resolve()
    try:
        lines = source_file.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as error:
        print(f"batch_error=Failed to read {source_file}: {error}")
        return 2
    results = detect_many(lines, options)
    for line_number, info in enumerate(results, start=1):
        print(f"{line_number}\t{format_result(info)}")
    detected = sum(1 for info in results if info is not None)
    reliable = sum(
        1 for info in results if info is not None and info.is_reliable(config.reliable_confidence)
    )
    _LOGGER.info(
        "batch_completed",
        source=str(source_file),
        lines=len(results),
        detected=detected,
        reliable=reliable,
    )
    return 0
