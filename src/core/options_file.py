"""Typed options-file parsing for detection runs.

This module loads and validates YAML files describing detection options,
so CLI batch runs and library callers can share one declarative filter
configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import DEFAULT_MIN_TEXT_LENGTH, OPTIONS_FILE_VERSION
from core.errors import LangsiftOptionsError
from detection.filter_list import FilterList
from detection.query import Options
from profiles.languages import Language
from profiles.scripts import Script

_SUPPORTED_KEYS = frozenset({"version", "allow", "deny", "min_text_length", "scripts"})


def load_options_file(
    options_path: str | Path,
    default_min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
) -> Options:
    """Load and validate a YAML options file from disk.

    Args:
        options_path: File path to the YAML options file.
        default_min_text_length: Minimum used when the file sets none.

    Returns:
        Fully validated detection options.

    Raises:
        LangsiftOptionsError: If file is invalid or schema checks fail.
    """
    payload = _load_yaml_payload(options_path)
    return parse_options(payload, default_min_text_length)


def parse_options(
    payload: object,
    default_min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
) -> Options:
    """Validate a decoded options payload.

    Args:
        payload: Decoded YAML document.
        default_min_text_length: Minimum used when the document sets none.

    Returns:
        Detection options.

    Raises:
        LangsiftOptionsError: If schema checks fail.
    """
    root_mapping = _expect_mapping(payload, "options root")
    _validate_root_keys(root_mapping)
    _parse_version(root_mapping)
    filter_list = _parse_filter_list(root_mapping)
    min_text_length = _parse_min_text_length(root_mapping, default_min_text_length)
    allowed_scripts = _parse_scripts(root_mapping)
    return Options(
        filter_list=filter_list,
        min_text_length=min_text_length,
        allowed_scripts=allowed_scripts,
    )


def parse_language_codes(raw_codes: Sequence[object], context: str) -> tuple[Language, ...]:
    """Resolve ISO 639-3 codes into languages.

    Args:
        raw_codes: Codes from a file or command line.
        context: Field name used in error messages.

    Returns:
        Languages in input order.

    Raises:
        LangsiftOptionsError: If a code is not a string or is unknown.
    """
    languages: list[Language] = []
    for raw_code in raw_codes:
        if not isinstance(raw_code, str):
            raise LangsiftOptionsError(
                f"Invalid {context} entry: expected language code string, "
                f"got {type(raw_code).__name__}."
            )
        language = Language.from_code(raw_code)
        if language is None:
            raise LangsiftOptionsError(
                f"Unknown language code '{raw_code}' in {context}. "
                "Run 'python -m cli languages' to list supported codes."
            )
        languages.append(language)
    return tuple(languages)


def _load_yaml_payload(options_path: str | Path) -> object:
    options_file = Path(options_path).expanduser().resolve()
    if not options_file.exists():
        raise LangsiftOptionsError(
            f"Options file does not exist at {options_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(options_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise LangsiftOptionsError(
            f"Failed to read options file at {options_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise LangsiftOptionsError(
            f"Failed to parse YAML options file at {options_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise LangsiftOptionsError(f"Options file at {options_file} is empty. Define 'version'.")
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise LangsiftOptionsError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise LangsiftOptionsError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise LangsiftOptionsError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _validate_root_keys(root_mapping: Mapping[str, object]) -> None:
    unknown_keys = sorted(set(root_mapping) - _SUPPORTED_KEYS)
    if unknown_keys:
        supported = ", ".join(sorted(_SUPPORTED_KEYS))
        raise LangsiftOptionsError(
            f"Unsupported options keys: {', '.join(unknown_keys)}. Use only: {supported}."
        )


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if not isinstance(raw_version, int) or isinstance(raw_version, bool):
        raise LangsiftOptionsError(
            f"Options field 'version' must be an integer. Set version: {OPTIONS_FILE_VERSION}."
        )
    if raw_version != OPTIONS_FILE_VERSION:
        raise LangsiftOptionsError(
            f"Unsupported options version {raw_version}. Use version: {OPTIONS_FILE_VERSION}."
        )
    return raw_version


def _parse_filter_list(root_mapping: Mapping[str, object]) -> FilterList:
    raw_allow = root_mapping.get("allow")
    raw_deny = root_mapping.get("deny")
    allowed = (
        parse_language_codes(_expect_sequence(raw_allow, "allow"), "allow")
        if raw_allow is not None
        else ()
    )
    denied = (
        parse_language_codes(_expect_sequence(raw_deny, "deny"), "deny")
        if raw_deny is not None
        else ()
    )
    return FilterList(allowed=frozenset(allowed), denied=frozenset(denied))


def _parse_min_text_length(root_mapping: Mapping[str, object], default: int) -> int:
    raw_value = root_mapping.get("min_text_length", default)
    if not isinstance(raw_value, int) or isinstance(raw_value, bool) or raw_value < 1:
        raise LangsiftOptionsError(
            f"Options field 'min_text_length' must be a positive integer, got {raw_value!r}."
        )
    return raw_value


def _parse_scripts(root_mapping: Mapping[str, object]) -> frozenset[Script] | None:
    raw_scripts = root_mapping.get("scripts")
    if raw_scripts is None:
        return None
    scripts: set[Script] = set()
    for raw_name in _expect_sequence(raw_scripts, "scripts"):
        script = Script.from_name(raw_name) if isinstance(raw_name, str) else None
        if script is None:
            supported = ", ".join(script.value for script in Script)
            raise LangsiftOptionsError(
                f"Unknown script {raw_name!r} in scripts. Choose from: {supported}."
            )
        scripts.add(script)
    if not scripts:
        raise LangsiftOptionsError("Options field 'scripts' cannot be an empty list.")
    return frozenset(scripts)
