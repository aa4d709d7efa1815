"""Runtime configuration model for langsift.

This module owns all environment variable parsing and validation.
The detection library never reads the environment; the CLI consumes
a typed config object and turns it into default options.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MIN_TEXT_LENGTH,
    RELIABLE_CONFIDENCE_THRESHOLD,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import LangsiftConfigError


@dataclass(frozen=True)
class LangsiftConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structured log level name.
        min_text_length: Minimum number of scripted letters to attempt detection.
        reliable_confidence: Confidence at or above which a result is reliable.
    """

    log_level: str
    min_text_length: int
    reliable_confidence: float

    @classmethod
    def from_env(cls) -> "LangsiftConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LangsiftConfigError: If environment values are invalid.
        """
        log_level = _parse_log_level(os.getenv("LANGSIFT_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        min_text_length = _parse_min_text_length(
            os.getenv("LANGSIFT_MIN_TEXT_LENGTH", str(DEFAULT_MIN_TEXT_LENGTH))
        )
        reliable_confidence = _parse_reliable_confidence(
            os.getenv("LANGSIFT_RELIABLE_CONFIDENCE", str(RELIABLE_CONFIDENCE_THRESHOLD))
        )
        return cls(
            log_level=log_level,
            min_text_length=min_text_length,
            reliable_confidence=reliable_confidence,
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-case level name.

    Raises:
        LangsiftConfigError: If the level is unsupported.
    """
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise LangsiftConfigError(
            f"Invalid LANGSIFT_LOG_LEVEL value '{raw_value}'. "
            f"Set LANGSIFT_LOG_LEVEL to one of: {supported}."
        )
    return normalized


def _parse_min_text_length(raw_value: str) -> int:
    """Parse the minimum text length environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer.

    Raises:
        LangsiftConfigError: If value is not a positive integer.
    """
    try:
        parsed = int(raw_value)
    except ValueError as error:
        raise LangsiftConfigError(
            "Invalid LANGSIFT_MIN_TEXT_LENGTH value: "
            f"expected integer, got '{raw_value}'. "
            "Set LANGSIFT_MIN_TEXT_LENGTH to a positive number."
        ) from error
    if parsed < 1:
        raise LangsiftConfigError(
            f"Invalid LANGSIFT_MIN_TEXT_LENGTH value {parsed}: must be at least 1."
        )
    return parsed


def _parse_reliable_confidence(raw_value: str) -> float:
    """Parse the reliability threshold environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Threshold in [0, 1].

    Raises:
        LangsiftConfigError: If value is not a number in [0, 1].
    """
    try:
        parsed = float(raw_value)
    except ValueError as error:
        raise LangsiftConfigError(
            "Invalid LANGSIFT_RELIABLE_CONFIDENCE value: "
            f"expected number, got '{raw_value}'. "
            "Set LANGSIFT_RELIABLE_CONFIDENCE to a value between 0 and 1."
        ) from error
    if not 0.0 <= parsed <= 1.0:
        raise LangsiftConfigError(
            f"Invalid LANGSIFT_RELIABLE_CONFIDENCE value {parsed}: must be between 0 and 1."
        )
    return parsed
