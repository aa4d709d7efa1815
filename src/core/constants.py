"""Core constants used across langsift modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in detection logic.
"""

from __future__ import annotations

MAX_TRIGRAMS = 300
MISSING_TRIGRAM_PENALTY = MAX_TRIGRAMS
WORD_BOUNDARY = " "
PROFILE_BOUNDARY_MARKER = "_"
PROFILE_SEPARATOR = "|"
TRIGRAM_LENGTH = 3
DIRECT_CONFIDENCE = 1.0
SINGLE_CANDIDATE_CONFIDENCE = 0.5
CONFIDENT_RATE_SCALE = 12.0
CONFIDENT_RATE_FLOOR = 0.05
RELIABLE_CONFIDENCE_THRESHOLD = 0.5
DEFAULT_MIN_TEXT_LENGTH = 1
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OPTIONS_FILE_VERSION = 1
UNDETERMINED_MARKER = "-"
