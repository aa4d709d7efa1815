"""Shared typed models.

This module defines immutable result models used by the detection
pipeline, the SDK surface and the CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.constants import RELIABLE_CONFIDENCE_THRESHOLD
from profiles.languages import Language
from profiles.scripts import Script


class Method(Enum):
    """How a language was chosen once the script was known."""

    DIRECT = "direct"
    NGRAM_BASED = "ngram"


@dataclass(frozen=True)
class Info:
    """Detection result for one input text.

    Attributes:
        language: Best-guess language.
        script: Dominant script of the input.
        confidence: Margin of the winner over the runner-up, in [0, 1].
    """

    language: Language
    script: Script
    confidence: float

    def is_reliable(self, threshold: float = RELIABLE_CONFIDENCE_THRESHOLD) -> bool:
        """Check whether the confidence reaches a reliability threshold.

        Args:
            threshold: Minimum confidence considered reliable.

        Returns:
            True when confidence is at or above the threshold.
        """
        return self.confidence >= threshold

    def to_dict(self, threshold: float = RELIABLE_CONFIDENCE_THRESHOLD) -> dict[str, object]:
        """Serialize the result into JSON-compatible fields."""
        return {
            "language": self.language.code,
            "language_name": self.language.eng_name,
            "script": self.script.value,
            "confidence": round(self.confidence, 6),
            "reliable": self.is_reliable(threshold),
        }
