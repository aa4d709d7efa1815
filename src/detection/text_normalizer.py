"""Text normalization for detection.

This module exposes a lazy, lowercase, letters-only view of raw text.
Runs of digits, punctuation, symbols and whitespace collapse into one
word boundary so downstream stages can still see word edges.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

from core.constants import WORD_BOUNDARY


class NormalizedText:
    """Letters-only view over a caller's string.

    The string is only rebuilt when it is not already in NFC form.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: str) -> None:
        if not unicodedata.is_normalized("NFC", raw):
            raw = unicodedata.normalize("NFC", raw)
        self._raw = raw

    def iter_chars(self) -> Iterator[str]:
        """Yield lowercase letters with single boundaries between words.

        Returns:
            Iterator over letters and WORD_BOUNDARY markers. A boundary
            never leads or trails the sequence.
        """
        in_word = False
        pending_boundary = False
        for character in self._raw:
            if _is_letter(character) or (in_word and _is_mark(character)):
                if pending_boundary:
                    yield WORD_BOUNDARY
                    pending_boundary = False
                in_word = True
                yield _lowercase(character)
            elif in_word:
                in_word = False
                pending_boundary = True

    def iter_letters(self) -> Iterator[str]:
        """Yield lowercase letters only, without boundaries."""
        return (character for character in self.iter_chars() if character != WORD_BOUNDARY)

    def is_empty(self) -> bool:
        """Check whether the text holds no letters at all."""
        return next(self.iter_letters(), None) is None


def _is_letter(character: str) -> bool:
    return character.isalpha()


def _is_mark(character: str) -> bool:
    return unicodedata.category(character).startswith("M")


def _lowercase(character: str) -> str:
    lowered = character.lower()
    if len(lowered) != 1:
        return character
    return lowered
