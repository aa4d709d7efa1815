"""Writing scripts and their Unicode code-point ranges.

This module defines the closed set of scripts the detector recognizes
and classifies single characters into them with a sorted range table.
"""

from __future__ import annotations

from bisect import bisect_right
from enum import Enum


class Script(Enum):
    """Writing script tag.

    Definition order is the ordinal used for deterministic tie-breaks.
    """

    LATIN = "Latin"
    CYRILLIC = "Cyrillic"
    ARABIC = "Arabic"
    DEVANAGARI = "Devanagari"
    HEBREW = "Hebrew"
    GREEK = "Greek"
    ETHIOPIC = "Ethiopic"
    GEORGIAN = "Georgian"
    ARMENIAN = "Armenian"
    BENGALI = "Bengali"
    GURMUKHI = "Gurmukhi"
    GUJARATI = "Gujarati"
    ORIYA = "Oriya"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    KANNADA = "Kannada"
    MALAYALAM = "Malayalam"
    SINHALA = "Sinhala"
    THAI = "Thai"
    MYANMAR = "Myanmar"
    KHMER = "Khmer"
    HANGUL = "Hangul"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    MANDARIN = "Mandarin"

    @property
    def ordinal(self) -> int:
        """Position of the script in definition order."""
        return _SCRIPT_ORDINALS[self]

    @classmethod
    def from_name(cls, name: str) -> "Script | None":
        """Look up a script by display name, case-insensitively."""
        return _SCRIPTS_BY_NAME.get(name.strip().lower())

    def __str__(self) -> str:
        return self.value


_SCRIPT_ORDINALS = {script: index for index, script in enumerate(Script)}
_SCRIPTS_BY_NAME = {script.value.lower(): script for script in Script}

_SCRIPT_RANGES: tuple[tuple[int, int, Script], ...] = (
    (0x0041, 0x005A, Script.LATIN),
    (0x0061, 0x007A, Script.LATIN),
    (0x00AA, 0x00AA, Script.LATIN),
    (0x00BA, 0x00BA, Script.LATIN),
    (0x00C0, 0x00D6, Script.LATIN),
    (0x00D8, 0x00F6, Script.LATIN),
    (0x00F8, 0x02AF, Script.LATIN),
    (0x0370, 0x03FF, Script.GREEK),
    (0x0400, 0x052F, Script.CYRILLIC),
    (0x0531, 0x058F, Script.ARMENIAN),
    (0x0591, 0x05FF, Script.HEBREW),
    (0x0600, 0x06FF, Script.ARABIC),
    (0x0750, 0x077F, Script.ARABIC),
    (0x08A0, 0x08FF, Script.ARABIC),
    (0x0900, 0x097F, Script.DEVANAGARI),
    (0x0980, 0x09FF, Script.BENGALI),
    (0x0A00, 0x0A7F, Script.GURMUKHI),
    (0x0A80, 0x0AFF, Script.GUJARATI),
    (0x0B00, 0x0B7F, Script.ORIYA),
    (0x0B80, 0x0BFF, Script.TAMIL),
    (0x0C00, 0x0C7F, Script.TELUGU),
    (0x0C80, 0x0CFF, Script.KANNADA),
    (0x0D00, 0x0D7F, Script.MALAYALAM),
    (0x0D80, 0x0DFF, Script.SINHALA),
    (0x0E00, 0x0E7F, Script.THAI),
    (0x1000, 0x109F, Script.MYANMAR),
    (0x10A0, 0x10FF, Script.GEORGIAN),
    (0x1100, 0x11FF, Script.HANGUL),
    (0x1200, 0x139F, Script.ETHIOPIC),
    (0x1780, 0x17FF, Script.KHMER),
    (0x19E0, 0x19FF, Script.KHMER),
    (0x1C80, 0x1C8F, Script.CYRILLIC),
    (0x1C90, 0x1CBF, Script.GEORGIAN),
    (0x1D00, 0x1D7F, Script.LATIN),
    (0x1E00, 0x1EFF, Script.LATIN),
    (0x1F00, 0x1FFF, Script.GREEK),
    (0x2C60, 0x2C7F, Script.LATIN),
    (0x2D00, 0x2D2F, Script.GEORGIAN),
    (0x2D80, 0x2DDF, Script.ETHIOPIC),
    (0x2DE0, 0x2DFF, Script.CYRILLIC),
    (0x2E80, 0x2FDF, Script.MANDARIN),
    (0x3005, 0x3005, Script.MANDARIN),
    (0x3007, 0x3007, Script.MANDARIN),
    (0x3021, 0x3029, Script.MANDARIN),
    (0x3038, 0x303B, Script.MANDARIN),
    (0x3041, 0x309F, Script.HIRAGANA),
    (0x30A0, 0x30FF, Script.KATAKANA),
    (0x3131, 0x318E, Script.HANGUL),
    (0x31F0, 0x31FF, Script.KATAKANA),
    (0x3400, 0x4DBF, Script.MANDARIN),
    (0x4E00, 0x9FFF, Script.MANDARIN),
    (0xA640, 0xA69F, Script.CYRILLIC),
    (0xA720, 0xA7FF, Script.LATIN),
    (0xA8E0, 0xA8FF, Script.DEVANAGARI),
    (0xA960, 0xA97F, Script.HANGUL),
    (0xA9E0, 0xA9FF, Script.MYANMAR),
    (0xAA60, 0xAA7F, Script.MYANMAR),
    (0xAB00, 0xAB2F, Script.ETHIOPIC),
    (0xAB30, 0xAB6F, Script.LATIN),
    (0xAC00, 0xD7FF, Script.HANGUL),
    (0xF900, 0xFAFF, Script.MANDARIN),
    (0xFB00, 0xFB06, Script.LATIN),
    (0xFB13, 0xFB17, Script.ARMENIAN),
    (0xFB1D, 0xFB4F, Script.HEBREW),
    (0xFB50, 0xFDFF, Script.ARABIC),
    (0xFE70, 0xFEFF, Script.ARABIC),
    (0xFF21, 0xFF3A, Script.LATIN),
    (0xFF41, 0xFF5A, Script.LATIN),
    (0xFF66, 0xFF9F, Script.KATAKANA),
    (0x20000, 0x2FA1F, Script.MANDARIN),
)
_RANGE_STARTS = tuple(start for start, _, _ in _SCRIPT_RANGES)


def classify_char(character: str) -> Script | None:
    """Map one character to its script.

    Args:
        character: A single character.

    Returns:
        The script owning the code point, or None when unmapped.
    """
    code_point = ord(character)
    if code_point < 0x80:
        if 0x61 <= code_point <= 0x7A or 0x41 <= code_point <= 0x5A:
            return Script.LATIN
        return None
    index = bisect_right(_RANGE_STARTS, code_point) - 1
    if index < 0:
        return None
    _, end, script = _SCRIPT_RANGES[index]
    if code_point <= end:
        return script
    return None
