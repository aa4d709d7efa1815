"""Supported languages and their lookup tables.

This module defines the closed language set keyed by ISO 639-3 code,
the English and native names, and the scripts each language is written
in. The script-to-languages association is derived from these rows.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from profiles.scripts import Script


class Language(Enum):
    """Supported language tag, valued by its ISO 639-3 code.

    Definition order is the ordinal used for deterministic tie-breaks.
    """

    ENG = "eng"
    FRA = "fra"
    DEU = "deu"
    SPA = "spa"
    POR = "por"
    ITA = "ita"
    NLD = "nld"
    POL = "pol"
    RUS = "rus"
    UKR = "ukr"
    BUL = "bul"
    ARB = "arb"
    HIN = "hin"
    HEB = "heb"
    ELL = "ell"
    AMH = "amh"
    KAT = "kat"
    HYE = "hye"
    BEN = "ben"
    PAN = "pan"
    GUJ = "guj"
    ORI = "ori"
    TAM = "tam"
    TEL = "tel"
    KAN = "kan"
    MAL = "mal"
    SIN = "sin"
    THA = "tha"
    MYA = "mya"
    KHM = "khm"
    KOR = "kor"
    JPN = "jpn"
    CMN = "cmn"

    @classmethod
    def from_code(cls, code: str) -> "Language | None":
        """Get a language by ISO 639-3 code, case-insensitively.

        Args:
            code: Three-letter code such as "ukr" or "ENG".

        Returns:
            The language, or None for unknown codes.
        """
        return _LANGUAGES_BY_CODE.get(code.strip().lower())

    @property
    def code(self) -> str:
        """ISO 639-3 code."""
        return self.value

    @property
    def ordinal(self) -> int:
        """Position of the language in definition order."""
        return _LANGUAGE_ORDINALS[self]

    @property
    def native_name(self) -> str:
        """Language name written in the language itself."""
        return _LANGUAGE_ROWS[self][1]

    @property
    def eng_name(self) -> str:
        """Human readable English name."""
        return _LANGUAGE_ROWS[self][0]

    @property
    def script(self) -> Script:
        """Script used when selecting this language as a candidate."""
        return _LANGUAGE_ROWS[self][2][0]

    @property
    def scripts(self) -> tuple[Script, ...]:
        """Every script the language is written in, selection script first."""
        return _LANGUAGE_ROWS[self][2]

    def __str__(self) -> str:
        return self.native_name


_LANGUAGE_ROWS: Mapping[Language, tuple[str, str, tuple[Script, ...]]] = {
    Language.ENG: ("English", "English", (Script.LATIN,)),
    Language.FRA: ("French", "Français", (Script.LATIN,)),
    Language.DEU: ("German", "Deutsch", (Script.LATIN,)),
    Language.SPA: ("Spanish", "Español", (Script.LATIN,)),
    Language.POR: ("Portuguese", "Português", (Script.LATIN,)),
    Language.ITA: ("Italian", "Italiano", (Script.LATIN,)),
    Language.NLD: ("Dutch", "Nederlands", (Script.LATIN,)),
    Language.POL: ("Polish", "Polski", (Script.LATIN,)),
    Language.RUS: ("Russian", "Русский", (Script.CYRILLIC,)),
    Language.UKR: ("Ukrainian", "Українська", (Script.CYRILLIC,)),
    Language.BUL: ("Bulgarian", "Български", (Script.CYRILLIC,)),
    Language.ARB: ("Arabic", "العربية", (Script.ARABIC,)),
    Language.HIN: ("Hindi", "हिन्दी", (Script.DEVANAGARI,)),
    Language.HEB: ("Hebrew", "עברית", (Script.HEBREW,)),
    Language.ELL: ("Greek", "Ελληνικά", (Script.GREEK,)),
    Language.AMH: ("Amharic", "አማርኛ", (Script.ETHIOPIC,)),
    Language.KAT: ("Georgian", "ქართული", (Script.GEORGIAN,)),
    Language.HYE: ("Armenian", "Հայերեն", (Script.ARMENIAN,)),
    Language.BEN: ("Bengali", "বাংলা", (Script.BENGALI,)),
    Language.PAN: ("Punjabi", "ਪੰਜਾਬੀ", (Script.GURMUKHI,)),
    Language.GUJ: ("Gujarati", "ગુજરાતી", (Script.GUJARATI,)),
    Language.ORI: ("Oriya", "ଓଡ଼ିଆ", (Script.ORIYA,)),
    Language.TAM: ("Tamil", "தமிழ்", (Script.TAMIL,)),
    Language.TEL: ("Telugu", "తెలుగు", (Script.TELUGU,)),
    Language.KAN: ("Kannada", "ಕನ್ನಡ", (Script.KANNADA,)),
    Language.MAL: ("Malayalam", "മലയാളം", (Script.MALAYALAM,)),
    Language.SIN: ("Sinhalese", "සිංහල", (Script.SINHALA,)),
    Language.THA: ("Thai", "ภาษาไทย", (Script.THAI,)),
    Language.MYA: ("Burmese", "မြန်မာစာ", (Script.MYANMAR,)),
    Language.KHM: ("Khmer", "ភាសាខ្មែរ", (Script.KHMER,)),
    Language.KOR: ("Korean", "한국어", (Script.HANGUL,)),
    Language.JPN: ("Japanese", "日本語", (Script.HIRAGANA, Script.KATAKANA)),
    Language.CMN: ("Mandarin", "普通话", (Script.MANDARIN,)),
}
_LANGUAGE_ORDINALS = {language: index for index, language in enumerate(Language)}
_LANGUAGES_BY_CODE = {language.value: language for language in Language}


def _build_script_languages() -> dict[Script, tuple[Language, ...]]:
    """Group languages by every script they are written in.

    Returns:
        Mapping from script to languages in ordinal order.
    """
    grouped: dict[Script, list[Language]] = {}
    for language in Language:
        for script in language.scripts:
            grouped.setdefault(script, []).append(language)
    return {script: tuple(languages) for script, languages in grouped.items()}


SCRIPT_LANGUAGES: Mapping[Script, tuple[Language, ...]] = _build_script_languages()
ALL_LANGUAGES: frozenset[Language] = frozenset(Language)


def languages_for_script(script: Script) -> tuple[Language, ...]:
    """Return languages written in a script, in ordinal order.

    Args:
        script: Script to look up.

    Returns:
        Tuple of languages, empty when none is supported.
    """
    return SCRIPT_LANGUAGES.get(script, ())


def is_determinate_script(script: Script) -> bool:
    """Check whether exactly one supported language uses a script."""
    return len(languages_for_script(script)) == 1
