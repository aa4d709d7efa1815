"""Unit tests for the supported language table."""

from __future__ import annotations

from profiles.languages import (
    Language,
    is_determinate_script,
    languages_for_script,
)
from profiles.scripts import Script


def test_from_code_round_trips_every_language() -> None:
    """Every language should resolve from its own code."""
    resolved = [Language.from_code(language.code) for language in Language]

    assert resolved == list(Language)


def test_from_code_is_case_insensitive() -> None:
    """Lookup should ignore case and surrounding whitespace."""
    assert Language.from_code(" ENG ") is Language.ENG


def test_from_code_returns_none_for_unknown_code() -> None:
    """Unknown codes should not raise."""
    assert Language.from_code("oops") is None


def test_language_names() -> None:
    """Languages should expose native and English names."""
    assert (Language.RUS.native_name, Language.RUS.eng_name) == ("Русский", "Russian")
    assert str(Language.DEU) == "Deutsch"


def test_every_script_has_a_language() -> None:
    """No script should be classified without a language behind it."""
    missing = [script for script in Script if not languages_for_script(script)]

    assert missing == []


def test_latin_and_cyrillic_are_ambiguous() -> None:
    """Scripts shared by several languages need trigram scoring."""
    assert not is_determinate_script(Script.LATIN)
    assert not is_determinate_script(Script.CYRILLIC)


def test_greek_is_determinate() -> None:
    """A script with one language should be determinate."""
    assert languages_for_script(Script.GREEK) == (Language.ELL,)
    assert is_determinate_script(Script.GREEK)


def test_japanese_uses_both_kana_scripts() -> None:
    """Japanese should be selected by hiragana and katakana."""
    assert Language.JPN.scripts == (Script.HIRAGANA, Script.KATAKANA)
    assert languages_for_script(Script.KATAKANA) == (Language.JPN,)


def test_languages_for_script_keeps_ordinal_order() -> None:
    """Cyrillic languages should come back in definition order."""
    assert languages_for_script(Script.CYRILLIC) == (Language.RUS, Language.UKR, Language.BUL)
