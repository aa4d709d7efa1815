"""Unit tests for the reference trigram profiles."""

from __future__ import annotations

from core.constants import MAX_TRIGRAMS, WORD_BOUNDARY
from profiles.languages import Language, is_determinate_script
from profiles.scripts import classify_char
from profiles.trigram_profiles import LANGUAGE_PROFILES, parse_profile, profile_for


def test_every_profile_holds_three_character_trigrams() -> None:
    """Profiles should contain only trigrams."""
    bad_entries = {
        language.code: trigram
        for language, profile in LANGUAGE_PROFILES.items()
        for trigram in profile
        if len(trigram) != 3
    }

    assert bad_entries == {}


def test_profiles_are_full_length() -> None:
    """Every profile should hold exactly the ranked trigram bound."""
    lengths = {language.code: len(profile) for language, profile in LANGUAGE_PROFILES.items()}

    assert set(lengths.values()) == {MAX_TRIGRAMS}


def test_profiles_have_no_duplicate_trigrams() -> None:
    """A trigram should appear once so its rank is unambiguous."""
    duplicated = {
        language.code: sorted({trigram for trigram in profile if profile.count(trigram) > 1})
        for language, profile in LANGUAGE_PROFILES.items()
        if len(set(profile)) != len(profile)
    }

    assert duplicated == {}


def test_profile_trigrams_use_the_language_script() -> None:
    """Trigrams should hold lowercase letters of the script around a letter."""
    for language, profile in LANGUAGE_PROFILES.items():
        for trigram in profile:
            assert trigram == trigram.lower()
            assert trigram[1] != WORD_BOUNDARY
            letters = [character for character in trigram if character != WORD_BOUNDARY]
            assert {classify_char(character) for character in letters} == {language.script}


def test_ambiguous_script_languages_have_profiles() -> None:
    """Every language competing on a shared script needs a profile."""
    missing = [
        language
        for language in Language
        if not is_determinate_script(language.script) and not profile_for(language)
    ]

    assert missing == []


def test_profile_for_returns_empty_for_direct_languages() -> None:
    """Determinate-script languages should not need a profile."""
    assert profile_for(Language.ELL) == ()


def test_parse_profile_maps_boundaries_and_keeps_order() -> None:
    """Parser should convert markers and keep positions as ranks."""
    profile = parse_profile("_th|the|he_|e_a")

    assert profile == (" th", "the", "he ", "e a")
