"""Unit tests for dominant script detection."""

from __future__ import annotations

import pytest

from core.errors import NotEnoughTextError
from core.types import Method
from detection.script_detection import count_scripts, detect_dominant_script
from detection.text_normalizer import NormalizedText
from profiles.scripts import Script


def test_latin_text_needs_trigram_scoring() -> None:
    """Latin text should select the n-gram method."""
    detection = detect_dominant_script(NormalizedText("Good morning"))

    assert (detection.script, detection.method) == (Script.LATIN, Method.NGRAM_BASED)


def test_greek_text_is_direct() -> None:
    """A single-language script should select the direct method."""
    detection = detect_dominant_script(NormalizedText("Καλημέρα κόσμε"))

    assert (detection.script, detection.method) == (Script.GREEK, Method.DIRECT)


def test_strict_majority_wins() -> None:
    """A script with more than half the letters should win."""
    detection = detect_dominant_script(NormalizedText("ab где"))

    assert detection.script is Script.CYRILLIC


def test_plurality_wins_without_majority() -> None:
    """Highest count should win when no script has a majority."""
    detection = detect_dominant_script(NormalizedText("ab где αβγδ"))

    assert detection.script is Script.GREEK


def test_tie_goes_to_lowest_ordinal() -> None:
    """Equal counts should resolve to the script defined first."""
    detection = detect_dominant_script(NormalizedText("abc где"))

    assert detection.script is Script.LATIN


def test_counts_are_ordered_by_script_ordinal() -> None:
    """The tally should list scripts in definition order."""
    detection = detect_dominant_script(NormalizedText("где ab"))

    assert detection.counts == ((Script.LATIN, 2), (Script.CYRILLIC, 3))
    assert detection.total == 5


def test_punctuation_only_text_raises() -> None:
    """Text without scripted letters should fail."""
    with pytest.raises(NotEnoughTextError):
        detect_dominant_script(NormalizedText("123456 !!! ???"))


def test_min_text_length_is_enforced() -> None:
    """Too few scripted letters should fail."""
    with pytest.raises(NotEnoughTextError, match="fewer than"):
        detect_dominant_script(NormalizedText("abc"), min_text_length=5)


def test_allowed_scripts_ignore_other_letters() -> None:
    """Letters outside the allowed scripts should not be counted."""
    detection = detect_dominant_script(
        NormalizedText("abcdef где"),
        allowed_scripts=frozenset({Script.CYRILLIC}),
    )

    assert detection.script is Script.CYRILLIC
    assert detection.count_for(Script.LATIN) == 0


def test_count_scripts_skips_unmapped_letters() -> None:
    """Letters outside every range should not be tallied."""
    counts = count_scripts(NormalizedText("abc ʰ"))

    assert counts == {Script.LATIN: 3}
