"""Unit tests for trigram extraction and ranking."""

from __future__ import annotations

from core.constants import MAX_TRIGRAMS
from detection.text_normalizer import NormalizedText
from detection.trigram_extraction import (
    build_window,
    count_trigrams,
    extract_trigrams,
    rank_trigrams,
)
from profiles.scripts import Script


def test_build_window_pads_words_with_boundaries() -> None:
    """Window should start and end with a boundary."""
    window = build_window(NormalizedText("Hi, there!"), Script.LATIN)

    assert window == " hi there "


def test_build_window_treats_other_scripts_as_boundaries() -> None:
    """Foreign letters should split words instead of joining them."""
    window = build_window(NormalizedText("abcгдеxyz мир world"), Script.LATIN)

    assert window == " abc xyz world "


def test_build_window_is_empty_without_script_letters() -> None:
    """No matching letters should give an empty window."""
    assert build_window(NormalizedText("где"), Script.LATIN) == ""


def test_count_trigrams_includes_padded_edges() -> None:
    """A two-letter word should yield both edge trigrams."""
    assert count_trigrams(" ab ") == {" ab": 1, "ab ": 1}


def test_count_trigrams_handles_single_letter_word() -> None:
    """A one-letter word should yield one padded trigram."""
    assert count_trigrams(" a ") == {" a ": 1}


def test_count_trigrams_skips_cross_word_windows() -> None:
    """Windows centered on a boundary should be skipped."""
    counts = count_trigrams(" ab cd ")

    assert list(counts) == [" ab", "ab ", " cd", "cd "]


def test_rank_trigrams_breaks_ties_by_first_seen_order() -> None:
    """Equal counts should keep insertion order."""
    ranking = rank_trigrams({"xyz": 1, "abc": 2, "def": 1})

    assert ranking == {"abc": 0, "xyz": 1, "def": 2}


def test_rank_trigrams_caps_length() -> None:
    """Ranking should hold at most the profile bound."""
    counts = {f"{index:03d}": 1 for index in range(MAX_TRIGRAMS + 100)}

    ranking = rank_trigrams(counts)

    assert len(ranking) == MAX_TRIGRAMS
    assert "399" not in ranking


def test_extract_trigrams_ranks_repeated_word() -> None:
    """Repeated trigrams should share counts and keep first-seen ranks."""
    ranking = extract_trigrams(NormalizedText("The the"), Script.LATIN)

    assert ranking == {" th": 0, "the": 1, "he ": 2}
