"""Trigram extraction and ranking.

This module slides a three-character window over the letters of the
dominant script and ranks the observed trigrams by frequency. Each word
is padded with one boundary on both sides, matching the convention the
reference profiles were written with.
"""

from __future__ import annotations

from core.constants import MAX_TRIGRAMS, TRIGRAM_LENGTH, WORD_BOUNDARY
from detection.text_normalizer import NormalizedText
from profiles.scripts import Script, classify_char

TrigramRanking = dict[str, int]


def build_window(text: NormalizedText, script: Script) -> str:
    """Materialize the boundary-padded letter sequence of one script.

    Letters of other scripts act as word boundaries so foreign words do
    not leak into the ranking.

    Args:
        text: Normalized input text.
        script: Dominant script to keep.

    Returns:
        Space-padded words joined by single spaces, or "" when none remain.
    """
    words: list[str] = []
    current: list[str] = []
    for character in text.iter_chars():
        if character != WORD_BOUNDARY and classify_char(character) is script:
            current.append(character)
            continue
        if current:
            words.append("".join(current))
            current = []
    if current:
        words.append("".join(current))
    if not words:
        return ""
    return WORD_BOUNDARY + WORD_BOUNDARY.join(words) + WORD_BOUNDARY


def count_trigrams(window: str) -> dict[str, int]:
    """Count trigrams of a padded window in first-seen order.

    Windows centered on a boundary span two words and are skipped.

    Args:
        window: Output of build_window.

    Returns:
        Trigram counts, insertion-ordered by first occurrence.
    """
    counts: dict[str, int] = {}
    for index in range(len(window) - TRIGRAM_LENGTH + 1):
        if window[index + 1] == WORD_BOUNDARY:
            continue
        trigram = window[index : index + TRIGRAM_LENGTH]
        counts[trigram] = counts.get(trigram, 0) + 1
    return counts


def rank_trigrams(counts: dict[str, int], limit: int = MAX_TRIGRAMS) -> TrigramRanking:
    """Rank trigrams by descending count, ties by first-seen order.

    Args:
        counts: Insertion-ordered trigram counts.
        limit: Maximum ranking length.

    Returns:
        Mapping from trigram to 0-based rank.
    """
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return {trigram: rank for rank, (trigram, _) in enumerate(ordered[:limit])}


def extract_trigrams(text: NormalizedText, script: Script) -> TrigramRanking:
    """Build the trigram ranking of a text restricted to one script."""
    return rank_trigrams(count_trigrams(build_window(text, script)))
