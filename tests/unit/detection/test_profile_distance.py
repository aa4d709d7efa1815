"""Unit tests for out-of-place distance scoring."""

from __future__ import annotations

import pytest

from core.constants import MISSING_TRIGRAM_PENALTY
from core.errors import NoCandidatesError
from detection.profile_distance import CandidateScore, calculate_distance, score_candidates
from profiles.languages import Language


def test_calculate_distance_sums_rank_differences() -> None:
    """Present trigrams should cost their rank difference."""
    distance = calculate_distance({"abc": 0, "bcd": 1}, {"bcd": 0, "abc": 3})

    assert distance == 4


def test_calculate_distance_penalizes_missing_trigrams() -> None:
    """Absent trigrams should cost the fixed penalty."""
    distance = calculate_distance({"abc": 0, "bcd": 1}, {"abc": 2})

    assert distance == 2 + MISSING_TRIGRAM_PENALTY


def test_score_candidates_orders_by_distance() -> None:
    """Closer profiles should come first."""
    profiles = {Language.ENG: ("zzz", "yyy"), Language.FRA: ("abc", "bcd")}

    scores = score_candidates({"abc": 0, "bcd": 1}, [Language.ENG, Language.FRA], profiles)

    assert [score.language for score in scores] == [Language.FRA, Language.ENG]
    assert scores[0].distance == 0


def test_score_candidates_breaks_ties_by_language_order() -> None:
    """Equal distances should resolve to the language defined first."""
    profiles = {Language.DEU: ("abc",), Language.ENG: ("abc",), Language.FRA: ("abc",)}

    scores = score_candidates(
        {"abc": 0},
        [Language.FRA, Language.DEU, Language.ENG],
        profiles,
    )

    assert [score.language for score in scores] == [Language.ENG, Language.FRA, Language.DEU]


def test_score_candidates_without_profile_costs_full_penalty() -> None:
    """A language without a profile should miss every trigram."""
    scores = score_candidates({"abc": 0, "xyz": 1}, [Language.ELL])

    assert scores == [CandidateScore(language=Language.ELL, distance=2 * MISSING_TRIGRAM_PENALTY)]


def test_score_candidates_rejects_empty_candidates() -> None:
    """An empty candidate set should fail."""
    with pytest.raises(NoCandidatesError):
        score_candidates({"abc": 0}, [])
