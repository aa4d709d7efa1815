"""Unit tests for confidence calculation."""

from __future__ import annotations

import pytest

from core.constants import SINGLE_CANDIDATE_CONFIDENCE
from detection.confidence import calculate_confidence, confidence_from_scores
from detection.profile_distance import CandidateScore
from profiles.languages import Language


def test_perfect_match_is_fully_confident() -> None:
    """Zero distance should give full confidence."""
    assert calculate_confidence(0, 500, 10) == 1.0
    assert calculate_confidence(0, None, 10) == 1.0


def test_single_candidate_uses_fixed_confidence() -> None:
    """Without a runner-up the fixed constant should apply."""
    assert calculate_confidence(120, None, 10) == SINGLE_CANDIDATE_CONFIDENCE


def test_confidence_is_margin_over_confident_rate() -> None:
    """Score margin should be scaled by the rate required for the length."""
    # scores 1500 and 1000 against 3000, margin 0.5, rate 12 / 10 + 0.05
    assert calculate_confidence(1500, 2000, 10) == pytest.approx(0.4)


def test_longer_input_needs_smaller_margin() -> None:
    """The same relative margin should count for more on longer input."""
    short_confidence = calculate_confidence(1900, 2000, 10)
    long_confidence = calculate_confidence(19000, 20000, 100)

    assert short_confidence == pytest.approx(0.08)
    assert long_confidence == pytest.approx(0.1 / 0.17)


def test_wide_margin_is_capped_at_one() -> None:
    """Margins beyond the confident rate should saturate."""
    assert calculate_confidence(60000, 70000, 300) == 1.0


def test_equal_distances_give_zero_confidence() -> None:
    """A tie between the top two should give no confidence."""
    assert calculate_confidence(100, 100, 10) == 0.0


def test_unmatched_input_gives_zero_confidence() -> None:
    """No trigram found in any profile should give no confidence."""
    assert calculate_confidence(3000, 3000, 10) == 0.0


def test_confidence_from_scores_uses_top_two() -> None:
    """Scores beyond the runner-up should not matter."""
    scores = [
        CandidateScore(language=Language.ENG, distance=1500),
        CandidateScore(language=Language.FRA, distance=2000),
        CandidateScore(language=Language.DEU, distance=2900),
    ]

    assert confidence_from_scores(scores, 10) == pytest.approx(0.4)
