"""Confidence calculation.

Confidence expresses how much closer the winner is than the runner-up,
not a calibrated probability. Distances are turned into closeness
scores against the worst possible distance of the input, and the
relative margin between the two best scores is compared with a rate
that shrinks as the input grows: short texts need a wider margin.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    CONFIDENT_RATE_FLOOR,
    CONFIDENT_RATE_SCALE,
    MISSING_TRIGRAM_PENALTY,
    SINGLE_CANDIDATE_CONFIDENCE,
)
from detection.profile_distance import CandidateScore


def calculate_confidence(
    best_distance: int,
    second_distance: int | None,
    trigram_count: int,
) -> float:
    """Convert the two best raw distances into a confidence in [0, 1].

    Args:
        best_distance: Distance of the winning language.
        second_distance: Distance of the runner-up, None with one candidate.
        trigram_count: Number of trigrams in the input ranking.

    Returns:
        1.0 for a perfect match, SINGLE_CANDIDATE_CONFIDENCE without a
        runner-up, otherwise the score margin relative to the confident
        rate for this input length, capped at 1.0.
    """
    if best_distance == 0:
        return 1.0
    if second_distance is None:
        return SINGLE_CANDIDATE_CONFIDENCE
    max_distance = trigram_count * MISSING_TRIGRAM_PENALTY
    best_score = max_distance - best_distance
    second_score = max_distance - second_distance
    if best_score <= 0:
        return 0.0
    if second_score <= 0:
        return 1.0
    rate = (best_score - second_score) / second_score
    confident_rate = CONFIDENT_RATE_SCALE / trigram_count + CONFIDENT_RATE_FLOOR
    return min(1.0, max(0.0, rate / confident_rate))


def confidence_from_scores(scores: Sequence[CandidateScore], trigram_count: int) -> float:
    """Compute confidence from ordered candidate scores."""
    second_distance = scores[1].distance if len(scores) > 1 else None
    return calculate_confidence(scores[0].distance, second_distance, trigram_count)
