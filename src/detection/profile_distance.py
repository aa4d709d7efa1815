"""Out-of-place rank distance between trigram rankings.

This module compares an input trigram ranking with the reference
profile of every candidate language. Lower distance means a closer
match; trigrams a profile lacks cost a fixed maximum penalty.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from core.constants import MISSING_TRIGRAM_PENALTY
from core.errors import NoCandidatesError
from detection.trigram_extraction import TrigramRanking
from profiles.languages import Language
from profiles.trigram_profiles import PROFILE_RANKS, LanguageProfile


@dataclass(frozen=True)
class CandidateScore:
    """Raw distance of one candidate language.

    Attributes:
        language: Candidate language.
        distance: Sum of rank differences and missing-trigram penalties.
    """

    language: Language
    distance: int


def calculate_distance(ranking: TrigramRanking, profile_ranks: Mapping[str, int]) -> int:
    """Compute the out-of-place distance of a ranking to one profile.

    Args:
        ranking: Input trigram to rank mapping.
        profile_ranks: Reference trigram to rank mapping.

    Returns:
        Total distance over every input trigram.
    """
    total = 0
    for trigram, input_rank in ranking.items():
        reference_rank = profile_ranks.get(trigram)
        if reference_rank is None:
            total += MISSING_TRIGRAM_PENALTY
        else:
            total += abs(input_rank - reference_rank)
    return total


def score_candidates(
    ranking: TrigramRanking,
    candidates: Iterable[Language],
    profiles: Mapping[Language, LanguageProfile] | None = None,
) -> list[CandidateScore]:
    """Score and order candidate languages by distance.

    Args:
        ranking: Input trigram ranking.
        candidates: Languages to score.
        profiles: Optional profile table; defaults to the built-in profiles.

    Returns:
        Scores sorted ascending by distance, ties by language ordinal.

    Raises:
        NoCandidatesError: If the candidate set is empty.
    """
    rank_tables = PROFILE_RANKS if profiles is None else _index_profiles(profiles)
    scores = [
        CandidateScore(
            language=language,
            distance=calculate_distance(ranking, rank_tables.get(language, {})),
        )
        for language in candidates
    ]
    if not scores:
        raise NoCandidatesError(
            "No candidate languages remain after filtering. "
            "Widen the allow-list or shrink the deny-list."
        )
    scores.sort(key=lambda score: (score.distance, score.language.ordinal))
    return scores


def _index_profiles(
    profiles: Mapping[Language, LanguageProfile],
) -> dict[Language, dict[str, int]]:
    return {
        language: {trigram: rank for rank, trigram in enumerate(profile)}
        for language, profile in profiles.items()
    }
