"""Candidate filtering and scoring.

Score = interest overlap * INTEREST_MATCH_WEIGHT + budget fit.
Budget mismatch only lowers the score; it never excludes a place.
"""

from dataclasses import dataclass

from daytrip.plans.constants import (
    BUDGET_FIT_BONUS,
    BUDGET_OVER_PENALTY,
    BUDGET_TIER_CEILINGS,
    INTEREST_MATCH_WEIGHT,
)
from daytrip.plans.types import BudgetTier, CandidatePlace, Interest


@dataclass(frozen=True)
class ScoredCandidate:
    """Candidate with its precomputed, position-independent score."""

    place: CandidatePlace
    overlap: int
    score: float


def interest_overlap(place: CandidatePlace, interests: frozenset[Interest]) -> int:
    """Count requested interests the place satisfies.

    A request for Interest.GENERAL is satisfied by every place.
    """
    overlap = len(place.tags & interests)
    if Interest.GENERAL in interests and Interest.GENERAL not in place.tags:
        overlap += 1
    return overlap


def matches_interests(place: CandidatePlace, interests: frozenset[Interest]) -> bool:
    return interest_overlap(place, interests) > 0


def fits_budget(place: CandidatePlace, tier: BudgetTier) -> bool:
    ceiling = BUDGET_TIER_CEILINGS[tier]
    return ceiling is None or place.cost_max <= ceiling


def budget_fit_score(place: CandidatePlace, tier: BudgetTier) -> float:
    return BUDGET_FIT_BONUS if fits_budget(place, tier) else BUDGET_OVER_PENALTY


def score_candidate(place: CandidatePlace, interests: frozenset[Interest], tier: BudgetTier) -> ScoredCandidate:
    overlap = interest_overlap(place, interests)
    score = overlap * INTEREST_MATCH_WEIGHT + budget_fit_score(place, tier)
    return ScoredCandidate(place=place, overlap=overlap, score=score)


def rank_candidates(
    places: list[CandidatePlace],
    interests: frozenset[Interest],
    tier: BudgetTier,
) -> list[ScoredCandidate]:
    """Score places and order them by score descending, then id ascending.

    Args:
        places: Candidates already filtered by interest
        interests: Requested interests
        tier: Requested budget tier

    Returns:
        Scored candidates in deterministic rank order
    """
    scored = [score_candidate(place, interests, tier) for place in places]
    return sorted(scored, key=lambda c: (-c.score, c.place.id))
