"""Greedy stop selection.

Repeatedly picks the unplaced candidate that fits the remaining time (using
its minimum visit duration plus travel from the current position) with the
highest score. Ties go to the nearest candidate, then the lowest id, which
keeps routes from zig-zagging and keeps the result deterministic.
"""

import math
from dataclasses import dataclass

from loguru import logger

from daytrip.geo.engine import determine_region, distance_meters, estimated_walk_minutes
from daytrip.geo.types import GeoPoint
from daytrip.plans.constants import SAME_SPOT_RADIUS_METERS, STOPS_PER_HOUR
from daytrip.plans.scoring import ScoredCandidate
from daytrip.plans.types import CandidatePlace, Pace


@dataclass(frozen=True)
class SelectedStop:
    """A chosen candidate with the leg that reaches it.

    Attributes:
        place: Selected catalog place
        travel_minutes: Walk from the previous position (0 without a start point)
        travel_meters: Straight-line distance of that walk
    """

    place: CandidatePlace
    travel_minutes: int
    travel_meters: float


def max_stops_for_pace(pace: Pace, available_minutes: int) -> int:
    """Pace-dependent stop cap that scales with the available time.

    Always at least 1 so a short window can still hold a single stop.
    """
    return max(1, math.floor(available_minutes / 60 * STOPS_PER_HOUR[pace]))


def travel_to(origin: GeoPoint | None, place: CandidatePlace, region_aware: bool = False) -> tuple[int, float]:
    """Walking minutes and meters from origin to place.

    No origin means the plan has not located the traveler yet, so the leg is free.
    With region_aware, the walk is paced by the region the leg starts in.
    """
    if origin is None:
        return 0, 0.0

    meters = distance_meters(origin, place.position)
    if meters <= SAME_SPOT_RADIUS_METERS:
        return 0, meters

    region = determine_region(origin) if region_aware else None
    return estimated_walk_minutes(meters, region=region), meters


def select_stops(
    ranked: list[ScoredCandidate],
    start_point: GeoPoint | None,
    available_minutes: int,
    max_stops: int,
    region_aware: bool = False,
) -> list[SelectedStop]:
    """Select stops greedily within the time budget.

    Args:
        ranked: Scored candidates in rank order
        start_point: Traveler start, or None to begin at the first selected stop
        available_minutes: Total time budget
        max_stops: Pace-dependent cap
        region_aware: Walk slower on legs starting in dense regions

    Returns:
        Selected stops in visit order
    """
    remaining = list(ranked)
    selected: list[SelectedStop] = []
    origin = start_point
    elapsed = 0

    while remaining and len(selected) < max_stops:
        best: tuple[ScoredCandidate, int, float] | None = None
        best_key: tuple[float, float, str] | None = None

        for candidate in remaining:
            travel_minutes, travel_meters = travel_to(origin, candidate.place, region_aware)
            if elapsed + travel_minutes + candidate.place.visit_min_minutes > available_minutes:
                continue

            key = (-candidate.score, travel_meters, candidate.place.id)
            if best_key is None or key < best_key:
                best = (candidate, travel_minutes, travel_meters)
                best_key = key

        if best is None:
            break

        candidate, travel_minutes, travel_meters = best
        selected.append(
            SelectedStop(
                place=candidate.place,
                travel_minutes=travel_minutes,
                travel_meters=travel_meters,
            )
        )
        remaining.remove(candidate)
        elapsed += travel_minutes + candidate.place.visit_min_minutes
        origin = candidate.place.position

        logger.debug(
            "plan_stop_selected",
            place_id=candidate.place.id,
            score=candidate.score,
            travel_minutes=travel_minutes,
            elapsed_minutes=elapsed,
        )

    return selected
