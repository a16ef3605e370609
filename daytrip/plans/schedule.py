"""Visit-minute assignment and stop timing."""

from datetime import datetime, timedelta

from daytrip.plans.selection import SelectedStop
from daytrip.plans.types import CostRange, PlanStop


def assign_visit_minutes(selected: list[SelectedStop], available_minutes: int) -> list[int]:
    """Start every stop at its minimum visit and spend leftover time earliest-first.

    Each stop is extended toward its maximum before the next one gets any
    extra time, so the same selection always yields the same assignment.
    """
    leftover = available_minutes - sum(s.travel_minutes + s.place.visit_min_minutes for s in selected)

    visits = []
    for stop in selected:
        extra = max(0, min(leftover, stop.place.visit_max_minutes - stop.place.visit_min_minutes))
        leftover -= extra
        visits.append(stop.place.visit_min_minutes + extra)
    return visits


def build_schedule(
    selected: list[SelectedStop],
    available_minutes: int,
    reference_time: datetime,
) -> tuple[list[PlanStop], int]:
    """Turn selected stops into timed PlanStops.

    Args:
        selected: Stops in visit order
        available_minutes: Total time budget
        reference_time: Plan start instant

    Returns:
        Tuple of (stops, total elapsed minutes)
    """
    visits = assign_visit_minutes(selected, available_minutes)

    stops: list[PlanStop] = []
    elapsed = 0
    for stop, visit_minutes in zip(selected, visits, strict=True):
        arrival = reference_time + timedelta(minutes=elapsed + stop.travel_minutes)
        stops.append(
            PlanStop(
                place_id=stop.place.id,
                arrival_time=arrival,
                departure_time=arrival + timedelta(minutes=visit_minutes),
                visit_minutes=visit_minutes,
                travel_minutes_from_previous=stop.travel_minutes,
            )
        )
        elapsed += stop.travel_minutes + visit_minutes

    return stops, elapsed


def estimate_cost_range(selected: list[SelectedStop]) -> CostRange:
    return CostRange(
        min=sum(s.place.cost_min for s in selected),
        max=sum(s.place.cost_max for s in selected),
    )
