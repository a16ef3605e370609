"""Plan output validators with hard guardrails.

Enforces the guarantees every generated plan must keep:
- Total time never exceeds the available time
- Total time equals the sum of visit and travel minutes
- Every stop references a known candidate exactly once
- Visit minutes stay within the place's duration range
"""

from daytrip.plans.errors import PlanningInvariantError
from daytrip.plans.types import PlanInput, PlanOutput


def validate_plan_output(plan_input: PlanInput, output: PlanOutput) -> None:
    """Validate plan output invariants.

    Args:
        plan_input: Request the plan was generated from
        output: Generated plan

    Raises:
        PlanningInvariantError: If any invariant is violated
    """
    if output.stops and output.total_minutes > plan_input.available_minutes:
        raise PlanningInvariantError(
            "TIME_BUDGET_EXCEEDED",
            [f"total_minutes={output.total_minutes} > available_minutes={plan_input.available_minutes}"],
        )

    summed = sum(stop.visit_minutes + stop.travel_minutes_from_previous for stop in output.stops)
    if summed != output.total_minutes:
        raise PlanningInvariantError(
            "TOTAL_MISMATCH",
            [f"total_minutes={output.total_minutes} but stops sum to {summed}"],
        )

    places = {candidate.id: candidate for candidate in plan_input.candidates}

    unknown = [stop.place_id for stop in output.stops if stop.place_id not in places]
    if unknown:
        raise PlanningInvariantError("UNKNOWN_PLACE", [f"unknown place_id={place_id}" for place_id in unknown])

    place_ids = [stop.place_id for stop in output.stops]
    duplicates = sorted({place_id for place_id in place_ids if place_ids.count(place_id) > 1})
    if duplicates:
        raise PlanningInvariantError("DUPLICATE_STOP", [f"place_id={place_id} scheduled more than once" for place_id in duplicates])

    out_of_range = []
    for stop in output.stops:
        place = places[stop.place_id]
        if not place.visit_min_minutes <= stop.visit_minutes <= place.visit_max_minutes:
            out_of_range.append(
                f"place_id={stop.place_id} visit_minutes={stop.visit_minutes} "
                f"outside [{place.visit_min_minutes}, {place.visit_max_minutes}]"
            )
    if out_of_range:
        raise PlanningInvariantError("VISIT_OUT_OF_RANGE", out_of_range)
