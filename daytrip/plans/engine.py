"""Day-plan generation.

Turns a traveler's time, pace, budget and interest constraints into an
ordered list of stops:
1. Filter candidates by interest, leaving out recently shown places
2. Score by interest overlap and budget fit
3. Select stops greedily within the time budget and pace cap
4. Extend visits with leftover time and derive arrival times

Generation is deterministic: the same PlanInput (including candidate order)
always produces the same PlanOutput. Nothing is cached or persisted.
"""

from loguru import logger

from daytrip.plans.constants import (
    SHORT_PLAN_FRACTION,
    WARNING_NO_INTERESTS,
    WARNING_NO_MATCHES,
    WARNING_NO_TIME,
    WARNING_NOTHING_FITS,
    WARNING_RECENT_FALLBACK,
    WARNING_SHORT_PLAN,
)
from daytrip.plans.schedule import build_schedule, estimate_cost_range
from daytrip.plans.scoring import matches_interests, rank_candidates
from daytrip.plans.selection import max_stops_for_pace, select_stops
from daytrip.plans.types import CandidatePlace, PlanInput, PlanOutput
from daytrip.plans.validators import validate_plan_output


def _empty_output(warnings: list[str]) -> PlanOutput:
    return PlanOutput(warnings=tuple(warnings))


def filter_candidates(plan_input: PlanInput) -> tuple[list[CandidatePlace], list[str]]:
    """Keep interest matches, dropping recently shown places when possible.

    Args:
        plan_input: Plan request

    Returns:
        Tuple of (candidates in catalog order, warnings)
    """
    matching = [c for c in plan_input.candidates if matches_interests(c, plan_input.interests)]
    if not matching:
        return [], [WARNING_NO_MATCHES]

    fresh = [c for c in matching if c.id not in plan_input.recent_place_ids]
    if not fresh:
        return matching, [WARNING_RECENT_FALLBACK]

    return fresh, []


def generate(plan_input: PlanInput) -> PlanOutput:
    """Generate a day plan.

    Empty-result conditions (no time, no interests, no matches, nothing fits)
    return an empty stop list with a warning instead of raising.

    Args:
        plan_input: Traveler constraints and candidate places

    Returns:
        PlanOutput with stops in visit order

    Raises:
        PlanningInvariantError: If the generated plan breaks its own guarantees
    """
    available_minutes = plan_input.available_minutes

    if available_minutes <= 0:
        logger.debug("plan_generation_skipped", reason="no_time", available_minutes=available_minutes)
        return _empty_output([WARNING_NO_TIME])

    if not plan_input.interests:
        logger.debug("plan_generation_skipped", reason="no_interests")
        return _empty_output([WARNING_NO_INTERESTS])

    candidates, warnings = filter_candidates(plan_input)
    if not candidates:
        logger.debug("plan_generation_skipped", reason="no_matches", catalog_size=len(plan_input.candidates))
        return _empty_output(warnings)

    ranked = rank_candidates(candidates, plan_input.interests, plan_input.budget_tier)
    max_stops = max_stops_for_pace(plan_input.pace, available_minutes)
    selected = select_stops(
        ranked,
        plan_input.start_point,
        available_minutes,
        max_stops,
        region_aware=plan_input.region_aware_walking,
    )

    if not selected:
        warnings.append(WARNING_NOTHING_FITS)
        logger.debug("plan_generation_skipped", reason="nothing_fits", candidates=len(candidates))
        return _empty_output(warnings)

    stops, total_minutes = build_schedule(selected, available_minutes, plan_input.reference_time)

    if total_minutes < SHORT_PLAN_FRACTION * available_minutes:
        warnings.append(WARNING_SHORT_PLAN)

    output = PlanOutput(
        stops=tuple(stops),
        total_minutes=total_minutes,
        estimated_cost_range=estimate_cost_range(selected),
        warnings=tuple(warnings),
    )
    validate_plan_output(plan_input, output)

    logger.info(
        "plan_generated",
        stops=len(output.stops),
        total_minutes=output.total_minutes,
        available_minutes=available_minutes,
        pace=plan_input.pace.value,
        warnings=len(output.warnings),
    )
    return output
