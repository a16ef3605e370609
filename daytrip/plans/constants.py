"""Tunable constants for day-plan generation.

Scoring weights are independent of the selection loop so they can be tuned
and tested on their own. INTEREST_MATCH_WEIGHT must stay larger than the
spread between BUDGET_FIT_BONUS and BUDGET_OVER_PENALTY so that interest
overlap remains the primary ranking key.
"""

from daytrip.plans.types import BudgetTier, Pace

# Scoring weights
INTEREST_MATCH_WEIGHT = 10.0
BUDGET_FIT_BONUS = 2.0
BUDGET_OVER_PENALTY = -4.0

# Upper bound on a place's cost_max for it to fit a tier (None = unbounded)
BUDGET_TIER_CEILINGS: dict[BudgetTier, int | None] = {
    BudgetTier.BUDGET: 50,
    BudgetTier.MID: 150,
    BudgetTier.SPLURGE: None,
}

# Maximum stops per hour of available time
STOPS_PER_HOUR: dict[Pace, float] = {
    Pace.RELAXED: 0.5,
    Pace.STANDARD: 1.0,
    Pace.ACTIVE: 1.5,
}

# Places closer than this to the current position need no travel time
SAME_SPOT_RADIUS_METERS = 20.0

# Plans using less than this share of the available time get a warning
SHORT_PLAN_FRACTION = 0.5

WARNING_NO_TIME = "Available time is too short to generate a plan."
WARNING_NO_INTERESTS = "Choose at least one interest to build a plan."
WARNING_NO_MATCHES = "No places match your interests."
WARNING_RECENT_FALLBACK = "Only recently shown places match your interests, so they are included again."
WARNING_NOTHING_FITS = "No place fits in the available time. Try allowing more time or broadening interests."
WARNING_SHORT_PLAN = "Plan is shorter than the requested time."
