"""Plans module - deterministic day-plan generation.

This module provides:
- Catalog and request value types (CandidatePlace, PlanInput)
- Interest, budget and pace scoring with tunable weights
- Greedy, time-bounded stop selection
- Plan output validation

See constants.py for the scoring weights and pace ratios.
"""

from daytrip.plans.engine import filter_candidates, generate
from daytrip.plans.errors import PlanningInvariantError
from daytrip.plans.scoring import rank_candidates, score_candidate
from daytrip.plans.selection import max_stops_for_pace
from daytrip.plans.types import (
    BudgetTier,
    CandidatePlace,
    CostRange,
    Interest,
    Pace,
    PlanInput,
    PlanOutput,
    PlanStop,
)
from daytrip.plans.validators import validate_plan_output

__all__ = [
    "BudgetTier",
    "CandidatePlace",
    "CostRange",
    "Interest",
    "Pace",
    "PlanInput",
    "PlanOutput",
    "PlanStop",
    "PlanningInvariantError",
    "filter_candidates",
    "generate",
    "max_stops_for_pace",
    "rank_candidates",
    "score_candidate",
    "validate_plan_output",
]
