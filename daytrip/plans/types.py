"""Plan engine value types.

Catalog-facing values are frozen pydantic models so malformed catalog data
is rejected at construction, before it reaches the engine:
- Visit duration and cost ranges satisfy min <= max
- Tags come from the closed Interest vocabulary
- Candidate ids are unique within one PlanInput
"""

from datetime import datetime
from enum import StrEnum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator, model_validator

from daytrip.geo.types import GeoPoint


class Interest(StrEnum):
    HISTORY = "history"
    FOOD = "food"
    SHOPPING = "shopping"
    NATURE = "nature"
    CULTURE = "culture"
    ARCHITECTURE = "architecture"
    RELAXATION = "relaxation"
    NIGHTLIFE = "nightlife"
    GENERAL = "general"


class Pace(StrEnum):
    RELAXED = "relaxed"
    STANDARD = "standard"
    ACTIVE = "active"


class BudgetTier(StrEnum):
    BUDGET = "budget"
    MID = "mid"
    SPLURGE = "splurge"


def _normalize_interests(value: object) -> object:
    if isinstance(value, str):
        return [value.strip().lower()]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [item.strip().lower() if isinstance(item, str) else item for item in value]
    return value


class CandidatePlace(BaseModel):
    """A place from the content catalog that may become a plan stop.

    Attributes:
        id: Unique place identifier
        name: Display name
        position: Place coordinate
        visit_min_minutes: Shortest sensible visit
        visit_max_minutes: Longest sensible visit
        cost_min: Lower expected cost in local currency units
        cost_max: Upper expected cost in local currency units
        tags: Interest categories the place satisfies
        hint: Optional short wayfinding hint
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    position: GeoPoint
    visit_min_minutes: int = Field(gt=0)
    visit_max_minutes: int = Field(gt=0)
    cost_min: int = Field(default=0, ge=0)
    cost_max: int = Field(default=0, ge=0)
    tags: frozenset[Interest] = frozenset()
    hint: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: object) -> object:
        return _normalize_interests(value)

    @model_validator(mode="after")
    def validate_ranges(self) -> "CandidatePlace":
        if self.visit_min_minutes > self.visit_max_minutes:
            raise ValueError(
                f"visit_min_minutes ({self.visit_min_minutes}) must not exceed visit_max_minutes ({self.visit_max_minutes})"
            )
        if self.cost_min > self.cost_max:
            raise ValueError(f"cost_min ({self.cost_min}) must not exceed cost_max ({self.cost_max})")
        return self


class PlanInput(BaseModel):
    """Traveler constraints plus the candidate catalog for one plan request.

    Attributes:
        available_minutes: Time budget. Zero or negative yields an empty plan.
        start_point: Optional starting coordinate. None ignores travel to the first stop.
        interests: Requested interest categories (empty yields an empty plan)
        pace: Stop density setting
        budget_tier: Cost sensitivity setting (prioritizes, never excludes)
        reference_time: Plan start instant; arrival times are derived from it
        candidates: Catalog places in catalog order
        recent_place_ids: Recently shown places to leave out when possible
        region_aware_walking: Slow walking estimates down inside the medina and similar regions
    """

    model_config = ConfigDict(frozen=True)

    available_minutes: int
    start_point: GeoPoint | None = None
    interests: frozenset[Interest] = frozenset()
    pace: Pace = Pace.STANDARD
    budget_tier: BudgetTier = BudgetTier.MID
    reference_time: AwareDatetime
    candidates: tuple[CandidatePlace, ...] = ()
    recent_place_ids: frozenset[str] = frozenset()
    region_aware_walking: bool = False

    @field_validator("interests", mode="before")
    @classmethod
    def normalize_interests(cls, value: object) -> object:
        return _normalize_interests(value)

    @model_validator(mode="after")
    def validate_unique_candidates(self) -> "PlanInput":
        seen: set[str] = set()
        duplicates: set[str] = set()
        for candidate in self.candidates:
            if candidate.id in seen:
                duplicates.add(candidate.id)
            seen.add(candidate.id)
        if duplicates:
            raise ValueError(f"Duplicate candidate ids: {duplicates}")
        return self


class CostRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int = 0
    max: int = 0


class PlanStop(BaseModel):
    """One scheduled visit.

    Attributes:
        place_id: CandidatePlace.id
        arrival_time: Derived arrival instant (reference_time + elapsed minutes)
        departure_time: arrival_time + visit_minutes
        visit_minutes: Assigned visit length within the place's range
        travel_minutes_from_previous: Walk from previous stop (or start point)
    """

    model_config = ConfigDict(frozen=True)

    place_id: str
    arrival_time: datetime
    departure_time: datetime
    visit_minutes: int
    travel_minutes_from_previous: int


class PlanOutput(BaseModel):
    """Generated day plan. Stop order is the visit order."""

    model_config = ConfigDict(frozen=True)

    stops: tuple[PlanStop, ...] = ()
    total_minutes: int = 0
    estimated_cost_range: CostRange = CostRange()
    warnings: tuple[str, ...] = ()

    @property
    def place_ids(self) -> list[str]:
        return [stop.place_id for stop in self.stops]
