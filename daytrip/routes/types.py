"""Route execution value types.

RouteProgress is immutable. Engine operations return a new instance built
with replace(); callers own the progress value and re-render from it.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from daytrip.geo.types import GeoPoint
from daytrip.plans.types import CandidatePlace


class RouteType(StrEnum):
    ITINERARY = "itinerary"
    MY_DAY_PLAN = "my_day_plan"


class RouteStatus(StrEnum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    EXITED = "exited"


class RoutePlace(BaseModel):
    """A place on a route, from a generated plan or a pre-authored itinerary.

    Attributes:
        id: Place identifier
        name: Display name
        position: Place coordinate
        route_hint: Optional wayfinding hint shown on the leg toward this place
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    position: GeoPoint
    route_hint: str | None = None

    @classmethod
    def from_candidate(cls, place: CandidatePlace) -> "RoutePlace":
        return cls(id=place.id, name=place.name, position=place.position, route_hint=place.hint)


@dataclass(frozen=True)
class RouteLeg:
    """Navigation guidance toward the current step.

    Attributes:
        from_place: Previous place on the route (None on the first step)
        from_point: Effective origin (current location, else previous place, else None)
        to_place: Place of the current step
        distance_meters: Straight-line distance from the origin (0 without one)
        bearing_degrees: Initial bearing from the origin in [0, 360)
        estimated_walk_minutes: Walking time for distance_meters
        route_hint: Hint attached to to_place
        is_last_step: Whether to_place is the final place
    """

    from_place: RoutePlace | None
    from_point: GeoPoint | None
    to_place: RoutePlace
    distance_meters: float
    bearing_degrees: float
    estimated_walk_minutes: int
    route_hint: str | None
    is_last_step: bool


@dataclass(frozen=True)
class RouteProgress:
    """Immutable progress through an ordered list of places.

    Rules:
    - completed and skipped are disjoint
    - len(completed) + len(skipped) == current_step_index
    - current_step_index == len(places) once every step is resolved
    - Use replace() to create new progress instances

    Attributes:
        route_id: Route identifier
        route_type: Itinerary or generated day plan
        places: Places in visit order (fixed for the life of the progress)
        current_step_index: 0-based index of the next unresolved step
        completed: Indices of completed steps
        skipped: Indices of skipped steps
        status: Lifecycle status
        started_at: Caller-supplied start instant
        paused_at: Caller-supplied pause instant (None when not paused)
    """

    route_id: str
    route_type: RouteType
    places: tuple[RoutePlace, ...]
    current_step_index: int = 0
    completed: frozenset[int] = field(default_factory=frozenset)
    skipped: frozenset[int] = field(default_factory=frozenset)
    status: RouteStatus = RouteStatus.NOT_STARTED
    started_at: datetime | None = None
    paused_at: datetime | None = None

    @property
    def total_steps(self) -> int:
        return len(self.places)

    def replace(self, **changes: object) -> "RouteProgress":
        """Create a new progress instance with updated fields.

        Args:
            **changes: Fields to update

        Returns:
            New RouteProgress instance with updated fields
        """
        return replace(self, **changes)
