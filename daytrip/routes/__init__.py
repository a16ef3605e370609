"""Routes module - route execution over an ordered list of places.

This module provides:
- Immutable RouteProgress with a start/complete/skip/exit state machine
- Pause and resume with caller-supplied instants
- Progress queries (overall, completion, remaining steps)
- Live leg guidance (distance, bearing, walk time) toward the next stop
"""

from daytrip.routes.engine import (
    complete_current_step,
    exit_route,
    get_completion_percentage,
    get_overall_progress,
    get_remaining_steps,
    get_time_elapsed,
    is_route_complete,
    is_route_paused,
    pause_route,
    resume_route,
    skip_current_step,
    start_route,
)
from daytrip.routes.legs import get_current_leg
from daytrip.routes.types import RouteLeg, RoutePlace, RouteProgress, RouteStatus, RouteType

__all__ = [
    "RouteLeg",
    "RoutePlace",
    "RouteProgress",
    "RouteStatus",
    "RouteType",
    "complete_current_step",
    "exit_route",
    "get_completion_percentage",
    "get_current_leg",
    "get_overall_progress",
    "get_remaining_steps",
    "get_time_elapsed",
    "is_route_complete",
    "is_route_paused",
    "pause_route",
    "resume_route",
    "skip_current_step",
    "start_route",
]
