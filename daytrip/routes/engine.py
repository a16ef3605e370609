"""Route execution state machine.

States: NOT_STARTED -> IN_PROGRESS -> {COMPLETED, EXITED}

Every operation is total over well-formed input and returns a new
RouteProgress. Transitions that do not apply to the current status
(completing or skipping a finished, exited or unstarted route, exiting a
finished route) are no-ops: the same progress value is returned unchanged.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from loguru import logger

from daytrip.routes.types import RoutePlace, RouteProgress, RouteStatus, RouteType


def start_route(
    route_id: str,
    route_type: RouteType,
    places: Sequence[RoutePlace],
    started_at: datetime | None = None,
) -> RouteProgress | None:
    """Start a route over the given places.

    Args:
        route_id: Route identifier
        route_type: Itinerary or generated day plan
        places: Places in visit order
        started_at: Optional caller-supplied start instant

    Returns:
        Progress at step 0 with status IN_PROGRESS, or None if places is empty
    """
    if not places:
        logger.debug("route_start_rejected", route_id=route_id, reason="no_places")
        return None

    progress = RouteProgress(
        route_id=route_id,
        route_type=route_type,
        places=tuple(places),
        status=RouteStatus.IN_PROGRESS,
        started_at=started_at,
    )
    logger.info("route_started", route_id=route_id, route_type=route_type.value, steps=progress.total_steps)
    return progress


def _resolve_current_step(progress: RouteProgress, *, skipped: bool) -> RouteProgress:
    action = "skip" if skipped else "complete"
    if progress.status != RouteStatus.IN_PROGRESS or progress.current_step_index >= progress.total_steps:
        logger.debug(
            "route_transition_ignored",
            route_id=progress.route_id,
            action=action,
            status=progress.status.value,
        )
        return progress

    index = progress.current_step_index
    next_index = index + 1
    status = RouteStatus.COMPLETED if next_index == progress.total_steps else RouteStatus.IN_PROGRESS
    # Finished routes cannot stay paused
    paused_at = None if status == RouteStatus.COMPLETED else progress.paused_at

    if skipped:
        updated = progress.replace(
            current_step_index=next_index, skipped=progress.skipped | {index}, status=status, paused_at=paused_at
        )
    else:
        updated = progress.replace(
            current_step_index=next_index, completed=progress.completed | {index}, status=status, paused_at=paused_at
        )

    logger.debug("route_step_resolved", route_id=progress.route_id, action=action, step=index, status=status.value)
    return updated


def complete_current_step(progress: RouteProgress) -> RouteProgress:
    """Mark the current step completed and advance.

    The route becomes COMPLETED when the last step is resolved. No-op unless IN_PROGRESS.
    """
    return _resolve_current_step(progress, skipped=False)


def skip_current_step(progress: RouteProgress) -> RouteProgress:
    """Mark the current step skipped and advance. No-op unless IN_PROGRESS."""
    return _resolve_current_step(progress, skipped=True)


def exit_route(progress: RouteProgress) -> RouteProgress:
    """Abandon the route, keeping step indices as they are.

    EXITED is terminal and clears any pause. Exiting a COMPLETED or EXITED
    route is a no-op.
    """
    if progress.status in {RouteStatus.COMPLETED, RouteStatus.EXITED}:
        logger.debug("route_transition_ignored", route_id=progress.route_id, action="exit", status=progress.status.value)
        return progress

    logger.info("route_exited", route_id=progress.route_id, step=progress.current_step_index)
    return progress.replace(status=RouteStatus.EXITED, paused_at=None)


def pause_route(progress: RouteProgress, at: datetime) -> RouteProgress:
    """Pause an in-progress route at a caller-supplied instant."""
    if progress.status != RouteStatus.IN_PROGRESS:
        return progress
    return progress.replace(paused_at=at)


def resume_route(progress: RouteProgress) -> RouteProgress:
    """Resume a paused route. No-op unless IN_PROGRESS and paused."""
    if progress.status != RouteStatus.IN_PROGRESS or progress.paused_at is None:
        return progress
    return progress.replace(paused_at=None)


def is_route_paused(progress: RouteProgress) -> bool:
    return progress.status == RouteStatus.IN_PROGRESS and progress.paused_at is not None


def is_route_complete(progress: RouteProgress) -> bool:
    return progress.status == RouteStatus.COMPLETED


def get_overall_progress(progress: RouteProgress) -> float:
    """Share of steps resolved (completed or skipped), in [0, 1]."""
    if progress.total_steps == 0:
        return 0.0
    return (len(progress.completed) + len(progress.skipped)) / progress.total_steps


def get_completion_percentage(progress: RouteProgress) -> float:
    """Share of steps completed, not counting skips, in [0, 1]."""
    if progress.total_steps == 0:
        return 0.0
    return len(progress.completed) / progress.total_steps


def get_remaining_steps(progress: RouteProgress) -> int:
    return max(0, progress.total_steps - progress.current_step_index)


def get_time_elapsed(progress: RouteProgress, now: datetime) -> timedelta | None:
    """Time since the route started, or None if no start instant was recorded."""
    if progress.started_at is None:
        return None
    return now - progress.started_at
