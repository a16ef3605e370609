"""Live navigation guidance toward the current route step."""

from collections.abc import Sequence

from daytrip.geo.engine import determine_region, distance_meters, estimated_walk_minutes, initial_bearing_degrees
from daytrip.geo.types import GeoPoint
from daytrip.routes.types import RouteLeg, RoutePlace, RouteProgress, RouteStatus


def get_current_leg(
    progress: RouteProgress,
    places: Sequence[RoutePlace] | None = None,
    current_location: GeoPoint | None = None,
    region_aware: bool = False,
) -> RouteLeg | None:
    """Compute the leg from the traveler (or previous stop) to the current step.

    The caller polls this on every location or heading update; nothing is
    buffered between calls.

    Args:
        progress: Route progress
        places: Places to navigate; defaults to progress.places
        current_location: Traveler's live position, if known
        region_aware: Pace the walk by the region the leg starts in

    Returns:
        RouteLeg, or None if the route is not in progress or has no current step
    """
    places = progress.places if places is None else places

    if progress.status != RouteStatus.IN_PROGRESS or progress.current_step_index >= len(places):
        return None

    index = progress.current_step_index
    to_place = places[index]
    from_place = places[index - 1] if index > 0 else None

    if current_location is not None:
        from_point: GeoPoint | None = current_location
    elif from_place is not None:
        from_point = from_place.position
    else:
        from_point = None

    if from_point is None:
        meters = 0.0
        bearing = 0.0
        region = None
    else:
        meters = distance_meters(from_point, to_place.position)
        bearing = initial_bearing_degrees(from_point, to_place.position)
        region = determine_region(from_point) if region_aware else None

    return RouteLeg(
        from_place=from_place,
        from_point=from_point,
        to_place=to_place,
        distance_meters=meters,
        bearing_degrees=bearing,
        estimated_walk_minutes=estimated_walk_minutes(meters, region=region),
        route_hint=to_place.route_hint,
        is_last_step=index == len(places) - 1,
    )
