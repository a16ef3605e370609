"""Geodesic math for plan and route engines.

All functions are pure and safe to call from any thread. Distances are
straight-line (great-circle) only; there is no path routing.
"""

import math

from daytrip.config.settings import settings
from daytrip.geo.regions import (
    DENSE_REGIONS,
    GUELIZ_BOUNDS,
    KASBAH_MAX_LAT,
    KASBAH_MAX_LNG,
    MEDINA_BOUNDS,
    Region,
)
from daytrip.geo.types import BoundingBox, GeoPoint

EARTH_RADIUS_METERS = 6_371_000.0

# Points closer than this are the same place (poles, the antimeridian)
COINCIDENT_TOLERANCE_METERS = 1e-6

COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points (haversine formula).

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in meters. Symmetric, non-negative, zero for identical points.
        Coordinates naming the same physical location (any longitude at a
        pole, lng=180 vs lng=-180) are identical.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlng = math.radians(b.lng - a.lng)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    # Rounding can push h marginally outside [0, 1] for antipodal points
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    meters = EARTH_RADIUS_METERS * c
    if meters < COINCIDENT_TOLERANCE_METERS:
        return 0.0
    return meters


def initial_bearing_degrees(from_point: GeoPoint, to_point: GeoPoint) -> float:
    """Initial compass bearing from one point toward another.

    Args:
        from_point: Origin
        to_point: Destination

    Returns:
        Bearing in degrees in [0, 360) (0 = North, 90 = East).
        Identical points have no direction and return 0.0.
    """
    if from_point == to_point or distance_meters(from_point, to_point) == 0.0:
        return 0.0

    lat1 = math.radians(from_point.lat)
    lat2 = math.radians(to_point.lat)
    dlng = math.radians(to_point.lng - from_point.lng)

    x = math.sin(dlng) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlng)

    bearing = math.degrees(math.atan2(x, y))
    return (bearing + 360) % 360


def relative_angle(target_bearing: float, device_heading: float) -> float:
    """Rotation that points a screen arrow from the device heading to the target.

    Args:
        target_bearing: Bearing to target in degrees
        device_heading: Current device heading in degrees

    Returns:
        Signed angle in (-180, 180]. Positive rotates clockwise.
    """
    angle = (target_bearing - device_heading) % 360
    if angle > 180:
        angle -= 360
    return angle


def walk_speed_for_region(region: Region | None = None) -> float:
    """Walking speed in meters per minute, slowed down inside dense regions."""
    speed = settings.walk_speed_m_per_min
    if region in DENSE_REGIONS:
        speed *= settings.dense_region_speed_multiplier
    return speed


def estimated_walk_minutes(
    distance_meters: float,
    speed_m_per_min: float | None = None,
    region: Region | None = None,
) -> int:
    """Estimate walking time for a straight-line distance.

    Args:
        distance_meters: Distance in meters
        speed_m_per_min: Explicit walking speed; overrides region
        region: Region the walk happens in; None walks at the base speed

    Returns:
        Whole minutes, rounded up. At least 1 for any positive distance, 0 otherwise.

    Raises:
        ValueError: If the walking speed is not positive
    """
    speed = walk_speed_for_region(region) if speed_m_per_min is None else speed_m_per_min
    if speed <= 0:
        raise ValueError(f"Walking speed must be positive, got {speed}")

    if distance_meters <= 0:
        return 0

    return max(1, math.ceil(distance_meters / speed))


def compass_direction(bearing: float) -> str:
    """Convert a bearing to a 16-point compass label (N, NNE, NE, ...)."""
    index = int(((bearing % 360) + 11.25) / 22.5) % 16
    return COMPASS_POINTS[index]


def is_valid_coordinate(lat: float, lng: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lng <= 180


def is_within_bounds(point: GeoPoint, bounds: BoundingBox) -> bool:
    """Check a GPS fix against an expected area before displaying guidance."""
    return bounds.min_lat <= point.lat <= bounds.max_lat and bounds.min_lng <= point.lng <= bounds.max_lng


def determine_region(point: GeoPoint) -> Region:
    """Classify a point into a city region by approximate bounding boxes.

    The medina is checked first, then Gueliz, then the kasbah corner.
    """
    if is_within_bounds(point, MEDINA_BOUNDS):
        return Region.MEDINA
    if is_within_bounds(point, GUELIZ_BOUNDS):
        return Region.GUELIZ
    if point.lat < KASBAH_MAX_LAT and point.lng < KASBAH_MAX_LNG:
        return Region.KASBAH
    return Region.OTHER
