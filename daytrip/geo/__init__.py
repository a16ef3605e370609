"""Geo module - pure geodesic math shared by the plan and route engines.

This module provides:
- Haversine distance and initial bearing between coordinates
- Compass arrow rotation relative to the device heading
- Walking time estimates from straight-line distance, slower in dense regions
- Display formatting for distances and walking times
"""

from daytrip.geo.engine import (
    compass_direction,
    determine_region,
    distance_meters,
    estimated_walk_minutes,
    initial_bearing_degrees,
    is_valid_coordinate,
    is_within_bounds,
    relative_angle,
    walk_speed_for_region,
)
from daytrip.geo.formatting import format_distance, format_walk_time
from daytrip.geo.regions import DENSE_REGIONS, Region
from daytrip.geo.types import BoundingBox, GeoPoint

__all__ = [
    "DENSE_REGIONS",
    "BoundingBox",
    "GeoPoint",
    "Region",
    "compass_direction",
    "determine_region",
    "distance_meters",
    "estimated_walk_minutes",
    "format_distance",
    "format_walk_time",
    "initial_bearing_degrees",
    "is_valid_coordinate",
    "is_within_bounds",
    "relative_angle",
    "walk_speed_for_region",
]
