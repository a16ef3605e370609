"""Tests for live leg guidance toward the current step."""

import pytest

from daytrip.geo.engine import distance_meters
from daytrip.geo.types import GeoPoint
from daytrip.plans.types import CandidatePlace
from daytrip.routes.engine import complete_current_step, skip_current_step, start_route
from daytrip.routes.legs import get_current_leg
from daytrip.routes.types import RoutePlace, RouteProgress, RouteType
from tests.conftest import CITY_CENTER, TWO_KM_LAT


@pytest.fixture
def progress(route_places: list[RoutePlace]) -> RouteProgress:
    started = start_route("route-1", RouteType.ITINERARY, route_places)
    assert started is not None
    return started


def test_first_leg_without_location(progress: RouteProgress, route_places: list[RoutePlace]) -> None:
    """Test that the first leg has no origin when no location is supplied."""
    leg = get_current_leg(progress)

    assert leg is not None
    assert leg.from_place is None
    assert leg.from_point is None
    assert leg.to_place == route_places[0]
    assert leg.distance_meters == 0.0
    assert leg.bearing_degrees == 0.0
    assert leg.estimated_walk_minutes == 0
    assert leg.route_hint == "Start at the fountain"
    assert not leg.is_last_step


def test_first_leg_from_current_location(progress: RouteProgress) -> None:
    location = GeoPoint(lat=CITY_CENTER.lat - TWO_KM_LAT / 2, lng=CITY_CENTER.lng)

    leg = get_current_leg(progress, current_location=location)

    assert leg is not None
    assert leg.from_place is None
    assert leg.from_point == location
    assert leg.distance_meters == pytest.approx(1000.75, abs=1.0)
    assert leg.bearing_degrees == pytest.approx(0.0)
    assert leg.estimated_walk_minutes == 14


def test_leg_from_previous_place(progress: RouteProgress, route_places: list[RoutePlace]) -> None:
    progress = complete_current_step(progress)

    leg = get_current_leg(progress)

    assert leg is not None
    assert leg.from_place == route_places[0]
    assert leg.from_point == route_places[0].position
    assert leg.to_place == route_places[1]
    assert leg.distance_meters == pytest.approx(distance_meters(route_places[0].position, route_places[1].position))
    assert leg.bearing_degrees == pytest.approx(0.0)
    assert leg.route_hint is None


def test_current_location_takes_precedence(progress: RouteProgress, route_places: list[RoutePlace]) -> None:
    """Test that a live location replaces the previous place as the origin."""
    progress = skip_current_step(progress)
    progress = complete_current_step(progress)
    location = GeoPoint(lat=CITY_CENTER.lat + TWO_KM_LAT * 2, lng=CITY_CENTER.lng)

    leg = get_current_leg(progress, current_location=location)

    assert leg is not None
    assert leg.from_place == route_places[1]
    assert leg.from_point == location
    assert leg.to_place == route_places[2]
    assert leg.bearing_degrees == pytest.approx(180.0)
    assert leg.is_last_step
    assert leg.route_hint == "Enter by the blue gate"


def test_standing_at_destination(progress: RouteProgress, route_places: list[RoutePlace]) -> None:
    leg = get_current_leg(progress, current_location=route_places[0].position)

    assert leg is not None
    assert leg.distance_meters == 0.0
    assert leg.bearing_degrees == 0.0
    assert leg.estimated_walk_minutes == 0


def test_explicit_places_override(progress: RouteProgress, route_places: list[RoutePlace]) -> None:
    shorter = route_places[:1]

    leg = get_current_leg(progress, places=shorter)

    assert leg is not None
    assert leg.is_last_step


def test_index_beyond_places_returns_none(progress: RouteProgress, route_places: list[RoutePlace]) -> None:
    progress = complete_current_step(progress)

    assert get_current_leg(progress, places=route_places[:1]) is None


def test_route_place_from_candidate() -> None:
    candidate = CandidatePlace(
        id="tombs",
        name="Saadian Tombs",
        position=GeoPoint(lat=31.617, lng=-7.988),
        visit_min_minutes=30,
        visit_max_minutes=60,
        tags={"history"},
        hint="Through the narrow passage by the mosque",
    )

    place = RoutePlace.from_candidate(candidate)

    assert place.id == "tombs"
    assert place.name == "Saadian Tombs"
    assert place.position == candidate.position
    assert place.route_hint == "Through the narrow passage by the mosque"


def test_region_aware_leg_in_medina(progress: RouteProgress) -> None:
    """Test that a 1 km leg starting in the medina is estimated at 20 minutes instead of 14."""
    progress = complete_current_step(progress)

    assert get_current_leg(progress).estimated_walk_minutes == 14
    assert get_current_leg(progress, region_aware=True).estimated_walk_minutes == 20


def test_region_aware_leg_outside_dense_regions(progress: RouteProgress) -> None:
    location = GeoPoint(lat=31.600, lng=-7.950)

    plain = get_current_leg(progress, current_location=location)
    aware = get_current_leg(progress, current_location=location, region_aware=True)

    assert aware.estimated_walk_minutes == plain.estimated_walk_minutes
