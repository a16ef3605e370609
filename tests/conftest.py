"""Root conftest for all tests.

Shared fixtures: a fixed reference instant and factories for catalog places
and route places around a single city center.
"""

from datetime import UTC, datetime

import pytest

from daytrip.geo.types import GeoPoint
from daytrip.plans.types import CandidatePlace
from daytrip.routes.types import RoutePlace

# Roughly 2 km of latitude
TWO_KM_LAT = 0.018

CITY_CENTER = GeoPoint(lat=31.6258, lng=-7.9891)


@pytest.fixture
def reference_time() -> datetime:
    return datetime(2026, 3, 14, 9, 0, tzinfo=UTC)


@pytest.fixture
def make_place():
    """Factory for CandidatePlace with sensible defaults."""

    def _make_place(
        place_id: str,
        *,
        lat: float = CITY_CENTER.lat,
        lng: float = CITY_CENTER.lng,
        visit: tuple[int, int] = (60, 90),
        cost: tuple[int, int] = (0, 0),
        tags: tuple[str, ...] = ("history",),
        hint: str | None = None,
    ) -> CandidatePlace:
        return CandidatePlace(
            id=place_id,
            name=place_id.replace("-", " ").title(),
            position=GeoPoint(lat=lat, lng=lng),
            visit_min_minutes=visit[0],
            visit_max_minutes=visit[1],
            cost_min=cost[0],
            cost_max=cost[1],
            tags=frozenset(tags),
            hint=hint,
        )

    return _make_place


@pytest.fixture
def route_places() -> list[RoutePlace]:
    """Three places heading north, roughly 1 km apart."""
    return [
        RoutePlace(id="square", name="Main Square", position=CITY_CENTER, route_hint="Start at the fountain"),
        RoutePlace(
            id="mosque",
            name="Old Mosque",
            position=GeoPoint(lat=CITY_CENTER.lat + TWO_KM_LAT / 2, lng=CITY_CENTER.lng),
        ),
        RoutePlace(
            id="garden",
            name="North Garden",
            position=GeoPoint(lat=CITY_CENTER.lat + TWO_KM_LAT, lng=CITY_CENTER.lng),
            route_hint="Enter by the blue gate",
        ),
    ]
