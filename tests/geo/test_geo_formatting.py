"""Tests for distance and walk-time display helpers."""

import pytest

from daytrip.geo.formatting import format_distance, format_walk_time


@pytest.mark.parametrize(
    ("meters", "expected"),
    [
        (0.0, "0 m"),
        (-5.0, "0 m"),
        (42.0, "42 m"),
        (349.0, "350 m"),
        (999.0, "1.0 km"),
        (1000.0, "1.0 km"),
        (1500.0, "1.5 km"),
        (12345.0, "12.3 km"),
    ],
)
def test_format_distance(meters: float, expected: str) -> None:
    assert format_distance(meters) == expected


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (0, "0 min"),
        (45, "45 min"),
        (60, "1h"),
        (75, "1h 15m"),
        (120, "2h"),
    ],
)
def test_format_walk_time(minutes: int, expected: str) -> None:
    assert format_walk_time(minutes) == expected
