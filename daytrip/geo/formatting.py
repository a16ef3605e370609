"""Display helpers for distances and walking times.

The engines return meters and minutes; these helpers are for callers that
render them.
"""


def format_distance(meters: float) -> str:
    """Format a distance for display.

    Rules:
    - Under 100 m: exact meters ("42 m")
    - 100-999 m: rounded to 10 m ("350 m")
    - 1 km and above: one decimal ("1.5 km")

    Negative input is treated as 0.
    """
    safe_meters = max(meters, 0.0)

    if safe_meters < 100:
        return f"{round(safe_meters)} m"
    if safe_meters < 1000:
        rounded = round(safe_meters / 10) * 10
        if rounded >= 1000:
            return "1.0 km"
        return f"{rounded} m"
    return f"{safe_meters / 1000:.1f} km"


def format_walk_time(minutes: int) -> str:
    """Format walking minutes as "N min", "Hh" or "Hh Mm"."""
    if minutes < 60:
        return f"{max(minutes, 0)} min"

    hours, mins = divmod(minutes, 60)
    if mins > 0:
        return f"{hours}h {mins}m"
    return f"{hours}h"
