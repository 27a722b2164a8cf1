"""Shareable map link for a route."""

from collections.abc import Sequence

from tracklog.nmea.types import FixRecord

__all__ = ["build_google_maps_url"]

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir"

_COORDINATE_PRECISION = 6


def build_google_maps_url(route: Sequence[FixRecord]) -> str:
    """Build a Google Maps directions URL with one waypoint per route point.

    Coordinates are written with six decimals (about 0.1 m).

    Example:
        >>> build_google_maps_url([FixRecord("123519", 48.1173, 11.516667, 0.0)])
        'https://www.google.com/maps/dir/48.117300,11.516667'

    Returns:
        The URL, or an empty string for an empty route.
    """
    if not route:
        return ""
    waypoints = "".join(
        f"/{point.latitude:.{_COORDINATE_PRECISION}f},{point.longitude:.{_COORDINATE_PRECISION}f}"
        for point in route
    )
    return GOOGLE_MAPS_DIRECTIONS_URL + waypoints
