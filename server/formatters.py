"""JSON formatting utilities for route results."""

import json

from tracklog.maps import build_google_maps_url
from tracklog.nmea.types import FixRecord
from tracklog.pipeline import ProcessingSummary, RouteResult

__all__ = ["format_route_message"]


def _format_summary(summary: ProcessingSummary) -> dict[str, int]:
    return {
        "lines_total": summary.lines_total,
        "checksum_failures": summary.checksum_failures,
        "not_relevant": summary.not_relevant,
        "parse_failures": summary.parse_failures,
        "valid_records": summary.valid_records,
        "after_timestamp_dedup": summary.after_timestamp_dedup,
        "after_spatial_dedup": summary.after_spatial_dedup,
    }


def _format_point(point: FixRecord) -> dict[str, str | float]:
    return {
        "timestamp": point.timestamp,
        "lat": point.latitude,
        "lon": point.longitude,
        "speed_ms": point.speed,
    }


def format_route_message(result: RouteResult) -> str:
    """Serialize a route result into a JSON string for the HTTP response."""
    return json.dumps({
        "summary": _format_summary(result.summary),
        "route": [_format_point(point) for point in result.route],
        "url": build_google_maps_url(result.route),
    })
