"""tracklog: NMEA-0183 tracklog validation, deduplication and route building."""

from tracklog.config import PipelineConfig
from tracklog.maps import build_google_maps_url
from tracklog.nmea import (
    ChecksumResult,
    FixRecord,
    calculate_checksum,
    convert_to_decimal_degrees,
    is_not_relevant,
    parse_rmc,
    verify_checksum,
)
from tracklog.pipeline import (
    LineOutcome,
    LineResult,
    ProcessingSummary,
    RouteResult,
    build_route,
    classify_line,
    normalize_lines,
    parse_lines,
)
from tracklog.route import deduplicate_by_distance, deduplicate_by_timestamp

__all__ = [
    "ChecksumResult",
    "FixRecord",
    "LineOutcome",
    "LineResult",
    "PipelineConfig",
    "ProcessingSummary",
    "RouteResult",
    "build_google_maps_url",
    "build_route",
    "calculate_checksum",
    "classify_line",
    "convert_to_decimal_degrees",
    "deduplicate_by_distance",
    "deduplicate_by_timestamp",
    "is_not_relevant",
    "normalize_lines",
    "parse_lines",
    "parse_rmc",
    "verify_checksum",
]
