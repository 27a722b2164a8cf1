"""Temporal and spatial deduplication of fix records.

Loggers that are restarted, or several overlapping log files from the same
trip, repeat fixes for the same second. A parked or slow-moving receiver
produces a cloud of fixes that wander a few centimeters around one spot.
Two passes clean this up:

1. ``deduplicate_by_timestamp`` keeps one record per timestamp (the last one
   seen) and restores chronological order.
2. ``deduplicate_by_distance`` walks that ordered sequence and drops points
   that have not moved more than epsilon degrees from the last kept point.

Both are pure functions over complete sequences; the spatial pass depends on
the full ordering produced by the temporal pass.
"""

from collections.abc import Iterable, Sequence

from tracklog.nmea.types import FixRecord

__all__ = ["deduplicate_by_distance", "deduplicate_by_timestamp"]


def deduplicate_by_timestamp(records: Iterable[FixRecord]) -> list[FixRecord]:
    """Collapse records sharing a timestamp to the last one seen.

    Args:
        records: Fix records in arrival order (file order, then line order).

    Returns:
        One record per distinct timestamp, sorted ascending by timestamp.
        Timestamps are fixed-width ``HHMMSS.sss`` strings, so string order
        is chronological.

    Example:
        >>> a = FixRecord("123456.00", 1.0, 1.0, 0.0)
        >>> b = FixRecord("123456.00", 2.0, 2.0, 0.0)
        >>> deduplicate_by_timestamp([a, b]) == [b]
        True
    """
    latest: dict[str, FixRecord] = {}
    for record in records:
        latest[record.timestamp] = record
    return [latest[timestamp] for timestamp in sorted(latest)]


def _has_moved(record: FixRecord, anchor: FixRecord, epsilon: float) -> bool:
    return (
        abs(record.latitude - anchor.latitude) > epsilon
        or abs(record.longitude - anchor.longitude) > epsilon
    )


def deduplicate_by_distance(records: Sequence[FixRecord], epsilon: float) -> list[FixRecord]:
    """Drop points within ``epsilon`` degrees of the last kept point.

    The first record is always kept. Each later record is kept only if its
    latitude or its longitude differs from the most recently kept record by
    strictly more than ``epsilon``. Comparing against the last kept point
    (not the previous input point) suppresses slow drift around a single
    location as well as adjacent duplicates.

    Args:
        records: Chronologically ordered, timestamp-deduplicated records.
        epsilon: Threshold in decimal degrees.

    Returns:
        The route, in input order. Applying the function again with the same
        epsilon returns the same route.
    """
    route: list[FixRecord] = []
    for record in records:
        if not route or _has_moved(record, route[-1], epsilon):
            route.append(record)
    return route
