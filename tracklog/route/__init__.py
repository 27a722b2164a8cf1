"""Route construction from extracted fix records."""

from tracklog.route.dedup import deduplicate_by_distance, deduplicate_by_timestamp

__all__ = ["deduplicate_by_distance", "deduplicate_by_timestamp"]
