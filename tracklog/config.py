"""Pipeline configuration.

Thresholds are plain module constants used as defaults and bundled into a
``PipelineConfig`` that is passed explicitly to extraction and deduplication,
so runs (and tests) can vary them without touching globals.
"""

from dataclasses import dataclass

# ~1e-5 deg is about 1.1 m at the equator
SPATIAL_EPSILON_DEGREES = 1e-5

# 1 knot = 1852 m / 3600 s
KNOTS_TO_METERS_PER_SECOND = 0.514444


@dataclass(frozen=True)
class PipelineConfig:
    """Tunable values for one run of the route pipeline.

    Attributes:
        epsilon_degrees: Spatial deduplication threshold in decimal degrees.
            A point within this distance of the last kept point in both
            latitude and longitude is dropped. Must be >= 0.

        knots_to_meters_per_second: Factor applied to RMC speed (knots).
            Must be > 0.

    Raises:
        ValueError: If either value is out of range.
    """

    epsilon_degrees: float = SPATIAL_EPSILON_DEGREES
    knots_to_meters_per_second: float = KNOTS_TO_METERS_PER_SECOND

    def __post_init__(self) -> None:
        # NaN fails both comparisons below
        if not self.epsilon_degrees >= 0:
            raise ValueError(f"epsilon_degrees must be >= 0, got {self.epsilon_degrees}")
        if not self.knots_to_meters_per_second > 0:
            raise ValueError(
                "knots_to_meters_per_second must be > 0, "
                f"got {self.knots_to_meters_per_second}"
            )
