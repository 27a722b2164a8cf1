"""NMEA data types for parsed sentences.

Design Decisions:
    1. A single frozen record: a FixRecord is only ever constructed from a
       sentence that passed checksum verification and full field extraction,
       so there is no separate validity flag. A failed sentence produces no
       record at all.

    2. Plain floats in SI-friendly units: coordinates are signed decimal
       degrees and speed is meters per second, converted once at extraction
       so the deduplication and presentation stages never see NMEA units.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FixRecord:
    """One validated, decoded position fix from a ``$GPRMC``/``$GNRMC`` sentence.

    Attributes:
        timestamp: UTC time of day exactly as it appeared in the sentence
            (fixed-width ``HHMMSS.sss``, e.g. "123519.000"). Used as an
            exact-match deduplication key; because the width is fixed,
            lexicographic order equals chronological order.

        latitude: Latitude in decimal degrees, positive=North.
            Converted from NMEA's DDMM.MMMM format.

        longitude: Longitude in decimal degrees, positive=East.
            Converted from NMEA's DDDMM.MMMM format.

        speed: Ground speed over ground in meters per second. Never
            negative; 0.0 when the sentence carried no usable speed.

    Example:
        >>> fix = parse_rmc("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A")
        >>> fix.latitude
        48.1173
        >>> fix.speed
        11.523...
    """

    timestamp: str
    latitude: float
    longitude: float
    speed: float
