"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) carries the minimum data set a
receiver must provide: time, fix status, position, speed and course.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (degrees)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active fix, V=void)
           +-- UTC time (HHMMSS.sss)

Only fields 0-7 are used; date and course are ignored.
"""

import logging

from tracklog.config import KNOTS_TO_METERS_PER_SECOND
from tracklog.nmea.fields import convert_to_decimal_degrees, parse_float_field
from tracklog.nmea.sentences import RMC_SENTENCE_IDS
from tracklog.nmea.types import FixRecord

logger = logging.getLogger(__name__)

# Fields 0-7: sentence ID through speed over ground
_MINIMUM_FIELD_COUNT = 8

_TIME = 1
_STATUS = 2
_LATITUDE = 3
_LATITUDE_HEMISPHERE = 4
_LONGITUDE = 5
_LONGITUDE_HEMISPHERE = 6
_SPEED_KNOTS = 7

_ACTIVE_FIX = "A"


def _extract_fields(sentence: str) -> list[str] | None:
    """Split an RMC sentence into comma-separated fields.

    The checksum trailer ('*' and everything after it) is dropped first.
    Empty fields are preserved so field indices stay aligned.

    Args:
        sentence: Checksum-verified NMEA sentence

    Returns:
        List of field strings, or None if fewer than 8 fields

    Example:
        Input: "$GPRMC,123519,A,4807.038,N,...*6A"
        Output: ["$GPRMC", "123519", "A", "4807.038", "N", ...]
    """
    star = sentence.rfind("*")
    body = sentence[:star] if star != -1 else sentence
    fields = body.split(",")

    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None

    return fields


def _is_active_fix(fields: list[str]) -> bool:
    return fields[_STATUS][:1] == _ACTIVE_FIX


def _has_hemispheres(fields: list[str]) -> bool:
    return len(fields[_LATITUDE_HEMISPHERE]) == 1 and len(fields[_LONGITUDE_HEMISPHERE]) == 1


def _parse_speed(value: str, knots_to_meters_per_second: float) -> float:
    """Convert the speed field from knots to m/s.

    Speed is the one field that degrades instead of failing the sentence:
    an empty, unparseable or negative value is taken as 0 knots.
    """
    speed_knots = parse_float_field(value)
    if speed_knots is None or speed_knots < 0:
        speed_knots = 0.0
    return speed_knots * knots_to_meters_per_second


def parse_rmc(
    sentence: str,
    knots_to_meters_per_second: float = KNOTS_TO_METERS_PER_SECOND,
) -> FixRecord | None:
    """Parse an RMC sentence into a fix record.

    The sentence is expected to have passed checksum verification and not
    to be one of the recognized-but-skipped types. The checks performed are:
    1. At least 8 fields after removing the checksum trailer
    2. Sentence ID is $GPRMC or $GNRMC
    3. Status field starts with 'A' (active fix)
    4. UTC time field is present
    5. Both hemisphere fields are exactly one character
    6. Latitude and longitude convert to decimal degrees

    Args:
        sentence: Checksum-verified NMEA sentence
        knots_to_meters_per_second: Speed conversion factor

    Returns:
        FixRecord on success, or None if any check fails

    Example:
        >>> fix = parse_rmc("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A")
        >>> fix.timestamp, fix.latitude, fix.longitude
        ('123519', 48.1173, 11.516666...)
    """
    fields = _extract_fields(sentence)
    if fields is None:
        logger.debug("RMC rejected, too few fields: %r", sentence)
        return None

    if fields[0] not in RMC_SENTENCE_IDS:
        logger.debug("RMC rejected, sentence ID %r: %r", fields[0], sentence)
        return None

    if not _is_active_fix(fields) or not fields[_TIME]:
        logger.debug("RMC rejected, no active fix or time: %r", sentence)
        return None

    if not _has_hemispheres(fields):
        logger.debug("RMC rejected, bad hemisphere: %r", sentence)
        return None

    latitude = convert_to_decimal_degrees(fields[_LATITUDE], fields[_LATITUDE_HEMISPHERE])
    longitude = convert_to_decimal_degrees(fields[_LONGITUDE], fields[_LONGITUDE_HEMISPHERE])
    if latitude is None or longitude is None:
        logger.debug("RMC rejected, bad coordinate: %r", sentence)
        return None

    return FixRecord(
        timestamp=fields[_TIME],
        latitude=latitude,
        longitude=longitude,
        speed=_parse_speed(fields[_SPEED_KNOTS], knots_to_meters_per_second),
    )
