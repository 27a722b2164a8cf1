"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). These utilities handle empty fields gracefully by returning None,
allowing callers to distinguish "no data" from "zero value".
"""

import math

# Hemisphere indicators that flip the sign of a coordinate.
NEGATIVE_HEMISPHERES = ("S", "W")


def parse_float_field(value: str) -> float | None:
    """Parse a string field to a finite float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty, unparseable,
        or not finite ("nan", "inf")

    Example:
        >>> parse_float_field("022.4")
        22.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _is_unsigned_decimal(value: str) -> bool:
    """Return True if value is ASCII digits with at most one decimal point."""
    integer, _, fraction = value.partition(".")
    if not (integer.isascii() and integer.isdigit()):
        return False
    return not fraction or (fraction.isascii() and fraction.isdigit())


def _parse_coordinate_parts(value: str) -> tuple[int, float] | None:
    """Parse NMEA coordinate into degrees and minutes components.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees, variable width
    - MM.MMMM = decimal minutes

    The decimal point position determines the split between degrees and minutes:
    the 2 digits before the decimal point are always minutes.

    Args:
        value: Coordinate string in DDDMM.MMMM format

    Returns:
        Tuple of (degrees, minutes) or None if the string has no decimal
        point, fewer than 2 characters precede it, or either segment is
        not a plain unsigned number

    Example:
        >>> _parse_coordinate_parts("4807.038")  # 48° 07.038'
        (48, 7.038)
        >>> _parse_coordinate_parts("01131.000")  # 11° 31.000'
        (11, 31.0)
    """
    dot_position = value.find(".")
    if dot_position < 2:
        return None

    # Minutes are always 2 digits before the decimal point
    degree_text = value[: dot_position - 2]
    minute_text = value[dot_position - 2 :]

    if not (degree_text.isascii() and degree_text.isdigit()):
        return None
    if not _is_unsigned_decimal(minute_text):
        return None

    return int(degree_text), float(minute_text)


def convert_to_decimal_degrees(
    value: str,
    hemisphere: str,
) -> float | None:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    This function converts to decimal degrees with sign convention:
    - North/East = positive
    - South/West = negative

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        hemisphere: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees (positive for N/E, negative for S/W),
        or None if the value is empty or malformed

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    if not value:
        return None

    parts = _parse_coordinate_parts(value)
    if parts is None:
        return None

    degrees, minutes = parts
    decimal_degrees = degrees + minutes / 60.0

    if hemisphere in NEGATIVE_HEMISPHERES:
        return -decimal_degrees

    return decimal_degrees
