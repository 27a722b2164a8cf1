"""NMEA 0183 checksum verification and RMC sentence extraction."""

from tracklog.nmea.checksum import ChecksumResult, calculate_checksum, verify_checksum
from tracklog.nmea.fields import convert_to_decimal_degrees
from tracklog.nmea.rmc import parse_rmc
from tracklog.nmea.sentences import is_not_relevant
from tracklog.nmea.types import FixRecord

__all__ = [
    "ChecksumResult",
    "FixRecord",
    "calculate_checksum",
    "convert_to_decimal_degrees",
    "is_not_relevant",
    "parse_rmc",
    "verify_checksum",
]
