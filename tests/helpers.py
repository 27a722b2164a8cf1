"""Sentence builders shared by the test suite."""

from tracklog.nmea.types import FixRecord

RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
GGA_VALID = "$GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*61"


def make_sentence(body: str) -> str:
    """Wrap ``body`` in '$' and a correct '*HH' checksum trailer."""
    checksum = 0
    for character in body:
        checksum ^= ord(character)
    return f"${body}*{checksum:02X}"


def make_rmc(
    time: str = "123519",
    latitude: str = "4807.038",
    longitude: str = "01131.000",
    speed: str = "022.4",
    sentence_id: str = "GPRMC",
    status: str = "A",
    latitude_hemisphere: str = "N",
    longitude_hemisphere: str = "E",
) -> str:
    """Build a checksummed RMC sentence, overriding individual fields."""
    return make_sentence(
        f"{sentence_id},{time},{status},{latitude},{latitude_hemisphere},"
        f"{longitude},{longitude_hemisphere},{speed},084.4,230394,003.1,W"
    )


def make_fix(timestamp: str, latitude: float, longitude: float, speed: float = 0.0) -> FixRecord:
    return FixRecord(timestamp=timestamp, latitude=latitude, longitude=longitude, speed=speed)


def make_raw_sentence(body: bytes) -> bytes:
    """Like ``make_sentence`` but over raw bytes, which need not be valid UTF-8."""
    checksum = 0
    for byte in body:
        checksum ^= byte
    return b"$" + body + b"*" + f"{checksum:02X}".encode("ascii")


# Variation field carries a byte that is not valid UTF-8
RMC_WITH_RAW_BYTE = make_raw_sentence(
    b"GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1\xff,W"
)
