"""NMEA checksum verification.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all bytes between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
    ^                       checksum content                           ^^
    start                                                  checksum (0x6A = 106)

Verification is tri-state so that callers can count garbled transmissions
(a well-formed sentence whose checksum does not match) separately from lines
that are structurally broken (no '$', no '*', or a truncated trailer).
"""

import enum
import string

_HEX_DIGITS = frozenset(string.hexdigits)


class ChecksumResult(enum.Enum):
    """Outcome of verifying a sentence checksum."""

    OK = "ok"
    INCOMPLETE = "incomplete"
    MISMATCH = "mismatch"


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and declared checksum from an NMEA sentence.

    NMEA sentences follow the format: $<content>*<checksum>
    The last '*' is taken as the checksum delimiter.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPRMC,...*6A")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' start delimiter
        - Missing '*' checksum delimiter
        - Fewer than 2 characters follow the '*' (truncated sentence)
        - The 2 characters after '*' are not hexadecimal digits

    Example:
        >>> _extract_checksum_parts("$GPRMC,123519*6A")
        ('GPRMC,123519', '6A')
    """
    if not sentence.startswith("$"):
        return None

    end = sentence.rfind("*")
    if end == -1:
        return None

    content = sentence[1:end]
    provided = sentence[end + 1 : end + 3]

    if len(provided) != 2 or not all(c in _HEX_DIGITS for c in provided):
        return None

    return content, provided


def _encode_content(content: str) -> bytes:
    try:
        return content.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates that did not come from surrogateescape decoding
        return content.encode("utf-8", errors="surrogatepass")


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The content is the text between '$' and '*' (exclusive). Each byte of
    its encoded form is XORed into the result, so the value always fits in
    an unsigned byte. Text decoded with ``errors="surrogateescape"`` encodes
    back to the bytes originally read, so undecodable input is checked as it
    arrived on the wire.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("GPRMC")
        75
    """
    result = 0
    for byte in _encode_content(content):
        result ^= byte
    return result


def verify_checksum(sentence: str) -> ChecksumResult:
    """Verify the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  Must start with '$'; leading whitespace makes the
                  sentence incomplete. Anything after the two checksum
                  digits (e.g. a line ending) is ignored.

    Returns:
        ``ChecksumResult.OK`` if the declared checksum matches the computed
        one, ``ChecksumResult.INCOMPLETE`` if the sentence is structurally
        malformed, and ``ChecksumResult.MISMATCH`` otherwise. A malformed
        sentence is never reported as a mismatch.

    Example:
        >>> verify_checksum("$GPRMC,123519,A,...*6A")
        <ChecksumResult.OK: 'ok'>
        >>> verify_checksum("GPRMC,123519,A,...*6A")  # missing '$'
        <ChecksumResult.INCOMPLETE: 'incomplete'>
    """
    parts = _extract_checksum_parts(sentence)
    if parts is None:
        return ChecksumResult.INCOMPLETE

    content, provided = parts
    if calculate_checksum(content) == int(provided, 16):
        return ChecksumResult.OK
    return ChecksumResult.MISMATCH
