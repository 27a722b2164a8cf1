"""Sentence identification.

A receiver log interleaves many sentence types. Only RMC sentences carry
what a route needs, but GGA and GSA sentences (position fix data and DOP /
active satellites) are expected companions in any tracklog. Recognizing them
up front lets them be counted as skipped instead of as parse failures.
Any other sentence ID is treated as an attempt at extraction and fails there.
"""

# Sentence IDs that are extracted into fix records.
RMC_SENTENCE_IDS = ("$GPRMC", "$GNRMC")

# Known position/DOP sentences that are not the extraction target.
# GN = multi-constellation (combined solution) variant of GP.
NOT_RELEVANT_SENTENCE_IDS = frozenset({"$GPGGA", "$GNGGA", "$GPGSA", "$GNGSA"})


def sentence_id(sentence: str) -> str | None:
    """Return the sentence ID (text up to the first comma), or None if absent.

    Example:
        >>> sentence_id("$GPGGA,123519,4807.038,N*47")
        '$GPGGA'
        >>> sentence_id("$GPGGA*56")
        None
    """
    comma = sentence.find(",")
    if comma == -1:
        return None
    return sentence[:comma]


def is_not_relevant(sentence: str) -> bool:
    """Return True if the sentence is a recognized but unsupported type.

    Only meaningful for sentences that already passed checksum verification.
    A sentence with no field delimiter has no ID and is considered relevant,
    so it is handed to extraction and counted as a failure there.
    """
    return sentence_id(sentence) in NOT_RELEVANT_SENTENCE_IDS
