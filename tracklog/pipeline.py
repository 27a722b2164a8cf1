"""Line-by-line classification and batch route construction.

Every input line ends up in exactly one bucket:

    raw line --checksum--> INCOMPLETE / MISMATCH
             --classify--> NOT_RELEVANT
             --extract---> EXTRACTION_FAILED / PARSED

Rejections are local to the line: nothing raises across lines and one bad
sentence never stops the run. Once every line has been classified, the
parsed records go through timestamp and then distance deduplication.
"""

import enum
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tracklog.config import PipelineConfig
from tracklog.nmea.checksum import ChecksumResult, verify_checksum
from tracklog.nmea.rmc import parse_rmc
from tracklog.nmea.sentences import is_not_relevant
from tracklog.nmea.types import FixRecord
from tracklog.route.dedup import deduplicate_by_distance, deduplicate_by_timestamp

__all__ = [
    "LineOutcome",
    "LineResult",
    "ParseResult",
    "ProcessingSummary",
    "RouteResult",
    "build_route",
    "classify_line",
    "normalize_lines",
    "parse_lines",
]

logger = logging.getLogger(__name__)


class LineOutcome(enum.Enum):
    """Classification of a single input line."""

    PARSED = "parsed"
    CHECKSUM_INCOMPLETE = "checksum_incomplete"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    NOT_RELEVANT = "not_relevant"
    EXTRACTION_FAILED = "extraction_failed"


@dataclass(frozen=True)
class LineResult:
    """Outcome of one line; ``record`` is set only when outcome is PARSED."""

    outcome: LineOutcome
    record: FixRecord | None = None


@dataclass
class ProcessingSummary:
    """Counters for reporting a run.

    Structurally incomplete lines are counted with extraction failures
    under ``parse_failures``; ``checksum_failures`` only counts well-formed
    sentences whose checksum did not match.

    Attributes:
        lines_total: Lines attempted.
        checksum_failures: Well-formed sentences with a wrong checksum.
        not_relevant: Recognized GGA/GSA sentences that were skipped.
        parse_failures: Incomplete sentences plus failed RMC extraction.
        valid_records: Records extracted before deduplication.
        after_timestamp_dedup: Records left after timestamp deduplication.
        after_spatial_dedup: Points in the final route.
    """

    lines_total: int = 0
    checksum_failures: int = 0
    not_relevant: int = 0
    parse_failures: int = 0
    valid_records: int = 0
    after_timestamp_dedup: int = 0
    after_spatial_dedup: int = 0

    def count(self, outcome: LineOutcome) -> None:
        """Attribute one classified line to its counter."""
        self.lines_total += 1
        if outcome is LineOutcome.PARSED:
            self.valid_records += 1
        elif outcome is LineOutcome.CHECKSUM_MISMATCH:
            self.checksum_failures += 1
        elif outcome is LineOutcome.NOT_RELEVANT:
            self.not_relevant += 1
        else:
            self.parse_failures += 1


@dataclass
class ParseResult:
    """Records extracted from a batch of lines, in arrival order."""

    records: list[FixRecord]
    summary: ProcessingSummary


@dataclass
class RouteResult:
    """Final route plus the counters gathered while building it."""

    route: list[FixRecord]
    summary: ProcessingSummary


def normalize_lines(raw_lines: Iterable[str]) -> Iterator[str]:
    """Strip line endings and skip blank lines.

    Handles both ``\\n`` and ``\\r\\n`` terminated input.
    """
    for raw in raw_lines:
        line = raw.rstrip("\r\n")
        if line:
            yield line


def classify_line(line: str, config: PipelineConfig | None = None) -> LineResult:
    """Run one line through checksum, relevance and extraction checks.

    Args:
        line: A single NMEA sentence without its line ending.
        config: Pipeline settings; defaults are used when omitted.

    Returns:
        LineResult whose ``record`` is the extracted fix when the outcome is
        ``LineOutcome.PARSED`` and None otherwise.
    """
    config = config or PipelineConfig()

    checksum = verify_checksum(line)
    if checksum is ChecksumResult.INCOMPLETE:
        return LineResult(LineOutcome.CHECKSUM_INCOMPLETE)
    if checksum is ChecksumResult.MISMATCH:
        return LineResult(LineOutcome.CHECKSUM_MISMATCH)

    if is_not_relevant(line):
        return LineResult(LineOutcome.NOT_RELEVANT)

    record = parse_rmc(line, config.knots_to_meters_per_second)
    if record is None:
        return LineResult(LineOutcome.EXTRACTION_FAILED)

    return LineResult(LineOutcome.PARSED, record)


def parse_lines(lines: Iterable[str], config: PipelineConfig | None = None) -> ParseResult:
    """Classify every line and collect the extracted records.

    Args:
        lines: Sentences in deterministic order, possibly concatenated from
            several sources.
        config: Pipeline settings; defaults are used when omitted.

    Returns:
        ParseResult with records in arrival order and per-outcome counters.
    """
    config = config or PipelineConfig()
    summary = ProcessingSummary()
    records: list[FixRecord] = []

    for line in lines:
        result = classify_line(line, config)
        summary.count(result.outcome)
        if result.record is not None:
            records.append(result.record)
        elif result.outcome is not LineOutcome.NOT_RELEVANT:
            logger.debug("Dropped line (%s): %r", result.outcome.value, line)

    return ParseResult(records=records, summary=summary)


def build_route(lines: Iterable[str], config: PipelineConfig | None = None) -> RouteResult:
    """Parse all lines, then deduplicate by timestamp and by distance.

    Args:
        lines: Sentences in deterministic order.
        config: Pipeline settings; defaults are used when omitted.

    Returns:
        RouteResult holding the chronologically ordered route and the full
        processing summary. The route is empty when no line yields a fix.
    """
    config = config or PipelineConfig()
    parsed = parse_lines(lines, config)
    summary = parsed.summary

    deduplicated = deduplicate_by_timestamp(parsed.records)
    summary.after_timestamp_dedup = len(deduplicated)

    route = deduplicate_by_distance(deduplicated, config.epsilon_degrees)
    summary.after_spatial_dedup = len(route)

    logger.info(
        "Processed %d lines: %d checksum failures, %d not relevant, "
        "%d parse failures, %d records, %d route points",
        summary.lines_total,
        summary.checksum_failures,
        summary.not_relevant,
        summary.parse_failures,
        summary.valid_records,
        summary.after_spatial_dedup,
    )
    return RouteResult(route=route, summary=summary)
