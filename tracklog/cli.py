"""Command-line entry point: NMEA log files in, route summary and map link out.

Usage::

    tracklog drive1.nmea drive2.nmea [--epsilon 1e-5] [--verbose]

Files are read in argument order and their lines concatenated before
deduplication, so a later file wins when two files contain the same second.
"""

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from tracklog.config import SPATIAL_EPSILON_DEGREES, PipelineConfig
from tracklog.maps import build_google_maps_url
from tracklog.nmea.types import FixRecord
from tracklog.pipeline import ProcessingSummary, build_route, normalize_lines

logger = logging.getLogger(__name__)

_TABLE_RULE_WIDTH = 44


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tracklog",
        description="Extract a deduplicated route from NMEA-0183 tracklogs.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="NMEA log file(s)")
    parser.add_argument(
        "--epsilon",
        type=float,
        default=SPATIAL_EPSILON_DEGREES,
        help="Spatial deduplication threshold in degrees (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every dropped line")
    return parser


def read_lines(paths: Sequence[str]) -> Iterator[str]:
    """Yield non-blank lines from each readable file, in order.

    Unreadable files are logged and skipped.
    """
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as stream:
                yield from normalize_lines(stream)
        except OSError as error:
            logger.warning("Cannot open '%s', skipping: %s", path, error)


def print_summary(summary: ProcessingSummary, out: TextIO) -> None:
    out.write(
        "=== Processing Summary ===\n"
        f"  Total lines read      : {summary.lines_total}\n"
        f"  Checksum failures     : {summary.checksum_failures}\n"
        f"  Not relevant (skipped): {summary.not_relevant}\n"
        f"  Parse/validation fail : {summary.parse_failures}\n"
        f"  Valid records parsed  : {summary.valid_records}\n"
        f"  After timestamp dedup : {summary.after_timestamp_dedup}\n"
        f"  After spatial dedup   : {summary.after_spatial_dedup}\n"
        "\n"
    )


def print_route(route: Sequence[FixRecord], out: TextIO) -> None:
    out.write("=== Route Points ===\n")
    out.write(f"{'#':<6}{'Latitude':<14}{'Longitude':<14}Speed (m/s)\n")
    out.write("-" * _TABLE_RULE_WIDTH + "\n")
    for index, point in enumerate(route, start=1):
        out.write(f"{index:<6}{point.latitude:<14.6f}{point.longitude:<14.6f}{point.speed:.6f}\n")


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = PipelineConfig(epsilon_degrees=args.epsilon)
    except ValueError as error:
        logger.error("%s", error)
        return 2

    result = build_route(read_lines(args.files), config)

    print_summary(result.summary, out)
    if not result.route:
        out.write("No valid GPS points found.\n")
        return 0

    print_route(result.route, out)
    out.write(f"\n=== Google Maps URL ===\n{build_google_maps_url(result.route)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
