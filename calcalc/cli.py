"""Command line entry point for calcalc."""

import argparse
import logging
import sys

from calcalc.arithmetic import UNITS, add
from calcalc.clock import SystemClock
from calcalc.distance import distance_between
from calcalc.errors import CalendarCalcError
from calcalc.timestamp import now
from calcalc.util import TIMESTAMP_PATTERN

logger = logging.getLogger(__name__)

DEMO_FIRST = "2004-02-29 10:00:00"
DEMO_SECOND = "1997-07-12 10:00:00"
DEMO_DAYS = -2423


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calcalc",
        description=(
            "Distances between timestamps and calendar arithmetic. "
            f"Timestamps use the form '{TIMESTAMP_PATTERN}'. "
            "Without a command, prints a short demonstration."
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug details to stderr"
    )
    commands = parser.add_subparsers(dest="command")

    distance = commands.add_parser("distance", help="Elapsed time between A and B")
    distance.add_argument("first", help="First timestamp")
    distance.add_argument("second", help="Second timestamp")

    shift = commands.add_parser("add", help="Add AMOUNT UNITs to a timestamp")
    shift.add_argument("timestamp", help="Starting timestamp")
    shift.add_argument("amount", type=int, help="Signed integer amount")
    shift.add_argument("unit", help=f"One of: {', '.join(UNITS)}")

    current = commands.add_parser("now", help="Print the current timestamp")
    current.add_argument(
        "--utc", action="store_true", help="Use UTC instead of local time"
    )
    return parser


def _run(args: argparse.Namespace) -> None:
    if args.command == "distance":
        print(distance_between(args.first, args.second))
    elif args.command == "add":
        print(add(args.timestamp, args.amount, args.unit))
    elif args.command == "now":
        print(now(SystemClock("UTC" if args.utc else None)))
    else:
        print(distance_between(DEMO_FIRST, DEMO_SECOND))
        print(add(DEMO_FIRST, DEMO_DAYS, "day"))


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running command %r", args.command)
    try:
        _run(args)
    except CalendarCalcError as exc:
        print(f"calcalc: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
