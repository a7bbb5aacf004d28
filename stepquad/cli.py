"""Command line benchmark: ``python -m stepquad`` or ``stepquad``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from stepquad.benchmark import format_report, plot_benchmark, run_benchmark, select_cases
from stepquad.logging_config import configure_from_env, enable_console_logging
from stepquad.numerics.errors import InvalidStepError

logger = logging.getLogger(__name__)

DEFAULT_STEP = 1e-4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stepquad",
        description="Compare fixed-step and adaptive-step trapezoid integration",
    )
    parser.add_argument(
        "--step",
        type=float,
        default=DEFAULT_STEP,
        help=f"fixed integrator step size (default {DEFAULT_STEP:g})",
    )
    parser.add_argument(
        "--cases",
        nargs="+",
        metavar="LABEL",
        help="labels of the cases to run (default: all)",
    )
    parser.add_argument("--lo", type=float, help="override the lower bound of every case")
    parser.add_argument("--hi", type=float, help="override the upper bound of every case")
    parser.add_argument("--csv", type=str, help="write the results table to this CSV file")
    parser.add_argument("--plot", type=str, help="write time/error charts to this image file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="enable console logging at this level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    if (args.lo is None) != (args.hi is None):
        parser.error("--lo and --hi must be given together")

    try:
        cases = select_cases(args.cases)
    except KeyError as e:
        parser.error(str(e.args[0]))

    if args.lo is not None:
        cases = [case.with_interval((args.lo, args.hi)) for case in cases]

    try:
        result = run_benchmark(cases, args.step)
    except InvalidStepError as e:
        parser.error(str(e))

    print(format_report(result))

    if args.csv:
        result.to_dataframe().to_csv(args.csv, index=False)
        logger.info("Wrote %s", args.csv)
    if args.plot:
        path = plot_benchmark(result, args.plot)
        logger.info("Wrote %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
