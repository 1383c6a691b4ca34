"""Command-line entry point for the string concatenation benchmark."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional

from .config import DEFAULT_ITERATIONS, DEFAULT_REPEAT, DEFAULT_TOKEN, BenchmarkConfig
from .errors import InvalidConfiguration, StrategyFailure
from .harness import run_benchmark, stderr_progress
from .report import FORMATS, render
from .strategies import DEFAULT_REFERENCE, STRATEGY_NAMES

EXIT_OK = 0
EXIT_STRATEGY_FAILURE = 1
EXIT_INVALID_CONFIGURATION = 2


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="concat-bench",
        description=(
            "Time operator, StringIO, bytearray and %-format string concatenation "
            "and print each method relative to a reference."
        ),
    )
    parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Number of tokens to concatenate (default: {DEFAULT_ITERATIONS}).",
    )
    parser.add_argument(
        "--token",
        "-t",
        default=DEFAULT_TOKEN,
        help=f"Token repeated in the dataset (default: {DEFAULT_TOKEN!r}).",
    )
    parser.add_argument(
        "--reference",
        "-r",
        default=DEFAULT_REFERENCE,
        choices=STRATEGY_NAMES,
        help=f"Strategy used as the ratio denominator (default: {DEFAULT_REFERENCE}).",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=DEFAULT_REPEAT,
        help="Timed runs per strategy; the best run is reported (default: 1).",
    )
    parser.add_argument(
        "--format",
        default="table",
        choices=FORMATS,
        help="Output format written to stdout (default: table).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Report progress on stderr.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    config = BenchmarkConfig(
        iterations=args.iterations,
        token=args.token,
        reference=args.reference,
        repeat=args.repeat,
    )
    progress = stderr_progress if args.verbose else None

    try:
        run = run_benchmark(config, progress=progress)
    except InvalidConfiguration as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_INVALID_CONFIGURATION
    except StrategyFailure as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_STRATEGY_FAILURE

    sys.stdout.write(render(run, args.format))
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
