#!/usr/bin/env python3
"""
dictbench CLI -- time dict item assignment against dict.update merges.

Usage:
  dictbench [--warmup SECONDS] [--time SECONDS] [--progress] [--plain] [--verbose]

With no arguments both cases are warmed up and measured with the default
budget, then one line per case and a comparison are printed.
"""

from __future__ import annotations

import argparse
import logging
import platform
import sys

from dictbench.cases import default_cases
from dictbench.compare import compare
from dictbench.config import DEFAULT_TIME, DEFAULT_WARMUP, LOG_FORMAT
from dictbench.console import configure, console
from dictbench.models import BenchmarkCase, Result, RunConfig
from dictbench.runner import run

logger = logging.getLogger("dictbench")


class _Progress:
    """Runner hooks that print warmup and result lines as they arrive."""

    def __init__(self, quiet: bool) -> None:
        self.quiet = quiet
        self._calculating = False

    def on_warmup(self, case: BenchmarkCase, cycles: int) -> None:
        if not self.quiet:
            console.warmup_line(case.label, cycles)

    def on_result(self, result: Result) -> None:
        if not self.quiet and not self._calculating:
            console.section("Calculating")
            self._calculating = True
        console.result_line(result)


def _seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return seconds


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_run(config: RunConfig) -> list[Result]:
    """Benchmark the default cases and print the comparison."""
    cases = default_cases()
    progress = _Progress(config.quiet)

    if not config.quiet:
        console.info(
            f"{platform.python_implementation()} {platform.python_version()} "
            f"on {sys.platform}"
        )
        console.section("Warming up")

    try:
        results = run(
            cases,
            config,
            on_warmup=progress.on_warmup,
            on_result=progress.on_result,
        )
    except Exception as exc:
        console.error(f"benchmark aborted: {type(exc).__name__}: {exc}")
        raise
    console.comparison(compare(results))
    return results


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dictbench",
        description="Compare dict[k] = v against dict.update({k: v}) throughput",
    )
    parser.add_argument(
        "--warmup",
        type=_seconds,
        default=DEFAULT_WARMUP,
        help=f"Seconds to warm up each case (default: {DEFAULT_WARMUP})",
    )
    parser.add_argument(
        "--time",
        type=_seconds,
        default=DEFAULT_TIME,
        help=f"Seconds to measure each case (default: {DEFAULT_TIME})",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show warmup and calculation phases"
    )
    parser.add_argument("--plain", action="store_true", help="Plain-text output, no colour")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    # -- Console configuration ----------------------------------------------
    configure(backend="plain" if args.plain else "auto")

    # -- Logging configuration (stderr, stdout is the report) ---------------
    logging.basicConfig(
        stream=sys.stderr,
        format=LOG_FORMAT,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        config = RunConfig(warmup=args.warmup, time=args.time, quiet=not args.progress)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("config: %s", config)
    cmd_run(config)


if __name__ == "__main__":
    main()
