"""Rank results and phrase the comparison."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from dictbench.models import Comparison, ComparisonEntry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dictbench.models import Result

logger = logging.getLogger("dictbench.compare")

_SUFFIXES: tuple[str, ...] = ("", "k", "M", "B", "T")


def compare(results: Sequence[Result]) -> Comparison:
    """Rank *results* by throughput, fastest first.

    Two results are same-ish when their one-stddev error bars overlap.

    Raises:
        ValueError: If *results* is empty.
    """
    if not results:
        raise ValueError("cannot compare an empty set of results")

    ranked = sorted(results, key=lambda r: r.ips, reverse=True)
    fastest = ranked[0]

    entries: list[ComparisonEntry] = [ComparisonEntry(result=fastest, slowdown=1.0, sameish=True)]
    for result in ranked[1:]:
        slowdown = fastest.ips / result.ips if result.ips > 0 else math.inf
        sameish = fastest.ips - fastest.stddev <= result.ips + result.stddev
        entries.append(ComparisonEntry(result=result, slowdown=slowdown, sameish=sameish))

    logger.debug("fastest: %s (%.1f i/s)", fastest.name, fastest.ips)
    return Comparison(fastest=fastest, entries=tuple(entries))


def humanize(value: float) -> str:
    """Format an iterations-per-second figure with a k/M/B/T suffix."""
    if value <= 0 or not math.isfinite(value):
        return f"{value:.3f}"
    scale = int(math.log10(value) / 3)
    if scale < 0 or scale >= len(_SUFFIXES):
        scale = 0
    return f"{value / 1000**scale:.3f}{_SUFFIXES[scale]}"


def summary(comparison: Comparison) -> str:
    """One-line verdict: the fastest case against the slowest one."""
    fastest = comparison.fastest
    if len(comparison.entries) == 1:
        return f"{fastest.label} is the only case"

    slowest = comparison.entries[-1]
    if slowest.sameish:
        return (
            f"{fastest.label} and {slowest.result.label} are same-ish: "
            "difference falls within error"
        )
    return f"{fastest.label} is {slowest.slowdown:.2f}x as fast as {slowest.result.label}"
