"""Core data types for dictbench.

All types are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

import statistics
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dictbench.config import DEFAULT_TIME, DEFAULT_WARMUP

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class BenchmarkCase:
    """A named, zero-argument unit of work whose throughput is measured."""

    name: str
    label: str
    func: Callable[[], object]


@dataclass(frozen=True)
class RunConfig:
    """Timing budget for a benchmark run.

    Raises:
        ValueError: If ``warmup`` is negative or ``time`` is not positive.
    """

    warmup: float = DEFAULT_WARMUP
    time: float = DEFAULT_TIME
    quiet: bool = False

    def __post_init__(self) -> None:
        if self.warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {self.warmup}")
        if self.time <= 0:
            raise ValueError(f"time must be > 0, got {self.time}")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Result:
    """Measured throughput of a single case.

    ``samples`` holds the iterations-per-second of each timed batch;
    ``ips`` is computed over the whole window, not averaged from samples.
    """

    name: str
    label: str
    iterations: int
    elapsed: float
    cycles: int
    samples: tuple[float, ...] = ()

    @property
    def ips(self) -> float:
        """Completed invocations per measured second."""
        if self.elapsed <= 0:
            return 0.0
        return self.iterations / self.elapsed

    @property
    def stddev(self) -> float:
        if len(self.samples) < 2:
            return 0.0
        return statistics.pstdev(self.samples)

    @property
    def error_percent(self) -> float:
        ips = self.ips
        if ips == 0:
            return 0.0
        return self.stddev / ips * 100


@dataclass(frozen=True)
class ComparisonEntry:
    """A result ranked against the fastest one."""

    result: Result
    slowdown: float
    sameish: bool


@dataclass(frozen=True)
class Comparison:
    """Results ranked by throughput, fastest first."""

    fastest: Result
    entries: tuple[ComparisonEntry, ...]
