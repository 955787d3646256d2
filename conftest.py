"""Shared pytest fixtures and test factories for dictbench.

Provides:
- A deterministic fake clock for driving the runner
- Factory fixtures for benchmark cases and results with sensible defaults
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dictbench.models import BenchmarkCase, Result

if TYPE_CHECKING:
    from collections.abc import Callable


# ── Fake Clock ────────────────────────────────────────────────────────────


class FakeClock:
    """Manually advanced monotonic clock.

    Cases built with ``make_case`` advance it by a fixed cost per call,
    so measured throughput is exactly ``1 / cost``.
    """

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_case(clock: FakeClock) -> Callable[..., BenchmarkCase]:
    """Factory for cases whose every call costs *cost* fake-clock seconds."""

    def _factory(cost: float, name: str = "case") -> BenchmarkCase:
        def func() -> None:
            clock.advance(cost)

        return BenchmarkCase(name=name, label=name, func=func)

    return _factory


@pytest.fixture()
def make_result() -> Callable[..., Result]:
    """Factory for Result -- 1000 i/s with no spread by default."""

    def _factory(
        name: str = "case",
        *,
        iterations: int = 1000,
        elapsed: float = 1.0,
        cycles: int = 100,
        samples: tuple[float, ...] = (),
    ) -> Result:
        return Result(
            name=name,
            label=name,
            iterations=iterations,
            elapsed=elapsed,
            cycles=cycles,
            samples=samples,
        )

    return _factory
