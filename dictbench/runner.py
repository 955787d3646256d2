"""Benchmark runner -- warmup then timed batches per case.

Every case is first warmed up one call at a time to estimate how many
calls fit in a sample interval. Each case is then measured in batches of
that size until the time budget is spent. Throughput is total calls over total measured time.

Exceptions raised by a case propagate immediately; there are no retries
and no partial results.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from dictbench.config import SAMPLE_INTERVAL
from dictbench.models import BenchmarkCase, Result, RunConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger("dictbench.runner")


def warmup(
    case: BenchmarkCase,
    seconds: float,
    clock: Callable[[], float] = time.perf_counter,
) -> int:
    """Call *case* until *seconds* have elapsed and size the timing batch.

    The case is always called at least once, so a broken case fails here
    before any measurement starts.

    Args:
        case: The case to warm up.
        seconds: Warmup budget.
        clock: Monotonic clock returning seconds.

    Returns:
        Number of calls per batch, sized to roughly one sample interval.
    """
    func = case.func
    count = 0
    start = clock()
    while True:
        func()
        count += 1
        elapsed = clock() - start
        if elapsed >= seconds:
            break

    if elapsed <= 0:
        cycles = 1
    else:
        cycles = max(1, int(count / elapsed * SAMPLE_INTERVAL))

    logger.debug(
        "warmup %s: %d calls in %.4fs -> %d cycles/batch", case.name, count, elapsed, cycles
    )
    return cycles


def measure(
    case: BenchmarkCase,
    seconds: float,
    cycles: int,
    clock: Callable[[], float] = time.perf_counter,
) -> Result:
    """Run batches of *cycles* calls until *seconds* of batch time accrue.

    Raises:
        RuntimeError: If *clock* does not advance across a batch.
    """
    func = case.func
    samples: list[float] = []
    iterations = 0
    measured = 0.0

    while measured < seconds:
        start = clock()
        for _ in range(cycles):
            func()
        batch = clock() - start
        if batch <= 0:
            raise RuntimeError(
                f"clock did not advance across {cycles} calls of {case.name!r}"
            )
        iterations += cycles
        measured += batch
        samples.append(cycles / batch)

    result = Result(
        name=case.name,
        label=case.label,
        iterations=iterations,
        elapsed=measured,
        cycles=cycles,
        samples=tuple(samples),
    )
    logger.debug(
        "measure %s: %d calls in %.4fs (%.1f i/s, %d samples)",
        case.name,
        iterations,
        measured,
        result.ips,
        len(samples),
    )
    return result


def run(
    cases: Sequence[BenchmarkCase],
    config: RunConfig | None = None,
    *,
    clock: Callable[[], float] = time.perf_counter,
    on_warmup: Callable[[BenchmarkCase, int], None] | None = None,
    on_result: Callable[[Result], None] | None = None,
) -> list[Result]:
    """Benchmark every case in order.

    Args:
        cases: Cases to run; results keep this order.
        config: Timing budget (defaults to ``RunConfig()``).
        clock: Monotonic clock returning seconds; it must advance while
            cases run.
        on_warmup: Called with ``(case, cycles)`` once a case is warmed up.
        on_result: Called with each result as soon as it is measured.

    Returns:
        One ``Result`` per case.
    """
    if config is None:
        config = RunConfig()

    logger.info(
        "Running %d cases (warmup=%.2fs, time=%.2fs)", len(cases), config.warmup, config.time
    )

    # All warmups run before any measurement
    batch_sizes: list[int] = []
    for case in cases:
        cycles = warmup(case, config.warmup, clock)
        batch_sizes.append(cycles)
        if on_warmup is not None:
            on_warmup(case, cycles)

    results: list[Result] = []
    for case, cycles in zip(cases, batch_sizes, strict=True):
        result = measure(case, config.time, cycles, clock)
        results.append(result)
        if on_result is not None:
            on_result(result)

    return results
