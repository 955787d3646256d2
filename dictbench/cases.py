"""The two dict-building strategies being compared.

Both build ``{e: e for e in keys}``; they differ only in how each key
lands in the accumulator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dictbench.config import KEYS
from dictbench.models import BenchmarkCase

if TYPE_CHECKING:
    from collections.abc import Iterable


def fast(keys: Iterable[int] = KEYS) -> dict[int, int]:
    """Build the mapping with direct item assignment."""
    mapping: dict[int, int] = {}
    for e in keys:
        mapping[e] = e
    return mapping


def slow(keys: Iterable[int] = KEYS) -> dict[int, int]:
    """Build the mapping by merging a one-entry dict per key."""
    mapping: dict[int, int] = {}
    for e in keys:
        mapping.update({e: e})
    return mapping


def default_cases() -> tuple[BenchmarkCase, ...]:
    """Return the benchmark cases in report order."""
    return (
        BenchmarkCase(name="fast", label="dict[k] = v", func=fast),
        BenchmarkCase(name="slow", label="dict.update", func=slow),
    )
