"""dictbench.console._plain -- Plain-text backend.

print()-based output with no external dependencies.
Used when stdout is not a TTY or ``--plain`` is given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dictbench.compare import humanize, summary

if TYPE_CHECKING:
    from dictbench.models import Comparison, Result

_LABEL_WIDTH = 20


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print()."""

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        print(f"  {message}")

    def error(self, message: str) -> None:
        print(f"  [error] {message}")

    # -- Benchmark report ---------------------------------------------------

    def section(self, title: str) -> None:
        print(f"{title}:")

    def warmup_line(self, label: str, cycles: int) -> None:
        print(f"{label.rjust(_LABEL_WIDTH)}  {cycles:>10,} i/100ms")

    def result_line(self, result: Result) -> None:
        print(
            f"{result.label.rjust(_LABEL_WIDTH)}  {humanize(result.ips):>12} i/s "
            f"(± {result.error_percent:4.1f}%) - "
            f"{result.iterations:,} in {result.elapsed:.3f}s"
        )

    def comparison(self, comparison: Comparison) -> None:
        print()
        print("Comparison:")
        for entry in comparison.entries:
            label = entry.result.label.rjust(_LABEL_WIDTH)
            line = f"{label}: {humanize(entry.result.ips):>12} i/s"
            if entry.result is not comparison.fastest:
                if entry.sameish:
                    line += " - same-ish: difference falls within error"
                else:
                    line += f" - {entry.slowdown:.2f}x  slower"
            print(line)
        print()
        print(summary(comparison))
