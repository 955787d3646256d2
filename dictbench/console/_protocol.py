"""dictbench.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the terminal output system.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dictbench.models import Comparison, Result


class ConsoleProtocol(Protocol):
    """dictbench terminal output protocol.

    **General messages**::

        console.info("Python 3.12.1")
        console.error("benchmark aborted: TypeError: unhashable type")

    **Benchmark report** -- used by cli.py as the runner reports back::

        console.section("Warming up")
        console.warmup_line("dict[k] = v", 4213)
        console.result_line(result)
        console.comparison(comparison)
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Benchmark report ---------------------------------------------------

    def section(self, title: str) -> None:
        """Start a titled report section."""
        ...

    def warmup_line(self, label: str, cycles: int) -> None:
        """Report the batch size found while warming up a case."""
        ...

    def result_line(self, result: Result) -> None:
        """Report the measured throughput of one case."""
        ...

    def comparison(self, comparison: Comparison) -> None:
        """Report every case against the fastest, then the verdict line."""
        ...
