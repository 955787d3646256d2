"""dictbench.console._rich -- Rich-based backend.

Provides coloured, structured terminal output using the Rich library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape as rich_escape
from rich.rule import Rule
from rich.table import Table
from rich.theme import Theme

from dictbench.compare import humanize, summary

if TYPE_CHECKING:
    from dictbench.models import Comparison, Result

_THEME = Theme(
    {
        "info": "blue",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "label": "bold cyan",
        "ips": "bold",
        "dim": "dim",
    }
)


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self._con = console or Console(theme=_THEME, highlight=False)

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        self._con.print(f"  {rich_escape(message)}", style="info")

    def error(self, message: str) -> None:
        self._con.print(f"  ✗ {rich_escape(message)}", style="error")

    # -- Benchmark report ---------------------------------------------------

    def section(self, title: str) -> None:
        self._con.print(Rule(f" {title} ", style="bold", align="left"))

    def warmup_line(self, label: str, cycles: int) -> None:
        self._con.print(
            f"  [label]{rich_escape(label.rjust(20))}[/]  [dim]{cycles:>10,} i/100ms[/]"
        )

    def result_line(self, result: Result) -> None:
        self._con.print(
            f"  [label]{rich_escape(result.label.rjust(20))}[/]  "
            f"[ips]{humanize(result.ips):>12}[/] i/s "
            f"[dim](± {result.error_percent:4.1f}%) - "
            f"{result.iterations:,} in {result.elapsed:.3f}s[/]"
        )

    def comparison(self, comparison: Comparison) -> None:
        self._con.print()
        t = Table(title="Comparison", box=box.SIMPLE, show_edge=False, pad_edge=True)
        t.add_column("Case", style="label", justify="right")
        t.add_column("i/s", justify="right")
        t.add_column("±", justify="right", style="dim")
        t.add_column("vs fastest")
        for entry in comparison.entries:
            result = entry.result
            if result is comparison.fastest:
                verdict = "[success]fastest[/]"
            elif entry.sameish:
                verdict = "[dim]same-ish[/]"
            else:
                verdict = f"[warning]{entry.slowdown:.2f}x slower[/]"
            t.add_row(
                rich_escape(result.label),
                humanize(result.ips),
                f"{result.error_percent:.1f}%",
                verdict,
            )
        self._con.print(t)
        self._con.print(f"  {rich_escape(summary(comparison))}", style="success")
