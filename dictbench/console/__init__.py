"""Where benchmark reports get printed.

``cli.main()`` picks a backend once with ``configure()``; everything else
prints through the module-level ``console``::

    from dictbench.console import console

    console.section("Warming up")
    console.result_line(result)
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from dictbench.console._plain import PlainBackend

if TYPE_CHECKING:
    from dictbench.console._protocol import ConsoleProtocol

_backend: ConsoleProtocol = PlainBackend()


def configure(*, backend: str = "auto") -> None:
    """Switch report output to ``"plain"`` or ``"rich"``.

    ``"auto"`` means rich on a terminal and plain when stdout is piped,
    so redirected reports carry no escape codes.

    Raises:
        ValueError: For any other backend name.
    """
    global _backend  # noqa: PLW0603

    if backend == "auto":
        backend = "rich" if sys.stdout.isatty() else "plain"

    if backend == "plain":
        _backend = PlainBackend()
    elif backend == "rich":
        from dictbench.console._rich import RichBackend

        _backend = RichBackend()
    else:
        raise ValueError(f"unknown console backend: {backend!r}")


def get_console() -> ConsoleProtocol:
    return _backend


class _Forwarder:
    """Looks up the active backend on every attribute access."""

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _Forwarder()  # type: ignore[assignment]
