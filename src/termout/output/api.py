# topmark:header:start
#
#   project      : TermOut
#   file         : api.py
#   file_relpath : src/termout/output/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic interface for program output.

This protocol defines the surface that callers use to emit user-facing text,
separate from internal logging. [`OutputChannel`][termout.output.channel.OutputChannel]
and [`ConsoleOutput`][termout.output.console.ConsoleOutput] implement it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from termout.core.levels import OutputType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from termout.formatter.api import FormatterLike


class OutputLike(Protocol):
    """Minimal interface for an output channel."""

    def write(
        self,
        messages: str | Iterable[str],
        newline: bool = False,
        output_type: OutputType | int = OutputType.NORMAL,
    ) -> None:
        """Write one message or a sequence of messages."""
        ...

    def writeln(
        self,
        messages: str | Iterable[str],
        output_type: OutputType | int = OutputType.NORMAL,
    ) -> None:
        """Write one message or a sequence of messages, each followed by a newline."""
        ...

    def set_formatter(self, formatter: FormatterLike) -> None:
        """Replace the formatter."""
        ...

    def get_formatter(self) -> FormatterLike:
        """Return the formatter."""
        ...

    def set_decorated(self, decorated: bool) -> None:
        """Set whether messages are decorated."""
        ...

    def is_decorated(self) -> bool:
        """Return True if messages are decorated."""
        ...

    def set_verbosity(self, level: int) -> None:
        """Set the verbosity level."""
        ...

    def get_verbosity(self) -> int:
        """Return the verbosity level."""
        ...
