# topmark:header:start
#
#   project      : TermOut
#   file         : sinks.py
#   file_relpath : src/termout/output/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sinks: the places where output channels actually emit text.

A sink receives messages that are already filtered and formatted by an
[`OutputChannel`][termout.output.channel.OutputChannel] and writes them
somewhere: a text stream, Click's ``echo``, an in-memory buffer, or nowhere.

Sinks do not buffer, flush or lock on their own. Callers that share one sink
across threads must synchronize access themselves.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Protocol, TextIO

import click

from termout.constants import LINE_SEPARATOR


class SinkLike(Protocol):
    """Emission primitive used by output channels."""

    def do_write(self, message: str, newline: bool) -> None:
        """Emit ``message``, followed by a line separator if ``newline`` is True."""
        ...


class StreamSink(SinkLike):
    """Sink writing to a text stream.

    Args:
        stream (TextIO | None): Target stream. Defaults to `sys.stdout` at
            construction time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream: TextIO = stream or sys.stdout

    def do_write(self, message: str, newline: bool) -> None:
        """Write a message to the stream."""
        self.stream.write(message + (LINE_SEPARATOR if newline else ""))


class ClickSink(SinkLike):
    """Sink emitting through `click.echo`.

    Args:
        file (TextIO | None): Target stream. ``None`` lets Click pick stdout.
        color (bool | None): Forwarded to `click.echo`. ``None`` keeps Click's
            default of stripping ANSI codes when the stream is not a terminal.

    Attributes:
        file (TextIO | None): Target stream (``None`` means stdout).
        color (bool | None): Color override passed to `click.echo`.
    """

    file: TextIO | None
    color: bool | None

    def __init__(self, file: TextIO | None = None, *, color: bool | None = None) -> None:
        self.file = file
        self.color = color

    def do_write(self, message: str, newline: bool) -> None:
        """Write a message through `click.echo`."""
        click.echo(message, nl=newline, file=self.file, color=self.color)


class BufferedSink(SinkLike):
    """Sink accumulating output in memory until it is fetched."""

    def __init__(self) -> None:
        self._buffer = StringIO()

    def do_write(self, message: str, newline: bool) -> None:
        """Append a message to the buffer."""
        self._buffer.write(message + (LINE_SEPARATOR if newline else ""))

    def fetch(self) -> str:
        """Return the buffered text and empty the buffer."""
        content: str = self._buffer.getvalue()
        self._buffer = StringIO()
        return content


class NullSink(SinkLike):
    """Sink discarding everything."""

    def do_write(self, message: str, newline: bool) -> None:
        """Discard the message."""
