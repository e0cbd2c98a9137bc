# topmark:header:start
#
#   project      : TermOut
#   file         : console.py
#   file_relpath : src/termout/output/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console output: a stdout channel paired with a stderr channel.

`ConsoleOutput` is the channel most programs want. Regular messages go to
standard output; errors and warnings go to the channel returned by
`ConsoleOutput.get_error_output`. Both channels share one formatter, so style
registrations and the decoration flag apply to both.

Example:
    ```python
    output = ConsoleOutput()
    output.writeln("<info>Done.</info>")
    output.get_error_output().writeln("<error>Something failed</error>")
    ```
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from termout.config.color import ColorMode, resolve_color_mode
from termout.core.levels import VerbosityLevel
from termout.formatter.formatter import OutputFormatter
from termout.output.channel import OutputChannel
from termout.output.sinks import ClickSink

if TYPE_CHECKING:
    from termout.formatter.api import FormatterLike


class ConsoleOutput(OutputChannel):
    """Channel on standard output that owns an error channel on standard error.

    Args:
        verbosity (int | None): Verbosity level for both channels.
        decorated (bool | None): Whether to decorate messages. ``None`` resolves
            automatically from ``FORCE_COLOR``/``NO_COLOR`` and the TTY status of
            the output stream.
        formatter (FormatterLike | None): Formatter shared by both channels.
        out (TextIO | None): Stream for standard output (defaults to `sys.stdout`).
        err (TextIO | None): Stream for error output (defaults to `sys.stderr`).
    """

    def __init__(
        self,
        verbosity: int | None = VerbosityLevel.NORMAL,
        decorated: bool | None = None,
        formatter: FormatterLike | None = None,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        out = out or sys.stdout
        err = err or sys.stderr
        if decorated is None:
            decorated = resolve_color_mode(color_mode_override=ColorMode.AUTO, stream=out)
        if formatter is None:
            formatter = OutputFormatter()

        # The formatter decides decoration; the sinks pass every message through as is.
        super().__init__(ClickSink(out, color=True), verbosity, decorated, formatter)
        self._error_output: OutputChannel = OutputChannel(
            ClickSink(err, color=True),
            verbosity,
            decorated,
            formatter,
        )

    def get_error_output(self) -> OutputChannel:
        """Return the channel writing to standard error."""
        return self._error_output

    def set_error_output(self, error_output: OutputChannel) -> None:
        """Replace the channel writing to standard error."""
        self._error_output = error_output

    def set_decorated(self, decorated: bool) -> None:
        """Set whether to decorate messages on both channels."""
        super().set_decorated(decorated)
        self._error_output.set_decorated(decorated)

    def set_formatter(self, formatter: FormatterLike) -> None:
        """Replace the formatter on both channels."""
        super().set_formatter(formatter)
        self._error_output.set_formatter(formatter)

    def set_verbosity(self, level: int) -> None:
        """Set the verbosity of both channels."""
        super().set_verbosity(level)
        self._error_output.set_verbosity(level)
