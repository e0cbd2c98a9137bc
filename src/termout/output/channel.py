# topmark:header:start
#
#   project      : TermOut
#   file         : channel.py
#   file_relpath : src/termout/output/channel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output channel: verbosity gate, message transform and sink delegation.

There are three levels of verbosity:

- normal: regular output (default)
- verbose: more output; treated like normal by the channel itself
- quiet: no output at all

Each message passed to `OutputChannel.write` goes through one of three transforms
selected by [`OutputType`][termout.core.levels.OutputType] before the channel hands
it to its sink:

- ``NORMAL``: rendered by the formatter
- ``RAW``: emitted unchanged
- ``PLAIN``: rendered by the formatter, then stripped of any remaining tags

The channel holds its formatter and sink by reference. Swapping either with
`set_formatter` or `set_sink` is not atomic; callers sharing a channel across
threads must synchronize those calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termout.config.logging import get_logger
from termout.core.errors import InvalidOutputTypeError
from termout.core.levels import OutputType, VerbosityLevel
from termout.formatter.formatter import OutputFormatter, strip_tags
from termout.output.api import OutputLike

if TYPE_CHECKING:
    from collections.abc import Iterable

    from termout.config.logging import TermoutLogger
    from termout.formatter.api import FormatterLike
    from termout.output.sinks import SinkLike

logger: TermoutLogger = get_logger(__name__)


def coerce_verbosity(level: int) -> VerbosityLevel | int:
    """Convert ``level`` to an int, preferring a `VerbosityLevel` member.

    Levels outside the known range are accepted and returned as plain ints.

    Args:
        level (int): Verbosity level (enum member or integer-like value).

    Returns:
        VerbosityLevel | int: The matching member, or the integer value itself.
    """
    value: int = int(level)
    try:
        return VerbosityLevel(value)
    except ValueError:
        logger.debug("Storing verbosity %d outside the known levels", value)
        return value


class OutputChannel(OutputLike):
    """Program-output channel writing formatted messages to a sink.

    Args:
        sink (SinkLike): Emission primitive receiving the transformed messages.
        verbosity (int | None): Verbosity level. ``None`` means
            ``VerbosityLevel.NORMAL``.
        decorated (bool | None): Whether to decorate messages. ``None`` means False.
        formatter (FormatterLike | None): Formatter instance. ``None`` creates a
            default [`OutputFormatter`][termout.formatter.formatter.OutputFormatter].
    """

    def __init__(
        self,
        sink: SinkLike,
        verbosity: int | None = VerbosityLevel.NORMAL,
        decorated: bool | None = None,
        formatter: FormatterLike | None = None,
    ) -> None:
        if formatter is None:
            formatter = OutputFormatter()

        self._sink: SinkLike = sink
        self._verbosity: VerbosityLevel | int = (
            VerbosityLevel.NORMAL if verbosity is None else coerce_verbosity(verbosity)
        )
        self._formatter: FormatterLike = formatter
        self._formatter.set_decorated(bool(decorated))

    # --- Collaborators -------------------------------------------------------

    def set_formatter(self, formatter: FormatterLike) -> None:
        """Replace the formatter (the decoration flag is not carried over)."""
        self._formatter = formatter

    def get_formatter(self) -> FormatterLike:
        """Return the current formatter (shared, not copied)."""
        return self._formatter

    def set_sink(self, sink: SinkLike) -> None:
        """Replace the sink."""
        self._sink = sink

    def get_sink(self) -> SinkLike:
        """Return the current sink."""
        return self._sink

    # --- Decoration & verbosity ----------------------------------------------

    def set_decorated(self, decorated: bool) -> None:
        """Set whether to decorate messages.

        Args:
            decorated (bool): Whether to decorate the messages or not.
        """
        self._formatter.set_decorated(bool(decorated))

    def is_decorated(self) -> bool:
        """Return True if the output will decorate messages."""
        return self._formatter.is_decorated()

    def set_verbosity(self, level: int) -> None:
        """Set the verbosity of the output.

        No range check is done: values outside `VerbosityLevel` are stored as ints.

        Args:
            level (int): The level of verbosity.
        """
        self._verbosity = coerce_verbosity(level)

    def get_verbosity(self) -> VerbosityLevel | int:
        """Return the current verbosity level."""
        return self._verbosity

    def is_quiet(self) -> bool:
        """Return True if the channel suppresses all output."""
        return self._verbosity == VerbosityLevel.QUIET

    def is_verbose(self) -> bool:
        """Return True if the verbosity is at least ``VERBOSE``."""
        return self._verbosity >= VerbosityLevel.VERBOSE

    # --- Writing -------------------------------------------------------------

    def writeln(
        self,
        messages: str | Iterable[str],
        output_type: OutputType | int = OutputType.NORMAL,
    ) -> None:
        """Write one message or a sequence of messages, each followed by a newline.

        Args:
            messages (str | Iterable[str]): A single message or messages in order.
            output_type (OutputType | int): Transform applied to each message.
        """
        self.write(messages, True, output_type)

    def write(
        self,
        messages: str | Iterable[str],
        newline: bool = False,
        output_type: OutputType | int = OutputType.NORMAL,
    ) -> None:
        """Write one message or a sequence of messages.

        Nothing happens when the channel is quiet. Otherwise each message is
        transformed and passed to `do_write` in order.

        Args:
            messages (str | Iterable[str]): A single message or messages in order.
            newline (bool): Whether to add a newline after each message.
            output_type (OutputType | int): Transform applied to each message.

        Raises:
            InvalidOutputTypeError: When ``output_type`` is not a known output type.
                Messages written before the failure stay written.
        """
        if self.is_quiet():
            return

        if isinstance(messages, str):
            messages = [messages]

        for message in messages:
            self.do_write(self._transform(message, output_type), newline)

    def _transform(self, message: str, output_type: OutputType | int) -> str:
        if output_type == OutputType.NORMAL:
            return self._formatter.format(message)
        if output_type == OutputType.RAW:
            return message
        if output_type == OutputType.PLAIN:
            return strip_tags(self._formatter.format(message))
        raise InvalidOutputTypeError(output_type)

    def do_write(self, message: str, newline: bool) -> None:
        """Emit an already transformed message through the sink.

        Args:
            message (str): A message to write to the output.
            newline (bool): Whether to add a newline or not.
        """
        logger.trace("do_write(%r, newline=%s)", message, newline)
        self._sink.do_write(message, newline)
