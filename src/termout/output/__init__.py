# topmark:header:start
#
#   project      : TermOut
#   file         : __init__.py
#   file_relpath : src/termout/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output channels and sinks."""

from __future__ import annotations

from termout.output.api import OutputLike
from termout.output.channel import OutputChannel
from termout.output.console import ConsoleOutput
from termout.output.factory import create_console_output
from termout.output.sinks import BufferedSink, ClickSink, NullSink, SinkLike, StreamSink

__all__ = [
    "BufferedSink",
    "ClickSink",
    "ConsoleOutput",
    "NullSink",
    "OutputChannel",
    "OutputLike",
    "SinkLike",
    "StreamSink",
    "create_console_output",
]
