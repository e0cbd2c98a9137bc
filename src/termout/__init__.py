# topmark:header:start
#
#   project      : TermOut
#   file         : __init__.py
#   file_relpath : src/termout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermOut: formatted, verbosity-aware console output.

Public API:
    - [`OutputChannel`][termout.output.channel.OutputChannel]: verbosity gate,
      message transform and delegation to a sink.
    - [`ConsoleOutput`][termout.output.console.ConsoleOutput]: stdout channel
      with a companion stderr channel.
    - [`OutputFormatter`][termout.formatter.formatter.OutputFormatter]: the
      default markup formatter.
    - Sinks: `StreamSink`, `ClickSink`, `BufferedSink`, `NullSink`.
    - `VerbosityLevel`, `OutputType` and the TermOut exceptions.
    - `load_config`, `discover_config` and `create_console_output` for
      configuration-driven setup.

Example:
    ```python
    from termout import BufferedSink, OutputChannel, OutputType

    sink = BufferedSink()
    channel = OutputChannel(sink)
    channel.writeln("<info>hello</info>")
    channel.writeln("<info>raw</info>", OutputType.RAW)
    sink.fetch()  # 'hello\\n<info>raw</info>\\n'
    ```
"""

from __future__ import annotations

from termout.config.color import ColorMode, resolve_color_mode
from termout.config.loaders import discover_config, load_config
from termout.config.model import OutputConfig
from termout.constants import TERMOUT_VERSION
from termout.core.errors import (
    ConfigError,
    InvalidOutputTypeError,
    InvalidStyleError,
    TermoutError,
)
from termout.core.levels import OutputType, VerbosityLevel
from termout.formatter.api import FormatterLike
from termout.formatter.formatter import OutputFormatter, escape, strip_tags
from termout.formatter.style import OutputFormatterStyle
from termout.output.api import OutputLike
from termout.output.channel import OutputChannel
from termout.output.console import ConsoleOutput
from termout.output.factory import create_console_output
from termout.output.sinks import BufferedSink, ClickSink, NullSink, SinkLike, StreamSink

__version__: str = TERMOUT_VERSION

__all__ = [
    "BufferedSink",
    "ClickSink",
    "ColorMode",
    "ConfigError",
    "ConsoleOutput",
    "FormatterLike",
    "InvalidOutputTypeError",
    "InvalidStyleError",
    "NullSink",
    "OutputChannel",
    "OutputConfig",
    "OutputFormatter",
    "OutputFormatterStyle",
    "OutputLike",
    "OutputType",
    "SinkLike",
    "StreamSink",
    "TermoutError",
    "VerbosityLevel",
    "__version__",
    "create_console_output",
    "discover_config",
    "escape",
    "load_config",
    "resolve_color_mode",
    "strip_tags",
]
