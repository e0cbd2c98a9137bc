# topmark:header:start
#
#   project      : TermOut
#   file         : factory.py
#   file_relpath : src/termout/output/factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build output channels from an [`OutputConfig`][termout.config.model.OutputConfig]."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from termout.config.color import resolve_color_mode
from termout.config.logging import get_logger
from termout.config.model import OutputConfig
from termout.formatter.formatter import OutputFormatter
from termout.output.console import ConsoleOutput

if TYPE_CHECKING:
    from termout.config.logging import TermoutLogger

logger: TermoutLogger = get_logger(__name__)


def create_formatter(config: OutputConfig) -> OutputFormatter:
    """Return an undecorated formatter with the configured styles registered."""
    return OutputFormatter(styles=config.styles)


def create_console_output(
    config: OutputConfig | None = None,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> ConsoleOutput:
    """Build a [`ConsoleOutput`][termout.output.console.ConsoleOutput] from a configuration.

    Args:
        config (OutputConfig | None): Settings to apply. ``None`` uses the defaults.
        out (TextIO | None): Stream for standard output (defaults to `sys.stdout`).
        err (TextIO | None): Stream for error output (defaults to `sys.stderr`).

    Returns:
        ConsoleOutput: The configured console output.
    """
    config = config or OutputConfig()
    out = out or sys.stdout

    decorated: bool = resolve_color_mode(color_mode_override=config.color_mode, stream=out)
    logger.debug(
        "Creating console output (verbosity=%s, color=%s -> decorated=%s, source=%s)",
        config.verbosity.name,
        config.color_mode.value,
        decorated,
        config.source,
    )
    return ConsoleOutput(
        config.verbosity,
        decorated,
        create_formatter(config),
        out=out,
        err=err,
    )
