# topmark:header:start
#
#   project      : TermOut
#   file         : logging.py
#   file_relpath : src/termout/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for TermOut internals.

TermOut logs how it resolves colors, loads configuration and renders markup.
These records are for people debugging the library; program output always goes
through an output channel and never through logging.

Channels log every sink call at ``TRACE``, a level below ``DEBUG`` registered
here. Set ``TERMOUT_LOG_LEVEL=TRACE`` to see them.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

import click

from termout.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"

# Highest threshold first; the first one at or below the record level wins.
LEVEL_COLORS: Final[tuple[tuple[int, str], ...]] = (
    (logging.CRITICAL, "bright_red"),
    (logging.ERROR, "red"),
    (logging.WARNING, "yellow"),
    (logging.INFO, "green"),
    (logging.DEBUG, "bright_black"),
    (TRACE_LEVEL, "blue"),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class TermoutLogger(logging.Logger):
    """Logger with a ``trace`` method for per-write diagnostics."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at ``TRACE_LEVEL``."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(TermoutLogger)


class ColorFormatter(logging.Formatter):
    """Formatter coloring each record with `click.style` by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it after its level."""
        message: str = super().format(record)
        for threshold, color in LEVEL_COLORS:
            if record.levelno >= threshold:
                return click.style(message, fg=color)
        return click.style(message, dim=True)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TERMOUT_LOG_LEVEL``.

    The value may be a level name (``"trace"``, ``"warn"``...) or a number.

    Returns:
        int | None: The level, or None when the variable is unset or unrecognized.
    """
    value: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    return _LEVEL_NAMES.get(value)


def setup_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """Send TermOut diagnostics to a single colored handler.

    Existing root handlers are replaced.

    Args:
        level (int | None): Root log level. ``None`` reads ``TERMOUT_LOG_LEVEL`` and
            falls back to ``CRITICAL``, which keeps the library silent.
        stream (TextIO | None): Handler stream. Defaults to `sys.stderr` so
            diagnostics never mix with program output on stdout.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> TermoutLogger:
    """Return the `TermoutLogger` called ``name``."""
    return cast("TermoutLogger", logging.getLogger(name))
