# topmark:header:start
#
#   project      : TermOut
#   file         : errors.py
#   file_relpath : src/termout/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by TermOut.

Usage:
    Raise these exceptions from output channels, formatters and configuration
    loaders to signal errors with a stable, catchable type. Argument errors also
    derive from `ValueError` so callers that only know the builtin hierarchy can
    still handle them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class TermoutError(Exception):
    """Base class for all TermOut errors."""


class InvalidOutputTypeError(TermoutError, ValueError):
    """Error for a write call with an output type outside NORMAL/RAW/PLAIN.

    Args:
        output_type (object): The rejected output type value.

    Attributes:
        output_type (object): The rejected output type value.
    """

    def __init__(self, output_type: object) -> None:
        self.output_type = output_type
        super().__init__(f"Unknown output type given ({output_type})")


class InvalidStyleError(TermoutError, ValueError):
    """Error for unknown style names, colors, options or badly nested style tags."""


class ConfigError(TermoutError):
    """Error for missing, unreadable or malformed configuration.

    Args:
        message (str): Human-readable description of the problem.
        path (Path | None): The configuration file involved, if any.

    Attributes:
        path (Path | None): The configuration file involved, if any.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)
