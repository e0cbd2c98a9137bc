# topmark:header:start
#
#   project      : TermOut
#   file         : __init__.py
#   file_relpath : src/termout/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core vocabulary of TermOut: levels, output types and exceptions."""

from __future__ import annotations

from termout.core.errors import (
    ConfigError,
    InvalidOutputTypeError,
    InvalidStyleError,
    TermoutError,
)
from termout.core.levels import OutputType, VerbosityLevel

__all__ = [
    "ConfigError",
    "InvalidOutputTypeError",
    "InvalidStyleError",
    "OutputType",
    "TermoutError",
    "VerbosityLevel",
]
