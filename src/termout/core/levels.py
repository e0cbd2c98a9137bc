# topmark:header:start
#
#   project      : TermOut
#   file         : levels.py
#   file_relpath : src/termout/core/levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verbosity levels and output types shared by all TermOut frontends.

This module centralizes the two closed vocabularies used by output channels so
formatters, sinks and configuration loaders agree on the same values without
importing the channel itself.
"""

from __future__ import annotations

from enum import IntEnum


class VerbosityLevel(IntEnum):
    """Program-output verbosity.

    Attributes:
        QUIET: Suppress all output.
        NORMAL: Regular output (default).
        VERBOSE: More output. Channels treat it like ``NORMAL``; callers may use
            it to decide whether to emit extra detail.
    """

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2

    @classmethod
    def from_name(cls, name: str) -> VerbosityLevel:
        """Return the level for a case-insensitive name such as ``"quiet"``.

        Args:
            name (str): Level name.

        Returns:
            VerbosityLevel: The matching level.

        Raises:
            ValueError: If the name does not match any level.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices: str = ", ".join(m.name.lower() for m in cls)
            raise ValueError(f"Unknown verbosity '{name}'. Must be one of: {choices}") from None


class OutputType(IntEnum):
    """Transform applied to a message before it reaches the sink.

    Attributes:
        NORMAL: Pass the message through the formatter.
        RAW: Emit the message unchanged.
        PLAIN: Format the message, then strip all remaining tags.
    """

    NORMAL = 0
    RAW = 1
    PLAIN = 2
