# topmark:header:start
#
#   project      : TermOut
#   file         : api.py
#   file_relpath : src/termout/formatter/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic formatter interface used by output channels.

An output channel only needs three things from its formatter: turn markup into
text, and get or set whether that text should carry terminal decoration.
"""

from __future__ import annotations

from typing import Protocol


class FormatterLike(Protocol):
    """Minimal interface for a markup formatter held by an output channel.

    Implementations may render decoration with Click, plain ANSI sequences, or
    nothing at all. The decoration flag is owned by the formatter; channels only
    delegate to it.
    """

    def format(self, text: str) -> str:
        """Apply markup rules to ``text`` and return the result."""
        ...

    def set_decorated(self, decorated: bool) -> None:
        """Set whether markup is rendered as terminal decoration."""
        ...

    def is_decorated(self) -> bool:
        """Return True if markup is rendered as terminal decoration."""
        ...
