# topmark:header:start
#
#   project      : TermOut
#   file         : style.py
#   file_relpath : src/termout/formatter/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal styles for formatter markup.

An `OutputFormatterStyle` bundles a foreground color, a background color and a
set of text options, and renders text with them through `click.style`.

Styles can also be parsed from the inline tag syntax used in markup::

    <fg=red;bg=blue;options=bold,underscore>text</>
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import click

from termout.config.logging import get_logger
from termout.core.errors import InvalidStyleError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from termout.config.logging import TermoutLogger

logger: TermoutLogger = get_logger(__name__)

BASE_COLORS: Final[tuple[str, ...]] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

COLORS: Final[frozenset[str]] = frozenset(
    (*BASE_COLORS, *(f"bright_{c}" for c in BASE_COLORS))
)

# Markup option name -> click.style keyword
OPTIONS: Final[dict[str, str]] = {
    "bold": "bold",
    "dim": "dim",
    "underscore": "underline",
    "italic": "italic",
    "blink": "blink",
    "reverse": "reverse",
    "strikethrough": "strikethrough",
}


def _check_color(kind: str, color: str | None) -> str | None:
    if color is None:
        return None
    name: str = color.strip().lower()
    if name not in COLORS:
        raise InvalidStyleError(
            f"Invalid {kind} color specified: '{color}'. "
            f"Expected one of ({', '.join(sorted(COLORS))})"
        )
    return name


class OutputFormatterStyle:
    """A foreground/background/options combination applied to formatter output.

    Args:
        foreground (str | None): Foreground color name, or None for the terminal default.
        background (str | None): Background color name, or None for the terminal default.
        options (Iterable[str] | None): Option names (``bold``, ``underscore``, ...).

    Raises:
        InvalidStyleError: If a color or option name is unknown.
    """

    def __init__(
        self,
        foreground: str | None = None,
        background: str | None = None,
        options: Iterable[str] | None = None,
    ) -> None:
        self._foreground: str | None = None
        self._background: str | None = None
        self._options: set[str] = set()

        self.set_foreground(foreground)
        self.set_background(background)
        self.set_options(options or ())

    @property
    def foreground(self) -> str | None:
        """The foreground color name, or None."""
        return self._foreground

    @property
    def background(self) -> str | None:
        """The background color name, or None."""
        return self._background

    @property
    def options(self) -> frozenset[str]:
        """The active option names."""
        return frozenset(self._options)

    def set_foreground(self, color: str | None) -> None:
        """Set the foreground color (None resets it)."""
        self._foreground = _check_color("foreground", color)

    def set_background(self, color: str | None) -> None:
        """Set the background color (None resets it)."""
        self._background = _check_color("background", color)

    def set_option(self, option: str) -> None:
        """Enable a single text option.

        Raises:
            InvalidStyleError: If the option is unknown.
        """
        name: str = option.strip().lower()
        if name not in OPTIONS:
            raise InvalidStyleError(
                f"Invalid option specified: '{option}'. "
                f"Expected one of ({', '.join(sorted(OPTIONS))})"
            )
        self._options.add(name)

    def unset_option(self, option: str) -> None:
        """Disable a single text option (no-op if it was not set)."""
        self._options.discard(option.strip().lower())

    def set_options(self, options: Iterable[str]) -> None:
        """Replace all text options."""
        self._options = set()
        for option in options:
            self.set_option(option)

    def is_empty(self) -> bool:
        """Return True if the style sets no color and no option."""
        return self._foreground is None and self._background is None and not self._options

    def apply(self, text: str) -> str:
        """Return ``text`` wrapped in the ANSI codes for this style.

        Args:
            text (str): Text to style.

        Returns:
            str: The styled text. Empty input yields an empty string.
        """
        if not text or self.is_empty():
            return text
        flags: dict[str, bool] = {OPTIONS[o]: True for o in self._options}
        return click.style(text, fg=self._foreground, bg=self._background, **flags)

    @classmethod
    def from_string(cls, spec: str) -> OutputFormatterStyle | None:
        """Parse an inline style spec such as ``fg=red;bg=blue;options=bold``.

        Args:
            spec (str): The tag body between ``<`` and ``>``.

        Returns:
            OutputFormatterStyle | None: The parsed style, or None when ``spec`` is
                not a valid inline style (the caller then keeps the tag literally).
        """
        style = cls()
        matched: bool = False
        for part in spec.lower().split(";"):
            if not part:
                continue
            key, sep, value = part.partition("=")
            if not sep or not value:
                return None
            try:
                if key == "fg":
                    style.set_foreground(value)
                elif key == "bg":
                    style.set_background(value)
                elif key == "options":
                    style.set_options(o for o in value.split(",") if o)
                else:
                    return None
            except InvalidStyleError as exc:
                logger.debug("Ignoring invalid inline style '%s': %s", spec, exc)
                return None
            matched = True
        return style if matched else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutputFormatterStyle):
            return NotImplemented
        return (self._foreground, self._background, self._options) == (
            other._foreground,
            other._background,
            other._options,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"OutputFormatterStyle(foreground={self._foreground!r}, "
            f"background={self._background!r}, options={sorted(self._options)!r})"
        )
