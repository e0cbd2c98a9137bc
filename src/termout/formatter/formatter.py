# topmark:header:start
#
#   project      : TermOut
#   file         : formatter.py
#   file_relpath : src/termout/formatter/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default markup formatter for output channels.

Markup syntax:
    - ``<info>text</info>``: apply the named style ``info``.
    - ``<fg=red;bg=blue;options=bold>text</>``: apply an inline style.
    - ``</>``: close the innermost open style.
    - ``\\<``: a literal ``<`` that is never read as a tag.

Tags that name neither a registered style nor a valid inline style are kept in
the text as-is. When the formatter is not decorated, recognized tags are removed
and no ANSI codes are emitted.

Example:
    ```python
    formatter = OutputFormatter(decorated=False)
    formatter.format("<info>done</info>")  # 'done'
    ```
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from termout.config.logging import get_logger
from termout.core.errors import InvalidStyleError
from termout.formatter.style import OutputFormatterStyle

if TYPE_CHECKING:
    from collections.abc import Mapping

    from termout.config.logging import TermoutLogger

logger: TermoutLogger = get_logger(__name__)

# Groups: 1 = escape backslash, 2 = closing slash, 3 = style name or inline spec
TAG_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(\\?)<(/?)([a-z][a-z0-9_=;,-]*)?>", re.IGNORECASE
)

# Anything that looks like a tag once formatting is done
STRIP_PATTERN: Final[re.Pattern[str]] = re.compile(r"<[^<>]*>")


def default_styles() -> dict[str, OutputFormatterStyle]:
    """Return a fresh copy of the built-in named styles."""
    return {
        "error": OutputFormatterStyle("white", "red"),
        "info": OutputFormatterStyle("green"),
        "comment": OutputFormatterStyle("yellow"),
        "question": OutputFormatterStyle("black", "cyan"),
    }


def escape(text: str) -> str:
    """Escape ``<`` so ``text`` is emitted verbatim by `OutputFormatter.format`."""
    return text.replace("<", "\\<")


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` tag from ``text``.

    Args:
        text (str): Text, typically the result of `OutputFormatter.format`.

    Returns:
        str: ``text`` without tags. Text without tags is returned unchanged.
    """
    # Removing "<a>" from "<<a>>" leaves "<>", so repeat until nothing matches
    count: int = 1
    while count:
        text, count = STRIP_PATTERN.subn("", text)
    return text


class OutputFormatter:
    """Formatter that turns TermOut markup into decorated or plain text.

    Args:
        decorated (bool): Whether recognized tags are rendered as ANSI decoration.
        styles (Mapping[str, OutputFormatterStyle] | None): Extra named styles,
            added on top of (or replacing) the built-in ones.
    """

    def __init__(
        self,
        decorated: bool = False,
        styles: Mapping[str, OutputFormatterStyle] | None = None,
    ) -> None:
        self._decorated: bool = bool(decorated)
        self._styles: dict[str, OutputFormatterStyle] = default_styles()
        for name, style in (styles or {}).items():
            self.set_style(name, style)

    def set_decorated(self, decorated: bool) -> None:
        """Set whether recognized tags are rendered as ANSI decoration."""
        self._decorated = bool(decorated)

    def is_decorated(self) -> bool:
        """Return True if recognized tags are rendered as ANSI decoration."""
        return self._decorated

    def set_style(self, name: str, style: OutputFormatterStyle) -> None:
        """Register (or replace) a named style. Names are case-insensitive."""
        logger.trace("Registering style '%s': %r", name, style)
        self._styles[name.lower()] = style

    def has_style(self, name: str) -> bool:
        """Return True if a style with this name is registered."""
        return name.lower() in self._styles

    def get_style(self, name: str) -> OutputFormatterStyle:
        """Return the named style.

        Raises:
            InvalidStyleError: If no style with this name is registered.
        """
        try:
            return self._styles[name.lower()]
        except KeyError:
            raise InvalidStyleError(f"Undefined style: {name}") from None

    @property
    def styles(self) -> dict[str, OutputFormatterStyle]:
        """A copy of the registered named styles."""
        return dict(self._styles)

    def format(self, text: str) -> str:
        """Render markup in ``text``.

        Args:
            text (str): Text that may contain style tags.

        Returns:
            str: The text with recognized tags rendered (decorated) or removed
                (undecorated). Unknown tags are kept literally.

        Raises:
            InvalidStyleError: If a closing tag does not match any open style.
        """
        stack: list[OutputFormatterStyle] = []
        chunks: list[str] = []
        pos: int = 0

        for match in TAG_PATTERN.finditer(text):
            chunks.append(self._render(stack, text[pos : match.start()]))
            pos = match.end()

            escaped, closing, name = match.group(1), match.group(2), match.group(3)
            if escaped:
                chunks.append(self._render(stack, match.group(0)))
                continue

            if not name:
                if closing:
                    # "</>" closes the innermost style
                    if stack:
                        stack.pop()
                else:
                    chunks.append(self._render(stack, "<>"))
                continue

            style: OutputFormatterStyle | None = self._styles.get(name.lower())
            if style is None:
                style = OutputFormatterStyle.from_string(name)
            if style is None:
                chunks.append(self._render(stack, match.group(0)))
                continue

            if closing:
                self._pop(stack, style, name)
            else:
                stack.append(style)

        chunks.append(self._render(stack, text[pos:]))
        return "".join(chunks)

    def _render(self, stack: list[OutputFormatterStyle], segment: str) -> str:
        segment = segment.replace("\\<", "<")
        if not segment or not self._decorated or not stack:
            return segment
        return stack[-1].apply(segment)

    @staticmethod
    def _pop(stack: list[OutputFormatterStyle], style: OutputFormatterStyle, name: str) -> None:
        for index in range(len(stack) - 1, -1, -1):
            if stack[index] == style:
                del stack[index:]
                return
        raise InvalidStyleError(f"Incorrectly nested style tag found: </{name}>")
