# topmark:header:start
#
#   project      : TermOut
#   file         : color.py
#   file_relpath : src/termout/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for output channels.

This module turns the user's color intent (``auto``/``always``/``never``) into
the boolean ``decorated`` flag that output channels hand to their formatter.
It does not depend on any console instance so it can be reused from
configuration loading and tests alike.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from termout.config.logging import get_logger
from termout.constants import FORCE_COLOR_ENV_VAR, NO_COLOR_ENV_VAR

if TYPE_CHECKING:
    from termout.config.logging import TermoutLogger


logger: TermoutLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for decorated terminal output.

    Attributes:
        AUTO: Decorate only when appropriate (typically when the stream is a TTY).
        ALWAYS: Force-enable decoration regardless of TTY status.
        NEVER: Disable decoration entirely.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    stream: TextIO | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether decorated output should be enabled.

    Decision precedence:
        1. **Override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: If none of the above decide, return ``stream.isatty()``.

    Args:
        color_mode_override (ColorMode | None): Explicit color mode; `None` or
            ``AUTO`` defer to the environment and the TTY check.
        stream (TextIO | None): Stream probed for TTY status. Defaults to `sys.stdout`.
        stdout_isatty (bool | None): Optional override for TTY detection. When `None`,
            the function calls ``stream.isatty()`` and falls back to `False` on error.

    Returns:
        bool: True if ANSI decoration should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv(FORCE_COLOR_ENV_VAR)
    if force_color and force_color != "0":
        logger.debug("%s=%s forces decorated output", FORCE_COLOR_ENV_VAR, force_color)
        return True
    if os.getenv(NO_COLOR_ENV_VAR) is not None:
        logger.debug("%s is set; decoration disabled", NO_COLOR_ENV_VAR)
        return False

    if stdout_isatty is None:
        probe: TextIO = stream if stream is not None else sys.stdout
        try:
            stdout_isatty = probe.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
