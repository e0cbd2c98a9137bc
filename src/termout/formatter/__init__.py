# topmark:header:start
#
#   project      : TermOut
#   file         : __init__.py
#   file_relpath : src/termout/formatter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup formatting for TermOut output channels."""

from __future__ import annotations

from termout.formatter.api import FormatterLike
from termout.formatter.formatter import OutputFormatter, default_styles, escape, strip_tags
from termout.formatter.style import OutputFormatterStyle

__all__ = [
    "FormatterLike",
    "OutputFormatter",
    "OutputFormatterStyle",
    "default_styles",
    "escape",
    "strip_tags",
]
