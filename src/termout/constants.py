# topmark:header:start
#
#   project      : TermOut
#   file         : constants.py
#   file_relpath : src/termout/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermOut Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TERMOUT_VERSION: str = get_version("termout")
except PackageNotFoundError:  # running from a source checkout
    TERMOUT_VERSION = "0.0.0"

# Environment variables
LOG_LEVEL_ENV_VAR: str = "TERMOUT_LOG_LEVEL"
FORCE_COLOR_ENV_VAR: str = "FORCE_COLOR"
NO_COLOR_ENV_VAR: str = "NO_COLOR"

# Configuration files, in discovery order within one directory
TERMOUT_TOML_NAME: str = "termout.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
# Table holding TermOut settings inside pyproject.toml: [tool.termout]
PYPROJECT_TOOL_TABLE: tuple[str, str] = ("tool", "termout")

LINE_SEPARATOR: str = "\n"
