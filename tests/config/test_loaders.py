# topmark:header:start
#
#   project      : TermOut
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Config loaders: TOML parsing, pyproject nesting and upward discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from termout.config.color import ColorMode
from termout.config.loaders import discover_config, load_config, load_toml_dict
from termout.core.errors import ConfigError
from termout.core.levels import VerbosityLevel

if TYPE_CHECKING:
    from pathlib import Path

TERMOUT_TOML = """\
verbosity = "verbose"
color = "never"

[styles.success]
fg = "green"
options = ["bold"]
"""

PYPROJECT_TOML = """\
[project]
name = "demo"

[tool.termout]
verbosity = "quiet"
color = "always"
"""


def test_load_toml_dict_returns_plain_values(tmp_path: Path) -> None:
    """It should unwrap tomlkit items into plain Python values."""
    path = tmp_path / "termout.toml"
    path.write_text(TERMOUT_TOML, encoding="utf-8")

    data = load_toml_dict(path)

    assert data == {
        "verbosity": "verbose",
        "color": "never",
        "styles": {"success": {"fg": "green", "options": ["bold"]}},
    }
    assert type(data["verbosity"]) is str


def test_load_toml_dict_errors(tmp_path: Path) -> None:
    """It should raise ConfigError for missing and malformed files."""
    with pytest.raises(ConfigError, match="cannot read"):
        load_toml_dict(tmp_path / "missing.toml")

    bad = tmp_path / "termout.toml"
    bad.write_text("verbosity = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid TOML") as excinfo:
        load_toml_dict(bad)
    assert excinfo.value.path == bad


def test_load_termout_toml(tmp_path: Path) -> None:
    """It should read settings from the top level of termout.toml."""
    path = tmp_path / "termout.toml"
    path.write_text(TERMOUT_TOML, encoding="utf-8")

    config = load_config(path)

    assert config.verbosity is VerbosityLevel.VERBOSE
    assert config.color_mode is ColorMode.NEVER
    assert "success" in config.styles
    assert config.source == path


def test_load_pyproject_tool_table(tmp_path: Path) -> None:
    """It should read settings from [tool.termout] in pyproject.toml."""
    path = tmp_path / "pyproject.toml"
    path.write_text(PYPROJECT_TOML, encoding="utf-8")

    config = load_config(path)

    assert config.verbosity is VerbosityLevel.QUIET
    assert config.color_mode is ColorMode.ALWAYS


def test_pyproject_tool_termout_must_be_a_table(tmp_path: Path) -> None:
    """It should reject a non-table [tool.termout] value."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool]\ntermout = "on"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(path)


def test_discover_walks_up_to_nearest_file(tmp_path: Path) -> None:
    """It should find the closest configuration in a parent directory."""
    (tmp_path / "termout.toml").write_text(TERMOUT_TOML, encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    config = discover_config(nested)

    assert config.source == (tmp_path / "termout.toml").resolve()
    assert config.verbosity is VerbosityLevel.VERBOSE


def test_discover_prefers_termout_toml_over_pyproject(tmp_path: Path) -> None:
    """It should pick termout.toml when both files are in the same directory."""
    (tmp_path / "termout.toml").write_text(TERMOUT_TOML, encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML, encoding="utf-8")

    config = discover_config(tmp_path)

    assert config.color_mode is ColorMode.NEVER


def test_discover_skips_pyproject_without_tool_table(tmp_path: Path) -> None:
    """It should ignore a pyproject.toml that has no [tool.termout] table."""
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML, encoding="utf-8")
    inner = tmp_path / "pkg"
    inner.mkdir()
    (inner / "pyproject.toml").write_text('[project]\nname = "inner"\n', encoding="utf-8")

    config = discover_config(inner)

    assert config.source == (tmp_path / "pyproject.toml").resolve()
    assert config.verbosity is VerbosityLevel.QUIET


def test_discover_from_a_file_path(tmp_path: Path) -> None:
    """It should start from the parent directory when given a file."""
    (tmp_path / "termout.toml").write_text(TERMOUT_TOML, encoding="utf-8")
    script = tmp_path / "script.py"
    script.write_text("", encoding="utf-8")

    assert discover_config(script).verbosity is VerbosityLevel.VERBOSE


def test_discover_defaults_to_current_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """It should search from the working directory when no start is given."""
    (tmp_path / "termout.toml").write_text('color = "always"\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert discover_config().color_mode is ColorMode.ALWAYS


def test_invalid_utf8_raises_config_error(tmp_path: Path) -> None:
    """It should report undecodable bytes as ConfigError."""
    path = tmp_path / "termout.toml"
    path.write_bytes(b'verbosity = "\xff\xfe"\n')

    with pytest.raises(ConfigError, match="invalid UTF-8") as excinfo:
        load_config(path)
    assert excinfo.value.path == path


def test_discover_skips_undecodable_pyproject(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """It should warn about and skip a pyproject.toml that is not UTF-8."""
    (tmp_path / "termout.toml").write_text(TERMOUT_TOML, encoding="utf-8")
    inner = tmp_path / "pkg"
    inner.mkdir()
    (inner / "pyproject.toml").write_bytes(b"[tool.termout]\nname = '\xe9t\xe9'\n")

    config = discover_config(inner)

    assert config.source == (tmp_path / "termout.toml").resolve()
    assert "Skipping" in caplog.text
