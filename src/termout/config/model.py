# topmark:header:start
#
#   project      : TermOut
#   file         : model.py
#   file_relpath : src/termout/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable output configuration.

`OutputConfig` carries the settings used to build an output channel. Every
field has a default, so an empty configuration file (or none at all) yields a
normal-verbosity, auto-color console with the built-in styles.

Shape of the configuration table (``termout.toml`` top level, or
``[tool.termout]`` in ``pyproject.toml``):

```toml
verbosity = "normal"        # "quiet" | "normal" | "verbose" | 0..2
color = "auto"              # "auto" | "always" | "never"

[styles.success]
fg = "green"
options = ["bold"]
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from termout.config.color import ColorMode
from termout.config.logging import get_logger
from termout.core.errors import ConfigError, InvalidStyleError
from termout.core.levels import VerbosityLevel
from termout.formatter.style import OutputFormatterStyle

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from termout.config.logging import TermoutLogger

logger: TermoutLogger = get_logger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset({"verbosity", "color", "styles"})
STYLE_KEYS: frozenset[str] = frozenset({"fg", "bg", "options"})


def _empty_styles() -> Mapping[str, OutputFormatterStyle]:
    return MappingProxyType({})


@dataclass(frozen=True)
class OutputConfig:
    """Settings for building an output channel.

    Attributes:
        verbosity (VerbosityLevel): Initial verbosity level.
        color_mode (ColorMode): Decoration intent, resolved when the channel is built.
        styles (Mapping[str, OutputFormatterStyle]): Extra named styles registered
            on the formatter (read-only mapping).
        source (Path | None): File the configuration was read from, if any.

    Instances are hashable; the hash leaves out ``styles``.
    """

    verbosity: VerbosityLevel = VerbosityLevel.NORMAL
    color_mode: ColorMode = ColorMode.AUTO
    styles: Mapping[str, OutputFormatterStyle] = field(default_factory=_empty_styles, hash=False)
    source: Path | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: Path | None = None) -> OutputConfig:
        """Build a validated configuration from a plain mapping.

        Unknown keys are ignored with a warning.

        Args:
            data (Mapping[str, Any]): Parsed TOML table.
            source (Path | None): File the table was read from (for error messages).

        Returns:
            OutputConfig: The configuration.

        Raises:
            ConfigError: If a value has the wrong type or an unknown name.
        """
        for key in data:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)

        verbosity: VerbosityLevel = _parse_verbosity(data.get("verbosity"), source)
        color_mode: ColorMode = _parse_color_mode(data.get("color"), source)
        styles: dict[str, OutputFormatterStyle] = _parse_styles(data.get("styles"), source)

        return cls(
            verbosity=verbosity,
            color_mode=color_mode,
            styles=MappingProxyType(styles),
            source=source,
        )


def _parse_verbosity(value: object, source: Path | None) -> VerbosityLevel:
    if value is None:
        return VerbosityLevel.NORMAL
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise ConfigError(f"'verbosity' must be a name or an integer, got {value!r}", path=source)
    try:
        if isinstance(value, int):
            return VerbosityLevel(value)
        if isinstance(value, str):
            return VerbosityLevel.from_name(value)
    except ValueError as exc:
        raise ConfigError(f"invalid 'verbosity': {exc}", path=source) from exc
    raise ConfigError(f"'verbosity' must be a name or an integer, got {value!r}", path=source)


def _parse_color_mode(value: object, source: Path | None) -> ColorMode:
    if value is None:
        return ColorMode.AUTO
    if isinstance(value, str):
        try:
            return ColorMode(value.strip().lower())
        except ValueError:
            pass
    choices: str = ", ".join(m.value for m in ColorMode)
    raise ConfigError(f"invalid 'color' {value!r}. Must be one of: {choices}", path=source)


def _parse_styles(value: object, source: Path | None) -> dict[str, OutputFormatterStyle]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("'styles' must be a table", path=source)

    styles: dict[str, OutputFormatterStyle] = {}
    for name, spec_any in cast("dict[str, Any]", value).items():
        if not isinstance(spec_any, dict):
            raise ConfigError(f"style '{name}' must be a table", path=source)
        spec: dict[str, Any] = cast("dict[str, Any]", spec_any)
        for key in spec:
            if key not in STYLE_KEYS:
                raise ConfigError(f"style '{name}' has unknown key '{key}'", path=source)

        options: object = spec.get("options", [])
        if isinstance(options, str):
            options = [o for o in options.split(",") if o]
        if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
            raise ConfigError(f"style '{name}': 'options' must be a list of names", path=source)

        try:
            styles[name.lower()] = OutputFormatterStyle(
                foreground=spec.get("fg"),
                background=spec.get("bg"),
                options=cast("list[str]", options),
            )
        except (InvalidStyleError, AttributeError) as exc:
            raise ConfigError(f"style '{name}': {exc}", path=source) from exc
    return styles
