# topmark:header:start
#
#   project      : TermOut
#   file         : test_console.py
#   file_relpath : tests/output/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console output: stdout/stderr channel pair and configuration-driven setup."""

from __future__ import annotations

import io
from types import MappingProxyType

import click
import pytest

from termout.config.color import ColorMode
from termout.config.model import OutputConfig
from termout.core.levels import OutputType, VerbosityLevel
from termout.formatter.formatter import OutputFormatter
from termout.formatter.style import OutputFormatterStyle
from termout.output.channel import OutputChannel
from termout.output.console import ConsoleOutput
from termout.output.factory import create_console_output
from termout.output.sinks import BufferedSink


def _streams() -> tuple[io.StringIO, io.StringIO]:
    return io.StringIO(), io.StringIO()


def test_writes_go_to_out_and_error_output_to_err() -> None:
    """It should split regular and error output across the two streams."""
    out, err = _streams()
    console = ConsoleOutput(out=out, err=err)

    console.writeln("<info>hello</info>")
    console.get_error_output().writeln("<error>boom</error>")

    assert out.getvalue() == "hello\n"
    assert err.getvalue() == "boom\n"


def test_auto_decoration_is_off_for_non_tty_streams() -> None:
    """It should resolve decorated=None to False for a StringIO."""
    out, err = _streams()

    console = ConsoleOutput(out=out, err=err)

    assert console.is_decorated() is False
    assert console.get_error_output().is_decorated() is False


def test_force_color_enables_decoration(monkeypatch: pytest.MonkeyPatch) -> None:
    """It should honor FORCE_COLOR when decoration is left to auto-detection."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    out, err = _streams()

    console = ConsoleOutput(out=out, err=err)
    console.write("<info>x</info>")

    assert console.is_decorated() is True
    assert out.getvalue() == click.style("x", fg="green")


def test_channels_share_formatter_and_settings() -> None:
    """It should apply decoration, verbosity and formatter changes to both channels."""
    out, err = _streams()
    console = ConsoleOutput(decorated=False, out=out, err=err)
    errors: OutputChannel = console.get_error_output()

    assert errors.get_formatter() is console.get_formatter()

    console.set_decorated(True)
    assert errors.is_decorated() is True

    console.set_verbosity(VerbosityLevel.QUIET)
    assert errors.get_verbosity() is VerbosityLevel.QUIET

    formatter = OutputFormatter()
    console.set_formatter(formatter)
    assert errors.get_formatter() is formatter


def test_set_decorated_controls_ansi_emission() -> None:
    """It should emit ANSI codes on both streams once decoration is enabled."""
    out, err = _streams()
    console = ConsoleOutput(decorated=False, out=out, err=err)

    console.set_decorated(True)
    console.write("<comment>c</comment>")
    console.get_error_output().write("<comment>e</comment>")

    assert out.getvalue() == click.style("c", fg="yellow")
    assert err.getvalue() == click.style("e", fg="yellow")


def test_quiet_silences_both_channels() -> None:
    """It should suppress everything on both streams when QUIET."""
    out, err = _streams()
    console = ConsoleOutput(VerbosityLevel.QUIET, out=out, err=err)

    console.writeln("a")
    console.get_error_output().writeln("b", OutputType.RAW)

    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_error_output_can_be_replaced() -> None:
    """It should use the replacement error channel."""
    out, err = _streams()
    console = ConsoleOutput(out=out, err=err)
    sink = BufferedSink()

    console.set_error_output(OutputChannel(sink))
    console.get_error_output().writeln("captured")

    assert sink.fetch() == "captured\n"
    assert err.getvalue() == ""


# --- Factory -----------------------------------------------------------------


def test_create_console_output_defaults() -> None:
    """It should build a normal, undecorated console for non-TTY streams."""
    out, err = _streams()

    console = create_console_output(out=out, err=err)

    assert console.get_verbosity() is VerbosityLevel.NORMAL
    assert console.is_decorated() is False


def test_create_console_output_applies_config() -> None:
    """It should apply verbosity, color mode and custom styles from the config."""
    out, err = _streams()
    config = OutputConfig(
        verbosity=VerbosityLevel.VERBOSE,
        color_mode=ColorMode.ALWAYS,
        styles=MappingProxyType({"success": OutputFormatterStyle("green", options=["bold"])}),
    )

    console = create_console_output(config, out=out, err=err)
    console.write("<success>ok</success>")

    assert console.is_verbose() is True
    assert console.is_decorated() is True
    assert out.getvalue() == click.style("ok", fg="green", bold=True)


def test_create_console_output_never_color_beats_force_color(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """It should let an explicit ``never`` override FORCE_COLOR."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    out, err = _streams()

    console = create_console_output(OutputConfig(color_mode=ColorMode.NEVER), out=out, err=err)

    assert console.is_decorated() is False


@pytest.mark.parametrize("decorated", [False, True])
def test_raw_output_keeps_ansi_sequences(decorated: bool) -> None:
    """It should emit RAW messages byte for byte, whatever the decoration."""
    out, err = _streams()
    console = ConsoleOutput(decorated=decorated, out=out, err=err)
    styled = "\x1b[31mred\x1b[0m"

    console.write(styled, output_type=OutputType.RAW)
    console.get_error_output().write(styled, output_type=OutputType.RAW)

    assert out.getvalue() == styled
    assert err.getvalue() == styled


def test_undecorated_console_strips_markup_only() -> None:
    """It should leave decoration to the formatter after set_decorated(False)."""
    out, err = _streams()
    console = ConsoleOutput(decorated=True, out=out, err=err)

    console.set_decorated(False)
    console.write("<info>plain</info>")
    console.write("\x1b[1mraw\x1b[0m", output_type=OutputType.RAW)

    assert out.getvalue() == "plain\x1b[1mraw\x1b[0m"
