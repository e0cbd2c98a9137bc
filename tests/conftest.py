# topmark:header:start
#
#   project      : TermOut
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TermOut test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests that need to observe what reaches a sink use the `sink` fixture (a
    `RecordingSink`). Property tests must not depend on function-scoped fixtures,
    so they build their own sinks through the session-scoped `sink_factory`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from termout.config import logging

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: Any = pytest.hookimpl(*args, **kwargs)

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


class RecordingSink:
    """Sink that records every ``do_write`` call instead of emitting it.

    Attributes:
        calls (list[tuple[str, bool]]): ``(message, newline)`` pairs in call order.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, bool]] = []

    def do_write(self, message: str, newline: bool) -> None:
        """Record the call."""
        self.calls.append((message, newline))

    @property
    def messages(self) -> list[str]:
        """The recorded messages, in call order."""
        return [message for message, _ in self.calls]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak color or log settings into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("TERMOUT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def sink() -> RecordingSink:
    """Return a fresh recording sink."""
    return RecordingSink()


@pytest.fixture(scope="session")
def sink_factory() -> Callable[[], RecordingSink]:
    """Return a factory for recording sinks (safe to use with Hypothesis)."""
    return RecordingSink


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
