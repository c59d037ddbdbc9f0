# rangler:header:start
#
#   project      : Rangler
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Pytest configuration for the Rangler test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest
from hypothesis import settings

from rangler.config import logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

# Opt-in larger example budget: pytest --hypothesis-profile thorough
settings.register_profile("thorough", max_examples=2000, deadline=None)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class FlushCountingBytesIO(io.BytesIO):
    """In-memory binary stream that counts ``flush()`` calls."""

    def __init__(self, initial: bytes = b"") -> None:
        super().__init__(initial)
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class RecordingObserver:
    """Progress observer remembering every notification it receives."""

    def __init__(self) -> None:
        self.updates: list[tuple[int, int]] = []
        self.finished: tuple[int, int] | None = None

    def update(self, bytes_read: int, bytes_stored: int) -> None:
        self.updates.append((bytes_read, bytes_stored))

    def finish(self, bytes_read: int, bytes_stored: int) -> None:
        self.finished = (bytes_read, bytes_stored)


@pytest.fixture(autouse=True)
def silence_rangler_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Rangler's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("RANGLER_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_logging() -> Any:
    """Re-install the test logging setup after each test.

    CLI invocations reconfigure the root logger against Click's captured
    streams; those streams are closed once the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL, use_color=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL, use_color=False)
