# topmark:header:start
#
#   project      : ctap
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Pytest configuration for the ctap test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `ctap.config.model.MutableConfig` (mutable), then
      `freeze()` into a `ctap.config.model.Config` for **public API** calls
      (``ctap.api.colorize``).
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from ctap.api import colorize
from ctap.cli.console import ClickConsole
from ctap.config import logging
from ctap.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ctap.config.model import Config
    from ctap.core.exit_codes import ExitCode

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


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


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_ctap_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the developer's environment out of the tests.

    Removes every ``CTAP_*`` variable (log level, output switches, colors) and the
    generic color switches (``CI``, ``NO_COLOR``, ``FORCE_COLOR``). After the test,
    logging is reset to TRACE on a fresh handler, since CLI runs reconfigure it.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in list(os.environ):
        if name.startswith("CTAP_"):
            monkeypatch.delenv(name, raising=False)
    for name in ("CI", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def chalk_truecolor() -> None:
    """Make yachalk emit true-color ANSI codes regardless of the terminal."""
    chalk.set_color_mode(ChalkColorMode.FullTrueColor)


def make_console(*, enable_color: bool = False) -> ClickConsole:
    """Return a console writing to in-memory buffers.

    Args:
        enable_color (bool): Keep ANSI codes in the output when True.

    Returns:
        ClickConsole: A console whose ``out``/``err`` are `io.StringIO` buffers.
    """
    return ClickConsole(enable_color=enable_color, out=io.StringIO(), err=io.StringIO())


def console_output(console: ClickConsole) -> str:
    """Return everything written to ``console.out`` so far."""
    return cast("io.StringIO", console.out).getvalue()


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def run_tap(lines: Iterable[str], **overrides: Any) -> tuple[ExitCode, list[str]]:
    """Colorize ``lines`` without color and return the exit code and output lines.

    Args:
        lines (Iterable[str]): TAP input lines.
        **overrides (Any): `MutableConfig` overrides (``summary=True``, ...).

    Returns:
        tuple[ExitCode, list[str]]: The exit code and the plain output lines.
    """
    console = make_console()
    code = colorize(lines, config=make_config(**overrides), console=console)
    return code, console_output(console).splitlines()
