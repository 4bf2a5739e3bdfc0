# topmark:header:start
#
#   project      : ctap
#   file         : test_colorize_api.py
#   file_relpath : tests/api/test_colorize_api.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Tests for the public `ctap.api` functions."""

from __future__ import annotations

import click
import pytest

from ctap.api import build_processor, colorize
from ctap.config.model import Config, MutableConfig
from ctap.core.exit_codes import ExitCode
from ctap.core.lines import LineKind
from ctap.errors import StyleError
from tests.conftest import console_output, make_config, make_console


def test_colorize_with_defaults() -> None:
    """Without a config the built-in defaults are used."""
    console = make_console()
    code = colorize(["1..1", "ok 1 - works"], console=console)
    assert code == ExitCode.SUCCESS
    assert console_output(console) == "1..1\nok 1 - works\n"


def test_colorize_with_config() -> None:
    """Config switches reach the processor."""
    console = make_console()
    code = colorize(
        ["1..2", "ok 1", "not ok 2"],
        config=make_config(summary=True, failures_only=True),
        console=console,
    )
    assert code == ExitCode.TEST_FAIL
    assert console_output(console).splitlines() == [
        "1..2",
        "not ok 2",
        "FAILED test: 2",
        "Failed 1/2 tests, 50.00% ok",
    ]


def test_colorize_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """The default console writes to standard output."""
    code = colorize(["1..1", "ok"], config=Config())
    assert code == ExitCode.SUCCESS
    captured = capsys.readouterr()
    assert click.unstyle(captured.out) == "1..1\nok\n"


def test_invalid_style_fails_before_reading() -> None:
    """A bad descriptor raises before a single line is consumed."""
    builder = MutableConfig.from_defaults()
    builder.styles[LineKind.BAIL] = "yellow green"
    lines = iter(["1..1", "ok"])
    console = make_console()

    with pytest.raises(StyleError, match="bail"):
        colorize(lines, config=builder.freeze(), console=console)

    assert next(lines) == "1..1"
    assert console_output(console) == ""


def test_build_processor_uses_render_options() -> None:
    """The processor carries the config's render options."""
    config = make_config(glyphs=True)
    processor = build_processor(config, make_console())
    assert processor.options == config.render_options()
    assert not processor.finished
