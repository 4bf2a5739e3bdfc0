# topmark:header:start
#
#   project      : ctap
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Tests for style descriptors, renderers and the style map."""

from __future__ import annotations

import pytest

from ctap.core.lines import STYLE_KEYS, LineKind, OutcomeKind
from ctap.errors import StyleError
from ctap.rendering.styles import DEFAULT_STYLES, LineRenderer, StyleMap, parse_style, plain
from tests.conftest import console_output, make_console, parametrize

# --- parse_style ---------------------------------------------------------------


@parametrize(
    "descriptor",
    [
        "red",
        "RED bold",
        "bold green",
        "#c90",
        "c90",
        "#CC9900 underscore",
        "default",
        "gray fuzzy italic reverse concealed",
        "yellow blink",
        "  cyan   bold  ",
    ],
)
def test_parse_style_accepts(descriptor: str) -> None:
    """One color plus any modifiers, in any order and case, is valid."""
    color = parse_style(descriptor)
    assert "text" in color("text")


@parametrize(
    "descriptor, message",
    [
        ("", "empty"),
        ("   ", "empty"),
        ("purple", "bad colour"),
        ("red green", "multiple colours"),
        ("bold", "no colour"),
        ("bold italic", "no colour"),
        ("#12345", "bad colour"),
        ("#ggg", "bad colour"),
    ],
)
def test_parse_style_rejects(descriptor: str, message: str) -> None:
    """Invalid descriptors raise `StyleError` with a helpful message."""
    with pytest.raises(StyleError, match=message):
        parse_style(descriptor)


@pytest.mark.usefixtures("chalk_truecolor")
def test_colors_emit_ansi_codes() -> None:
    """Named and hex colors produce escape sequences around the text."""
    styled = parse_style("red bold")("failed")
    assert styled != "failed"
    assert "\x1b[" in styled
    assert "failed" in styled

    assert "38;2;204;153;0" in parse_style("#c90")("x")


@pytest.mark.usefixtures("chalk_truecolor")
def test_short_and_long_hex_are_equivalent() -> None:
    """``#rgb`` expands to ``#rrggbb``; the leading ``#`` is optional."""
    expected = parse_style("#cc9900")("x")
    assert parse_style("#c90")("x") == expected
    assert parse_style("cc9900")("x") == expected


def test_default_color_leaves_text_untouched() -> None:
    """The ``default`` color without modifiers does not decorate text."""
    assert parse_style("default")("as is") == "as is"
    assert plain("a", "b") == "a b"


def test_blink_uses_click_style() -> None:
    """``blink`` is applied as SGR 5 around the colored text."""
    styled = parse_style("default blink")("alert")
    assert styled.startswith("\x1b[5m")
    assert "alert" in styled


# --- LineRenderer --------------------------------------------------------------


def test_line_renderer_println_and_printf() -> None:
    """`println` adds a newline; `printf` only writes the newline it is given."""
    console = make_console()
    renderer = LineRenderer(plain, console)
    renderer.println("one")
    renderer.printf("%d/%d", 1, 2)
    renderer.printf(" tests\n")
    assert console_output(console) == "one\n1/2 tests\n"


@pytest.mark.usefixtures("chalk_truecolor")
def test_printf_keeps_newline_outside_styles() -> None:
    """The trailing newline is written after the closing escape sequence."""
    console = make_console(enable_color=True)
    LineRenderer(parse_style("green"), console).printf("%s\n", "Passed")
    out = console_output(console)
    assert out.endswith("m\n")
    assert "Passed\n" not in out


# --- StyleMap ------------------------------------------------------------------


def test_default_styles_cover_every_key() -> None:
    """Built-in defaults define a descriptor for every style key."""
    assert set(DEFAULT_STYLES) == set(STYLE_KEYS)
    assert DEFAULT_STYLES[LineKind.TEST_NOT_OK] == "red bold"
    assert DEFAULT_STYLES[OutcomeKind.PLAN_FAIL] == "magenta bold"


def test_style_map_resolves_every_key() -> None:
    """Every style key resolves to its own renderer."""
    styles = StyleMap.from_descriptors(DEFAULT_STYLES, make_console())
    assert styles.renderer_for(LineKind.PLAN) is styles.plan
    assert styles.renderer_for(OutcomeKind.SUMMARY_FAIL) is styles.summary_fail
    renderers = [styles.renderer_for(key) for key in STYLE_KEYS]
    assert all(isinstance(r, LineRenderer) for r in renderers)
    assert len({id(r) for r in renderers}) == len(STYLE_KEYS)


def test_style_map_requires_every_key() -> None:
    """A missing descriptor is a configuration error."""
    descriptors = dict(DEFAULT_STYLES)
    del descriptors[OutcomeKind.SUMMARY_OK]
    with pytest.raises(StyleError, match="summary_ok"):
        StyleMap.from_descriptors(descriptors, make_console())


def test_style_map_names_the_bad_key() -> None:
    """An invalid descriptor is reported with the key it belongs to."""
    descriptors = dict(DEFAULT_STYLES)
    descriptors[LineKind.DIAGNOSTIC] = "grey"
    with pytest.raises(StyleError, match="diagnostic: bad colour string 'grey'"):
        StyleMap.from_descriptors(descriptors, make_console())


@pytest.mark.usefixtures("chalk_truecolor")
def test_colored_and_plain_rendering() -> None:
    """Failing lines are colored; unknown lines keep the terminal's default."""
    console = make_console(enable_color=True)
    styles = StyleMap.from_descriptors(DEFAULT_STYLES, console)
    styles.renderer_for(LineKind.TEST_NOT_OK).println("not ok 1")
    styles.renderer_for(LineKind.UNKNOWN).println("chatter")
    first, second = console_output(console).splitlines()
    assert "\x1b[" in first
    assert second == "chatter"


@pytest.mark.usefixtures("chalk_truecolor")
def test_disabled_console_strips_styles() -> None:
    """A console with color disabled writes plain text."""
    console = make_console(enable_color=False)
    styles = StyleMap.from_descriptors(DEFAULT_STYLES, console)
    styles.renderer_for(LineKind.TEST_NOT_OK).println("not ok 1")
    assert console_output(console) == "not ok 1\n"
