# topmark:header:start
#
#   project      : ctap
#   file         : styles.py
#   file_relpath : src/ctap/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Style descriptors, colorizers and the per-kind style map.

A *style descriptor* is a short human-written string such as ``"red bold"`` or
``"#c90 underscore"``: exactly one color (a name or a hex string) plus any number
of space-separated modifiers. `parse_style` turns a descriptor into a
`Colorizer`, which in practice is a `yachalk` builder.

`StyleMap` holds one `LineRenderer` per `StyleKey`. It is built once per run
from descriptors and is immutable afterwards. Construction fails with
`StyleError` if any key is missing or any descriptor is invalid, so a stream is
never processed under an incomplete map.

Example:
    ```python
    color = parse_style("green bold")
    print(color("ok 1 - adds numbers"))
    ```
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Protocol

import click
from yachalk import chalk

from ctap.config.logging import get_logger
from ctap.core.lines import STYLE_KEYS, LineKind, OutcomeKind
from ctap.errors import StyleError

if TYPE_CHECKING:
    from ctap.config.logging import CtapLogger
    from ctap.core.lines import StyleKey
    from ctap.rendering.console_api import ConsoleLike

logger: CtapLogger = get_logger(__name__)

RE_HEX_COLOR: Final[re.Pattern[str]] = re.compile(r"^#?([0-9a-f]{6}|[0-9a-f]{3})$", re.IGNORECASE)

# Color names accepted in descriptors, mapped to yachalk attributes.
# "default" leaves the terminal's own foreground color untouched.
COLOR_NAMES: Final[Mapping[str, str | None]] = MappingProxyType(
    {
        "red": "red",
        "blue": "blue",
        "green": "green",
        "yellow": "yellow",
        "cyan": "cyan",
        "magenta": "magenta",
        "white": "white",
        "black": "black",
        "gray": "gray",
        "default": None,
    }
)

# Modifier names accepted in descriptors, mapped to yachalk attributes.
# yachalk has no blink modifier; blink is applied through click.style instead.
MODIFIER_NAMES: Final[Mapping[str, str | None]] = MappingProxyType(
    {
        "bold": "bold",
        "italic": "italic",
        "underscore": "underline",
        "reverse": "inverse",
        "concealed": "hidden",
        "fuzzy": "dim",
        "blink": None,
    }
)

DEFAULT_STYLES: Final[Mapping[StyleKey, str]] = MappingProxyType(
    {
        LineKind.UNKNOWN: "default",
        LineKind.VERSION: "cyan",
        LineKind.PLAN: "white",
        LineKind.TEST_OK: "green",
        LineKind.TEST_NOT_OK: "red bold",
        LineKind.DIAGNOSTIC: "gray",
        LineKind.BAIL: "yellow bold",
        OutcomeKind.SUMMARY_OK: "green bold",
        OutcomeKind.SUMMARY_FAIL: "red bold",
        OutcomeKind.PLAN_FAIL: "magenta bold",
    }
)


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword. ctap always calls colorizers with a
    single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the given arguments.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments. Defaults to a single space.

        Returns:
            str: The decorated output string.
        """
        ...


def plain(*args: object, sep: str = " ") -> str:
    """Join the arguments without decorating them."""
    return sep.join(str(a) for a in args)


class _Blinking:
    """Wrap a colorizer so its output also blinks."""

    def __init__(self, inner: Colorizer) -> None:
        self.inner = inner

    def __call__(self, *args: object, sep: str = " ") -> str:
        return click.style(self.inner(*args, sep=sep), blink=True)


def _expand_hex(value: str) -> str:
    """Return ``value`` as a ``#rrggbb`` string (accepts ``rgb`` and ``#rgb``)."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.lower()}"


def parse_style(descriptor: str) -> Colorizer:
    """Convert a style descriptor into a colorizer.

    Args:
        descriptor (str): One color (name or hex) plus optional modifiers,
            space-separated and in any order, e.g. ``"bold #c60"``.

    Returns:
        Colorizer: A callable that decorates text with the described style.

    Raises:
        StyleError: If the descriptor is empty, names more than one color, names
            no color, or contains an unknown color.
    """
    color_word: str | None = None
    modifiers: list[str] = []

    words = descriptor.split()
    if not words:
        raise StyleError("empty style descriptor")

    for word in words:
        lowered = word.lower()
        if lowered in MODIFIER_NAMES:
            modifiers.append(lowered)
            continue
        if color_word is not None:
            raise StyleError(f"multiple colours in style {descriptor!r}")
        color_word = word

    if color_word is None:
        raise StyleError(f"no colour in style {descriptor!r}")

    builder: Colorizer | None
    if RE_HEX_COLOR.match(color_word):
        builder = chalk.hex(_expand_hex(color_word))
    elif color_word.lower() in COLOR_NAMES:
        attr = COLOR_NAMES[color_word.lower()]
        builder = getattr(chalk, attr) if attr is not None else None
    else:
        raise StyleError(f"bad colour string {color_word!r}")

    blink = False
    for modifier in modifiers:
        attr = MODIFIER_NAMES[modifier]
        if attr is None:
            blink = True
            continue
        builder = getattr(builder if builder is not None else chalk, attr)

    color: Colorizer = builder if builder is not None else plain
    if blink:
        color = _Blinking(color)
    logger.trace("Parsed style %r (modifiers: %s)", descriptor, modifiers)
    return color


class LineRenderer:
    """Writes styled text to a console.

    Attributes:
        color (Colorizer): The colorizer applied to every line.
        console (ConsoleLike): The output sink.
    """

    color: Colorizer
    console: ConsoleLike

    def __init__(self, color: Colorizer, console: ConsoleLike) -> None:
        self.color = color
        self.console = console

    def println(self, text: str) -> None:
        """Write ``text`` followed by a newline."""
        self.console.print(self.color(text))

    def printf(self, fmt: str, *args: object) -> None:
        """Write ``fmt % args``; a newline is only written if ``fmt`` ends with one.

        The trailing newline is kept outside the styled span.
        """
        text = fmt % args if args else fmt
        if text.endswith("\n"):
            self.console.print(self.color(text[:-1]))
        else:
            self.console.print(self.color(text), nl=False)


@dataclass(frozen=True)
class StyleMap:
    """One renderer for each line kind and each appended outcome kind."""

    unknown: LineRenderer
    version: LineRenderer
    plan: LineRenderer
    test_ok: LineRenderer
    test_not_ok: LineRenderer
    diagnostic: LineRenderer
    bail: LineRenderer
    summary_ok: LineRenderer
    summary_fail: LineRenderer
    plan_fail: LineRenderer

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Mapping[StyleKey, str],
        console: ConsoleLike,
    ) -> StyleMap:
        """Build a style map, parsing one descriptor per style key.

        Args:
            descriptors (Mapping[StyleKey, str]): Descriptor for every key in
                `ctap.core.lines.STYLE_KEYS`.
            console (ConsoleLike): Console every renderer writes to.

        Returns:
            StyleMap: The complete, immutable style map.

        Raises:
            StyleError: If a key has no descriptor or a descriptor is invalid.
        """
        renderers: dict[str, LineRenderer] = {}
        for key in STYLE_KEYS:
            descriptor = descriptors.get(key)
            if descriptor is None:
                raise StyleError(f"no style defined for {key.value!r} lines")
            try:
                color = parse_style(descriptor)
            except StyleError as exc:
                raise StyleError(f"{key.value}: {exc}") from exc
            renderers[key.value] = LineRenderer(color, console)
        return cls(**renderers)

    @classmethod
    def undecorated(cls, console: ConsoleLike) -> StyleMap:
        """Return a style map that writes every line undecorated."""
        renderer = LineRenderer(plain, console)
        return cls(**{key.value: renderer for key in STYLE_KEYS})

    def renderer_for(self, key: StyleKey) -> LineRenderer:
        """Return the renderer for ``key``.

        The match is exhaustive over the closed set of style keys.
        """
        match key:
            case LineKind.UNKNOWN:
                return self.unknown
            case LineKind.VERSION:
                return self.version
            case LineKind.PLAN:
                return self.plan
            case LineKind.TEST_OK:
                return self.test_ok
            case LineKind.TEST_NOT_OK:
                return self.test_not_ok
            case LineKind.DIAGNOSTIC:
                return self.diagnostic
            case LineKind.BAIL:
                return self.bail
            case OutcomeKind.SUMMARY_OK:
                return self.summary_ok
            case OutcomeKind.SUMMARY_FAIL:
                return self.summary_fail
            case OutcomeKind.PLAN_FAIL:
                return self.plan_fail
