# topmark:header:start
#
#   project      : ctap
#   file         : options.py
#   file_relpath : src/ctap/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Reusable Click options for the ctap command.

This module centralizes the option groups (verbosity, color, output switches and
per-kind style descriptors) and their resolution logic, so the command itself
stays thin. Every output and style option can also be set through a ``CTAP_*``
environment variable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from ctap.cli.color import ColorMode
from ctap.cli.errors import CtapUsageError
from ctap.config.logging import TRACE_LEVEL, get_logger
from ctap.constants import ENV_PREFIX
from ctap.core.lines import LineKind, OutcomeKind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ctap.config.logging import CtapLogger
    from ctap.core.lines import StyleKey

P = ParamSpec("P")
R = TypeVar("R")

logger: CtapLogger = get_logger(__name__)

# Style options: (short flag, long flag, Click parameter name, style key, help)
STYLE_OPTIONS: tuple[tuple[str | None, str, str, StyleKey, str], ...] = (
    ("-V", "--cversion", "cversion", LineKind.VERSION, "Color for the TAP version line."),
    ("-P", "--cplan", "cplan", LineKind.PLAN, "Color for plan lines."),
    ("-O", "--cok", "cok", LineKind.TEST_OK, "Color for passing tests."),
    ("-F", "--cfail", "cfail", LineKind.TEST_NOT_OK, "Color for failing tests."),
    ("-D", "--cdiag", "cdiag", LineKind.DIAGNOSTIC, "Color for diagnostic lines."),
    ("-B", "--cbail", "cbail", LineKind.BAIL, "Color for bail-out lines."),
    (None, "--csummok", "csummok", OutcomeKind.SUMMARY_OK, "Color for a passing summary."),
    (None, "--csummfail", "csummfail", OutcomeKind.SUMMARY_FAIL, "Color for a failing summary."),
    (None, "--cplanfail", "cplanfail", OutcomeKind.PLAN_FAIL, "Color for plan failures."),
)

# Output switches: (short flag, long flag, Click parameter name, help)
OUTPUT_OPTIONS: tuple[tuple[str, str, str, str], ...] = (
    ("-f", "--failures", "failures", "Show failures only (suppress 'ok' lines)."),
    ("-g", "--glyphs", "glyphs", "Show ✓/✗ glyphs instead of 'ok'/'not ok'."),
    ("-s", "--summary", "summary", "Show a summary of the test results."),
)


def env_var_for(param_name: str) -> str:
    """Return the environment variable backing a Click parameter (``CTAP_<NAME>``)."""
    return f"{ENV_PREFIX}{param_name.upper()}"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level requested with ``-v``/``-q``.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int | None: The logging level, or None when neither flag was given.

    Raises:
        CtapUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more ``-v`` flags set TRACE, two set DEBUG, one sets INFO.
        One or more ``-q`` flags set ERROR.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CtapUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return None


def resolve_color_option(color_mode: str | None, no_color: bool) -> ColorMode | None:
    """Combine ``--color`` and ``--no-color`` into one override (None if neither)."""
    if no_color:
        return ColorMode.NEVER
    if color_mode is None:
        return None
    return ColorMode(color_mode)


def flag_override(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return ``value`` if the flag was given on the command line or environment.

    Flags left at their Click default return None, so that lower-precedence
    sources (the config file) keep their value.
    """
    source = ctx.get_parameter_source(name)
    if source in (None, ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP):
        return None
    return value


def collect_style_overrides(params: Mapping[str, object]) -> dict[StyleKey, str | None]:
    """Map the parsed style options to their style keys."""
    overrides: dict[StyleKey, str | None] = {}
    for _short, _long, name, key, _help in STYLE_OPTIONS:
        value = params.get(name)
        overrides[key] = value if isinstance(value, str) else None
    return overrides


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v INFO, -vv DEBUG, -vvv TRACE). Logs go to stderr.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the -f/--failures, -g/--glyphs and -s/--summary switches.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    for short, long, name, help_text in reversed(OUTPUT_OPTIONS):
        f = click.option(
            short,
            long,
            name,
            is_flag=True,
            default=False,
            envvar=env_var_for(name),
            show_envvar=True,
            help=help_text,
        )(f)
    return f


def style_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add one style-descriptor option per line kind and outcome kind.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    for short, long, name, _key, help_text in reversed(STYLE_OPTIONS):
        decls = (short, long, name) if short else (long, name)
        f = click.option(
            *decls,
            type=str,
            default=None,
            metavar="STYLE",
            envvar=env_var_for(name),
            show_envvar=True,
            help=help_text,
        )(f)
    return f
