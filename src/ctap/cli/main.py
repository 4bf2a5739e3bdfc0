# topmark:header:start
#
#   project      : ctap
#   file         : main.py
#   file_relpath : src/ctap/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""The ``ctap`` command.

Key ideas:
- Verbosity and color are resolved once; the console is placed into
  ``ctx.obj`` so errors can be shown through it.
- Configuration is layered: built-in defaults, then ``--config``, then command
  line options and their ``CTAP_*`` environment variables.
- Style descriptors are validated before the input is opened.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ctap.api import build_processor
from ctap.cli.color import force_chalk_colors, is_stdout_tty, resolve_color_mode
from ctap.cli.console import ClickConsole
from ctap.cli.errors import CtapConfigError
from ctap.cli.io import open_tap_source
from ctap.cli.options import (
    collect_style_overrides,
    common_color_options,
    common_verbose_options,
    env_var_for,
    flag_override,
    output_options,
    resolve_color_option,
    resolve_verbosity,
    style_options,
)
from ctap.config.loaders import load_ctap_table
from ctap.config.logging import get_logger, resolve_env_log_level, setup_logging
from ctap.config.model import MutableConfig
from ctap.constants import CTAP_VERSION
from ctap.errors import ConfigError, StyleError

if TYPE_CHECKING:
    from ctap.config.logging import CtapLogger
    from ctap.config.model import Config

logger: CtapLogger = get_logger(__name__)

EPILOG = """\b
Color strings may be any of the following color names:

\b
  red, green, blue, yellow, cyan, magenta, white, black, gray, default

They may also be hex color strings like "#cc9900" or "#c90" (with the
leading "#" optional).

\b
Color names or hex strings can also have any of the following modifiers
appended to them (space-separated):

\b
  bold, italic, underscore, reverse, blink, concealed, fuzzy

(though how they work will depend on your terminal support)

\b
Exit codes:
  0  all planned tests passed
  1  the input could not be read
  2  usage or configuration error
  3  one or more tests failed
  4  plan failure (no plan, no tests, or too few tests)
  5  a test bailed out
"""


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> ClickConsole:
    """Initialize logging, color and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Value of ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        ClickConsole: The console for program output.
    """
    ctx.obj = ctx.obj or {}

    console = ClickConsole(enable_color=False)
    ctx.obj["console"] = console

    level = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level()
    setup_logging(level=level)

    is_tty = is_stdout_tty()
    enable_color = resolve_color_mode(
        color_mode_override=resolve_color_option(color_mode, no_color),
        stdout_isatty=is_tty,
    )
    if enable_color and not is_tty:
        force_chalk_colors()
    ctx.color = enable_color
    console.enable_color = enable_color
    return console


def build_config(
    ctx: click.Context,
    console: ClickConsole,
    *,
    config_path: Path | None,
    failures: bool,
    glyphs: bool,
    summary: bool,
    style_params: dict[str, str | None],
) -> Config:
    """Layer defaults, the config file and command line options into a `Config`.

    Raises:
        CtapConfigError: If the config file cannot be loaded.
    """
    builder = MutableConfig.from_defaults()
    if config_path is not None:
        try:
            builder.merge_toml(load_ctap_table(config_path))
        except ConfigError as exc:
            raise CtapConfigError(str(exc)) from exc
        for message in builder.warnings:
            console.warn(f"Warning: {message}")

    builder.apply_overrides(
        failures_only=flag_override(ctx, "failures", failures),
        glyphs=flag_override(ctx, "glyphs", glyphs),
        summary=flag_override(ctx, "summary", summary),
        styles=collect_style_overrides(style_params),
    )
    return builder.freeze()


@click.command(
    name="ctap",
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
    help=(
        "Colorize a TAP stream read from TAPFILE (or STDIN when omitted or '-'), "
        "optionally appending a summary."
    ),
)
@click.argument("tapfile", required=False, type=str)
@output_options
@style_options
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar=env_var_for("config"),
    show_envvar=True,
    help="Read defaults from a TOML file ([ctap] table, or [tool.ctap] in pyproject.toml).",
)
@common_verbose_options
@common_color_options
@click.version_option(CTAP_VERSION, "--version", message="%(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    tapfile: str | None,
    failures: bool,
    glyphs: bool,
    summary: bool,
    config_path: Path | None,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    **style_params: str | None,
) -> None:
    """Entry point for the ctap CLI."""
    console = init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    config = build_config(
        ctx,
        console,
        config_path=config_path,
        failures=failures,
        glyphs=glyphs,
        summary=summary,
        style_params=style_params,
    )
    try:
        processor = build_processor(config, console)
    except StyleError as exc:
        raise CtapConfigError(str(exc)) from exc

    with open_tap_source(tapfile) as lines:
        code = processor.run(lines)

    logger.info("Exit code %d (%s)", code, code.name)
    ctx.exit(int(code))


if __name__ == "__main__":
    cli()
