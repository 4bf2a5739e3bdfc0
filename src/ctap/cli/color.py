# topmark:header:start
#
#   project      : ctap
#   file         : color.py
#   file_relpath : src/ctap/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Color-mode resolution for the ctap CLI.

Provides the `ColorMode` enum, the decision whether to emit ANSI styles, and a
helper that makes yachalk produce styles when output is not a terminal.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from ctap.config.logging import get_logger

logger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def is_stdout_tty() -> bool:
    """Return whether stdout is a terminal (False if that cannot be determined)."""
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - ``FORCE_COLOR`` (set and not ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
            - ``CI`` (set to any value) → True
        3. **Auto**: ``stdout.isatty()``.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value;
            ``None`` means "not provided".
        stdout_isatty (bool | None): Optional override for TTY detection.

    Returns:
        bool: True if ANSI color should be enabled.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=ColorMode.ALWAYS, stdout_isatty=False)
        True
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("CI") is not None:
        return True

    if stdout_isatty is None:
        stdout_isatty = is_stdout_tty()
    return bool(stdout_isatty)


def force_chalk_colors() -> None:
    """Switch yachalk to true-color output.

    yachalk disables styling when stdout is not a terminal; ctap decides that
    itself, so when color is enabled for a pipe or a CI log yachalk is told to
    style anyway.
    """
    logger.debug("Forcing yachalk true-color output")
    chalk.set_color_mode(ChalkColorMode.FullTrueColor)
