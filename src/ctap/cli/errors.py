# topmark:header:start
#
#   project      : ctap
#   file         : errors.py
#   file_relpath : src/ctap/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Exceptions for the ctap CLI.

Usage:
    Raise these exceptions in the command to signal setup or input errors with
    standardized messages and exit codes. They are raised before any TAP line is
    processed, so no partial summary is ever written.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from ctap.core.exit_codes import ExitCode


class CtapCliError(click.ClickException):
    """Base class for all ctap CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # Click pops the context before calling show(); keep the one we were raised in
        self.ctx = click.get_current_context(silent=True)

    def format_message(self) -> str:
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        console = None
        if self.ctx is not None and isinstance(self.ctx.obj, dict):
            console = self.ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class CtapUsageError(CtapCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CtapConfigError(CtapCliError):
    """Error for configuration errors (bad style descriptor, unreadable config file)."""

    exit_code = ExitCode.USAGE_ERROR


class CtapInputError(CtapCliError):
    """Error when the TAP input cannot be opened or read."""

    exit_code = ExitCode.FAILURE
