# topmark:header:start
#
#   project      : ctap
#   file         : errors.py
#   file_relpath : src/ctap/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Library-level exceptions for ctap.

These are raised by the configuration and rendering layers before any input is
processed. The CLI translates them into `ctap.cli.errors` exceptions that carry
an exit code; library callers can catch `CtapError` directly.

Classification never raises: malformed input lines are reported as
`ctap.core.lines.LineKind.UNKNOWN`.
"""

from __future__ import annotations


class CtapError(Exception):
    """Base class for all ctap library errors."""


class StyleError(CtapError):
    """A style descriptor could not be parsed, or a style map is incomplete."""


class ConfigError(CtapError):
    """A configuration file is missing, unreadable or malformed."""
