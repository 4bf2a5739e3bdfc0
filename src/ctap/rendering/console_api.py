# topmark:header:start
#
#   project      : ctap
#   file         : console_api.py
#   file_relpath : src/ctap/rendering/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

The rendered TAP stream and the appended summary are program output and go
through a `ConsoleLike`; diagnostics about ctap itself go through logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for the console ctap writes rendered lines to.

    Implementations may use Click or plain stdlib streams.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...
