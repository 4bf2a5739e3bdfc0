# topmark:header:start
#
#   project      : ctap
#   file         : io.py
#   file_relpath : src/ctap/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

r"""Input helpers for the ctap CLI.

`open_tap_source` opens a file (or STDIN for ``-``) in binary mode with
`click.open_file` and yields its lines lazily, decoded and without line
terminators. Lines are never buffered beyond the one being processed, so ctap
colors output as a test run produces it.

Lines are split on ``\n`` only. A bare ``\r`` (as written by progress meters)
stays inside its line.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from ctap.cli.errors import CtapInputError
from ctap.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import IO

    from ctap.config.logging import CtapLogger

logger: CtapLogger = get_logger(__name__)

STDIN_NAME = "-"


def strip_line_terminator(line: str) -> str:
    r"""Remove one trailing ``\n`` and then one trailing ``\r``."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_lines(stream: IO[bytes]) -> Iterator[str]:
    """Yield the lines of a binary ``stream``, decoded and without terminators.

    Undecodable bytes are replaced with U+FFFD so one bad byte cannot abort a run.

    Raises:
        CtapInputError: If reading fails part way through the stream.
    """
    try:
        for line in stream:
            yield strip_line_terminator(line.decode("utf-8", errors="replace"))
    except OSError as exc:
        raise CtapInputError(f"error reading input: {exc}") from exc


@contextmanager
def open_tap_source(path: str | None) -> Iterator[Iterator[str]]:
    """Open a TAP source and yield an iterator over its lines.

    Args:
        path (str | None): File to read; ``None`` or ``"-"`` reads STDIN.

    Yields:
        Iterator[str]: The input lines, in order, without terminators.

    Raises:
        CtapInputError: If the file cannot be opened.
    """
    name = path or STDIN_NAME
    try:
        stream = click.open_file(name, "rb")
    except OSError as exc:
        raise CtapInputError(f"cannot open {name}: {exc.strerror or exc}") from exc

    logger.debug("Reading TAP from %s", "STDIN" if name == STDIN_NAME else name)
    with stream:
        yield iter_lines(stream)
