# topmark:header:start
#
#   project      : ctap
#   file         : api.py
#   file_relpath : src/ctap/api.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Public API for colorizing TAP streams from Python.

The CLI is a thin layer over these functions; they can be used directly when
TAP output is produced in-process:

```python
from ctap.api import colorize
from ctap.config.model import Config

code = colorize(["1..2", "ok 1", "not ok 2"], config=Config(summary=True))
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctap.config.logging import get_logger
from ctap.config.model import Config
from ctap.core.processor import StreamProcessor
from ctap.rendering.styles import StyleMap

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ctap.config.logging import CtapLogger
    from ctap.core.exit_codes import ExitCode
    from ctap.rendering.console_api import ConsoleLike

logger: CtapLogger = get_logger(__name__)

__all__ = ["build_processor", "colorize"]


def _default_console() -> ConsoleLike:
    from ctap.cli.console import ClickConsole

    return ClickConsole()


def build_processor(config: Config, console: ConsoleLike) -> StreamProcessor:
    """Create a stream processor for ``config`` writing to ``console``.

    The style map is built (and every descriptor validated) before the
    processor exists.

    Args:
        config (Config): Frozen configuration.
        console (ConsoleLike): Output sink.

    Returns:
        StreamProcessor: A fresh, single-use processor.

    Raises:
        StyleError: If a style descriptor is invalid or missing.
    """
    styles = StyleMap.from_descriptors(config.styles, console)
    logger.debug(
        "Processor options: failures_only=%s glyphs=%s summary=%s",
        config.failures_only,
        config.glyphs,
        config.summary,
    )
    return StreamProcessor(styles, config.render_options())


def colorize(
    lines: Iterable[str],
    *,
    config: Config | None = None,
    console: ConsoleLike | None = None,
) -> ExitCode:
    """Classify, render and tally ``lines``; return the exit code.

    Args:
        lines (Iterable[str]): TAP lines without line terminators, consumed once.
        config (Config | None): Configuration; defaults to `Config.from_defaults()`.
        console (ConsoleLike | None): Output sink; defaults to a `ClickConsole`
            on stdout.

    Returns:
        ExitCode: ``SUCCESS``, ``TEST_FAIL``, ``PLAN_FAIL`` or ``BAIL``.

    Raises:
        StyleError: If a style descriptor is invalid; no line is read in that case.
    """
    processor = build_processor(
        config or Config.from_defaults(),
        console or _default_console(),
    )
    return processor.run(lines)
