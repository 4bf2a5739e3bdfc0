# topmark:header:start
#
#   project      : ctap
#   file         : processor.py
#   file_relpath : src/ctap/core/processor.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Streaming TAP state machine.

`StreamProcessor` consumes lines one at a time, strictly in arrival order. For
each line it:

1. classifies the line (`ctap.core.lines.classify`),
2. renders it immediately through the injected `StyleMap`,
3. updates its `RunState` counters.

When the input ends (or the caller simply stops feeding lines), `finish()`
checks the plan, appends the optional summary and any plan failure, and returns
the final `ExitCode`.

Exit code precedence is ``BAIL > PLAN_FAIL > TEST_FAIL > SUCCESS``. The code only
ever moves up, through `ctap.core.exit_codes.raise_exit_code`.

Only the number of tests seen is compared with the plan's last number; the
plan's first number is not validated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from ctap.config.logging import get_logger
from ctap.constants import GLYPH_NOT_OK, GLYPH_OK
from ctap.core.exit_codes import ExitCode, raise_exit_code
from ctap.core.lines import ClassifiedLine, LineKind, OutcomeKind, classify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ctap.config.logging import CtapLogger
    from ctap.rendering.styles import StyleMap

logger: CtapLogger = get_logger(__name__)

RE_TEST_PREFIX: Final[re.Pattern[str]] = re.compile(r"^(ok|not ok)\s*")


@dataclass(frozen=True)
class RenderOptions:
    """Rendering switches, fixed for the lifetime of a run.

    Attributes:
        suppress_successes (bool): Omit ``ok`` lines from the output entirely.
        glyphs (bool): Replace ``ok``/``not ok`` with ✓/✗ glyphs, prefix bail-out
            lines and appended lines with a glyph.
        summary (bool): Append a Test::Harness-like summary after the stream.
    """

    suppress_successes: bool = False
    glyphs: bool = False
    summary: bool = False


@dataclass
class RunState:
    """Counters accumulated over one TAP stream.

    Attributes:
        test_counter (int): Number of the last test seen (explicit or sequential).
        failures (list[int]): Numbers of failed tests, in encounter order.
        plan_last (int): Last number of the most recent plan line (0 if none).
        exit_code (ExitCode): Most severe outcome seen so far.
        lines_seen (int): Number of input lines processed.
        plan_seen (bool): Whether any plan line was seen.
        bailed (bool): Whether a bail-out line was seen.
    """

    test_counter: int = 0
    failures: list[int] = field(default_factory=list)
    plan_last: int = 0
    exit_code: ExitCode = ExitCode.SUCCESS
    lines_seen: int = 0
    plan_seen: bool = False
    bailed: bool = False

    @property
    def plan_mismatch(self) -> bool:
        """Return True if no tests were seen or the count differs from the plan."""
        return self.test_counter == 0 or self.test_counter != self.plan_last

    @property
    def passed(self) -> int:
        """Return the number of tests that did not fail."""
        return self.test_counter - len(self.failures)

    def raise_to(self, floor: ExitCode) -> None:
        """Raise the exit code to at least ``floor``."""
        self.exit_code = raise_exit_code(self.exit_code, floor)


def failure_list(failures: Iterable[int]) -> str:
    """Return failed test numbers as ``"1, 3, 7"``."""
    return ", ".join(str(n) for n in failures)


class StreamProcessor:
    """Classify, render and tally one TAP stream.

    A processor is single-use: create one per stream, `feed` every line (or call
    `run`), then `finish`.

    Args:
        styles (StyleMap): Renderers for every line and outcome kind.
        options (RenderOptions | None): Rendering switches; defaults to all off.
    """

    def __init__(self, styles: StyleMap, options: RenderOptions | None = None) -> None:
        self.styles = styles
        self.options = options or RenderOptions()
        self.state = RunState()
        self._finished = False

    @property
    def finished(self) -> bool:
        """Return True once `finish` has run."""
        return self._finished

    def feed(self, text: str) -> ClassifiedLine:
        """Process one input line.

        Args:
            text (str): The line, without its line terminator.

        Returns:
            ClassifiedLine: The classification of ``text``.

        Raises:
            RuntimeError: If the stream has already been finished.
        """
        if self._finished:
            raise RuntimeError("cannot feed lines to a finished stream")

        line = classify(text)
        logger.trace("line %d: %s %r", self.state.lines_seen + 1, line.kind.value, text)
        self.render(line)
        self._update(line)
        return line

    def _update(self, line: ClassifiedLine) -> None:
        state = self.state
        state.lines_seen += 1

        match line.kind:
            case LineKind.PLAN:
                state.plan_seen = True
                state.plan_last = line.plan_last or 0
            case LineKind.TEST_OK | LineKind.TEST_NOT_OK:
                if line.test_number:
                    state.test_counter = line.test_number
                else:
                    state.test_counter += 1
                if line.kind == LineKind.TEST_NOT_OK:
                    state.failures.append(state.test_counter)
                    state.raise_to(ExitCode.TEST_FAIL)
            case LineKind.BAIL:
                state.bailed = True
                state.raise_to(ExitCode.BAIL)
            case LineKind.VERSION | LineKind.DIAGNOSTIC | LineKind.UNKNOWN:
                pass

    def render(self, line: ClassifiedLine) -> None:
        """Write ``line`` through its renderer, honoring the render options."""
        if self.options.suppress_successes and line.kind == LineKind.TEST_OK:
            return

        text = line.raw_text
        if self.options.glyphs:
            if line.kind == LineKind.TEST_OK:
                text = RE_TEST_PREFIX.sub(GLYPH_OK + " ", text, count=1)
            elif line.kind == LineKind.TEST_NOT_OK:
                text = RE_TEST_PREFIX.sub(GLYPH_NOT_OK + " ", text, count=1)
            elif line.kind == LineKind.BAIL:
                text = f"{GLYPH_NOT_OK} {text}"

        self.styles.renderer_for(line.kind).println(text)

    def _glyph(self, ok: bool) -> str:
        if not self.options.glyphs:
            return ""
        return f"{GLYPH_OK if ok else GLYPH_NOT_OK} "

    def _emit_summary(self, plan_mismatch: bool) -> None:
        state = self.state
        if state.failures:
            renderer = self.styles.renderer_for(OutcomeKind.SUMMARY_FAIL)
            glyph = self._glyph(ok=False)
            plural = "s" if len(state.failures) > 1 else ""
            renderer.printf("%sFAILED test%s: %s\n", glyph, plural, failure_list(state.failures))
            renderer.printf(
                "%sFailed %d/%d tests, %.2f%% ok\n",
                glyph,
                len(state.failures),
                state.test_counter,
                state.passed * 100 / state.test_counter,
            )
        elif not plan_mismatch:
            renderer = self.styles.renderer_for(OutcomeKind.SUMMARY_OK)
            renderer.printf(
                "%sPassed %d/%d tests, 100%% ok\n",
                self._glyph(ok=True),
                state.test_counter,
                state.test_counter,
            )

    def _emit_plan_failure(self) -> None:
        state = self.state
        renderer = self.styles.renderer_for(OutcomeKind.PLAN_FAIL)
        glyph = self._glyph(ok=False)
        if state.test_counter == 0:
            renderer.printf("%sFailed plan: no tests seen\n", glyph)
        else:
            renderer.printf(
                "%sFailed plan: only %d/%d planned tests seen\n",
                glyph,
                state.test_counter,
                state.plan_last,
            )

    def finish(self) -> ExitCode:
        """Check the plan, append summary lines, and return the final exit code.

        Returns:
            ExitCode: The most severe outcome of the stream.

        Raises:
            RuntimeError: If called more than once.
        """
        if self._finished:
            raise RuntimeError("stream already finished")
        self._finished = True

        state = self.state
        plan_mismatch = state.plan_mismatch
        if plan_mismatch:
            state.raise_to(ExitCode.PLAN_FAIL)

        if self.options.summary:
            self._emit_summary(plan_mismatch)

        # Plan failures are reported whether or not a summary was requested
        if plan_mismatch:
            self._emit_plan_failure()

        logger.debug(
            "%d line(s), %d test(s), %d failure(s), plan %s, exit code %s",
            state.lines_seen,
            state.test_counter,
            len(state.failures),
            state.plan_last if state.plan_seen else "missing",
            state.exit_code.name,
        )
        return state.exit_code

    def run(self, lines: Iterable[str]) -> ExitCode:
        """Feed every line of ``lines`` in order, then finish.

        Args:
            lines (Iterable[str]): Input lines without line terminators. Read once.

        Returns:
            ExitCode: The final exit code.
        """
        for text in lines:
            self.feed(text)
        return self.finish()
