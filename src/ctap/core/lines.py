# topmark:header:start
#
#   project      : ctap
#   file         : lines.py
#   file_relpath : src/ctap/core/lines.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""TAP line classification.

`classify` maps a single line of text to a `ClassifiedLine`. It is a pure,
total function: every string, including blank or malformed lines, maps to
exactly one `LineKind`, with `LineKind.UNKNOWN` as the catch-all.

Patterns are tried in a fixed order and the first match wins:

1. ``TAP version N``
2. plan ``first..last [# reason]``
3. test result ``ok|not ok [number] [description] [# directive]``
4. diagnostic ``# ...``
5. ``Bail out! [reason]``

A test line ending in a ``# directive`` is a test, not a diagnostic; diagnostics
are only considered once the test pattern has failed on the whole line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Union

RE_VERSION: Final[re.Pattern[str]] = re.compile(r"^TAP version (\d+)")
RE_PLAN: Final[re.Pattern[str]] = re.compile(r"^(\d+)\.\.(\d+)\s*(?:#\s*(.*?)\s*)?$")
RE_TEST: Final[re.Pattern[str]] = re.compile(
    r"^(ok|not ok)(?:\s+(\d+))?(?:\s+([^#]+))?(?:\s+(#\s*(.*?)))?\s*?$"
)
RE_DIAGNOSTIC: Final[re.Pattern[str]] = re.compile(r"^#")
RE_BAIL: Final[re.Pattern[str]] = re.compile(r"^Bail out!(?:\s*(.*?))?\s*$")


class LineKind(str, Enum):
    """Kinds of TAP input lines."""

    UNKNOWN = "unknown"
    VERSION = "version"
    PLAN = "plan"
    TEST_OK = "test_ok"
    TEST_NOT_OK = "test_not_ok"
    DIAGNOSTIC = "diagnostic"
    BAIL = "bail"


class OutcomeKind(str, Enum):
    """Synthetic kinds for lines ctap appends after the input stream."""

    SUMMARY_OK = "summary_ok"
    SUMMARY_FAIL = "summary_fail"
    PLAN_FAIL = "plan_fail"


# Every key a style map has to resolve
StyleKey = Union[LineKind, OutcomeKind]

STYLE_KEYS: Final[tuple[StyleKey, ...]] = (*LineKind, *OutcomeKind)


@dataclass(frozen=True)
class ClassifiedLine:
    """A classified TAP line.

    Attributes:
        kind (LineKind): The line kind.
        raw_text (str): The original line, unmodified.
        plan_first (int | None): First planned test number (plan lines only).
        plan_last (int | None): Last planned test number (plan lines only).
        test_number (int | None): Explicit test number (test lines only);
            ``None`` when the line carries no number.
        description (str | None): Test description, e.g. ``"- adds numbers"``.
        directive (str | None): Text after ``#`` on a test line, e.g. ``"TODO later"``.
        reason (str | None): Plan comment, bail-out reason, or diagnostic text.
        tap_version (int | None): Protocol version (version lines only).
    """

    kind: LineKind
    raw_text: str
    plan_first: int | None = None
    plan_last: int | None = None
    test_number: int | None = None
    description: str | None = None
    directive: str | None = None
    reason: str | None = None
    tap_version: int | None = None

    @property
    def is_test(self) -> bool:
        """Return True for ``ok`` and ``not ok`` lines."""
        return self.kind in (LineKind.TEST_OK, LineKind.TEST_NOT_OK)

    @property
    def is_failure(self) -> bool:
        """Return True for ``not ok`` lines."""
        return self.kind == LineKind.TEST_NOT_OK


def _to_int(text: str | None, default: int | None = 0) -> int | None:
    """Parse ``text`` as an integer, falling back to ``default``."""
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        return default


def _empty_to_none(text: str | None) -> str | None:
    if text is None:
        return None
    text = text.strip()
    return text or None


def classify(text: str) -> ClassifiedLine:
    """Classify a single line of TAP text.

    Args:
        text (str): One input line without its line terminator.

    Returns:
        ClassifiedLine: The classification. Never raises; unrecognised lines are
            returned as `LineKind.UNKNOWN`.
    """
    m = RE_VERSION.match(text)
    if m:
        return ClassifiedLine(
            kind=LineKind.VERSION,
            raw_text=text,
            tap_version=_to_int(m.group(1), None),
        )

    m = RE_PLAN.match(text)
    if m:
        return ClassifiedLine(
            kind=LineKind.PLAN,
            raw_text=text,
            plan_first=_to_int(m.group(1)),
            plan_last=_to_int(m.group(2)),
            reason=_empty_to_none(m.group(3)),
        )

    m = RE_TEST.match(text)
    if m:
        return ClassifiedLine(
            kind=LineKind.TEST_OK if m.group(1) == "ok" else LineKind.TEST_NOT_OK,
            raw_text=text,
            test_number=_to_int(m.group(2), None),
            description=_empty_to_none(m.group(3)),
            directive=_empty_to_none(m.group(5)),
        )

    if RE_DIAGNOSTIC.match(text):
        return ClassifiedLine(
            kind=LineKind.DIAGNOSTIC,
            raw_text=text,
            reason=_empty_to_none(text[1:]),
        )

    m = RE_BAIL.match(text)
    if m:
        return ClassifiedLine(
            kind=LineKind.BAIL,
            raw_text=text,
            reason=_empty_to_none(m.group(1)),
        )

    return ClassifiedLine(kind=LineKind.UNKNOWN, raw_text=text)
