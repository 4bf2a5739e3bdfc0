# topmark:header:start
#
#   project      : ctap
#   file         : test_exit_codes.py
#   file_relpath : tests/core/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Tests for exit code values and the monotonic raise helper."""

from __future__ import annotations

import itertools

from ctap.core.exit_codes import ExitCode, raise_exit_code
from tests.conftest import parametrize


def test_exit_code_values_are_stable() -> None:
    """The numeric codes are part of the command line contract."""
    assert ExitCode.SUCCESS == 0
    assert ExitCode.FAILURE == 1
    assert ExitCode.USAGE_ERROR == 2
    assert ExitCode.TEST_FAIL == 3
    assert ExitCode.PLAN_FAIL == 4
    assert ExitCode.BAIL == 5


@parametrize(
    "current, floor, expected",
    [
        (ExitCode.SUCCESS, ExitCode.TEST_FAIL, ExitCode.TEST_FAIL),
        (ExitCode.TEST_FAIL, ExitCode.PLAN_FAIL, ExitCode.PLAN_FAIL),
        (ExitCode.BAIL, ExitCode.TEST_FAIL, ExitCode.BAIL),
        (ExitCode.BAIL, ExitCode.PLAN_FAIL, ExitCode.BAIL),
        (ExitCode.PLAN_FAIL, ExitCode.PLAN_FAIL, ExitCode.PLAN_FAIL),
    ],
)
def test_raise_exit_code(current: ExitCode, floor: ExitCode, expected: ExitCode) -> None:
    """The result is the more severe of the two codes."""
    result = raise_exit_code(current, floor)
    assert result == expected
    assert isinstance(result, ExitCode)


def test_raise_exit_code_never_lowers() -> None:
    """No combination of run outcomes ever lowers the code."""
    outcomes = (ExitCode.SUCCESS, ExitCode.TEST_FAIL, ExitCode.PLAN_FAIL, ExitCode.BAIL)
    for current, floor in itertools.product(outcomes, repeat=2):
        assert raise_exit_code(current, floor) >= current
        assert raise_exit_code(current, floor) >= floor
