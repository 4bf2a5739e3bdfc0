# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/ctap/core/exit_codes.py
#   project      : ctap
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Exit codes for ctap.

The values 0, 3, 4 and 5 are a committed external contract (they are listed in
the CLI help and relied upon by CI scripts) and must never be renumbered. Their
numeric order doubles as their precedence: a run reports the most severe outcome
it has seen, and `raise_exit_code` is the only way the code is ever changed.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ctap.

    Attributes:
        SUCCESS: Every planned test was seen and passed; no bail-out.
        FAILURE: The input source could not be opened or read.
        USAGE_ERROR: Invalid command-line usage, style descriptor or config file.
            Matches Click's own usage-error code.
        TEST_FAIL: At least one ``not ok`` line was seen.
        PLAN_FAIL: The number of tests seen differs from the plan, no tests were
            seen, or no plan line was present.
        BAIL: A ``Bail out!`` line was seen.

    Usage:
        ```python
        import subprocess
        from ctap.core.exit_codes import ExitCode

        result = subprocess.run(["ctap", "results.tap"])
        if result.returncode == ExitCode.BAIL:
            print("The test run bailed out.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2

    # Stream outcomes, in increasing order of severity
    TEST_FAIL = 3
    PLAN_FAIL = 4
    BAIL = 5


def raise_exit_code(current: int, floor: ExitCode) -> ExitCode:
    """Raise ``current`` to at least ``floor``.

    A later, milder outcome never masks an earlier, more severe one.

    Args:
        current (int): The exit code accumulated so far.
        floor (ExitCode): The minimum code implied by the new observation.

    Returns:
        ExitCode: ``max(current, floor)``.
    """
    return ExitCode(max(current, floor))
