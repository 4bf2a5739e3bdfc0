# topmark:header:start
#
#   project      : ctap
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""CLI test helpers for running ctap through Click's `CliRunner`.

`run_cli` feeds TAP text on STDIN (or reads a file given in ``argv``). Click
mixes stderr into ``Result.output``, so error messages and log lines can be
asserted on the same string as the rendered stream.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Mapping, Sequence

from click.testing import CliRunner, Result

from ctap.cli.main import cli
from ctap.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the ctap command.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["-s", "-"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input (the TAP
            stream when no file is given).
        env (Mapping[str, str | None] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color"], input_text="1..1\\nok 1\\n")
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env)


def write_tap(tmp_path: Path, text: str, name: str = "results.tap") -> Path:
    """Write ``text`` to a TAP file under ``tmp_path`` and return its path."""
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_TEST_FAIL(result: Result) -> None:
    """Assert that the command exited with TEST_FAIL (code 3).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.TEST_FAIL, result.output


def assert_PLAN_FAIL(result: Result) -> None:
    """Assert that the command exited with PLAN_FAIL (code 4).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.PLAN_FAIL, result.output


def assert_BAIL(result: Result) -> None:
    """Assert that the command exited with BAIL (code 5).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.BAIL, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    # Click's own UsageError uses the same code.
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FAILURE, result.output
