# topmark:header:start
#
#   project      : Tripwire
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""CLI test helpers for running Tripwire through Click's test runner.

Panics are never driven through `run_cli`: the in-suite abort trap would
surface as a `ProcessAborted` exception on the result. Use a child interpreter
(`tests.helpers.run_python`) for the real termination path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from click.testing import CliRunner, Result

from tripwire.cli.exit_codes import ExitCode
from tripwire.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI in-process.

    Diagnostic lines go to the runner's stderr; `Result.output` carries both
    streams on current Click releases.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["build-mode"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that Tripwire rejected the invocation (``EX_USAGE``).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CLICK_USAGE_ERROR(result: Result) -> None:
    """Assert that Click's own option parsing rejected the invocation.

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == click.UsageError.exit_code, result.output
