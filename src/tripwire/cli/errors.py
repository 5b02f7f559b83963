# topmark:header:start
#
#   project      : Tripwire
#   file         : errors.py
#   file_relpath : src/tripwire/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Exceptions for the Tripwire CLI.

Raise these from commands and parameter types to report an error with a
standardized exit code. Click prints the message as ``Error: <message>``.
"""

from __future__ import annotations

import click

from tripwire.cli.exit_codes import ExitCode


class TripwireError(click.ClickException):
    """Base class for all Tripwire CLI errors."""

    exit_code = ExitCode.FAILURE


class TripwireUsageError(TripwireError):
    """Error for command-line invocation errors (invalid arguments)."""

    exit_code = ExitCode.USAGE_ERROR
