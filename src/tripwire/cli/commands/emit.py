# topmark:header:start
#
#   project      : Tripwire
#   file         : emit.py
#   file_relpath : src/tripwire/cli/commands/emit.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end


"""Tripwire `emit` command.

Writes one diagnostic line from a shell script, in the same format as the
library. ``panic`` writes the termination notice and aborts this process.
"""

from __future__ import annotations

import click

from tripwire.cli.errors import TripwireUsageError
from tripwire.core.emission import emit, panic
from tripwire.diagnostic.model import Severity


class SeverityParam(click.ParamType):
    """Click parameter accepting a severity tier name, case-insensitively."""

    name = "severity"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Severity:
        """Convert ``value`` to a `Severity`.

        Args:
            value (object): Raw command-line value (or an existing `Severity`).
            param (click.Parameter | None): The parameter being converted.
            ctx (click.Context | None): The current Click context.

        Returns:
            Severity: The parsed tier.

        Raises:
            TripwireUsageError: If ``value`` names no tier.
        """
        if isinstance(value, Severity):
            return value
        try:
            return Severity.from_name(str(value))
        except ValueError as exc:
            raise TripwireUsageError(str(exc)) from exc


@click.command(
    name="emit",
    help="Write one diagnostic line to stderr (SEVERITY: info, warn, error, panic).",
)
@click.argument("severity", type=SeverityParam())
@click.argument("message")
def emit_command(*, severity: Severity, message: str) -> None:
    """Emit ``message`` at ``severity``; ``panic`` aborts the process.

    Args:
        severity (Severity): Tier of the line.
        message (str): Message text, written verbatim.
    """
    if severity is Severity.PANIC:
        panic("%s", message)
    emit(severity, "%s", message)
