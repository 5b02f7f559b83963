# topmark:header:start
#
#   project      : Tripwire
#   file         : version.py
#   file_relpath : src/tripwire/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end


"""Tripwire `version` command.

Prints the Tripwire version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from tripwire.constants import TRIPWIRE_VERSION


@click.command(
    name="version",
    help="Show the current version of Tripwire.",
)
def version_command() -> None:
    """Show the current version of Tripwire."""
    click.echo(TRIPWIRE_VERSION)
