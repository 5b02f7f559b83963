# topmark:header:start
#
#   project      : Tripwire
#   file         : build_mode.py
#   file_relpath : src/tripwire/cli/commands/build_mode.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end


"""Tripwire `build-mode` command.

Reports whether the debug tier is active in this interpreter. Run it as
``python -O -m tripwire build-mode`` to see the release binding.
"""

from __future__ import annotations

import click

from tripwire.config.build import build_mode, optimize_level


@click.command(
    name="build-mode",
    help="Show whether debug-tier diagnostics are active (debug) or elided (release).",
)
@click.option(
    "--details",
    is_flag=True,
    default=False,
    help="Also show the interpreter optimization level.",
)
def build_mode_command(*, details: bool = False) -> None:
    """Print ``debug`` or ``release``.

    Args:
        details (bool): Append the interpreter optimization level if True.
    """
    mode: str = build_mode().value
    if details:
        click.echo(f"{mode} (optimize={optimize_level()})")
    else:
        click.echo(mode)
