# topmark:header:start
#
#   project      : Tripwire
#   file         : main.py
#   file_relpath : src/tripwire/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end


"""Click CLI for Tripwire.

The group-level ``--color`` option reconfigures the diagnostic stream once,
before any subcommand runs.
"""

from __future__ import annotations

import click

from tripwire.cli.commands.build_mode import build_mode_command
from tripwire.cli.commands.emit import emit_command
from tripwire.cli.commands.version import version_command
from tripwire.config.logging import ColorMode, setup_logging


def init_common_state(*, color_mode: ColorMode | None) -> None:
    """Apply the group-level options shared by every subcommand.

    Args:
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
    """
    setup_logging(color_mode)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Tripwire CLI",
)
@click.option(
    "--color",
    "color_mode",
    type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
    default=None,
    help="Color diagnostic lines (auto, always, never).",
)
@click.pass_context
def cli(ctx: click.Context, color_mode: str | None) -> None:
    """Entry point for the Tripwire CLI."""
    init_common_state(
        color_mode=ColorMode(color_mode.lower()) if color_mode else None,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(build_mode_command)

cli.add_command(emit_command)

if __name__ == "__main__":
    cli()
