# topmark:header:start
#
#   project      : Tripwire
#   file         : __main__.py
#   file_relpath : src/tripwire/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end


"""Module entry point for Tripwire.

Equivalent to running the ``tripwire`` console script::

    python -m tripwire build-mode
"""

from __future__ import annotations

from tripwire.cli.main import cli

if __name__ == "__main__":
    cli()
