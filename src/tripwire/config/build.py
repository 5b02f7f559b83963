# topmark:header:start
#
#   project      : Tripwire
#   file         : build.py
#   file_relpath : src/tripwire/config/build.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Build mode of the running interpreter.

Tripwire's debug tier follows the interpreter's ``__debug__`` constant: it is
``True`` for a plain ``python`` run and ``False`` under ``python -O`` (or
``PYTHONOPTIMIZE``). The value is fixed when bytecode is compiled, so it is read
here exactly once and never re-evaluated per call.

Statements guarded by ``if __debug__:`` are removed by the compiler under ``-O``,
which is how call sites drop the evaluation of their arguments entirely.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Final


class BuildMode(str, Enum):
    """Build configuration selecting whether the debug tier is active."""

    DEBUG = "debug"
    RELEASE = "release"


DEBUG_BUILD: Final[bool] = __debug__


def build_mode() -> BuildMode:
    """Return the build mode the debug tier was bound under."""
    return BuildMode.DEBUG if DEBUG_BUILD else BuildMode.RELEASE


def optimize_level() -> int:
    """Return the interpreter's optimization level (0, 1 for ``-O``, 2 for ``-OO``)."""
    return sys.flags.optimize
