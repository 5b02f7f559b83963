# topmark:header:start
#
#   project      : Tripwire
#   file         : debug.py
#   file_relpath : src/tripwire/debug.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Debug tier: operations that exist only in debug builds.

Each ``d``-prefixed name is bound once, at import, from the interpreter's build
mode:

* debug build (plain ``python``): the name *is* its non-prefixed counterpart,
  e.g. ``dcheck is check``, so behavior and call-site capture are identical;
* release build (``python -O``): the name is a no-op that writes nothing, never
  terminates, and neither invokes a callable condition nor resolves a `Lazy`
  argument.

Python evaluates plain call arguments before the call. To drop those too, put
the call under ``if __debug__:``; the compiler removes the whole statement under
``-O``::

    if __debug__:
        dcheck(tree.is_balanced(), "unbalanced after insert of %r", key)
"""

from __future__ import annotations

from tripwire.config.build import DEBUG_BUILD
from tripwire.core.emission import error, info, panic, warn
from tripwire.core.guards import check, error_if, info_if, panic_if, warn_if


def _elided(*args: object, **kwargs: object) -> None:
    return None


if DEBUG_BUILD:
    dinfo = info
    dwarn = warn
    derror = error
    dpanic = panic
    dcheck = check

    dinfo_if = info_if
    dwarn_if = warn_if
    derror_if = error_if
    dpanic_if = panic_if
else:
    dinfo = _elided
    dwarn = _elided
    derror = _elided
    dpanic = _elided
    dcheck = _elided

    dinfo_if = _elided
    dwarn_if = _elided
    derror_if = _elided
    dpanic_if = _elided

__all__ = [
    "dcheck",
    "derror",
    "derror_if",
    "dinfo",
    "dinfo_if",
    "dpanic",
    "dpanic_if",
    "dwarn",
    "dwarn_if",
]
