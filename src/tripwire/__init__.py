# topmark:header:start
#
#   project      : Tripwire
#   file         : __init__.py
#   file_relpath : src/tripwire/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Tripwire package.

Tripwire reports severity-tagged diagnostics and enforces runtime invariants.
Every operation writes at most a couple of lines of the form::

    [Warn] /path/to/caller.py:42 - cache miss for 'user:7'

to standard error. ``panic`` and a failing ``check`` terminate the process.
The ``d``-prefixed operations are active only in debug builds (see
[`tripwire.debug`][tripwire.debug]).

Example:
    ```python
    from tripwire import check, info, lazy, warn_if

    info("value=%d", 5)
    warn_if(len(queue) > 1000, "queue backlog %d", lazy(lambda: len(queue)))
    check(balance >= 0, "negative balance %s", balance)
    ```
"""

from __future__ import annotations

from tripwire.core.emission import abort_process, emit, error, info, panic, warn
from tripwire.core.guards import check, error_if, info_if, panic_if, warn_if
from tripwire.debug import (
    dcheck,
    derror,
    derror_if,
    dinfo,
    dinfo_if,
    dpanic,
    dpanic_if,
    dwarn,
    dwarn_if,
)
from tripwire.diagnostic.model import PANIC_NOTICE, Lazy, Severity, lazy

__all__ = [
    "PANIC_NOTICE",
    "Lazy",
    "Severity",
    "abort_process",
    "check",
    "dcheck",
    "derror",
    "derror_if",
    "dinfo",
    "dinfo_if",
    "dpanic",
    "dpanic_if",
    "dwarn",
    "dwarn_if",
    "emit",
    "error",
    "error_if",
    "info",
    "info_if",
    "lazy",
    "panic",
    "panic_if",
    "warn",
    "warn_if",
]
