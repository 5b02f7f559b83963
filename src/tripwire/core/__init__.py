# topmark:header:start
#
#   project      : Tripwire
#   file         : __init__.py
#   file_relpath : src/tripwire/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Always-active diagnostic operations (emission and guards)."""

from __future__ import annotations

from tripwire.core.emission import abort_process, emit, error, info, panic, warn
from tripwire.core.guards import check, error_if, info_if, panic_if, warn_if

__all__ = [
    "abort_process",
    "check",
    "emit",
    "error",
    "error_if",
    "info",
    "info_if",
    "panic",
    "panic_if",
    "warn",
    "warn_if",
]
