# topmark:header:start
#
#   project      : Tripwire
#   file         : __init__.py
#   file_relpath : src/tripwire/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Diagnostic primitives: severity tiers, lazy arguments and condition evaluation."""

from __future__ import annotations

from tripwire.diagnostic.model import (
    PANIC_NOTICE,
    Lazy,
    Severity,
    evaluate_condition,
    lazy,
    resolve_args,
)

__all__ = [
    "PANIC_NOTICE",
    "Lazy",
    "Severity",
    "evaluate_condition",
    "lazy",
    "resolve_args",
]
