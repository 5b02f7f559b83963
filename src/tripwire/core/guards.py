# topmark:header:start
#
#   project      : Tripwire
#   file         : guards.py
#   file_relpath : src/tripwire/core/guards.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Guard layer: conditional emission and invariant checks.

Conditions are evaluated exactly once. A condition may be a plain value or a
zero-argument callable; the callable form defers the evaluation itself, which
matters for debug-tier calls in a release build. When a guard does not fire, no
`Lazy` message argument is resolved and nothing is rendered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tripwire.core.emission import _emit, _panic
from tripwire.diagnostic.model import Severity, evaluate_condition

if TYPE_CHECKING:
    from collections.abc import Callable

    Condition = object | Callable[[], object]


def info_if(cond: Condition, msg: str, *args: object) -> None:
    """Emit at tier Info if ``cond`` holds."""
    if evaluate_condition(cond):
        _emit(Severity.INFO, msg, args, 2)


def warn_if(cond: Condition, msg: str, *args: object) -> None:
    """Emit at tier Warn if ``cond`` holds."""
    if evaluate_condition(cond):
        _emit(Severity.WARN, msg, args, 2)


def error_if(cond: Condition, msg: str, *args: object) -> None:
    """Emit at tier Error if ``cond`` holds. Expected to be false."""
    if not evaluate_condition(cond):
        return
    _emit(Severity.ERROR, msg, args, 2)


def panic_if(cond: Condition, msg: str, *args: object) -> None:
    """Panic with ``msg % args`` if ``cond`` holds. Expected to be false."""
    if not evaluate_condition(cond):
        return
    _panic(msg, args, 2)


def check(cond: Condition, msg: str = "check failed", *args: object) -> None:
    """Assert an invariant; panic with ``msg % args`` if it does not hold.

    ``cond`` is evaluated exactly once, whatever the outcome, so conditions with
    side effects are safe. A passing check has no observable effect, and callers
    may rely on the condition from that point on.

    Args:
        cond (Condition): The invariant, or a zero-argument callable computing it.
        msg (str): ``%``-style template for the panic message.
        *args (object): Positional substitutions; `Lazy` values are resolved only
            on failure.
    """
    holds: bool = evaluate_condition(cond)
    if not holds:
        _panic(msg, args, 2)
