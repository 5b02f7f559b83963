# topmark:header:start
#
#   project      : Tripwire
#   file         : emission.py
#   file_relpath : src/tripwire/core/emission.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Emission layer: one diagnostic line per call, plus the panic path.

Every line has the shape ``[<Severity>] <file>:<line> - <message>`` where the
location is the application's call site, not a frame inside Tripwire. Internal
helpers take a ``stacklevel`` counted from their own caller (1 = direct caller)
and add one frame for each hop towards the logger.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, NoReturn

from tripwire.config.logging import setup_logging
from tripwire.diagnostic.model import PANIC_NOTICE, Severity, resolve_args

if TYPE_CHECKING:
    from tripwire.config.logging import TripwireLogger

logger: TripwireLogger = setup_logging()


def _emit(severity: Severity, msg: str, args: tuple[object, ...], stacklevel: int) -> None:
    logger.emit(severity, msg, *resolve_args(args), stacklevel=stacklevel + 1)


def abort_process() -> NoReturn:
    """Flush the diagnostic stream and abort the process.

    `os.abort` raises SIGABRT: no exception propagates, no ``finally`` block,
    ``atexit`` hook or context manager runs, and the caller cannot intercept it.
    """
    for handler in logger.handlers:
        handler.flush()
    os.abort()


def _panic(msg: str, args: tuple[object, ...], stacklevel: int) -> NoReturn:
    _emit(Severity.PANIC, msg, args, stacklevel + 1)
    _emit(Severity.PANIC, PANIC_NOTICE, (), stacklevel + 1)
    abort_process()


def emit(severity: Severity, msg: str, *args: object) -> None:
    """Write one diagnostic line at ``severity``.

    This is the bare primitive: even at `Severity.PANIC` it only writes.

    Args:
        severity (Severity): Tier written between brackets.
        msg (str): ``%``-style template; written verbatim when ``args`` is empty.
        *args (object): Positional substitutions; `Lazy` values are resolved first.
    """
    _emit(severity, msg, args, 2)


def info(msg: str, *args: object) -> None:
    """Emit ``msg % args`` at tier Info."""
    _emit(Severity.INFO, msg, args, 2)


def warn(msg: str, *args: object) -> None:
    """Emit ``msg % args`` at tier Warn."""
    _emit(Severity.WARN, msg, args, 2)


def error(msg: str, *args: object) -> None:
    """Emit ``msg % args`` at tier Error.

    This is a severity label only; control returns to the caller.
    """
    _emit(Severity.ERROR, msg, args, 2)


def panic(msg: str, *args: object) -> NoReturn:
    """Emit ``msg % args`` at tier Panic, then the termination notice, then abort.

    Never returns.

    Args:
        msg (str): ``%``-style template.
        *args (object): Positional substitutions; `Lazy` values are resolved first.
    """
    _panic(msg, args, 2)
