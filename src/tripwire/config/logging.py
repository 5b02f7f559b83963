# topmark:header:start
#
#   project      : Tripwire
#   file         : logging.py
#   file_relpath : src/tripwire/config/logging.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Tripwire logging: the single diagnostic stream.

This module wires the standard logging module into the fixed diagnostic line
format. It provides a specialized logger class that tags records with a
[`Severity`][tripwire.diagnostic.model.Severity], a formatter for the stable line
shape, a chalk-colored variant for terminals, and a handler that always writes to
the current ``sys.stderr``.

Every tier is always emitted: diagnostic records bypass level checks,
`logging.disable` and the ``disabled`` flag, and do not propagate to the
application's root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Final, TextIO, cast

from tripwire.diagnostic.model import Severity

if TYPE_CHECKING:
    from collections.abc import Mapping

DIAGNOSTIC_LOGGER_NAME: Final[str] = "tripwire.diagnostics"

DIAGNOSTIC_FORMAT: Final[str] = "[%(severity)s] %(pathname)s:%(lineno)d - %(message)s"

TRIPWIRE_COLOR_ENV: Final[str] = "TRIPWIRE_COLOR"


class TripwireLogger(logging.Logger):
    """Custom logger class for Tripwire that emits severity-tagged diagnostic records."""

    def emit(
        self,
        severity: Severity,
        msg: object,
        *args: object,
        stacklevel: int = 1,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Write ``msg % args`` tagged with ``severity`` to this logger's handlers.

        The record's ``pathname`` and ``lineno`` are taken from the frame
        ``stacklevel`` levels above this method (1 = the direct caller).

        The record is built and dispatched here rather than through `Logger.log`:
        diagnostics ignore `logging.disable`, the logger's ``disabled`` flag (set by
        ``dictConfig``/``fileConfig`` on existing loggers) and logger levels.

        Args:
            severity (Severity): Tier written between brackets.
            msg (object): The message template.
            *args (object): Positional substitution arguments.
            stacklevel (int): Which caller frame provides the source location.
            extra (Mapping[str, object] | None): Additional record attributes.
        """
        fn, lno, func, sinfo = self.findCaller(stack_info=False, stacklevel=stacklevel + 1)
        record = self.makeRecord(
            self.name,
            severity.level,
            fn,
            lno,
            msg,
            args,
            None,
            func=func,
            extra={**(extra or {}), "severity": severity.tag},
            sinfo=sinfo,
        )
        self.callHandlers(record)


class DiagnosticFormatter(logging.Formatter):
    """Formatter for the stable ``[<Severity>] <file>:<line> - <message>`` shape."""

    def __init__(self, fmt: str = DIAGNOSTIC_FORMAT) -> None:
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record``, deriving a tag for records that were not tagged.

        Args:
            record (logging.LogRecord): The record to render.

        Returns:
            str: The rendered diagnostic line, without trailing newline.
        """
        if not hasattr(record, "severity"):
            tier = Severity.from_level(record.levelno)
            record.severity = tier.tag if tier else record.levelname.capitalize()
        return super().format(record)


class ChalkFormatter(DiagnosticFormatter):
    """Formatter that colors each diagnostic line according to its tier."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on its tier.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized diagnostic line.
        """
        message = super().format(record)
        tier = Severity.from_level(record.levelno)
        if tier is None:
            return message
        return tier.color(message)


class StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler bound to whatever ``sys.stderr`` is at write time.

    Rebinding ``sys.stderr`` after import (test capture, redirection) is honored.
    Each record is flushed as soon as it is written.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        # Skip StreamHandler.__init__: it would store a fixed stream.
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        """Return the current standard error stream."""
        return sys.stderr


class ColorMode(str, Enum):
    """User intent for colorized diagnostic output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    mode: ColorMode | None = None,
    *,
    stderr_isatty: bool | None = None,
) -> bool:
    """Determine whether diagnostic lines should be colored.

    Args:
        mode (ColorMode | None): Explicit mode; ``None`` or ``AUTO`` defers to the
            environment.
        stderr_isatty (bool | None): Whether stderr is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Honors an explicit ``ALWAYS``/``NEVER`` first, then ``TRIPWIRE_COLOR``,
        then the ``FORCE_COLOR`` and ``NO_COLOR`` conventions, and finally
        enables color only when stderr is a TTY.
    """
    if mode is None or mode == ColorMode.AUTO:
        mode = resolve_env_color_mode()
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stderr_isatty is None:
        try:
            stderr_isatty = sys.stderr.isatty()
        except (AttributeError, ValueError):
            stderr_isatty = False
    return bool(stderr_isatty)


def resolve_env_color_mode() -> ColorMode | None:
    """Return the color mode from the environment or None if unset or invalid.

    Honors TRIPWIRE_COLOR (``auto``, ``always``, ``never``; case-insensitive).
    """
    val = os.environ.get(TRIPWIRE_COLOR_ENV)
    if val:
        try:
            return ColorMode(val.strip().lower())
        except ValueError:
            return None
    return None


def get_logger(name: str = DIAGNOSTIC_LOGGER_NAME) -> TripwireLogger:
    """Retrieve a TripwireLogger instance with the specified name.

    The logger class is swapped in only for this lookup, so applications that
    install their own logger class are unaffected.

    Args:
        name (str): The name of the logger.

    Returns:
        TripwireLogger: A TripwireLogger instance.
    """
    existing = logging.Logger.manager.loggerDict.get(name)
    if isinstance(existing, TripwireLogger):
        return existing
    previous = logging.getLoggerClass()
    logging.setLoggerClass(TripwireLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)
    return cast("TripwireLogger", logger)


def setup_logging(color: bool | ColorMode | None = None) -> TripwireLogger:
    """Configure the diagnostic logger with exactly one stderr handler.

    Safe to call repeatedly: existing handlers are replaced, never duplicated.

    Args:
        color (bool | ColorMode | None): ``True``/``False`` forces coloring on or off;
            a `ColorMode` or ``None`` is resolved via `resolve_color_mode`.

    Returns:
        TripwireLogger: The configured diagnostic logger.
    """
    enable_color = color if isinstance(color, bool) else resolve_color_mode(color)

    logger = get_logger(DIAGNOSTIC_LOGGER_NAME)
    logger.setLevel(Severity.INFO.level)

    # Iterate over a copy since we're modifying the list
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = StderrHandler()
    handler.setFormatter(ChalkFormatter() if enable_color else DiagnosticFormatter())
    logger.addHandler(handler)

    # Application logging configuration must neither duplicate nor filter diagnostics
    logger.propagate = False
    return logger
