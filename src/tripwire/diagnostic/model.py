# topmark:header:start
#
#   project      : Tripwire
#   file         : model.py
#   file_relpath : src/tripwire/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Core diagnostic types for Tripwire.

Sections:
    * Severity: the four emission tiers with their tag, logging level and color.
    * Lazy: deferred message argument, resolved only when a line is rendered.
    * Condition helpers: single evaluation of guard and check predicates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Generic, TypeVar, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

PANIC_NOTICE: Final[str] = "Program terminated due to the error above."


class Severity(Enum):
    """Severity tiers for emitted diagnostics.

    The enum value is the tag written between brackets on the diagnostic line.
    Tiers are ordered by importance: PANIC > ERROR > WARN > INFO. Only PANIC has a
    control-flow effect, and that effect lives in the panic path, not here.
    """

    INFO = "Info"
    WARN = "Warn"
    ERROR = "Error"
    PANIC = "Panic"

    @property
    def tag(self) -> str:
        """Return the bracketed tag text (e.g. ``"Warn"``)."""
        return self.value

    @property
    def level(self) -> int:
        """Return the stdlib `logging` level used to carry this tier."""
        return {
            Severity.INFO: logging.INFO,
            Severity.WARN: logging.WARNING,
            Severity.ERROR: logging.ERROR,
            Severity.PANIC: logging.CRITICAL,
        }[self]

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this tier.

        Intended for terminal output only; the uncolored line is the stable format.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this tier.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.INFO: chalk.green,
                Severity.WARN: chalk.yellow,
                Severity.ERROR: chalk.red,
                Severity.PANIC: chalk.red_bright.bold,
            }[self],
        )

    @classmethod
    def from_name(cls, name: str) -> Severity:
        """Look up a tier by member name or tag, case-insensitively.

        Args:
            name (str): ``"warn"``, ``"WARN"`` and ``"Warn"`` all resolve to `WARN`.

        Returns:
            Severity: The matching tier.

        Raises:
            ValueError: If ``name`` names no tier.
        """
        key: str = name.strip().upper()
        for member in cls:
            if member.name == key:
                return member
        raise ValueError(
            f"Unknown severity {name!r}; expected one of: "
            + ", ".join(m.name.lower() for m in cls)
        )

    @classmethod
    def from_level(cls, level: int) -> Severity | None:
        """Return the tier carried by a logging level, or None for foreign levels."""
        for member in cls:
            if member.level == level:
                return member
        return None


@dataclass(frozen=True, slots=True)
class Lazy(Generic[T]):
    """A message argument computed only when the diagnostic is actually rendered.

    Guards that do not fire, and debug-tier calls in a release build, never call
    ``fn``. When the line is rendered, ``fn`` is called exactly once.
    """

    fn: Callable[[], T]

    def resolve(self) -> T:
        """Call the wrapped function and return its value."""
        return self.fn()


def lazy(fn: Callable[[], T]) -> Lazy[T]:
    """Wrap ``fn`` so it runs only if the message is rendered."""
    return Lazy(fn)


def resolve_args(args: tuple[object, ...]) -> tuple[object, ...]:
    """Return ``args`` with every `Lazy` replaced by its value, in order."""
    return tuple(a.resolve() if isinstance(a, Lazy) else a for a in args)


def evaluate_condition(cond: object) -> bool:
    """Evaluate a guard or check condition exactly once.

    A zero-argument callable is invoked once and its result tested for truth;
    any other value is tested for truth directly.

    Args:
        cond (object): The condition value or a callable producing it.

    Returns:
        bool: The truth value of the condition.
    """
    value: object = cast("Callable[[], object]", cond)() if callable(cond) else cond
    return bool(value)
