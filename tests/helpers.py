# topmark:header:start
#
#   project      : Tripwire
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Shared helpers for the Tripwire test suite.

Notes:
    A panic ends with `tripwire.core.emission.abort_process`. In this suite it is
    replaced (see ``conftest.py``) by a function raising `ProcessAborted`, a
    `BaseException` that ordinary ``except Exception`` handlers in the code under
    test cannot catch. Tests that need the real abort run a child interpreter via
    `run_python`.
"""

from __future__ import annotations

import inspect
import os
import subprocess
import sys
import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tripwire.config.logging import TRIPWIRE_COLOR_ENV

if TYPE_CHECKING:
    from types import FrameType

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

SRC_DIR: Path = Path(__file__).resolve().parent.parent / "src"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.subprocess`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_subprocess: DecoratorType[Any] = as_typed_mark(pytest.mark.subprocess)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_debug_build_only: DecoratorType[Any] = as_typed_mark(
    pytest.mark.skipif(not __debug__, reason="in-process debug-tier tests need a debug build")
)
mark_posix_only: DecoratorType[Any] = as_typed_mark(
    pytest.mark.skipif(os.name != "posix", reason="abort status is reported as a signal on POSIX")
)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


class ProcessAborted(BaseException):
    """Raised in place of the real process abort during in-process tests."""


def caller_location() -> tuple[str, int]:
    """Return the ``(co_filename, f_lineno)`` of the calling line.

    Returns:
        tuple[str, int]: Source path and current line number of the caller.
    """
    frame: FrameType | None = inspect.currentframe()
    assert frame is not None and frame.f_back is not None
    caller: FrameType = frame.f_back
    return caller.f_code.co_filename, caller.f_lineno


def run_python(
    code: str,
    *,
    optimize: bool = False,
    module_args: tuple[str, ...] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run ``code`` (or ``-m tripwire ...``) in a fresh interpreter.

    The child always writes uncolored diagnostics and sees this checkout's
    ``src/`` ahead of any installed copy.

    Args:
        code (str): Program text for ``python -c`` (dedented first); ignored when
            ``module_args`` is given.
        optimize (bool): Run the child with ``-O`` (release build) if True.
        module_args (tuple[str, ...] | None): Arguments for ``python -m tripwire``.

    Returns:
        subprocess.CompletedProcess[str]: The finished child process.
    """
    argv: list[str] = [sys.executable]
    if optimize:
        argv.append("-O")
    if module_args is not None:
        argv.extend(["-m", "tripwire", *module_args])
    else:
        argv.extend(["-c", textwrap.dedent(code)])

    env: dict[str, str] = dict(os.environ)
    # Faulthandler would add its own report to stderr on abort
    for name in (
        "FORCE_COLOR",
        "NO_COLOR",
        "PYTHONOPTIMIZE",
        "PYTHONFAULTHANDLER",
        "PYTHONDEVMODE",
    ):
        env.pop(name, None)
    env[TRIPWIRE_COLOR_ENV] = "never"
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p)

    return subprocess.run(
        argv,
        capture_output=True,
        text=True,
        env=env,
        timeout=60,
        check=False,
    )
