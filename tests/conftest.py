# topmark:header:start
#
#   project      : Tripwire
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Pytest configuration for the Tripwire test suite.

This file sets up global fixtures so diagnostic output is plain (uncolored) and
so that no test can abort the pytest process.
"""

from __future__ import annotations

from typing import NoReturn

import pytest

from tests.helpers import ProcessAborted
from tripwire.config import logging
from tripwire.core import emission


@pytest.fixture(autouse=True)
def trap_abort(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace the process abort with `ProcessAborted` for every test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """

    def _raise() -> NoReturn:
        raise ProcessAborted

    monkeypatch.setattr(emission, "abort_process", _raise)


@pytest.fixture(autouse=True)
def plain_diagnostics(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no developer color setting leaks into diagnostic output.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (logging.TRIPWIRE_COLOR_ENV, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    logging.setup_logging(color=False)


def pytest_configure(config: pytest.Config) -> None:
    """Register the suite's custom markers.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    config.addinivalue_line("markers", "subprocess: runs a child Python interpreter")
    config.addinivalue_line("markers", "cli: exercises the click command-line interface")
