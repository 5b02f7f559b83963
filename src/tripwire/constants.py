# topmark:header:start
#
#   project      : Tripwire
#   file         : constants.py
#   file_relpath : src/tripwire/constants.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end


"""Tripwire Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TRIPWIRE_VERSION: str = get_version("tripwire")
