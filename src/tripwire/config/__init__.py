# topmark:header:start
#
#   project      : Tripwire
#   file         : __init__.py
#   file_relpath : src/tripwire/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Tripwire configuration: build mode and diagnostic stream setup."""

from __future__ import annotations

from tripwire.config.build import DEBUG_BUILD, BuildMode, build_mode, optimize_level
from tripwire.config.logging import ColorMode, get_logger, resolve_color_mode, setup_logging

__all__ = [
    "DEBUG_BUILD",
    "BuildMode",
    "ColorMode",
    "build_mode",
    "get_logger",
    "optimize_level",
    "resolve_color_mode",
    "setup_logging",
]
