"""Platform helpers deciding which path flavour truepath applies.

Keeping the decision in one place lets the normalization helpers and the
filesystem probes agree on whether Windows rules are in force.
"""

from __future__ import annotations

import os
import sys
import typing as t

# Tests set this override to emulate alternative platforms (for example
# Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "TRUEPATH_PLATFORM_OVERRIDE"

# Prefixes of ``sys.platform`` values that use drive letters, backslash
# separators and junctions.
_WINDOWS_PLATFORM_PREFIXES: t.Final[tuple[str, ...]] = ("win",)


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring the override."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def uses_windows_paths(platform: str | None = None) -> bool:
    """Return ``True`` when *platform* (default: current) uses Windows paths."""
    platform_name = current_platform(platform)
    return platform_name.startswith(_WINDOWS_PLATFORM_PREFIXES)


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "current_platform",
    "uses_windows_paths",
]
