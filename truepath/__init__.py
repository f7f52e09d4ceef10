"""Normalized, immutable path value types for the local filesystem.

:class:`LocalPath` may be relative or absolute; :class:`AbsolutePath` is
guaranteed to be absolute by construction. Both normalize once when built
and never touch the filesystem, except for :meth:`LocalPath.read_kind`.
"""

from __future__ import annotations

from ._path_utils import normalize_path, normalize_path_string
from .entry_kind import (
    EntryProbe,
    FileEntryKind,
    PosixEntryProbe,
    WindowsEntryProbe,
    classify_entry,
    default_probe,
)
from .errors import EntryKindReadError, InvalidPathError, TruePathError
from .paths import AbsolutePath, LocalPath, PathInput, PurePathValue
from .platform import PLATFORM_OVERRIDE_ENV, current_platform, uses_windows_paths

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "AbsolutePath",
    "EntryKindReadError",
    "EntryProbe",
    "FileEntryKind",
    "InvalidPathError",
    "LocalPath",
    "PathInput",
    "PosixEntryProbe",
    "PurePathValue",
    "TruePathError",
    "WindowsEntryProbe",
    "classify_entry",
    "current_platform",
    "default_probe",
    "normalize_path",
    "normalize_path_string",
    "uses_windows_paths",
]
