"""Classify what a path currently points at on the filesystem.

The platform-specific questions (does the entry exist, is it a directory,
a reparse point, a junction) are answered by an :class:`EntryProbe`. The
mapping from those answers to a :class:`FileEntryKind` lives in
:func:`classify_entry` and is the same on every platform.
"""

from __future__ import annotations

import enum
import logging
import os
import stat
import typing as t

from . import _path_utils as path_utils
from .errors import EntryKindReadError

logger = logging.getLogger(__name__)

# Mirrors ``stat.FILE_ATTRIBUTE_REPARSE_POINT`` and
# ``stat.IO_REPARSE_TAG_MOUNT_POINT``, which only exist on Windows builds.
FILE_ATTRIBUTE_REPARSE_POINT: t.Final[int] = 0x400
IO_REPARSE_TAG_MOUNT_POINT: t.Final[int] = 0xA0000003

_MISSING_ERRORS: t.Final[tuple[type[OSError], ...]] = (
    FileNotFoundError,
    NotADirectoryError,
)


class FileEntryKind(enum.Enum):
    """Kinds of filesystem entry a path can resolve to."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    JUNCTION = "junction"


class EntryProbe(t.Protocol):
    """Filesystem queries needed to classify an entry."""

    supports_junctions: bool

    def exists(self, path: str) -> bool:
        """Return ``True`` if a file or directory exists at *path*."""
        ...

    def is_directory(self, path: str) -> bool:
        """Return ``True`` if *path* resolves to a directory."""
        ...

    def is_symlink(self, path: str) -> bool:
        """Return ``True`` if the entry itself is a symlink or reparse point."""
        ...

    def is_junction(self, path: str) -> bool:
        """Return ``True`` if the entry is a directory junction."""
        ...


class PosixEntryProbe:
    """Probe backed by ``stat``/``lstat`` with POSIX semantics."""

    supports_junctions = False

    def exists(self, path: str) -> bool:
        """Return ``True`` when ``stat`` succeeds; dangling links do not exist.

        A string the OS cannot accept as a path, such as one holding a NUL
        byte, names nothing and so does not exist.
        """
        try:
            os.stat(path)
        except (*_MISSING_ERRORS, ValueError):
            return False
        return True

    def is_directory(self, path: str) -> bool:
        """Return ``True`` when *path* (following links) is a directory."""
        return stat.S_ISDIR(os.stat(path).st_mode)

    def is_symlink(self, path: str) -> bool:
        """Return ``True`` when the entry is a symbolic link."""
        return stat.S_ISLNK(os.lstat(path).st_mode)

    def is_junction(self, path: str) -> bool:  # noqa: ARG002 - protocol signature
        """Junctions do not exist outside Windows."""
        return False


class WindowsEntryProbe(PosixEntryProbe):
    """Probe that reads reparse-point attributes reported by Windows."""

    supports_junctions = True

    def is_symlink(self, path: str) -> bool:
        """Return ``True`` when the entry carries the reparse-point attribute."""
        attributes = getattr(os.lstat(path), "st_file_attributes", 0)
        return bool(attributes & FILE_ATTRIBUTE_REPARSE_POINT)

    def is_junction(self, path: str) -> bool:
        """Return ``True`` when the entry is a mount-point reparse point."""
        tag = getattr(os.lstat(path), "st_reparse_tag", 0)
        return tag == IO_REPARSE_TAG_MOUNT_POINT


def default_probe() -> EntryProbe:
    """Return the probe matching the active path flavour."""
    return WindowsEntryProbe() if path_utils.IS_WINDOWS else PosixEntryProbe()


def _classify_existing(path: str, probe: EntryProbe) -> FileEntryKind:
    """Map probe answers for an existing entry onto a :class:`FileEntryKind`."""
    if not probe.is_directory(path):
        return FileEntryKind.FILE
    if probe.supports_junctions and probe.is_junction(path):
        return FileEntryKind.JUNCTION
    if probe.is_symlink(path):
        return FileEntryKind.SYMLINK
    return FileEntryKind.DIRECTORY


def classify_entry(
    path: str, probe: EntryProbe | None = None
) -> FileEntryKind | None:
    """
    Return the kind of entry at *path*, or ``None`` when nothing exists there.

    Parameters
    ----------
    path : str
        Normalized path string to inspect.
    probe : EntryProbe | None, optional
        Filesystem probe to query. Defaults to :func:`default_probe`.

    Raises
    ------
    EntryKindReadError
        When the filesystem reports an error other than the entry being
        missing, for example a permission failure.
    """
    active = probe if probe is not None else default_probe()
    try:
        if not active.exists(path):
            logger.debug("No filesystem entry at %s", path)
            return None
        kind = _classify_existing(path, active)
    except _MISSING_ERRORS:
        # The entry vanished between the existence check and classification.
        logger.debug("Filesystem entry at %s disappeared during classification", path)
        return None
    except OSError as exc:
        logger.debug("Could not classify %s: %s", path, exc)
        raise EntryKindReadError(path, exc) from exc

    logger.debug("Classified %s as %s", path, kind.value)
    return kind


__all__ = [
    "EntryProbe",
    "FileEntryKind",
    "PosixEntryProbe",
    "WindowsEntryProbe",
    "classify_entry",
    "default_probe",
]
