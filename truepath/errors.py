"""Exception hierarchy for truepath."""

from __future__ import annotations


class TruePathError(Exception):
    """Base class for errors raised by truepath."""


class InvalidPathError(TruePathError, ValueError):
    """Raised when a string cannot be used where an absolute path is required.

    Parameters
    ----------
    path : str
        The rejected input, exactly as the caller supplied it.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Path {path!r} is not absolute")
        self.path = path


class EntryKindReadError(TruePathError, OSError):
    """Raised when the filesystem refuses to describe an entry.

    A missing entry is reported as ``None`` by the classifier; this error is
    reserved for failures such as denied permissions.

    Parameters
    ----------
    path : str
        The path that was being classified.
    last_exception : OSError
        The underlying filesystem error.

    Attributes
    ----------
    path : str
        The path that was being classified.
    last_exception : OSError
        The underlying filesystem error.
    """

    def __init__(self, path: str, last_exception: OSError) -> None:
        msg = f"Failed to read the entry kind of {path}: {last_exception}"
        super().__init__(msg)
        self.path = path
        self.last_exception = last_exception


__all__ = ["EntryKindReadError", "InvalidPathError", "TruePathError"]
