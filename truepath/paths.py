"""Immutable path value types.

:class:`LocalPath` holds any normalized path, relative or absolute.
:class:`AbsolutePath` wraps a :class:`LocalPath` that was checked to be
absolute when it was built. Normalization runs exactly once, on
construction; every other operation works on the stored string.
"""

from __future__ import annotations

import logging
import os
import typing as t

from . import _path_utils as path_utils
from .entry_kind import classify_entry
from .errors import InvalidPathError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .entry_kind import EntryProbe, FileEntryKind

logger = logging.getLogger(__name__)

PathInput: t.TypeAlias = "str | os.PathLike[str]"


class PurePathValue(t.Protocol):
    """Read-only surface shared by :class:`LocalPath` and :class:`AbsolutePath`."""

    @property
    def value(self) -> str:
        """The normalized path string."""
        ...

    @property
    def is_absolute(self) -> bool:
        """Whether the path is fully qualified."""
        ...

    @property
    def file_name(self) -> str:
        """The full name of the last component."""
        ...

    def __fspath__(self) -> str:
        """Return the normalized path string."""
        ...


def _normalized_value(path: PathInput) -> str:
    """Return the normalized string of *path* without re-normalizing path values."""
    if isinstance(path, (LocalPath, AbsolutePath)):
        return path.value
    return path_utils.normalize_path(path)


class LocalPath:
    """A path on the local filesystem that may be relative or absolute.

    The stored string is always normalized; see
    :func:`truepath._path_utils.normalize_path_string` for the rules.
    Comparisons are case-sensitive.
    """

    __slots__ = ("_value",)

    def __init__(self, value: PathInput) -> None:
        self._value = _normalized_value(value)

    @classmethod
    def _from_normalized(cls, value: str) -> LocalPath:
        path = cls.__new__(cls)
        path._value = value
        return path

    @property
    def value(self) -> str:
        """The normalized path string."""
        return self._value

    @property
    def is_absolute(self) -> bool:
        """Whether the path is fully qualified.

        On Windows this requires a drive letter followed by a separator or a
        UNC/device prefix; a leading separator alone is not enough.
        """
        return path_utils.is_absolute(self._value)

    @property
    def parent(self) -> LocalPath | None:
        """The directory containing this path, or ``None`` if there is none."""
        parent = path_utils.parent_path_string(self._value)
        return None if parent is None else LocalPath._from_normalized(parent)

    @property
    def file_name(self) -> str:
        """The full name (with extension) of the last component."""
        return path_utils.file_name(self._value)

    def starts_with(self, other: PathInput) -> bool:
        """Return ``True`` if this path's text starts with *other*'s text.

        This is a plain string check: ``/foo2`` starts with ``/foo``. Use
        :meth:`is_prefix_of` to test ancestry.
        """
        return self._value.startswith(_normalized_value(other))

    def is_prefix_of(self, other: PathInput) -> bool:
        """Return ``True`` if this path is *other* or one of its ancestors.

        Unlike :meth:`starts_with` the match must end on a component
        boundary, so ``/foo`` is not a prefix of ``/foo2``. The boundary is
        the character after the prefix, so a root such as ``/`` is a prefix
        only of itself.
        """
        prefix = self._value
        candidate = _normalized_value(other)
        if not candidate.startswith(prefix):
            return False
        if len(candidate) == len(prefix):
            return True
        return candidate[len(prefix)] == path_utils.separator()

    def relative_to(self, base: PathInput) -> LocalPath:
        """Return the path leading from *base* to this path.

        ``..`` segments in either path are folded lexically first. When the
        two paths share no anchor (one absolute and one relative, or
        different drives) this path is returned unchanged.
        """
        relative = path_utils.relative_path_string(self._value, _normalized_value(base))
        return LocalPath._from_normalized(relative)

    def join(self, other: PathInput) -> LocalPath:
        """Append *other* to this path.

        If *other* is absolute it takes over completely and this path is
        ignored.
        """
        joined = path_utils.join_path_strings(self._value, _normalized_value(other))
        return LocalPath._from_normalized(joined)

    def __truediv__(self, other: PathInput) -> LocalPath:
        """Alias for :meth:`join`."""
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return self.join(other)

    def read_kind(self, probe: EntryProbe | None = None) -> FileEntryKind | None:
        """Return the kind of filesystem entry at this path, or ``None``.

        Raises :class:`~truepath.errors.EntryKindReadError` when the
        filesystem reports an error other than the entry being absent.
        """
        return classify_entry(self._value, probe)

    def __fspath__(self) -> str:
        """Return the normalized path string."""
        return self._value

    def __str__(self) -> str:
        """Return the normalized path string."""
        return self._value

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"LocalPath({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Compare normalized strings, case-sensitively."""
        if not isinstance(other, LocalPath):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        """Hash the normalized string."""
        return hash(self._value)


class AbsolutePath:
    """A path on the local filesystem that is guaranteed to be absolute.

    For a path that may be relative, use :class:`LocalPath`.
    """

    __slots__ = ("_underlying",)

    def __init__(self, value: PathInput) -> None:
        underlying = LocalPath(value)
        if not underlying.is_absolute:
            raw = os.fspath(value)
            logger.debug("Rejected non-absolute path %r", raw)
            raise InvalidPathError(raw)
        self._underlying = underlying

    @classmethod
    def _wrap(cls, underlying: LocalPath) -> AbsolutePath:
        path = cls.__new__(cls)
        path._underlying = underlying
        return path

    @property
    def value(self) -> str:
        """The normalized path string."""
        return self._underlying.value

    @property
    def is_absolute(self) -> bool:
        """Always ``True``."""
        return True

    @property
    def parent(self) -> AbsolutePath | None:
        """The parent of this path; ``None`` for a root."""
        parent = self._underlying.parent
        # The parent of an absolute path keeps its anchor.
        return None if parent is None else AbsolutePath._wrap(parent)

    @property
    def file_name(self) -> str:
        """The full name (with extension) of the last component."""
        return self._underlying.file_name

    def to_local(self) -> LocalPath:
        """Return the same path as a :class:`LocalPath`; nothing is lost."""
        return self._underlying

    def starts_with(self, other: PathInput) -> bool:
        """Textual prefix check; see :meth:`LocalPath.starts_with`."""
        return self._underlying.starts_with(other)

    def is_prefix_of(self, other: PathInput) -> bool:
        """Ancestry check; see :meth:`LocalPath.is_prefix_of`."""
        return self._underlying.is_prefix_of(other)

    def relative_to(self, base: PathInput) -> LocalPath:
        """Return the path leading from *base* to this path."""
        return self._underlying.relative_to(base)

    def join(self, other: PathInput) -> AbsolutePath:
        """Append *other* to this path.

        If *other* is absolute it takes over completely and this path is
        ignored. Raises :class:`~truepath.errors.InvalidPathError` only when
        a Windows drive-relative *other* names a different drive.
        """
        return AbsolutePath(self._underlying.join(other))

    def __truediv__(self, other: PathInput) -> AbsolutePath:
        """Alias for :meth:`join`."""
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return self.join(other)

    def read_kind(self, probe: EntryProbe | None = None) -> FileEntryKind | None:
        """Return the kind of filesystem entry at this path, or ``None``."""
        return self._underlying.read_kind(probe)

    def __fspath__(self) -> str:
        """Return the normalized path string."""
        return self.value

    def __str__(self) -> str:
        """Return the normalized path string."""
        return self.value

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"AbsolutePath({self.value!r})"

    def __eq__(self, other: object) -> bool:
        """Compare the underlying :class:`LocalPath` values."""
        if not isinstance(other, AbsolutePath):
            return NotImplemented
        return self._underlying == other._underlying

    def __hash__(self) -> int:
        """Hash the underlying :class:`LocalPath`."""
        return hash(self._underlying)


__all__ = ["AbsolutePath", "LocalPath", "PathInput", "PurePathValue"]
