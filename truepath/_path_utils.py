"""String-level helpers for normalizing filesystem paths across platforms.

Every function here works on plain strings and never touches the
filesystem. The active flavour is chosen by :data:`IS_WINDOWS`, which is
read at call time so tests can monkeypatch it to exercise the other
platform's rules.
"""

from __future__ import annotations

import os
import string
import typing as t

from .platform import uses_windows_paths

IS_WINDOWS = uses_windows_paths()

CURRENT_DIRECTORY: t.Final[str] = "."
PARENT_DIRECTORY: t.Final[str] = ".."
_POSIX_SEP: t.Final[str] = "/"
_WINDOWS_SEP: t.Final[str] = "\\"
_UNC_MARKER: t.Final[str] = _WINDOWS_SEP * 2


def separator() -> str:
    """Return the canonical directory separator for the active flavour."""
    return _WINDOWS_SEP if IS_WINDOWS else _POSIX_SEP


def _looks_like_drive(text: str) -> bool:
    """Return ``True`` when *text* opens with a drive letter such as ``C:``."""
    return len(text) >= 2 and text[1] == ":" and text[0] in string.ascii_letters


def _split_windows_drive(path: str) -> tuple[str, str]:
    """Split a drive letter or UNC/device prefix from *path*.

    *path* must already use backslashes. ``\\\\server\\share`` and
    ``\\\\?\\C:`` style prefixes are kept as a single opaque drive. Empty
    segments between the server and the share are skipped.
    """
    if _looks_like_drive(path):
        return path[:2], path[2:]
    if path.startswith(_UNC_MARKER) and len(path) > 2 and path[2] != _WINDOWS_SEP:
        server, _, tail = path[2:].partition(_WINDOWS_SEP)
        share, sep, tail = tail.lstrip(_WINDOWS_SEP).partition(_WINDOWS_SEP)
        drive = _UNC_MARKER + server
        if share:
            drive += _WINDOWS_SEP + share
        return drive, sep + tail
    return "", path


def _shield_drive_lookalike(parts: list[str]) -> None:
    """Prefix relative *parts* with ``.`` when the first one reads as a drive."""
    if IS_WINDOWS and parts and _looks_like_drive(parts[0]):
        parts.insert(0, CURRENT_DIRECTORY)


def split_prefix(path: str) -> tuple[str, str, str]:
    """Return ``(drive, root, rest)`` for *path*.

    ``drive`` is always empty on POSIX. ``root`` is the separator when the
    path is anchored at the top of its drive and empty otherwise. ``rest``
    has its leading separators stripped.
    """
    sep = separator()
    drive = ""
    if IS_WINDOWS:
        drive, path = _split_windows_drive(path)
    rest = path.lstrip(sep)
    root = sep if len(rest) != len(path) else ""
    return drive, root, rest


def normalize_path_string(path: str) -> str:
    """Return the normalized form of *path* using platform rules.

    Separators are canonicalized and collapsed, ``.`` segments are dropped
    and trailing separators removed. ``..`` segments are kept verbatim and
    case is preserved. An empty result becomes ``"."``.

    Under Windows rules a relative path whose first component reads as a
    drive (``.\\C:x``) keeps its leading ``.`` so it stays relative.
    """
    sep = separator()
    if IS_WINDOWS:
        path = path.replace(_POSIX_SEP, _WINDOWS_SEP)
    drive, root, rest = split_prefix(path)
    parts = [part for part in rest.split(sep) if part not in ("", CURRENT_DIRECTORY)]
    if not (drive or root):
        _shield_drive_lookalike(parts)
    normalized = drive + root + sep.join(parts)
    return normalized or CURRENT_DIRECTORY


def normalize_path(path: os.PathLike[str] | str) -> str:
    """Normalize *path* regardless of whether it is a string or Path."""
    return normalize_path_string(os.fspath(path))


def is_rooted(path: str) -> bool:
    """Return ``True`` when *path* carries a drive, UNC prefix or leading separator."""
    drive, root, _ = split_prefix(path)
    return bool(drive or root)


def is_absolute(path: str) -> bool:
    """Return ``True`` when *path* is fully qualified.

    On Windows a leading separator alone (``\\foo``) or a bare drive
    (``C:foo``) is rooted but still relative to the current drive or the
    drive's current directory, so neither counts as absolute.
    """
    drive, root, _ = split_prefix(path)
    if not IS_WINDOWS:
        return bool(root)
    return drive.startswith(_UNC_MARKER) or bool(drive and root)


def path_parts(path: str) -> list[str]:
    """Return the components of normalized *path* after its prefix."""
    _, _, rest = split_prefix(path)
    if rest in ("", CURRENT_DIRECTORY):
        return []
    return rest.split(separator())


def parent_path_string(path: str) -> str | None:
    """Return the directory portion of normalized *path*, or ``None``."""
    drive, root, _ = split_prefix(path)
    parts = path_parts(path)
    if not parts:
        return None
    if len(parts) == 1:
        return (drive + root) or None
    return drive + root + separator().join(parts[:-1])


def file_name(path: str) -> str:
    """Return the last component of normalized *path*, or ``""`` for a root."""
    parts = path_parts(path)
    return parts[-1] if parts else ""


def _drives_match(left: str, right: str) -> bool:
    """Compare drive prefixes the way Windows resolves them."""
    return left.casefold() == right.casefold()


def join_path_strings(base: str, other: str) -> str:
    """Append normalized *other* to normalized *base*.

    An *other* that carries its own anchor replaces *base* entirely. On
    Windows a root-relative *other* (``\\x``) keeps the drive of *base*, and
    a drive-relative *other* (``C:x``) appends only when the drives match.
    """
    sep = separator()
    base_drive, _, _ = split_prefix(base)
    other_drive, other_root, other_rest = split_prefix(other)

    if other_drive:
        if other_root or not _drives_match(other_drive, base_drive):
            return normalize_path_string(other)
        other = other_rest
    elif other_root:
        return normalize_path_string(base_drive + other)

    if base == base_drive and not base_drive.startswith(_UNC_MARKER):
        # A bare drive joins without a separator, so ``C:`` + ``a`` is ``C:a``.
        return normalize_path_string(base + other)
    return normalize_path_string(base + sep + other)


def _fold_parent_segments(parts: list[str], *, anchored: bool) -> list[str]:
    """Collapse ``name/..`` pairs lexically without consulting the filesystem."""
    folded: list[str] = []
    for part in parts:
        if part == CURRENT_DIRECTORY:
            continue
        if part == PARENT_DIRECTORY:
            if folded and folded[-1] != PARENT_DIRECTORY:
                folded.pop()
                continue
            if anchored:
                # ``..`` above a root stays at the root.
                continue
        folded.append(part)
    return folded


def relative_path_string(path: str, base: str) -> str:
    """Return the path leading from normalized *base* to normalized *path*.

    When the two paths do not share a drive and root the result is *path*
    itself, since no relative path can connect them.
    """
    path_drive, path_root, _ = split_prefix(path)
    base_drive, base_root, _ = split_prefix(base)
    if path_root != base_root or not _drives_match(path_drive, base_drive):
        return path

    anchored = bool(path_drive or path_root)
    target = _fold_parent_segments(path_parts(path), anchored=anchored)
    origin = _fold_parent_segments(path_parts(base), anchored=anchored)

    common = 0
    for target_part, origin_part in zip(target, origin):
        if target_part != origin_part:
            break
        common += 1

    parts = [PARENT_DIRECTORY] * (len(origin) - common) + target[common:]
    _shield_drive_lookalike(parts)
    return normalize_path_string(separator().join(parts))


__all__ = [
    "CURRENT_DIRECTORY",
    "IS_WINDOWS",
    "PARENT_DIRECTORY",
    "file_name",
    "is_absolute",
    "is_rooted",
    "join_path_strings",
    "normalize_path",
    "normalize_path_string",
    "parent_path_string",
    "path_parts",
    "relative_path_string",
    "separator",
    "split_prefix",
]
