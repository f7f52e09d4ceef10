"""Global test configuration and shared fixtures."""

from __future__ import annotations

import tempfile
import typing as t
from pathlib import Path

import pytest

import truepath._path_utils as path_utils
from truepath.platform import PLATFORM_OVERRIDE_ENV

_SYMLINKS_SUPPORTED: bool | None = None


def _can_create_symlink() -> bool:
    """Return ``True`` when the test process may create directory symlinks."""
    try:
        with tempfile.TemporaryDirectory() as tmp_dir:
            target = Path(tmp_dir) / "target"
            target.mkdir()
            link = Path(tmp_dir) / "link"
            try:
                link.symlink_to(target, target_is_directory=True)
            except (NotImplementedError, OSError):
                # Windows refuses without Developer Mode or elevation.
                return False
    except OSError:
        return False
    else:
        return True


def _symlinks_supported() -> bool:
    global _SYMLINKS_SUPPORTED
    if _SYMLINKS_SUPPORTED is None:
        _SYMLINKS_SUPPORTED = _can_create_symlink()
    return _SYMLINKS_SUPPORTED


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers and cache platform capability checks."""
    config.addinivalue_line(
        "markers",
        "requires_symlinks: mark test as needing permission to create symlinks",
    )
    _symlinks_supported()


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip tests needing symlinks when the platform disallows them."""
    if _symlinks_supported():
        return
    skip = pytest.mark.skip(reason="Symlinks cannot be created in this environment")
    for item in items:
        if "requires_symlinks" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def clear_platform_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Keep a developer's platform override from leaking into tests."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)
    yield


@pytest.fixture
def posix_flavour(monkeypatch: pytest.MonkeyPatch) -> None:
    """Apply POSIX path rules regardless of the host platform."""
    monkeypatch.setattr(path_utils, "IS_WINDOWS", False)


@pytest.fixture
def windows_flavour(monkeypatch: pytest.MonkeyPatch) -> None:
    """Apply Windows path rules regardless of the host platform."""
    monkeypatch.setattr(path_utils, "IS_WINDOWS", True)
