# ruff: noqa: S101
"""pytest-bdd steps that create entries on disk and classify them."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import given, parsers, then, when

from truepath import AbsolutePath, FileEntryKind


@given("a temporary directory", target_fixture="workspace")
def create_workspace(tmp_path: Path) -> AbsolutePath:
    """Expose pytest's temporary directory as an :class:`AbsolutePath`."""
    return AbsolutePath(tmp_path)


@given(parsers.cfparse('a file named "{name}" in it'))
def create_file(workspace: AbsolutePath, name: str) -> None:
    """Write a small regular file inside the workspace."""
    Path(workspace / name).write_text("data")


@given(parsers.cfparse('a directory named "{name}" in it'))
def create_directory(workspace: AbsolutePath, name: str) -> None:
    """Create a directory inside the workspace."""
    Path(workspace / name).mkdir()


@when(parsers.cfparse('I read the kind of "{name}"'), target_fixture="entry_kind")
def read_entry_kind(workspace: AbsolutePath, name: str) -> FileEntryKind | None:
    """Classify the workspace entry called *name*."""
    return (workspace / name).read_kind()


@then(parsers.cfparse('the entry kind is "{kind}"'))
def check_entry_kind(entry_kind: FileEntryKind | None, kind: str) -> None:
    """Assert the entry was classified as *kind*."""
    assert entry_kind is FileEntryKind(kind)


@then("no entry kind is reported")
def check_no_entry_kind(entry_kind: FileEntryKind | None) -> None:
    """Assert nothing exists at the classified path."""
    assert entry_kind is None
