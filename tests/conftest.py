"""Shared fixtures for finderfs tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from finderfs import FinderSession, LocalDiskStore, StoreFinder

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Host directory laid out like a small remote server."""
    (tmp_path / "home" / "alice").mkdir(parents=True)
    (tmp_path / "data").mkdir()
    (tmp_path / "README").write_text("root file\n")
    return tmp_path


@pytest.fixture
def store(root: Path) -> LocalDiskStore:
    """LocalDiskStore rooted at the fake server."""
    return LocalDiskStore(host_dir=root)


@pytest.fixture
def finder(store: LocalDiskStore) -> StoreFinder:
    """StoreFinder for user alice over the local store."""
    return StoreFinder(FinderSession(store=store, user="alice"))
