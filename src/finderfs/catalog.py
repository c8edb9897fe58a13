"""Top-level storages visible under the store root."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from finderfs.fs.protocol import RemoteFileStore


def list_storages(store: RemoteFileStore) -> list[str]:
    """Names of the directories and symlinks directly under ``/``.

    The root never holds plain files for the purposes of the UI, so they
    are dropped.
    """
    return [e.name for e in store.read_dir("/") if e.is_dir or e.is_symlink]
