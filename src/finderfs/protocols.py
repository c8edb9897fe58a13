"""Finder protocol — the operations the web layer calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .types import FileEntry, Item, StorageCollection


@runtime_checkable
class Finder(Protocol):
    """File-manager operations over one remote store.

    Mutating operations take the ``adapter``/``path`` of the view the UI is
    showing and return a fresh :class:`StorageCollection` for it.
    """

    # ------------------------------------------------------------------
    # Browse
    # ------------------------------------------------------------------

    def index(self, adapter: str, path: str) -> StorageCollection: ...

    def search(self, adapter: str, path: str, query: str) -> StorageCollection: ...

    def subfolders(self, adapter: str, path: str) -> list[FileEntry]: ...

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def download(self, path: str) -> bytes: ...

    def preview(self, path: str) -> bytes: ...

    def save(self, path: str, content: str) -> None: ...

    def upload(self, remote_dir: str, remote_name: str, stream: BinaryIO) -> str: ...

    # ------------------------------------------------------------------
    # Mutate
    # ------------------------------------------------------------------

    def new_folder(self, adapter: str, path: str, name: str) -> StorageCollection: ...

    def new_file(self, adapter: str, path: str, name: str) -> StorageCollection: ...

    def rename(self, adapter: str, path: str, item: str, name: str) -> StorageCollection: ...

    def move(
        self, adapter: str, path: str, items: list[Item], target: str
    ) -> StorageCollection: ...

    def remove(self, adapter: str, path: str, items: list[Item]) -> StorageCollection: ...

    def remove_dir(self, path: str) -> None: ...

    def remove_file(self, path: str) -> None: ...

    def archive(
        self, adapter: str, path: str, items: list[Item], name: str
    ) -> StorageCollection: ...
