"""StoreFinder — the Finder implementation over any RemoteFileStore."""

from __future__ import annotations

import logging
import posixpath
import shutil
from typing import TYPE_CHECKING, BinaryIO

from finderfs.archive import build_archive
from finderfs.catalog import list_storages
from finderfs.guard import length_guard
from finderfs.listing import scan_files
from finderfs.listing import subfolders as list_subfolders
from finderfs.paths import entry_path, join_target, replace_last_part, resolve_path
from finderfs.types import ArchiveRequest, FileType, StorageCollection

if TYPE_CHECKING:
    from finderfs.fs.protocol import RemoteFileStore
    from finderfs.guard import GuardPolicy
    from finderfs.session import FinderSession
    from finderfs.types import FileEntry, Item

logger = logging.getLogger(__name__)


class StoreFinder:
    """File-manager facade for one session.

    Every call runs synchronously against ``session.store``.  Store errors
    propagate unchanged.  Items refused by the guard are skipped silently,
    so a successful batch call may have left some items untouched.

    Usage::

        session = FinderSession(store=LocalDiskStore("/srv/files"), user="alice")
        finder = StoreFinder(session)
        view = finder.index("null", "")
        view = finder.new_file(view.adapter, view.dirname, "notes.txt")
    """

    def __init__(self, session: FinderSession, *, guard: GuardPolicy = length_guard) -> None:
        self.session = session
        self.guard = guard

    @property
    def store(self) -> RemoteFileStore:
        return self.session.store

    def _view(self, adapter: str, path: str) -> tuple[str, str]:
        """Resolve the (adapter, dirname) pair a request is looking at."""
        config = self.session.config
        if adapter == config.unscoped_adapter:
            return config.home_adapter, self.session.home_dir
        return adapter, resolve_path(adapter, path)

    # ------------------------------------------------------------------
    # Browse
    # ------------------------------------------------------------------

    def index(self, adapter: str, path: str) -> StorageCollection:
        storages = list_storages(self.store)
        adapter, dirname = self._view(adapter, path)
        return StorageCollection(
            adapter=adapter,
            storages=storages,
            dirname=dirname,
            files=scan_files(self.store, dirname, adapter),
        )

    def search(self, adapter: str, path: str, query: str) -> StorageCollection:
        """Index *path*, keeping entries whose basename contains *query*."""
        result = self.index(adapter, path)
        result.files = [f for f in result.files if query in f.basename]
        return result

    def subfolders(self, adapter: str, path: str) -> list[FileEntry]:
        return list_subfolders(self.store, adapter, path)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def download(self, path: str) -> bytes:
        with self.store.open(path) as fh:
            return fh.read()

    def preview(self, path: str) -> bytes:
        return self.download(path)

    def save(self, path: str, content: str) -> None:
        """Overwrite *path* with *content*."""
        with self.store.create(path) as fh:
            fh.write(content.encode("utf-8"))

    def upload(self, remote_dir: str, remote_name: str, stream: BinaryIO) -> str:
        """Copy *stream* to *remote_dir*/*remote_name* and return the stored path.

        A *remote_name* such as ``photos/2024/a.jpg`` (folder uploads) places
        the file in the matching subdirectory, created on demand.
        """
        if "/" in remote_name:
            subdir, remote_name = remote_name.rsplit("/", 1)
            remote_dir = entry_path(remote_dir, subdir)

        try:
            self.store.stat(remote_dir)
        except FileNotFoundError:
            self.store.mkdir_all(remote_dir)

        dest = entry_path(remote_dir, remote_name)
        with self.store.create(dest) as fh:
            shutil.copyfileobj(stream, fh)
        logger.debug("Uploaded %s", dest)
        return dest

    # ------------------------------------------------------------------
    # Mutate
    # ------------------------------------------------------------------

    def new_folder(self, adapter: str, path: str, name: str) -> StorageCollection:
        _, dirname = self._view(adapter, path)
        self.store.mkdir_all(entry_path(dirname, name))
        return self.index(adapter, path)

    def new_file(self, adapter: str, path: str, name: str) -> StorageCollection:
        _, dirname = self._view(adapter, path)
        with self.store.create(entry_path(dirname, name)):
            pass
        return self.index(adapter, path)

    def rename(self, adapter: str, path: str, item: str, name: str) -> StorageCollection:
        """Rename *item* to *name* within its directory.

        A rename the guard refuses is a no-op that still returns the view.
        """
        new_path = replace_last_part(item, name)
        if not self.guard("rename", item, new_path):
            self.store.rename(item, new_path)
        return self.index(adapter, path)

    def move(self, adapter: str, path: str, items: list[Item], target: str) -> StorageCollection:
        for item in items:
            dest = posixpath.join(target, posixpath.basename(item.path))
            self.store.rename(item.path, dest)
        return self.index(adapter, path)

    def remove(self, adapter: str, path: str, items: list[Item]) -> StorageCollection:
        _, dirname = self._view(adapter, path)
        for item in items:
            if self.guard("remove", dirname, item.path):
                continue
            if item.type == FileType.DIR:
                self.remove_dir(item.path)
            elif item.type == FileType.FILE:
                self.remove_file(item.path)
        return self.index(adapter, path)

    def remove_dir(self, path: str) -> None:
        self.store.remove_all(path)

    def remove_file(self, path: str) -> None:
        self.store.remove(path)

    def archive(self, adapter: str, path: str, items: list[Item], name: str) -> StorageCollection:
        """Zip *items* into *name* (placed in the current directory when relative)."""
        _, dirname = self._view(adapter, path)
        request = ArchiveRequest(name=join_target(dirname, name), items=items, base_path=dirname)
        build_archive(self.store, request, guard=self.guard)
        return self.index(adapter, path)
