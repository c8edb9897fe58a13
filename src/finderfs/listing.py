"""Directory listing: raw store entries to FileEntry records."""

from __future__ import annotations

import logging
import posixpath
from typing import TYPE_CHECKING

from finderfs.fs.utils import guess_mime_type, split_extension
from finderfs.paths import entry_path, needs_parent_entries, parent_path, resolve_path
from finderfs.types import FileEntry, FileType

if TYPE_CHECKING:
    from finderfs.fs.protocol import RemoteFileStore
    from finderfs.fs.types import StoreStat

logger = logging.getLogger(__name__)


def link_type(store: RemoteFileStore, link: str) -> FileType:
    """Classify a symlink by its immediate target.

    Exactly one hop: the target is read and stat-ed once.  A relative
    target is taken relative to the directory holding the link.
    """
    target = store.readlink(link)
    if not target.startswith("/"):
        target = posixpath.join(posixpath.dirname(link), target)
    return FileType.DIR if store.stat(target).is_dir else FileType.FILE


def to_entry(
    store: RemoteFileStore,
    raw: StoreStat,
    dirname: str,
    adapter: str,
) -> FileEntry:
    """Convert one raw directory entry into a FileEntry."""
    path = entry_path(dirname, raw.name)
    ext = split_extension(raw.name)

    file_type: FileType | None
    if raw.is_dir:
        file_type = FileType.DIR
    elif raw.is_symlink:
        try:
            file_type = link_type(store, path)
        except Exception:
            logger.warning("Failed to resolve link type for %s", path, exc_info=True)
            file_type = None
    else:
        file_type = FileType.FILE

    return FileEntry(
        type=file_type,
        path=path,
        basename=raw.name,
        storage=adapter,
        last_modified=raw.mtime,
        mime_type=guess_mime_type(ext),
        extension=ext,
        file_size=raw.size,
    )


def scan(store: RemoteFileStore, path: str, adapter: str) -> list[FileEntry]:
    """List *path* in store order."""
    return [to_entry(store, raw, path, adapter) for raw in store.read_dir(path)]


def scan_files(store: RemoteFileStore, path: str, adapter: str) -> list[FileEntry]:
    """List *path*, prefixed with ``.`` and ``..`` below a root segment."""
    entries: list[FileEntry] = []
    if needs_parent_entries(path):
        entries.append(FileEntry(type=FileType.DIR, path=path, basename=".", storage=adapter))
        entries.append(
            FileEntry(type=FileType.DIR, path=parent_path(path), basename="..", storage=adapter)
        )
    entries.extend(scan(store, path, adapter))
    return entries


def subfolders(store: RemoteFileStore, adapter: str, path: str) -> list[FileEntry]:
    """Directories directly inside *path*, for the folder picker."""
    dirname = resolve_path(adapter, path)
    return [e for e in scan(store, dirname, adapter) if e.type is FileType.DIR]
