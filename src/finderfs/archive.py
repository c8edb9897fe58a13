"""Pack store paths into a zip archive written back to the store."""

from __future__ import annotations

import logging
import posixpath
import shutil
import stat as stat_mod
import zipfile
from typing import TYPE_CHECKING

from finderfs.fs.utils import normalize_path
from finderfs.guard import length_guard

if TYPE_CHECKING:
    from finderfs.fs.protocol import RemoteFileStore
    from finderfs.fs.types import StoreStat
    from finderfs.guard import GuardPolicy
    from finderfs.types import ArchiveRequest

logger = logging.getLogger(__name__)

ZIP_SUFFIX = ".zip"

# Zip timestamps cannot predate the DOS epoch
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

_DEFAULT_DIR_MODE = stat_mod.S_IFDIR | 0o755
_DEFAULT_FILE_MODE = stat_mod.S_IFREG | 0o644


def ensure_zip_extension(name: str) -> str:
    """Append ``.zip`` unless *name* already ends with it."""
    if not name.endswith(ZIP_SUFFIX):
        return name + ZIP_SUFFIX
    return name


def archive_name(path: str, base_path: str) -> str:
    """Name of *path* inside the archive: *base_path* stripped as a literal prefix."""
    return path.removeprefix(base_path)


def _zip_info(name: str, info: StoreStat) -> zipfile.ZipInfo:
    date_time = info.mtime.timetuple()[:6]
    zinfo = zipfile.ZipInfo(name, date_time=max(date_time, _ZIP_EPOCH))
    if info.is_dir:
        zinfo.compress_type = zipfile.ZIP_STORED
        zinfo.external_attr = ((info.mode or _DEFAULT_DIR_MODE) & 0xFFFF) << 16
        zinfo.external_attr |= 0x10  # MS-DOS directory flag
    else:
        zinfo.compress_type = zipfile.ZIP_DEFLATED
        zinfo.external_attr = ((info.mode or _DEFAULT_FILE_MODE) & 0xFFFF) << 16
        zinfo.file_size = info.size
    return zinfo


def _walk_and_zip(
    store: RemoteFileStore,
    zf: zipfile.ZipFile,
    root: str,
    base_path: str,
    target: str,
) -> None:
    """Depth-first walk of *root*, each directory header written before its children.

    Uses an explicit stack; children are pushed in reverse so they pop in
    the order the store listed them.  The archive being written (*target*)
    is never packed into itself.
    """
    stack = [root]
    while stack:
        path = stack.pop()
        if normalize_path(path) == target:
            continue
        info = store.stat(path)
        name = archive_name(path, base_path)

        if info.is_dir:
            zf.writestr(_zip_info(name + "/", info), b"")
            children = store.read_dir(path)
            stack.extend(posixpath.join(path, c.name) for c in reversed(children))
            continue

        zinfo = _zip_info(name, info)
        with store.open(path) as src, zf.open(zinfo, "w") as dest:
            shutil.copyfileobj(src, dest)


def build_archive(
    store: RemoteFileStore,
    request: ArchiveRequest,
    guard: GuardPolicy = length_guard,
) -> str:
    """Write a zip of the request's items to the store and return its path.

    Items refused by *guard* are skipped without error.  Any store failure
    aborts the whole call and propagates; whatever was already written to
    the archive stays on the store.
    """
    target = ensure_zip_extension(request.name)
    base_path = request.base_path

    with store.create(target) as fh, zipfile.ZipFile(fh, "w") as zf:
        for item in request.items:
            if guard("archive", base_path, item.path):
                continue
            _walk_and_zip(store, zf, item.path, base_path, normalize_path(target))

    logger.info("Wrote archive %s", target)
    return target
