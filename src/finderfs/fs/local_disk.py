"""LocalDiskStore — a RemoteFileStore backed by a host directory."""

from __future__ import annotations

import os
import posixpath
import shutil
import stat as stat_mod
from datetime import UTC, datetime
from pathlib import Path
from typing import BinaryIO

from .types import StoreStat
from .utils import normalize_path


class LocalDiskStore:
    """Direct disk access rooted at ``host_dir``.

    Implements the RemoteFileStore protocol.  Virtual paths such as
    ``/home/alice/notes.txt`` map to ``host_dir/home/alice/notes.txt``.

    Containment is lexical: ``..`` segments are collapsed before the path is
    joined onto ``host_dir``, so no virtual path can name a location above it.
    Symlinks are left alone (``read_dir`` reports them, ``stat`` follows them).
    ``readlink`` refuses targets outside the host directory, so such links
    list with an unknown type.
    """

    def __init__(self, host_dir: Path | str) -> None:
        self.host_dir = Path(host_dir).resolve()

        if not self.host_dir.exists():
            raise FileNotFoundError(f"Host directory does not exist: {self.host_dir}")
        if not self.host_dir.is_dir():
            raise NotADirectoryError(f"Host path is not a directory: {self.host_dir}")

    # =========================================================================
    # Path Resolution
    # =========================================================================

    def _resolve_path(self, virtual_path: str) -> Path:
        """Map a virtual path onto the host directory without following links."""
        rel = normalize_path(virtual_path).lstrip("/")
        if not rel:
            return self.host_dir

        candidate = self.host_dir / rel
        try:
            candidate.relative_to(self.host_dir)
        except ValueError:
            raise PermissionError(
                f"Path traversal detected: {virtual_path} resolves outside host directory"
            ) from None
        return candidate

    def _to_virtual_path(self, physical: str) -> str | None:
        """Convert an absolute host path back to a virtual one, if it is inside."""
        try:
            rel = Path(physical).relative_to(self.host_dir)
        except ValueError:
            return None
        vpath = "/" + rel.as_posix()
        return vpath if vpath != "/." else "/"

    @staticmethod
    def _to_stat(name: str, st: os.stat_result) -> StoreStat:
        return StoreStat(
            name=name,
            size=st.st_size,
            mtime=datetime.fromtimestamp(st.st_mtime, tz=UTC),
            is_dir=stat_mod.S_ISDIR(st.st_mode),
            is_symlink=stat_mod.S_ISLNK(st.st_mode),
            mode=st.st_mode,
        )

    # =========================================================================
    # Read Operations
    # =========================================================================

    def stat(self, path: str) -> StoreStat:
        resolved = self._resolve_path(path)
        return self._to_stat(posixpath.basename(normalize_path(path)) or "/", resolved.stat())

    def read_dir(self, path: str) -> list[StoreStat]:
        resolved = self._resolve_path(path)
        with os.scandir(resolved) as it:
            return [self._to_stat(e.name, e.stat(follow_symlinks=False)) for e in it]

    def open(self, path: str) -> BinaryIO:
        return self._resolve_path(path).open("rb")

    def readlink(self, path: str) -> str:
        """Return the link target.

        Absolute targets are translated to virtual paths.  A target that lands
        outside the host directory has no virtual path and raises
        ``PermissionError``.
        """
        link = self._resolve_path(path)
        target = os.readlink(link)
        physical = os.path.normpath(os.path.join(link.parent, target))
        vpath = self._to_virtual_path(physical)
        if vpath is None:
            raise PermissionError(f"Link target outside host directory: {path} -> {target}")
        return vpath if os.path.isabs(target) else target

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, path: str) -> BinaryIO:
        return self._resolve_path(path).open("wb")

    def mkdir_all(self, path: str) -> None:
        self._resolve_path(path).mkdir(parents=True, exist_ok=True)

    def remove(self, path: str) -> None:
        resolved = self._resolve_path(path)
        if resolved.is_dir() and not resolved.is_symlink():
            resolved.rmdir()
        else:
            resolved.unlink()

    def remove_all(self, path: str) -> None:
        resolved = self._resolve_path(path)
        if resolved.is_symlink() or not resolved.is_dir():
            resolved.unlink()
        else:
            shutil.rmtree(resolved)

    def rename(self, old_path: str, new_path: str) -> None:
        self._resolve_path(old_path).rename(self._resolve_path(new_path))
