"""SFTPStore — a RemoteFileStore over an SFTP session."""

from __future__ import annotations

import errno
import logging
import posixpath
import stat as stat_mod
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, BinaryIO

from .types import StoreStat
from .utils import iter_parents

if TYPE_CHECKING:
    from paramiko import SFTPAttributes, SFTPClient

logger = logging.getLogger(__name__)


class SFTPStore:
    """Adapter from a ``paramiko.SFTPClient`` to the RemoteFileStore protocol.

    The client is owned by the caller: it must already be connected and
    authenticated, and it is only closed when :meth:`close` is called.
    A paramiko client is not safe to share between threads; use one store
    per session.

    SFTP has no recursive mkdir or recursive remove, so :meth:`mkdir_all`
    and :meth:`remove_all` are emulated with one round trip per path.
    """

    def __init__(self, client: SFTPClient) -> None:
        self.client = client

    def __enter__(self) -> SFTPStore:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    @staticmethod
    def _to_stat(name: str, attrs: SFTPAttributes) -> StoreStat:
        mode = attrs.st_mode or 0
        return StoreStat(
            name=name,
            size=attrs.st_size or 0,
            mtime=datetime.fromtimestamp(attrs.st_mtime or 0, tz=UTC),
            is_dir=stat_mod.S_ISDIR(mode),
            is_symlink=stat_mod.S_ISLNK(mode),
            mode=attrs.st_mode,
        )

    # =========================================================================
    # Read Operations
    # =========================================================================

    def stat(self, path: str) -> StoreStat:
        return self._to_stat(posixpath.basename(path.rstrip("/")) or "/", self.client.stat(path))

    def read_dir(self, path: str) -> list[StoreStat]:
        # SSH_FXP_READDIR reports link attributes, not target attributes
        return [self._to_stat(a.filename, a) for a in self.client.listdir_attr(path)]

    def open(self, path: str) -> BinaryIO:
        fh: Any = self.client.open(path, "rb")
        return fh

    def readlink(self, path: str) -> str:
        target = self.client.readlink(path)
        if target is None:
            raise OSError(errno.EINVAL, "Not a symbolic link", path)
        return target

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, path: str) -> BinaryIO:
        fh: Any = self.client.open(path, "wb")
        return fh

    def mkdir_all(self, path: str) -> None:
        for current in iter_parents(path):
            try:
                attrs = self.client.stat(current)
            except FileNotFoundError:
                self.client.mkdir(current)
                continue
            if not stat_mod.S_ISDIR(attrs.st_mode or 0):
                raise NotADirectoryError(errno.ENOTDIR, "Not a directory", current)

    def remove(self, path: str) -> None:
        self.client.remove(path)

    def remove_all(self, path: str) -> None:
        attrs = self.client.lstat(path)
        if not stat_mod.S_ISDIR(attrs.st_mode or 0):
            self.client.remove(path)
            return

        # Post-order: collect directories top-down, delete them bottom-up
        dirs = [path]
        stack = [path]
        while stack:
            current = stack.pop()
            for child in self.client.listdir_attr(current):
                child_path = posixpath.join(current, child.filename)
                if stat_mod.S_ISDIR(child.st_mode or 0):
                    dirs.append(child_path)
                    stack.append(child_path)
                else:
                    self.client.remove(child_path)
        for d in reversed(dirs):
            logger.debug("Removing directory %s", d)
            self.client.rmdir(d)

    def rename(self, old_path: str, new_path: str) -> None:
        self.client.rename(old_path, new_path)
