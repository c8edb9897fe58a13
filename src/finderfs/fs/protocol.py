"""RemoteFileStore protocol — the capability set the Finder consumes.

Every method may block on network or disk I/O.  Failures surface as the
transport's own exceptions; callers above the store never translate them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .types import StoreStat


@runtime_checkable
class RemoteFileStore(Protocol):
    """Core interface every transport must implement.

    ``read_dir`` reports entries without following symlinks, so a link shows
    up with ``is_symlink=True``.  ``stat`` follows links.
    """

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def stat(self, path: str) -> StoreStat: ...

    def read_dir(self, path: str) -> list[StoreStat]: ...

    def open(self, path: str) -> BinaryIO:
        """Open *path* for reading."""
        ...

    def readlink(self, path: str) -> str:
        """Return the raw target of the symlink at *path*."""
        ...

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, path: str) -> BinaryIO:
        """Create *path*, truncating it if it exists, and open it for writing."""
        ...

    def mkdir_all(self, path: str) -> None:
        """Create *path* and any missing parents."""
        ...

    def remove(self, path: str) -> None: ...

    def remove_all(self, path: str) -> None:
        """Remove *path* and everything beneath it."""
        ...

    def rename(self, old_path: str, new_path: str) -> None: ...
