"""Store layer — the RemoteFileStore protocol and its transports."""

from finderfs.fs.exceptions import FinderError, StoreNotSupportedError
from finderfs.fs.local_disk import LocalDiskStore
from finderfs.fs.protocol import RemoteFileStore
from finderfs.fs.sftp import SFTPStore
from finderfs.fs.types import StoreStat
from finderfs.fs.utils import normalize_path

__all__ = [
    "FinderError",
    "LocalDiskStore",
    "RemoteFileStore",
    "SFTPStore",
    "StoreNotSupportedError",
    "StoreStat",
    "normalize_path",
]
