"""finderfs: file-manager backend over remote file stores.

Listing, navigation, mutation and zip archiving for a browser file-manager
UI, on top of any transport implementing ``RemoteFileStore``.
"""

__version__ = "0.1.0"

from finderfs._finder import StoreFinder
from finderfs.archive import build_archive, ensure_zip_extension
from finderfs.catalog import list_storages
from finderfs.fs.exceptions import FinderError, StoreNotSupportedError
from finderfs.fs.local_disk import LocalDiskStore
from finderfs.fs.protocol import RemoteFileStore
from finderfs.fs.sftp import SFTPStore
from finderfs.fs.types import StoreStat
from finderfs.guard import GuardPolicy, blocked, length_guard
from finderfs.listing import scan, scan_files, subfolders
from finderfs.paths import needs_parent_entries, resolve_path
from finderfs.protocols import Finder
from finderfs.session import FinderConfig, FinderSession
from finderfs.types import ArchiveRequest, FileEntry, FileType, Item, StorageCollection

__all__ = [
    "ArchiveRequest",
    "FileEntry",
    "FileType",
    "Finder",
    "FinderConfig",
    "FinderError",
    "FinderSession",
    "GuardPolicy",
    "Item",
    "LocalDiskStore",
    "RemoteFileStore",
    "SFTPStore",
    "StorageCollection",
    "StoreFinder",
    "StoreNotSupportedError",
    "StoreStat",
    "__version__",
    "blocked",
    "build_archive",
    "ensure_zip_extension",
    "length_guard",
    "list_storages",
    "needs_parent_entries",
    "resolve_path",
    "scan",
    "scan_files",
    "subfolders",
]
