"""Records exchanged with the UI layer: FileEntry, StorageCollection, Item."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime


class FileType(str, Enum):
    """Kind of entry shown in a listing."""

    DIR = "dir"
    FILE = "file"


@dataclass(frozen=True)
class FileEntry:
    """One row of a directory listing.

    ``path`` is ``dirname + "/" + basename`` for real entries.  The synthetic
    ``.`` and ``..`` entries point at the listed directory and its parent.
    """

    type: FileType | None
    path: str
    basename: str
    storage: str = ""
    visibility: str = "public"
    last_modified: datetime | None = None
    mime_type: str = ""
    extra_metadata: list[str] = field(default_factory=list)
    extension: str = ""
    file_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the key names the file-manager UI expects."""
        return {
            "type": self.type.value if self.type is not None else None,
            "path": self.path,
            "visibility": self.visibility,
            "last_modified": (
                self.last_modified.isoformat() if self.last_modified is not None else None
            ),
            "mime_type": self.mime_type,
            "extra_metadata": list(self.extra_metadata),
            "basename": self.basename,
            "extension": self.extension,
            "storage": self.storage,
            "file_size": self.file_size,
        }


@dataclass
class StorageCollection:
    """Result of an index or search call."""

    adapter: str
    storages: list[str] = field(default_factory=list)
    dirname: str = ""
    files: list[FileEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "adapter": self.adapter,
            "storages": list(self.storages),
            "dirname": self.dirname,
            "files": [f.to_dict() for f in self.files],
        }


@dataclass(frozen=True)
class Item:
    """Target of a batch operation (remove, move, archive)."""

    path: str
    type: FileType


@dataclass
class ArchiveRequest:
    """What to pack and where.

    ``base_path`` must be a literal prefix of every item path; it is stripped
    textually to form the names inside the archive.
    """

    name: str
    items: list[Item] = field(default_factory=list)
    base_path: str = ""
