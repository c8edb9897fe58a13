"""Store-level metadata record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True)
class StoreStat:
    """Metadata a store reports for a single path."""

    name: str
    size: int
    mtime: datetime
    is_dir: bool = False
    is_symlink: bool = False
    mode: int | None = None
