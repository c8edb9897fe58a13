"""FinderSession and FinderConfig."""

from __future__ import annotations

from dataclasses import dataclass, field

from finderfs.fs.exceptions import StoreNotSupportedError
from finderfs.fs.protocol import RemoteFileStore


@dataclass(frozen=True)
class FinderConfig:
    """Conventions shared by every Finder built on a session."""

    home_template: str = "/home/{user}"
    """Directory shown on the first, unscoped request."""

    home_adapter: str = "home"
    """Adapter label reported for the home directory view."""

    unscoped_adapter: str = "null"
    """Adapter value the UI sends before any storage has been picked."""


@dataclass
class FinderSession:
    """Everything a Finder needs to serve one remote session.

    The caller owns the store handle (and the connection behind it) and
    passes the session explicitly; nothing is looked up globally.
    """

    store: RemoteFileStore
    """Transport implementing the RemoteFileStore protocol."""

    user: str
    """Name of the remote user, used to locate the home directory."""

    config: FinderConfig = field(default_factory=FinderConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.store, RemoteFileStore):
            raise StoreNotSupportedError(
                f"{type(self.store).__name__} does not implement RemoteFileStore"
            )

    @property
    def home_dir(self) -> str:
        return self.config.home_template.format(user=self.user)
