"""Custom exception hierarchy for the finderfs package.

Transport failures raised by a store are never wrapped; these types only
cover misuse of the package itself.
"""


class FinderError(Exception):
    """Base exception for all finderfs errors."""


class StoreNotSupportedError(FinderError):
    """Raised when an object does not implement the RemoteFileStore protocol."""
