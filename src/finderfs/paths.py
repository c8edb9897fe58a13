"""Path resolution for adapter-relative UI paths."""

from __future__ import annotations

import posixpath

SCHEME_ABSOLUTE = ":///"
SCHEME = "://"


def resolve_path(adapter: str, raw: str) -> str:
    """Turn an adapter name and a raw UI path into an absolute store path.

    The navigation and search widgets send paths such as ``local:///etc``
    or a bare ``local://``; everything else is already absolute.

    Examples:
        resolve_path("home", "") -> "/home"
        resolve_path("local", "local:///etc/nginx") -> "/etc/nginx"
        resolve_path("local", "local://") -> "/local"
        resolve_path("home", "/home/alice") -> "/home/alice"
    """
    if not raw:
        return f"/{adapter}"

    if SCHEME_ABSOLUTE in raw:
        return "/" + raw.split(SCHEME_ABSOLUTE, 1)[1]

    if SCHEME in raw and not raw.split(SCHEME, 1)[1]:
        return f"/{adapter}"

    return raw


def needs_parent_entries(path: str) -> bool:
    """True unless *path* is a single root segment such as ``/home``.

    Only then can the UI not navigate up, so only then are the synthetic
    ``.`` and ``..`` entries left out.
    """
    return path.count("/") != 1


def entry_path(dirname: str, name: str) -> str:
    """Absolute path of *name* listed inside *dirname*."""
    return f"{dirname}/{name}"


def parent_path(path: str) -> str:
    """Parent directory of *path*; ``/`` is its own parent."""
    return posixpath.dirname(path) or "/"


def replace_last_part(path: str, name: str) -> str:
    """Swap the final component of *path* for *name*.

    Examples:
        replace_last_part("/home/alice/a.txt", "b.txt") -> "/home/alice/b.txt"
    """
    return posixpath.normpath(posixpath.join(posixpath.dirname(path), name))


def join_target(base: str, name: str) -> str:
    """Place a relative *name* inside *base*; absolute names are kept."""
    if name.startswith("/"):
        return name
    return entry_path(base.rstrip("/"), name)
