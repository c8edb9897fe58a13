"""Path and file-name helpers."""

from __future__ import annotations

import mimetypes
import posixpath


def normalize_path(path: str) -> str:
    """Normalize a virtual store path.

    - Ensures leading /
    - Resolves .. and . references
    - Removes double slashes
    - Removes trailing slash (except for root)

    Examples:
        normalize_path("foo.txt") -> "/foo.txt"
        normalize_path("/foo//bar.txt") -> "/foo/bar.txt"
        normalize_path("/foo/../bar.txt") -> "/bar.txt"
        normalize_path("/../..") -> "/"
        normalize_path("") -> "/"
    """
    if not path:
        return "/"

    path = path.strip()

    if not path.startswith("/"):
        path = "/" + path

    path = posixpath.normpath(path)

    # posixpath keeps a leading "//" as-is
    if path.startswith("//"):
        path = "/" + path.lstrip("/")

    return path


def iter_parents(path: str) -> list[str]:
    """Return every ancestor of *path* plus the path itself, shallowest first.

    Examples:
        iter_parents("/a/b/c") -> ["/a", "/a/b", "/a/b/c"]
        iter_parents("/") -> []
    """
    path = normalize_path(path)
    parts = [p for p in path.split("/") if p]
    return ["/" + "/".join(parts[: i + 1]) for i in range(len(parts))]


def split_extension(name: str) -> str:
    """Extension of *name* without the leading dot, or ``""``.

    Examples:
        split_extension("report.txt") -> "txt"
        split_extension("archive.tar.gz") -> "gz"
        split_extension(".bashrc") -> "bashrc"
        split_extension("Makefile") -> ""
    """
    _, dot, ext = name.rpartition(".")
    return ext if dot else ""


def guess_mime_type(extension: str) -> str:
    """Static extension to MIME lookup; ``""`` when the extension is unknown."""
    if not extension:
        return ""
    mime_type, _ = mimetypes.guess_type(f"file.{extension}", strict=False)
    return mime_type or ""
