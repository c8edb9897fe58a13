"""Tests for archive.py — zip packing over a store."""

from __future__ import annotations

import zipfile

import pytest

from finderfs.archive import archive_name, build_archive, ensure_zip_extension
from finderfs.fs.local_disk import LocalDiskStore
from finderfs.types import ArchiveRequest, FileType, Item


class SortedStore(LocalDiskStore):
    """LocalDiskStore with a deterministic listing order."""

    def read_dir(self, path):
        return sorted(super().read_dir(path), key=lambda e: e.name)


@pytest.fixture
def sorted_store(root) -> SortedStore:
    return SortedStore(host_dir=root)


@pytest.fixture
def docs(root):
    d = root / "data" / "docs"
    (d / "sub").mkdir(parents=True)
    (d / "a.txt").write_text("alpha\n")
    (d / "sub" / "b.txt").write_text("beta\n")
    (root / "data" / "top.txt").write_text("top\n")
    return d


def read_zip(path):
    with zipfile.ZipFile(path) as zf:
        return zf.namelist(), {n: zf.read(n) for n in zf.namelist()}, zf.infolist()


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestEnsureZipExtension:
    def test_appends_suffix(self):
        assert ensure_zip_extension("backup") == "backup.zip"

    def test_idempotent(self):
        assert ensure_zip_extension(ensure_zip_extension("backup")) == "backup.zip"

    def test_keeps_existing_suffix(self):
        assert ensure_zip_extension("backup.zip") == "backup.zip"


class TestArchiveName:
    def test_strips_literal_prefix(self):
        assert archive_name("/data/docs/a.txt", "/data") == "/docs/a.txt"

    def test_textual_not_path_semantic(self):
        assert archive_name("/database/x", "/data") == "base/x"

    def test_no_prefix_unchanged(self):
        assert archive_name("/srv/x", "/data") == "/srv/x"


# ---------------------------------------------------------------------------
# build_archive
# ---------------------------------------------------------------------------


class TestBuildArchive:
    def test_directory_tree(self, sorted_store, root, docs):
        request = ArchiveRequest(
            name="/data/out", items=[Item("/data/docs", FileType.DIR)], base_path="/data"
        )
        target = build_archive(sorted_store, request)

        assert target == "/data/out.zip"
        names, contents, _ = read_zip(root / "data" / "out.zip")
        assert names == ["/docs/", "/docs/a.txt", "/docs/sub/", "/docs/sub/b.txt"]
        assert contents["/docs/a.txt"] == b"alpha\n"
        assert contents["/docs/sub/b.txt"] == b"beta\n"

    def test_compression_methods(self, store, root, docs):
        request = ArchiveRequest(
            name="/data/out.zip", items=[Item("/data/docs", FileType.DIR)], base_path="/data"
        )
        build_archive(store, request)

        _, _, infos = read_zip(root / "data" / "out.zip")
        by_name = {i.filename: i for i in infos}
        assert by_name["/docs/"].compress_type == zipfile.ZIP_STORED
        assert by_name["/docs/"].is_dir()
        assert by_name["/docs/a.txt"].compress_type == zipfile.ZIP_DEFLATED

    def test_parent_header_before_children(self, store, root, docs):
        request = ArchiveRequest(
            name="/data/out", items=[Item("/data/docs", FileType.DIR)], base_path="/data"
        )
        build_archive(store, request)

        names, _, _ = read_zip(root / "data" / "out.zip")
        assert names[0] == "/docs/"
        assert names.index("/docs/sub/") < names.index("/docs/sub/b.txt")

    def test_single_file_item(self, store, root, docs):
        request = ArchiveRequest(
            name="/data/one", items=[Item("/data/top.txt", FileType.FILE)], base_path="/data"
        )
        build_archive(store, request)

        names, contents, _ = read_zip(root / "data" / "one.zip")
        assert names == ["/top.txt"]
        assert contents["/top.txt"] == b"top\n"

    def test_blocked_item_skipped(self, sorted_store, root, docs):
        request = ArchiveRequest(
            name="/data/out",
            items=[Item("/dat", FileType.DIR), Item("/data/top.txt", FileType.FILE)],
            base_path="/data",
        )
        build_archive(sorted_store, request)

        names, _, _ = read_zip(root / "data" / "out.zip")
        assert names == ["/top.txt"]

    def test_custom_guard(self, store, root, docs):
        request = ArchiveRequest(
            name="/data/out",
            items=[Item("/data/docs", FileType.DIR), Item("/data/top.txt", FileType.FILE)],
            base_path="/data",
        )
        build_archive(store, request, guard=lambda action, src, dst: dst.endswith(".txt"))

        names, _, _ = read_zip(root / "data" / "out.zip")
        assert "/top.txt" not in names
        assert "/docs/" in names

    def test_target_inside_item_not_packed(self, sorted_store, root, docs):
        request = ArchiveRequest(
            name="/data/docs/sub/out",
            items=[Item("/data/docs/sub", FileType.DIR)],
            base_path="/data",
        )
        build_archive(sorted_store, request)

        names, _, _ = read_zip(root / "data" / "docs" / "sub" / "out.zip")
        assert names == ["/docs/sub/", "/docs/sub/b.txt"]

    def test_missing_item_aborts_and_leaves_partial_file(self, store, root, docs):
        request = ArchiveRequest(
            name="/data/out",
            items=[Item("/data/top.txt", FileType.FILE), Item("/data/ghost", FileType.FILE)],
            base_path="/data",
        )
        with pytest.raises(FileNotFoundError):
            build_archive(store, request)

        assert (root / "data" / "out.zip").exists()
