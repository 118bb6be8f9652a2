"""Tests for file type codes and the local directory lister."""

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest
from sftpmirror.core.errors import DirectoryOpenError
from sftpmirror.filesystem.models import EntryType
from sftpmirror.remote.base import DirectoryLister, FileXferType
from sftpmirror.remote.local import LocalLister
from sftpmirror.remote.reader import read_directory


class TestFileXferType:
    """Tests for FileXferType."""

    def test_protocol_codes(self) -> None:
        """Codes match the SFTP protocol numbering."""
        assert FileXferType.REGULAR == 1
        assert FileXferType.DIRECTORY == 2
        assert FileXferType.SYMLINK == 3
        assert FileXferType.FIFO == 9

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (stat.S_IFREG | 0o644, FileXferType.REGULAR),
            (stat.S_IFDIR | 0o755, FileXferType.DIRECTORY),
            (stat.S_IFLNK | 0o777, FileXferType.SYMLINK),
            (stat.S_IFSOCK, FileXferType.SOCKET),
            (stat.S_IFCHR, FileXferType.CHAR_DEVICE),
            (stat.S_IFBLK, FileXferType.BLOCK_DEVICE),
            (stat.S_IFIFO, FileXferType.FIFO),
            (0, FileXferType.UNKNOWN),
            (None, FileXferType.UNKNOWN),
        ],
    )
    def test_from_mode(self, mode: int | None, expected: FileXferType) -> None:
        """Mode bits are classified by their file type."""
        assert FileXferType.from_mode(mode) == expected


class TestDirectoryListerInterface:
    """Tests for the abstract interface."""

    def test_cannot_instantiate_abstract(self) -> None:
        """DirectoryLister cannot be instantiated directly."""
        with pytest.raises(TypeError):
            DirectoryLister()  # type: ignore[abstract]

    def test_local_lister_is_lister(self) -> None:
        """LocalLister implements the interface."""
        lister = LocalLister()
        assert isinstance(lister, DirectoryLister)
        assert lister.description == "local"

    def test_only_local_lister_is_local(self, make_lister: Callable) -> None:
        """Only the local lister names paths on the local disk."""
        assert LocalLister().is_local is True
        assert make_lister({}).is_local is False


class TestLocalLister:
    """Tests for LocalLister."""

    @pytest.fixture
    def local_tree(self, tmp_path: Path) -> Path:
        """A directory with a file, a subdirectory and a symlink."""
        (tmp_path / "file.txt").write_text("content")
        (tmp_path / "sub").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "sub")
        return tmp_path

    def test_handle_protocol(self, local_tree: Path) -> None:
        """Entries are read until None, then the handle closes."""
        lister = LocalLister()
        handle = lister.open_directory(str(local_tree))

        listed = {}
        while (entry := lister.read_next_entry(handle)) is not None:
            listed[entry.name] = entry.file_type

        assert lister.close_directory(handle) is True
        assert listed == {
            "file.txt": FileXferType.REGULAR,
            "sub": FileXferType.DIRECTORY,
            "link": FileXferType.SYMLINK,
        }

    def test_read_directory_skips_symlinks(self, local_tree: Path) -> None:
        """Symlinks are not followed and not listed."""
        entries = read_directory(LocalLister(), str(local_tree))

        by_name = {entry.name: entry for entry in entries}
        assert set(by_name) == {"file.txt", "sub"}
        assert by_name["sub"].entry_type == EntryType.DIRECTORY
        assert by_name["file.txt"].path == str(local_tree / "file.txt")

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
    def test_fifo_is_skipped(self, tmp_path: Path) -> None:
        """FIFOs are reported with their type and ignored by the reader."""
        os.mkfifo(tmp_path / "pipe")
        (tmp_path / "data.bin").write_bytes(b"\x00")

        entries = read_directory(LocalLister(), str(tmp_path))

        assert [entry.name for entry in entries] == ["data.bin"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory raises DirectoryOpenError."""
        with pytest.raises(DirectoryOpenError):
            read_directory(LocalLister(), str(tmp_path / "missing"))
