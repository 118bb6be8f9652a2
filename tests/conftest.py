"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest
from sftpmirror.remote.base import DirectoryLister, FileXferType, ListedEntry

Tree = dict[str, list[tuple[str, FileXferType]]]


class FakeLister(DirectoryLister):
    """In-memory directory lister.

    ``tree`` maps directory paths to their raw entries. Paths listed in
    ``fail_open``/``fail_read``/``fail_close`` make the matching call fail;
    paths in ``close_false`` make close_directory() return False.
    """

    def __init__(
        self,
        tree: Tree,
        *,
        fail_open: set[str] | None = None,
        fail_read: set[str] | None = None,
        fail_close: set[str] | None = None,
        close_false: set[str] | None = None,
    ) -> None:
        self.tree = tree
        self.fail_open = fail_open or set()
        self.fail_read = fail_read or set()
        self.fail_close = fail_close or set()
        self.close_false = close_false or set()
        self.opened: list[str] = []
        self.closed: list[str] = []

    @property
    def description(self) -> str:
        return "fake"

    def open_directory(self, path: str) -> Any:
        if path in self.fail_open or path not in self.tree:
            raise OSError(f"No such file: {path}")
        self.opened.append(path)
        return {"path": path, "entries": iter(self.tree[path])}

    def read_next_entry(self, handle: Any) -> ListedEntry | None:
        if handle["path"] in self.fail_read:
            raise OSError("Connection lost")
        item = next(handle["entries"], None)
        if item is None:
            return None
        return ListedEntry(name=item[0], file_type=item[1])

    def close_directory(self, handle: Any) -> bool:
        self.closed.append(handle["path"])
        if handle["path"] in self.fail_close:
            raise OSError("Bad handle")
        return handle["path"] not in self.close_false


@pytest.fixture
def make_lister() -> Callable[..., FakeLister]:
    """Factory for FakeLister instances."""
    return FakeLister


@pytest.fixture
def sample_tree() -> Tree:
    """A small remote tree with a file, nested directories and a FIFO."""
    return {
        "/srv/data": [
            (".", FileXferType.DIRECTORY),
            ("..", FileXferType.DIRECTORY),
            ("readme.txt", FileXferType.REGULAR),
            ("docs", FileXferType.DIRECTORY),
            (".cache", FileXferType.DIRECTORY),
            ("pipe", FileXferType.FIFO),
        ],
        "/srv/data/docs": [
            ("guide.md", FileXferType.REGULAR),
            ("images", FileXferType.DIRECTORY),
            ("latest", FileXferType.SYMLINK),
        ],
        "/srv/data/docs/images": [
            ("logo.png", FileXferType.REGULAR),
        ],
        "/srv/data/.cache": [
            ("blob", FileXferType.REGULAR),
        ],
    }


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    logger = logging.getLogger("sftpmirror")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
