"""Filesystem domain models for directory enumeration and mirroring.

This module defines the entry type classification and the
FileSystemEntry record built for every file or directory found while
reading a directory.
"""

from dataclasses import dataclass
from enum import Enum

from sftpmirror.core.errors import PathTooLongError
from sftpmirror.core.growable import GrowableList
from sftpmirror.filesystem import pathops


class EntryType(str, Enum):
    """Type of filesystem entry.

    Attributes:
        REGULAR_FILE: Regular file.
        DIRECTORY: Directory.
        OTHER: Anything else (symlinks, devices, sockets, ...). Ignored
            during enumeration.
    """

    REGULAR_FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(slots=True)
class FileSystemEntry:
    """Represents one file or directory.

    Exactly one of ``relative_path`` and ``absolute_path`` is set by
    :meth:`from_path`, depending on whether the path starts with the
    separator. ``parent_path`` and ``grandparent_path`` stay empty until
    :meth:`populate_ancestry` is called.

    Attributes:
        name: Final path segment.
        relative_path: Path as given, when relative.
        absolute_path: Path as given, when absolute.
        parent_path: Path of the containing directory.
        grandparent_path: Path of the directory containing the parent.
        entry_type: Classification of the entry.
        released: Whether :meth:`release` has been called.
    """

    name: str
    relative_path: str
    absolute_path: str
    parent_path: str
    grandparent_path: str
    entry_type: EntryType
    released: bool = False

    @classmethod
    def from_path(cls, path: str, entry_type: EntryType) -> "FileSystemEntry":
        """Create an entry from a path and its classified type.

        Args:
            path: Absolute or relative path of the entry.
            entry_type: Classification of the entry.

        Returns:
            New FileSystemEntry.

        Raises:
            PathTooLongError: If the path or its final segment is too long.
        """
        if len(path) > pathops.MAX_PATH_LENGTH:
            raise PathTooLongError(path, pathops.MAX_PATH_LENGTH)

        is_absolute = path.startswith(pathops.SEPARATOR)
        return cls(
            name=pathops.split(path)[-1],
            relative_path="" if is_absolute else path,
            absolute_path=path if is_absolute else "",
            parent_path="",
            grandparent_path="",
            entry_type=entry_type,
        )

    @property
    def path(self) -> str:
        """The path this entry was built from."""
        return self.absolute_path or self.relative_path

    @property
    def is_directory(self) -> bool:
        return self.entry_type == EntryType.DIRECTORY

    def copy_identity_only(self, destination: "FileSystemEntry") -> None:
        """Copy ``name`` and ``relative_path`` into ``destination``.

        No other field is copied; list membership only needs the name and
        the relative identity.
        """
        destination.name = self.name
        destination.relative_path = self.relative_path

    def populate_ancestry(self) -> None:
        """Fill ``parent_path`` and ``grandparent_path`` from the path."""
        self.parent_path = pathops.parent(self.path)
        self.grandparent_path = pathops.parent(self.parent_path) if self.parent_path else ""

    def release(self) -> None:
        """Clear every string field.

        Any value read from the entry afterwards is empty; the entry must
        not be used again.
        """
        self.name = ""
        self.relative_path = ""
        self.absolute_path = ""
        self.parent_path = ""
        self.grandparent_path = ""
        self.released = True


def append_to_list(entries: GrowableList[FileSystemEntry], entry: FileSystemEntry) -> None:
    """Append an independent copy of ``entry`` to ``entries``.

    The list never holds the caller's object, so releasing ``entry``
    afterwards leaves the stored copy intact.

    Args:
        entries: List to append to.
        entry: Entry to copy.

    Raises:
        AllocationError: If the list cannot grow.
    """
    entries.reserve(len(entries) + 1)
    fresh = FileSystemEntry.from_path(entry.path, entry.entry_type)
    entry.copy_identity_only(fresh)
    entries.append(fresh)
