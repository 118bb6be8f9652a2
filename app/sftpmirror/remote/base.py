"""Abstract base class for directory listers.

This module defines the DirectoryLister interface that every source of
directory entries (SFTP server, local disk) must implement, together
with the file-type codes entries are reported with.
"""

import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class FileXferType(IntEnum):
    """File type codes as defined by the SFTP protocol (version 3+)."""

    REGULAR = 1
    DIRECTORY = 2
    SYMLINK = 3
    SPECIAL = 4
    UNKNOWN = 5
    SOCKET = 6
    CHAR_DEVICE = 7
    BLOCK_DEVICE = 8
    FIFO = 9

    @classmethod
    def from_mode(cls, mode: int | None) -> "FileXferType":
        """Classify a ``st_mode`` value.

        Args:
            mode: Mode bits as returned by ``lstat``, or None if the server
                did not report permissions.

        Returns:
            Matching file type, UNKNOWN when the mode is missing or unusual.
        """
        if mode is None:
            return cls.UNKNOWN
        if stat.S_ISREG(mode):
            return cls.REGULAR
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class ListedEntry:
    """Raw directory entry as reported by a lister.

    Attributes:
        name: Entry name without any directory component.
        file_type: File type code of the entry.
    """

    name: str
    file_type: FileXferType


class DirectoryLister(ABC):
    """Abstract base class for all directory listers.

    A lister owns whatever sessions it needs (transport and protocol) and
    exposes a handle-based listing protocol: open a directory, read entries
    until None, close it.

    Example:
        >>> lister = LocalLister()
        >>> handle = lister.open_directory("/tmp")
        >>> while (entry := lister.read_next_entry(handle)) is not None:
        ...     print(entry.name, entry.file_type)
        >>> lister.close_directory(handle)
        True
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Return a short human-readable description (e.g. ``sftp://host``)."""

    @property
    def is_local(self) -> bool:
        """Whether listed paths name the local disk."""
        return False

    @abstractmethod
    def open_directory(self, path: str) -> Any:
        """Open a directory for reading.

        Args:
            path: Directory to open.

        Returns:
            Opaque handle passed to read_next_entry() and close_directory().

        Raises:
            OSError: If the directory cannot be opened. The exception text
                is the collaborator's diagnostic message.
        """

    @abstractmethod
    def read_next_entry(self, handle: Any) -> ListedEntry | None:
        """Read the next entry from an open directory.

        Returns:
            The next entry, or None at the end of the directory.

        Raises:
            OSError: If the entry cannot be read.
        """

    @abstractmethod
    def close_directory(self, handle: Any) -> bool:
        """Close an open directory.

        Returns:
            True if the handle was closed successfully.

        Raises:
            OSError: If closing fails with a diagnostic message.
        """
