"""Directory lister backed by the local disk.

Useful for mirroring one local tree into another and for exercising
the reader without an SFTP server.
"""

import os
from typing import Any

from sftpmirror.remote.base import DirectoryLister, FileXferType, ListedEntry


class LocalLister(DirectoryLister):
    """Lists local directories with ``os.scandir``.

    Symbolic links are reported as SYMLINK and never followed.
    """

    @property
    def description(self) -> str:
        return "local"

    @property
    def is_local(self) -> bool:
        return True

    def open_directory(self, path: str) -> Any:
        return os.scandir(path or ".")

    def read_next_entry(self, handle: Any) -> ListedEntry | None:
        try:
            dir_entry = next(handle)
        except StopIteration:
            return None
        mode = dir_entry.stat(follow_symlinks=False).st_mode
        return ListedEntry(name=dir_entry.name, file_type=FileXferType.from_mode(mode))

    def close_directory(self, handle: Any) -> bool:
        handle.close()
        return True
