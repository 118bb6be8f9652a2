"""Local filesystem collaborator.

Provides existence checks and directory creation on the local disk,
plus make_parents() which creates a directory together with every
missing ancestor, one segment at a time.
"""

import logging
import os
from enum import Enum

from sftpmirror.core.errors import DirectoryCreateError
from sftpmirror.filesystem import pathops

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_PERMISSIONS = 0o755


class PathState(str, Enum):
    """Result of a local existence check."""

    EXISTS = "exists"
    NOT_FOUND = "not_found"


class LocalFilesystem:
    """Thin wrapper around the local disk.

    Kept as a class so mirroring can be pointed at a fake filesystem in
    tests or dry runs.
    """

    def stat_path(self, path: str) -> PathState:
        """Check whether ``path`` exists (symlinks are not followed).

        A path running through a non-directory does not exist.

        Args:
            path: Local path to check.

        Returns:
            PathState.EXISTS or PathState.NOT_FOUND.

        Raises:
            OSError: If the path cannot be checked, e.g. permission denied.
        """
        try:
            os.lstat(path)
        except (FileNotFoundError, NotADirectoryError):
            return PathState.NOT_FOUND
        return PathState.EXISTS

    def make_directory(self, path: str, permissions: int = DEFAULT_DIRECTORY_PERMISSIONS) -> None:
        """Create a single directory.

        Args:
            path: Directory to create. Its parent must exist.
            permissions: Mode bits for the new directory (before umask).

        Raises:
            OSError: If the directory cannot be created.
        """
        os.mkdir(path, permissions)


def make_parents(
    path: str,
    filesystem: LocalFilesystem | None = None,
    permissions: int = DEFAULT_DIRECTORY_PERMISSIONS,
) -> list[str]:
    """Create ``path`` and every missing ancestor.

    The path is split into segments and rebuilt one segment at a time;
    each prefix that does not exist yet is created.

    Args:
        path: Directory path to create.
        filesystem: Filesystem collaborator. Defaults to the local disk.
        permissions: Mode bits for created directories.

    Returns:
        Paths that were created, outermost first.

    Raises:
        DirectoryCreateError: If a directory cannot be checked or created.
        PathTooLongError: If the path or one of its segments is too long.
    """
    fs = filesystem if filesystem is not None else LocalFilesystem()
    created: list[str] = []
    current = ""

    for index, segment in enumerate(pathops.split(path)):
        if index and segment == pathops.CURRENT_DIR:
            continue
        current = segment if index == 0 else pathops.join([current, segment])
        if not current or current == pathops.SEPARATOR or pathops.is_dotted(segment):
            continue

        try:
            if fs.stat_path(current) == PathState.EXISTS:
                continue
            fs.make_directory(current, permissions)
        except OSError as e:
            logger.critical("Couldn't create directory %s: %s", current, e)
            raise DirectoryCreateError(current, str(e)) from e

        logger.debug("Created directory %s", current)
        created.append(current)

    return created
