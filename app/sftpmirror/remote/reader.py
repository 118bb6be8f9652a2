"""Directory reading and tree walking.

read_directory() materializes one directory level as a list of
FileSystemEntry objects; walk() drives it recursively over a subtree.
Each directory is all or nothing: when opening, reading or closing fails,
no entries are returned for it.
"""

import logging
from collections.abc import Callable, Iterator

from sftpmirror.core.errors import (
    DirectoryCloseError,
    DirectoryError,
    DirectoryOpenError,
    DirectoryReadError,
    PathTooLongError,
)
from sftpmirror.core.growable import GrowableList
from sftpmirror.filesystem import pathops
from sftpmirror.filesystem.models import EntryType, FileSystemEntry, append_to_list
from sftpmirror.remote.base import DirectoryLister, FileXferType

logger = logging.getLogger(__name__)

_SUPPORTED_TYPES: dict[FileXferType, EntryType] = {
    FileXferType.REGULAR: EntryType.REGULAR_FILE,
    FileXferType.DIRECTORY: EntryType.DIRECTORY,
}


def classify(file_type: FileXferType) -> EntryType:
    """Map a listed file type to an EntryType (OTHER when unsupported)."""
    return _SUPPORTED_TYPES.get(file_type, EntryType.OTHER)


def read_directory(lister: DirectoryLister, path: str) -> GrowableList[FileSystemEntry]:
    """Read one directory level.

    Regular files and directories become FileSystemEntry objects whose
    path is ``path`` joined with the entry name. Entries of any other type
    are skipped.

    Args:
        lister: Directory lister holding the open session(s).
        path: Directory to read.

    Returns:
        Entries in the order the lister reported them.

    Raises:
        DirectoryOpenError: If the directory cannot be opened.
        DirectoryReadError: If an entry cannot be read or its path would be
            too long.
        DirectoryCloseError: If the directory cannot be closed.
        AllocationError: If the result list cannot grow.
    """
    entries: GrowableList[FileSystemEntry] = GrowableList(1)
    # An empty path means the working directory, not the root
    base = path or pathops.CURRENT_DIR

    try:
        handle = lister.open_directory(path)
    except OSError as e:
        logger.critical("Couldn't open directory `%s` on %s: %s", path, lister.description, e)
        raise DirectoryOpenError(path, str(e)) from e

    try:
        while True:
            listed = lister.read_next_entry(handle)
            if listed is None:
                break

            entry_type = classify(listed.file_type)
            if entry_type == EntryType.OTHER:
                logger.info("Ignoring %s (file type %s)", listed.name, listed.file_type.name)
                continue

            entry = FileSystemEntry.from_path(pathops.join([base, listed.name]), entry_type)
            append_to_list(entries, entry)
            entry.release()
    except (OSError, PathTooLongError) as e:
        logger.critical("Couldn't read directory `%s` on %s: %s", path, lister.description, e)
        _close_quietly(lister, handle, path)
        raise DirectoryReadError(path, str(e)) from e
    except Exception:
        _close_quietly(lister, handle, path)
        raise

    try:
        closed = lister.close_directory(handle)
    except OSError as e:
        logger.critical("Couldn't close directory %s: %s", path, e)
        raise DirectoryCloseError(path, str(e)) from e
    if not closed:
        logger.critical("Couldn't close directory %s: close did not report success", path)
        raise DirectoryCloseError(path, "close did not report success")

    logger.debug("Read %d entries from %s", len(entries), path)
    return entries


def _close_quietly(lister: DirectoryLister, handle: object, path: str) -> None:
    """Close a handle after a failure, logging (not raising) close errors."""
    try:
        lister.close_directory(handle)
    except OSError as e:
        logger.warning("Couldn't close directory %s after failure: %s", path, e)


def walk(
    lister: DirectoryLister,
    root: str,
    *,
    include_hidden: bool = True,
    exclude: Callable[[FileSystemEntry], bool] | None = None,
    onerror: Callable[[DirectoryError], None] | None = None,
) -> Iterator[tuple[str, GrowableList[FileSystemEntry]]]:
    """Walk a directory tree depth-first.

    Yields ``(directory, entries)`` for ``root`` and then for every
    subdirectory below it. ``.`` and ``..`` are never descended into.

    Args:
        lister: Directory lister holding the open session(s).
        root: Directory to start from.
        include_hidden: If False, hidden entries are dropped from the
            yielded lists and hidden directories are not descended into.
        exclude: Entries for which this returns True are dropped the same
            way as hidden ones.
        onerror: Called with the error when a directory cannot be read;
            that subtree is then skipped. If None, the error propagates.

    Yields:
        Tuples of directory path and its entries.

    Raises:
        DirectoryError: If a directory cannot be read and onerror is None.
    """
    pending: GrowableList[str] = GrowableList()
    pending.append(root)

    while (directory := pending.pop()) is not None:
        try:
            entries = read_directory(lister, directory)
        except DirectoryError as e:
            if onerror is None:
                raise
            onerror(e)
            continue

        if not include_hidden or exclude is not None:
            visible: GrowableList[FileSystemEntry] = GrowableList(len(entries))
            for entry in entries:
                if not include_hidden and pathops.is_hidden(entry.name):
                    logger.debug("Skipping hidden entry %s", entry.path)
                    continue
                if exclude is not None and exclude(entry):
                    logger.debug("Skipping excluded entry %s", entry.path)
                    continue
                visible.append(entry)
            entries = visible

        yield directory, entries

        subdirectories = [
            entry.path
            for entry in entries
            if entry.is_directory and not pathops.is_dotted(entry.name)
        ]
        # Reversed so the first listed subdirectory is visited first
        for subdirectory in reversed(subdirectories):
            pending.append(subdirectory)
