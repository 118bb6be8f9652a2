"""Directory-tree mirroring.

Walks a source tree through a DirectoryLister and recreates its
directory structure under a local destination root. File contents are
not transferred; files are only counted.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field

from sftpmirror.core.errors import DirectoryCreateError, DirectoryError, PathError
from sftpmirror.filesystem import pathops
from sftpmirror.filesystem.local import (
    DEFAULT_DIRECTORY_PERMISSIONS,
    LocalFilesystem,
    PathState,
    make_parents,
)
from sftpmirror.filesystem.models import EntryType, FileSystemEntry
from sftpmirror.remote.base import DirectoryLister
from sftpmirror.remote.reader import walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MirrorActionResult:
    """Result of creating a single destination directory.

    Attributes:
        path: Destination path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing created).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


@dataclass(slots=True)
class MirrorReport:
    """Outcome of a mirror run.

    Attributes:
        created: Directories created (or that would be, in dry-run mode).
        existing: Destination directories that already existed.
        failed: Directories that could not be created.
        errors: Source directories that could not be read.
        files_seen: Number of regular files found in the source tree.
    """

    created: list[MirrorActionResult] = field(default_factory=list)
    existing: list[str] = field(default_factory=list)
    failed: list[MirrorActionResult] = field(default_factory=list)
    errors: list[DirectoryError] = field(default_factory=list)
    files_seen: int = 0

    @property
    def success(self) -> bool:
        return not self.failed and not self.errors


def relocate(path: str, source: str, destination: str) -> str:
    """Move ``path`` from below ``source`` to below ``destination``.

    Args:
        path: Path inside the source tree (as produced by the reader).
        source: Source root.
        destination: Destination root.

    Returns:
        The relocated path.

    Raises:
        ValueError: If ``path`` is not inside ``source``.
        PathTooLongError: If the relocated path is too long.
    """
    root = pathops.join([source])
    cleaned = pathops.join([path])

    if cleaned == root:
        return pathops.join([destination])

    prefix = root if root.endswith(pathops.SEPARATOR) else root + pathops.SEPARATOR
    if root in ("", pathops.CURRENT_DIR):
        prefix = ""
    if not cleaned.startswith(prefix):
        msg = f"Path {path!r} is not inside {source!r}"
        raise ValueError(msg)

    return pathops.join([destination, pathops.slice_path(cleaned, len(prefix), len(cleaned))])


class DirectoryMirror:
    """Recreates a source directory tree below a local destination.

    Args:
        lister: Lister for the source tree.
        filesystem: Destination filesystem. Defaults to the local disk.
        dry_run: If True, report what would be created without creating it.
        include_hidden: If False, hidden directories are not mirrored.
        permissions: Mode bits for created directories.
    """

    def __init__(
        self,
        lister: DirectoryLister,
        filesystem: LocalFilesystem | None = None,
        *,
        dry_run: bool = False,
        include_hidden: bool = True,
        permissions: int = DEFAULT_DIRECTORY_PERMISSIONS,
    ) -> None:
        self._lister = lister
        self._filesystem = filesystem if filesystem is not None else LocalFilesystem()
        self._dry_run = dry_run
        self._include_hidden = include_hidden
        self._permissions = permissions

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def mirror(self, source: str, destination: str) -> MirrorReport:
        """Mirror the directory structure of ``source`` into ``destination``.

        Source directories that cannot be read and destinations that cannot
        be created are recorded in the report; the rest of the tree is still
        mirrored. When the destination root itself cannot be created nothing
        else is attempted. A destination inside a local source is not
        mirrored into itself.

        Args:
            source: Source root, as understood by the lister.
            destination: Local destination root.

        Returns:
            MirrorReport describing what was done.
        """
        report = MirrorReport()

        self._ensure(destination, report)
        if report.failed:
            return report

        for directory, entries in walk(
            self._lister,
            source,
            include_hidden=self._include_hidden,
            exclude=self._destination_filter(destination),
            onerror=report.errors.append,
        ):
            logger.debug("Mirroring %s (%d entries)", directory, len(entries))
            for entry in entries:
                if entry.entry_type == EntryType.REGULAR_FILE:
                    report.files_seen += 1
                    continue
                if pathops.is_dotted(entry.name):
                    continue
                try:
                    target = relocate(entry.path, source, destination)
                except PathError as e:
                    logger.critical("Couldn't relocate %s: %s", entry.path, e)
                    report.failed.append(
                        MirrorActionResult(path=entry.path, success=False, error=str(e))
                    )
                    continue
                self._ensure(target, report)

        logger.info(
            "Mirrored %s to %s: %d created, %d existing, %d failed, %d unreadable",
            source,
            destination,
            len(report.created),
            len(report.existing),
            len(report.failed),
            len(report.errors),
        )
        return report

    def _destination_filter(self, destination: str) -> Callable[[FileSystemEntry], bool] | None:
        """Return a filter matching the destination root in a local source."""
        if not self._lister.is_local:
            return None
        root = os.path.realpath(destination)

        def is_destination(entry: FileSystemEntry) -> bool:
            return entry.is_directory and os.path.realpath(entry.path) == root

        return is_destination

    def _ensure(self, target: str, report: MirrorReport) -> None:
        """Create ``target`` unless it exists, recording the outcome."""
        try:
            state = self._filesystem.stat_path(target)
        except OSError as e:
            logger.critical("Couldn't check directory %s: %s", target, e)
            report.failed.append(MirrorActionResult(path=target, success=False, error=str(e)))
            return

        if state == PathState.EXISTS:
            report.existing.append(target)
            return

        if self._dry_run:
            logger.info("Dry-run: would create %s", target)
            report.created.append(MirrorActionResult(path=target, success=True, dry_run=True))
            return

        try:
            make_parents(target, self._filesystem, self._permissions)
        except DirectoryCreateError as e:
            report.failed.append(MirrorActionResult(path=target, success=False, error=e.reason))
            return
        except PathError as e:
            logger.critical("Couldn't create directory %s: %s", target, e)
            report.failed.append(MirrorActionResult(path=target, success=False, error=str(e)))
            return

        report.created.append(MirrorActionResult(path=target, success=True))
