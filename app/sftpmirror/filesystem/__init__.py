"""Filesystem paths, entries and the local filesystem.

This module provides the string-level path algorithms, the
FileSystemEntry model, and the local filesystem collaborator.
"""

from sftpmirror.filesystem.local import LocalFilesystem, PathState, make_parents
from sftpmirror.filesystem.models import EntryType, FileSystemEntry, append_to_list

__all__ = [
    "EntryType",
    "FileSystemEntry",
    "LocalFilesystem",
    "PathState",
    "append_to_list",
    "make_parents",
]
