"""Directory listing over SFTP or the local disk.

This module provides the DirectoryLister interface, its SFTP and local
implementations, and the directory reader built on top of them.
"""

from sftpmirror.remote.base import DirectoryLister, FileXferType, ListedEntry
from sftpmirror.remote.local import LocalLister
from sftpmirror.remote.reader import classify, read_directory, walk
from sftpmirror.remote.sftp import SftpLister, open_session

__all__ = [
    "DirectoryLister",
    "FileXferType",
    "ListedEntry",
    "LocalLister",
    "SftpLister",
    "classify",
    "open_session",
    "read_directory",
    "walk",
]
