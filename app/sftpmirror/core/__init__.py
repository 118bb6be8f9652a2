"""Core building blocks for sftpmirror.

This package contains the error hierarchy, the growable list used
during directory enumeration, and XDG path management.
"""

from sftpmirror.core.errors import (
    AllocationError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    DirectoryCloseError,
    DirectoryCreateError,
    DirectoryError,
    DirectoryOpenError,
    DirectoryReadError,
    PathError,
    PathTooLongError,
    SessionError,
    SftpMirrorError,
    SliceRangeError,
)
from sftpmirror.core.growable import GrowableList, grow_capacity

__all__ = [
    "AllocationError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "DirectoryCloseError",
    "DirectoryCreateError",
    "DirectoryError",
    "DirectoryOpenError",
    "DirectoryReadError",
    "GrowableList",
    "PathError",
    "PathTooLongError",
    "SessionError",
    "SftpMirrorError",
    "SliceRangeError",
    "grow_capacity",
]
