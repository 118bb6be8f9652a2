"""Exception hierarchy for sftpmirror.

Every failure raised by the path, listing and mirroring layers derives
from SftpMirrorError so callers can stop a subtree (or the whole run)
with a single except clause. Unsupported entry types are not errors and
never appear here.
"""


class SftpMirrorError(Exception):
    """Base exception for all sftpmirror errors."""


class AllocationError(SftpMirrorError):
    """Raised when a list or buffer cannot grow to the requested size."""


class PathError(SftpMirrorError, ValueError):
    """Base exception for invalid path strings or path arguments."""


class SliceRangeError(PathError):
    """Raised when slice bounds do not satisfy ``0 <= start < stop <= len``.

    Attributes:
        path: The path that was being sliced.
        start: Requested start index (inclusive).
        stop: Requested stop index (exclusive).
    """

    def __init__(self, path: str, start: int, stop: int) -> None:
        self.path = path
        self.start = start
        self.stop = stop
        super().__init__(
            f"Invalid slice [{start}, {stop}) for path {path!r} of length {len(path)}"
        )


class PathTooLongError(PathError):
    """Raised when a path or name exceeds its maximum length.

    Attributes:
        value: The offending path or name.
        limit: Maximum number of characters allowed.
    """

    def __init__(self, value: str, limit: int, kind: str = "path") -> None:
        self.value = value
        self.limit = limit
        super().__init__(f"{kind.capitalize()} exceeds {limit} characters: {value[:64]!r}...")


class DirectoryError(SftpMirrorError):
    """Base exception for failures while handling a single directory.

    Attributes:
        path: Directory the operation was performed on.
        reason: Diagnostic text reported by the collaborator.
    """

    action = "handle"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't {self.action} directory {path!r}: {reason}")


class DirectoryOpenError(DirectoryError):
    """Raised when a directory handle cannot be opened."""

    action = "open"


class DirectoryReadError(DirectoryError):
    """Raised when reading the next entry of an open directory fails."""

    action = "read"


class DirectoryCloseError(DirectoryError):
    """Raised when closing a directory handle does not report success."""

    action = "close"


class DirectoryCreateError(DirectoryError):
    """Raised when a local directory cannot be created."""

    action = "create"


class SessionError(SftpMirrorError):
    """Raised when an SSH/SFTP session cannot be established."""


class ConfigError(SftpMirrorError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""
