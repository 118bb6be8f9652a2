"""SFTP directory lister and session management.

Connects to an SSH server with paramiko and lists remote directories
through its SFTP subsystem.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import paramiko

from sftpmirror.core.errors import SessionError
from sftpmirror.remote.base import DirectoryLister, FileXferType, ListedEntry

if TYPE_CHECKING:
    from sftpmirror.config import ConnectionConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _RemoteDirectory:
    """Open remote directory: its path and the not-yet-read attributes."""

    path: str
    attributes: Iterator[paramiko.SFTPAttributes] = field(repr=False)
    closed: bool = False


class SftpLister(DirectoryLister):
    """Lists remote directories over an open SFTP session.

    Args:
        sftp: Connected paramiko SFTP client.
        host: Host name, used for descriptions only.
    """

    def __init__(self, sftp: paramiko.SFTPClient, host: str = "") -> None:
        self._sftp = sftp
        self._host = host

    @property
    def description(self) -> str:
        return f"sftp://{self._host}" if self._host else "sftp"

    def open_directory(self, path: str) -> Any:
        try:
            attributes = self._sftp.listdir_attr(path or ".")
        except paramiko.SSHException as e:
            # A dropped session is not an OSError in paramiko
            raise OSError(str(e)) from e
        return _RemoteDirectory(path=path, attributes=iter(attributes))

    def read_next_entry(self, handle: Any) -> ListedEntry | None:
        if handle.closed:
            msg = f"Directory handle for {handle.path!r} is closed"
            raise OSError(msg)
        attr = next(handle.attributes, None)
        if attr is None:
            return None
        return ListedEntry(name=attr.filename, file_type=FileXferType.from_mode(attr.st_mode))

    def close_directory(self, handle: Any) -> bool:
        if handle.closed:
            return False
        handle.closed = True
        return True


@contextmanager
def open_session(config: "ConnectionConfig") -> Iterator[SftpLister]:
    """Open an SSH connection and an SFTP session on it.

    Host keys are verified against the system known_hosts file; unknown
    hosts are rejected unless ``auto_add_host_keys`` is set.

    Args:
        config: Connection settings.

    Yields:
        SftpLister bound to the session. Both the SFTP session and the SSH
        connection are closed on exit.

    Raises:
        SessionError: If no host is configured or the connection fails.
    """
    if not config.host:
        msg = "No host configured. Run 'sftpmirror config init --host <host>' first."
        raise SessionError(msg)

    client = paramiko.SSHClient()
    client.load_system_host_keys()
    if config.auto_add_host_keys:
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
    else:
        client.set_missing_host_key_policy(paramiko.RejectPolicy())

    key_filename = str(Path(config.key_filename).expanduser()) if config.key_filename else None

    try:
        logger.debug("Connecting to %s:%d", config.host, config.port)
        client.connect(
            hostname=config.host,
            port=config.port,
            username=config.username,
            key_filename=key_filename,
            timeout=config.timeout_seconds,
        )
        sftp = client.open_sftp()
    except (paramiko.SSHException, OSError) as e:
        client.close()
        logger.critical("Couldn't connect to %s:%d: %s", config.host, config.port, e)
        msg = f"Couldn't connect to {config.host}:{config.port}: {e}"
        raise SessionError(msg) from e

    logger.info("Connected to %s:%d", config.host, config.port)
    try:
        yield SftpLister(sftp, host=config.host)
    finally:
        sftp.close()
        client.close()
