"""Shared helpers for CLI commands.

Loads the configuration selected on the command line and opens the
directory lister (SFTP or local) that commands read from.
"""

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from pathlib import Path

import typer

from sftpmirror.config import MirrorConfig, load_config_or_default
from sftpmirror.core.errors import ConfigError, SessionError
from sftpmirror.remote.base import DirectoryLister
from sftpmirror.remote.local import LocalLister
from sftpmirror.remote.sftp import open_session
from sftpmirror.utils.formatting import print_error


def get_config_path(ctx: typer.Context) -> Path | None:
    """Return the --config path given to the main command, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path")


def load_cli_config(ctx: typer.Context) -> MirrorConfig:
    """Load the configuration, exiting with an error message if it is invalid."""
    try:
        return load_config_or_default(get_config_path(ctx))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@contextmanager
def open_lister(
    ctx: typer.Context,
    *,
    local: bool,
    config: MirrorConfig | None = None,
) -> Iterator[DirectoryLister]:
    """Open the lister a command reads from.

    Args:
        ctx: Typer context of the running command.
        local: If True, list the local disk instead of the SFTP server.
        config: Already loaded configuration (loaded from ctx if None).

    Yields:
        Ready-to-use DirectoryLister.
    """
    if local:
        yield LocalLister()
        return

    if config is None:
        config = load_cli_config(ctx)

    with ExitStack() as stack:
        try:
            lister = stack.enter_context(open_session(config.connection))
        except SessionError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        yield lister
