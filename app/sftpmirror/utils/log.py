"""Logging setup for the command-line interface.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

import logging

from rich.logging import RichHandler

from sftpmirror.utils.formatting import err_console


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI flags to a logging level.

    CRITICAL messages pass every level, so they are always shown.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.CRITICAL
    return logging.WARNING


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send sftpmirror log records to stderr through Rich."""
    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=verbose,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("sftpmirror")
    logger.handlers = [handler]
    logger.setLevel(resolve_level(verbose=verbose, quiet=quiet))
