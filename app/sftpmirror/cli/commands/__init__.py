"""CLI commands for sftpmirror.

This package contains all subcommand implementations.
"""

from sftpmirror.cli.commands import config, ls, mirror

__all__ = ["config", "ls", "mirror"]
