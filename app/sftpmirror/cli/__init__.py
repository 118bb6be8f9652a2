"""CLI package for sftpmirror.

This package contains the Typer application and all subcommands.
"""

from sftpmirror.cli.main import app

__all__ = ["app"]
