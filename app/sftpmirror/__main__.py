"""Allow running sftpmirror as ``python -m sftpmirror``."""

from sftpmirror.cli.main import app

app()
