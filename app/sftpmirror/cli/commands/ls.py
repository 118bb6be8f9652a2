"""List command implementation.

Lists one directory level of the SFTP server (or the local disk).
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape

from sftpmirror.cli.session import open_lister
from sftpmirror.core.errors import SftpMirrorError
from sftpmirror.filesystem import pathops
from sftpmirror.filesystem.models import EntryType, FileSystemEntry
from sftpmirror.remote.reader import read_directory
from sftpmirror.utils.formatting import console, create_entry_table, print_error, print_info


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def list_directory(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Argument(help="Directory to list."),
    ] = ".",
    local: Annotated[
        bool,
        typer.Option("--local", help="List the local disk instead of the server."),
    ] = False,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include hidden entries."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the files and directories of a single directory."""
    with open_lister(ctx, local=local) as lister:
        try:
            entries = read_directory(lister, path)
        except SftpMirrorError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        source = lister.description

    visible = [entry for entry in entries if show_all or not pathops.is_hidden(entry.name)]

    if output_format == OutputFormat.JSON:
        _print_json(visible)
        return

    if not visible:
        print_info(f"No entries in {path}")
        return

    _print_table(visible, f"{path} ({source})")


# === Private helper functions ===


def _print_table(entries: list[FileSystemEntry], title: str) -> None:
    """Display entries as a Rich table, directories first."""
    table = create_entry_table(title)
    for entry in sorted(entries, key=lambda e: (not e.is_directory, e.name)):
        if pathops.is_hidden(entry.name):
            style = "entry.hidden"
        else:
            style = "entry.directory" if entry.is_directory else "entry.file"
        table.add_row(
            entry.entry_type.value,
            f"[{style}]{escape(entry.name)}[/]",
            escape(entry.path),
        )
    console.print(table)

    directories = sum(1 for e in entries if e.entry_type == EntryType.DIRECTORY)
    console.print(f"\n[dim]{directories} directories, {len(entries) - directories} files[/dim]")


def _print_json(entries: list[FileSystemEntry]) -> None:
    """Display entries as JSON."""
    data = [
        {
            "name": e.name,
            "path": e.path,
            "type": e.entry_type.value,
        }
        for e in entries
    ]
    console.print_json(json.dumps(data))
