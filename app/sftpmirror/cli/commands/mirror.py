"""Mirror command implementation.

Recreates the directory structure of a server (or local) tree below a
local destination directory.
"""

from typing import Annotated

import typer
from rich.table import Table

from sftpmirror.cli.session import load_cli_config, open_lister
from sftpmirror.core.errors import SftpMirrorError
from sftpmirror.mirror import DirectoryMirror, MirrorReport
from sftpmirror.utils.formatting import console, print_error, print_success, print_warning


def mirror_tree(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Directory tree to mirror.")],
    destination: Annotated[str, typer.Argument(help="Local destination directory.")],
    local: Annotated[
        bool,
        typer.Option("--local", help="Read the source from the local disk."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be created."),
    ] = False,
    no_hidden: Annotated[
        bool,
        typer.Option("--no-hidden", help="Skip hidden directories."),
    ] = False,
) -> None:
    """Mirror the directory structure of SOURCE into DESTINATION."""
    config = load_cli_config(ctx)
    include_hidden = config.mirror.include_hidden and not no_hidden

    with open_lister(ctx, local=local, config=config) as lister:
        mirror = DirectoryMirror(
            lister,
            dry_run=dry_run,
            include_hidden=include_hidden,
            permissions=config.mirror.directory_permissions,
        )
        try:
            report = mirror.mirror(source, destination)
        except SftpMirrorError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    _print_report(report, dry_run)

    if not report.success:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_report(report: MirrorReport, dry_run: bool) -> None:
    """Display the outcome of a mirror run."""
    if report.created:
        title = "Directories to Create (dry-run)" if dry_run else "Created Directories"
        table = Table(title=title, show_lines=False)
        table.add_column("Path", style="bold")
        for result in report.created:
            table.add_row(result.path)
        console.print(table)

    for result in report.failed:
        print_error(f"Couldn't create {result.path}: {result.error}")

    for error in report.errors:
        print_warning(f"Skipped unreadable directory {error.path}: {error.reason}")

    verb = "Would create" if dry_run else "Created"
    summary = (
        f"{verb} {len(report.created)} directories "
        f"({len(report.existing)} already present, {report.files_seen} files seen)"
    )
    if report.success:
        print_success(summary)
    else:
        console.print(f"\n[dim]{summary}[/dim]")
