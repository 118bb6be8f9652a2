"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from sftpmirror import __version__
from sftpmirror.cli.commands import config, ls, mirror
from sftpmirror.utils.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="sftpmirror",
    help="Mirror directory trees from SFTP servers to the local disk.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sftpmirror version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log critical errors.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/sftpmirror/config.toml).",
        ),
    ] = None,
) -> None:
    """sftpmirror - mirror directory trees from SFTP servers.

    List remote directories and recreate their structure locally.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="ls")(ls.list_directory)
app.command(name="mirror")(mirror.mirror_tree)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
