"""Configuration commands.

Show the effective configuration and write an initial config file.
"""

import json
from typing import Annotated

import typer

from sftpmirror.cli.session import get_config_path, load_cli_config
from sftpmirror.config import ConnectionConfig, MirrorConfig, save_config
from sftpmirror.core.errors import ConfigError
from sftpmirror.core.paths import get_config_path as get_default_config_path
from sftpmirror.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and create the sftpmirror configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config_path = get_config_path(ctx) or get_default_config_path()
    config = load_cli_config(ctx)

    if not config_path.exists():
        print_info(f"Showing defaults, no config file at {config_path}")
    else:
        print_info(f"Config file: {config_path}")

    console.print_json(json.dumps(config.model_dump()))


@app.command()
def init(
    ctx: typer.Context,
    host: Annotated[str, typer.Option("--host", "-H", help="Server host name.")],
    port: Annotated[int, typer.Option("--port", "-p", help="SSH port.")] = 22,
    username: Annotated[
        str | None,
        typer.Option("--username", "-u", help="Login name."),
    ] = None,
    key_filename: Annotated[
        str | None,
        typer.Option("--key", "-k", help="Private key file."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the given connection settings."""
    config_path = get_config_path(ctx) or get_default_config_path()

    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        config = MirrorConfig(
            connection=ConnectionConfig(
                host=host,
                port=port,
                username=username,
                key_filename=key_filename,
            )
        )
    except ValueError as e:
        print_error(f"Invalid settings: {e}")
        raise typer.Exit(code=1) from e

    try:
        saved = save_config(config, config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
