"""Configuration model and I/O for sftpmirror.

Configuration is stored in ~/.config/sftpmirror/config.toml and has two
sections:
- [connection]: where and how to reach the SFTP server
- [mirror]: defaults for mirroring directory trees
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sftpmirror.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from sftpmirror.core.paths import ensure_config_dir, get_config_path
from sftpmirror.filesystem.local import DEFAULT_DIRECTORY_PERMISSIONS

logger = logging.getLogger(__name__)


class ConnectionConfig(BaseModel):
    """SSH/SFTP connection settings.

    Attributes:
        host: Server host name. Required for remote commands.
        port: SSH port.
        username: Login name. If None, the SSH library default is used.
        key_filename: Private key file. If None, agent and default keys are tried.
        timeout_seconds: TCP connect timeout.
        auto_add_host_keys: Accept unknown host keys instead of rejecting them.
    """

    model_config = ConfigDict(extra="forbid")

    host: Annotated[str | None, Field(description="Server host name")] = None
    port: Annotated[int, Field(ge=1, le=65535, description="SSH port")] = 22
    username: Annotated[str | None, Field(description="Login name")] = None
    key_filename: Annotated[str | None, Field(description="Private key file")] = None
    timeout_seconds: Annotated[
        int,
        Field(ge=1, le=600, description="Connect timeout in seconds (1-600)"),
    ] = 30
    auto_add_host_keys: Annotated[
        bool,
        Field(description="Accept unknown host keys"),
    ] = False


class MirrorSettings(BaseModel):
    """Defaults for mirroring.

    Attributes:
        directory_permissions: Mode bits for created directories.
        include_hidden: Whether hidden entries are mirrored.
    """

    model_config = ConfigDict(extra="forbid")

    directory_permissions: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Mode bits for created directories"),
    ] = DEFAULT_DIRECTORY_PERMISSIONS
    include_hidden: Annotated[bool, Field(description="Mirror hidden entries")] = True


class MirrorConfig(BaseModel):
    """Top-level sftpmirror configuration."""

    model_config = ConfigDict(extra="forbid")

    connection: Annotated[
        ConnectionConfig,
        Field(default_factory=ConnectionConfig, description="Connection settings"),
    ]
    mirror: Annotated[
        MirrorSettings,
        Field(default_factory=MirrorSettings, description="Mirroring defaults"),
    ]


def load_config(path: Path | None = None) -> MirrorConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated MirrorConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        config = MirrorConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def load_config_or_default(path: Path | None = None) -> MirrorConfig:
    """Load configuration, falling back to defaults when the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return get_default_config()


def save_config(config: MirrorConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file first and moved into place
    with os.replace().

    Args:
        config: The MirrorConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            config_path = ensure_config_dir() / get_config_path().name
        except RuntimeError as e:
            raise ConfigError(str(e)) from e
    else:
        config_path = path
        config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def get_default_config() -> MirrorConfig:
    """Create a default MirrorConfig."""
    return MirrorConfig()
