"""User configuration.

Persisted defaults live in ~/.config/fileotter/config.toml:

    [glob]
    case_sensitive = true
    include_hidden = false
    follow_symlinks = false
    sort = true
    relative = false

    [colors]
    directory = "#0e8ac8"

Every key is optional; a missing file means all defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fileotter.core.paths import get_config_path
from fileotter.core.theme import ThemeColors
from fileotter.globbing.errors import FileOtterError
from fileotter.globbing.options import GlobOptions

logger = logging.getLogger(__name__)


class FileOtterConfig(BaseModel):
    """Root of the configuration file.

    Attributes:
        glob: Default glob engine options.
        colors: CLI color theme.
    """

    model_config = ConfigDict(extra="forbid")

    glob: Annotated[
        GlobOptions,
        Field(default_factory=GlobOptions, description="Glob defaults"),
    ]
    colors: Annotated[
        ThemeColors,
        Field(default_factory=ThemeColors, description="CLI colors"),
    ]


class ConfigError(FileOtterError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


def load_config(path: Path | None = None) -> FileOtterConfig:
    """Load the configuration file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated configuration. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return FileOtterConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return FileOtterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: FileOtterConfig, path: Path | None = None) -> Path:
    """Save the configuration atomically.

    Only values differing from the defaults are written.

    Args:
        config: Configuration to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = {
        section: values
        for section, values in config.model_dump(exclude_defaults=True).items()
        if values
    }

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path


def set_config_value(config: FileOtterConfig, key: str, value: str) -> FileOtterConfig:
    """Return a copy of the configuration with one dotted key changed.

    Values are given as strings and coerced by the schema, so
    ``set_config_value(cfg, "glob.sort", "false")`` yields a boolean.

    Args:
        config: Current configuration.
        key: Dotted key such as ``glob.include_hidden`` or ``colors.error``.
        value: New value as text.

    Returns:
        Updated, validated configuration.

    Raises:
        ConfigError: If the key is unknown or the value is invalid.
    """
    section, _, name = key.partition(".")
    data = config.model_dump()
    if section not in data or name not in data[section]:
        raise ConfigError(f"Unknown config key: {key}")

    data[section][name] = value
    try:
        return FileOtterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {value!r}") from e


def load_theme_colors() -> ThemeColors:
    """Load theme colors, falling back to defaults on a broken config."""
    try:
        return load_config().colors
    except ConfigError as e:
        logger.warning("Using default colors: %s", e)
        return ThemeColors()
