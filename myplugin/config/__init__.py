"""
Plugin Settings - the static application settings record.

This module provides:
- The settings schema (name, providers, capability)
- Loading and validation of config/app.toml
- Generation of a commented default settings file (printed or written)

The debug flag is never read from the file; it mirrors the host's debug
flag and is passed in by the caller.

Example usage:
    from myplugin.config import load_settings

    settings = load_settings(debug=host.environment.debug)
    print(settings.capability)  # 'manage_options'
"""

from dataclasses import dataclass
from pathlib import Path

from myplugin.config.schema import ConfigField, ValidationError, validate_config
from myplugin.config.toml_handler import (
    TOMLError,
    build_toml_document,
    generate_toml_from_schema,
    read_toml,
    write_toml,
)

SECTION = "app"

DEFAULT_CONFIG_FILE = Path(__file__).with_name("app.toml")

SETTINGS_SCHEMA: dict[str, ConfigField] = {
    "name": ConfigField(str, "My Plugin", "Application name", min=1),
    "providers": ConfigField(
        list,
        [],
        "Extra service providers to register, as 'module:Class'",
        items=str,
    ),
    "capability": ConfigField(
        str, "manage_options", "Capability required for the settings page", min=1
    ),
}


class ConfigError(Exception):
    """Base exception for settings errors."""

    pass


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        name: Application name
        debug: Debug mode, mirrors the host debug flag
        providers: Extra provider references ('module:Class')
        capability: Capability string for access gating
    """

    name: str = "My Plugin"
    debug: bool = False
    providers: tuple[str, ...] = ()
    capability: str = "manage_options"


def load_settings(path: Path | None = None, debug: bool = False) -> Settings:
    """
    Load settings from a TOML file.

    A missing file or a file without an [app] table yields defaults.

    Args:
        path: Settings file (defaults to the bundled config/app.toml)
        debug: Host debug flag

    Returns:
        Settings instance

    Raises:
        ConfigError: If the file cannot be parsed or fails validation
    """
    path = path or DEFAULT_CONFIG_FILE
    values = {name: field.default for name, field in SETTINGS_SCHEMA.items()}

    if path.exists():
        try:
            data = read_toml(path)
        except TOMLError as e:
            raise ConfigError(str(e)) from e

        table = data.get(SECTION, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[{SECTION}] in {path} must be a table")

        try:
            validate_config(table, SETTINGS_SCHEMA)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {path}: {e}") from e

        values.update(table)

    return Settings(
        name=values["name"],
        debug=debug,
        providers=tuple(values["providers"]),
        capability=values["capability"],
    )


def generate_default_config() -> str:
    """Commented TOML for a settings file holding the defaults."""
    return generate_toml_from_schema(SECTION, SETTINGS_SCHEMA, {})


def write_default_config(path: Path) -> None:
    """
    Write a commented settings file holding the defaults.

    Args:
        path: Destination file (parent directories are created)

    Raises:
        ConfigError: If the file cannot be written
    """
    try:
        write_toml(path, build_toml_document(SECTION, SETTINGS_SCHEMA, {}))
    except TOMLError as e:
        raise ConfigError(str(e)) from e


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_FILE",
    "SETTINGS_SCHEMA",
    "Settings",
    "generate_default_config",
    "load_settings",
    "write_default_config",
]
