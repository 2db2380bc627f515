"""
TOML File I/O Handler.

This module provides TOML parsing and writing for the settings file.

Key features:
- Parse TOML files using tomllib
- Write TOML files using tomlkit (preserves comments and formatting)
- Generate a commented settings document from the schema
"""

import tomllib
from pathlib import Path
from typing import Any

import tomlkit

from myplugin.config.schema import ConfigField


class TOMLError(Exception):
    """Base exception for TOML-related errors."""

    pass


def read_toml(file_path: Path) -> dict[str, Any]:
    """
    Read and parse a TOML file.

    Args:
        file_path: Path to the TOML file

    Returns:
        Parsed TOML data as dictionary

    Raises:
        TOMLError: If file cannot be read or parsed
    """
    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise TOMLError(f"TOML file not found: {file_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise TOMLError(f"Failed to parse TOML file {file_path}: {e}") from e
    except OSError as e:
        raise TOMLError(f"Failed to read TOML file {file_path}: {e}") from e


def write_toml(file_path: Path, data: dict[str, Any]) -> None:
    """
    Write data to a TOML file using tomlkit.

    Args:
        file_path: Path to the TOML file
        data: Data to write

    Raises:
        TOMLError: If file cannot be written
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            tomlkit.dump(data, f)
    except OSError as e:
        raise TOMLError(f"Failed to write TOML file {file_path}: {e}") from e


def build_toml_document(
    section: str, schema: dict[str, ConfigField], config_data: dict[str, Any]
) -> tomlkit.TOMLDocument:
    """
    Build a TOML document from schema with descriptive comments.

    Args:
        section: Table name the fields are written under
        schema: Schema dictionary (field_name -> ConfigField)
        config_data: Values to write (field_name -> value); defaults fill gaps

    Returns:
        tomlkit document with comments, ready for write_toml
    """
    doc = tomlkit.document()
    doc.add(tomlkit.comment(f"Plugin settings ([{section}])"))
    doc.add(tomlkit.nl())

    table = tomlkit.table()

    for field_name, field in schema.items():
        if field.description:
            table.add(tomlkit.comment(field.description))

        table.add(field_name, config_data.get(field_name, field.default))
        table.add(tomlkit.nl())

    doc.add(section, table)

    return doc


def generate_toml_from_schema(
    section: str, schema: dict[str, ConfigField], config_data: dict[str, Any]
) -> str:
    """Render build_toml_document as a string."""
    return tomlkit.dumps(build_toml_document(section, schema, config_data))
