"""
Settings Schema.

This module provides schema declaration and validation for the plugin
settings record.

Key features:
- Typed field definitions with defaults and descriptions
- Length constraints for strings and lists, element types for lists
- Validation of a whole settings table against the schema
"""

from dataclasses import dataclass
from typing import Any


class SchemaError(Exception):
    """Base exception for schema-related errors."""

    pass


class ValidationError(SchemaError):
    """Raised when value validation fails."""

    pass


@dataclass
class ConfigField:
    """
    Represents a settings field with type and constraints.

    Attributes:
        type_: The expected type of the field value
        default: Default value for the field
        description: Human-readable description
        min: Minimum length (strings/lists)
        max: Maximum length (strings/lists)
        items: Expected type of list elements (lists only)
    """

    type_: type
    default: Any
    description: str = ""
    min: int | None = None
    max: int | None = None
    items: type | None = None

    def __post_init__(self):
        """Validate field definition."""
        if not isinstance(self.default, self.type_):
            raise SchemaError(
                f"Default value {self.default!r} does not match type {self.type_.__name__}"
            )

        if (self.min is not None or self.max is not None) and self.type_ not in (str, list):
            raise SchemaError(
                f"min/max constraints only supported for str, list. Got {self.type_.__name__}"
            )

        if self.items is not None and self.type_ is not list:
            raise SchemaError("items constraint only supported for list")

    def validate(self, value: Any) -> None:
        """
        Validate a value against this field's constraints.

        Args:
            value: The value to validate

        Raises:
            ValidationError: If validation fails
        """
        # bool is an int subclass; keep the two apart
        if not isinstance(value, self.type_) or (
            self.type_ is not bool and isinstance(value, bool)
        ):
            raise ValidationError(
                f"Expected type {self.type_.__name__}, got {type(value).__name__}"
            )

        if self.type_ in (str, list):
            if self.min is not None and len(value) < self.min:
                raise ValidationError(
                    f"Length {len(value)} is less than minimum {self.min}"
                )
            if self.max is not None and len(value) > self.max:
                raise ValidationError(
                    f"Length {len(value)} is greater than maximum {self.max}"
                )

        if self.items is not None:
            for item in value:
                if not isinstance(item, self.items):
                    raise ValidationError(
                        f"Expected list of {self.items.__name__}, "
                        f"got element {item!r}"
                    )


def validate_config(config: dict[str, Any], schema: dict[str, ConfigField]) -> None:
    """
    Validate a settings table against a schema.

    Missing fields are allowed (defaults apply); unknown fields are not.

    Args:
        config: The settings table to validate
        schema: The schema dictionary (field_name -> ConfigField)

    Raises:
        ValidationError: If validation fails
    """
    for key in config:
        if key not in schema:
            raise ValidationError(f"Unknown configuration field: {key}")

    for field_name, field in schema.items():
        if field_name not in config:
            continue

        try:
            field.validate(config[field_name])
        except ValidationError as e:
            raise ValidationError(f"Field '{field_name}': {e}") from e

