"""
Tests for the settings record.

This test suite covers:
1. Schema validation (type mismatch, constraint violation)
2. TOML generation from schema (with comments)
3. Loading settings files
4. Error cases
"""

import tomllib

import pytest

from myplugin.config import (
    DEFAULT_CONFIG_FILE,
    SETTINGS_SCHEMA,
    ConfigError,
    Settings,
    generate_default_config,
    load_settings,
    write_default_config,
)
from myplugin.config.schema import ConfigField, SchemaError, ValidationError, validate_config
from myplugin.config.toml_handler import TOMLError, read_toml, write_toml


class TestSchemaValidation:
    """Test schema field validation."""

    def test_field_default_type_mismatch(self):
        """ConfigField should reject default value that doesn't match type."""
        with pytest.raises(SchemaError, match="does not match type"):
            ConfigField(int, "not an int", "Bad default")

    def test_min_max_only_for_sized_types(self):
        with pytest.raises(SchemaError, match="min/max constraints"):
            ConfigField(int, 1, "Number", min=0)

    def test_items_only_for_lists(self):
        with pytest.raises(SchemaError, match="items constraint"):
            ConfigField(str, "", "String", items=str)

    def test_field_string_length_constraints(self):
        """ConfigField should enforce min/max length for strings."""
        field = ConfigField(str, "hello", "String with length", min=3, max=10)

        field.validate("abc")
        field.validate("1234567890")

        with pytest.raises(ValidationError, match="less than minimum"):
            field.validate("ab")

        with pytest.raises(ValidationError, match="greater than maximum"):
            field.validate("12345678901")

    def test_list_items(self):
        field = ConfigField(list, [], "Providers", items=str)

        field.validate(["a:B"])

        with pytest.raises(ValidationError, match="Expected list of str"):
            field.validate(["a:B", 3])

    def test_bool_is_not_int(self):
        """Booleans should not pass as integers."""
        field = ConfigField(int, 1, "Count")

        with pytest.raises(ValidationError, match="Expected type int"):
            field.validate(True)

    def test_unknown_field(self):
        with pytest.raises(ValidationError, match="Unknown configuration field"):
            validate_config({"colour": "red"}, SETTINGS_SCHEMA)

    def test_missing_fields_allowed(self):
        validate_config({}, SETTINGS_SCHEMA)


class TestGeneration:
    """Test default settings file generation."""

    def test_defaults_parse_back(self):
        content = generate_default_config()
        data = tomllib.loads(content)

        assert data == {
            "app": {
                "name": "My Plugin",
                "providers": [],
                "capability": "manage_options",
            }
        }

    def test_comments(self):
        content = generate_default_config()

        assert "# Application name" in content
        assert "# Capability required for the settings page" in content

    def test_bundled_file_matches_defaults(self):
        assert tomllib.loads(DEFAULT_CONFIG_FILE.read_text()) == tomllib.loads(
            generate_default_config()
        )

    def test_write_default_config(self, tmp_path):
        """The written file keeps its comments and loads as the defaults."""
        path = tmp_path / "config" / "app.toml"

        write_default_config(path)

        assert "# Application name" in path.read_text()
        assert load_settings(path) == Settings()

    def test_write_default_config_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(ConfigError, match="Failed to write"):
            write_default_config(blocker / "app.toml")


class TestLoadSettings:
    """Test loading settings files."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.toml")

        assert settings == Settings()

    def test_bundled_file(self):
        settings = load_settings(debug=True)

        assert settings.name == "My Plugin"
        assert settings.debug is True
        assert settings.providers == ()

    def test_values_from_file(self, tmp_path):
        path = tmp_path / "app.toml"
        write_toml(
            path,
            {"app": {"name": "Shop", "providers": ["shop.providers:Shop"]}},
        )

        settings = load_settings(path)

        assert settings.name == "Shop"
        assert settings.providers == ("shop.providers:Shop",)
        assert settings.capability == "manage_options"

    def test_debug_not_read_from_file(self, tmp_path):
        """The debug flag comes from the host only."""
        path = tmp_path / "app.toml"
        path.write_text("[app]\ndebug = true\n")

        with pytest.raises(ConfigError, match="Unknown configuration field: debug"):
            load_settings(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "app.toml"
        path.write_text('[app]\nproviders = "not-a-list"\n')

        with pytest.raises(ConfigError, match="Field 'providers'"):
            load_settings(path)

    def test_app_must_be_table(self, tmp_path):
        path = tmp_path / "app.toml"
        path.write_text('app = "flat"\n')

        with pytest.raises(ConfigError, match="must be a table"):
            load_settings(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "app.toml"
        path.write_text("[app\n")

        with pytest.raises(ConfigError, match="Failed to parse"):
            load_settings(path)


class TestTOMLHandler:
    """Test TOML file I/O."""

    def test_read_missing(self, tmp_path):
        with pytest.raises(TOMLError, match="not found"):
            read_toml(tmp_path / "absent.toml")

    def test_write_creates_parents(self, tmp_path):
        path = tmp_path / "nested" / "app.toml"

        write_toml(path, {"app": {"name": "Shop"}})

        assert read_toml(path) == {"app": {"name": "Shop"}}
