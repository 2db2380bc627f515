"""
Tests for PluginContext.

This test suite covers:
1. Construction and validation of required keys
2. Prefixed identifier derivations
3. Site/network table names
4. Memoized path and URL resolution
"""

import dataclasses
import os

import pytest

from myplugin.core.context import (
    REQUIRED_KEYS,
    ConfigurationError,
    ContextError,
    MissingConfigurationError,
    PluginContext,
)
from myplugin.host.memory import StaticEnvironment, create_memory_host

CONFIG = {
    "file": "/var/www/wp-content/plugins/my-plugin/plugin.py",
    "slug": "my-plugin",
    "prefix": "mp_",
    "text_domain": "my-plugin",
    "version": "1.0.0",
}


@pytest.fixture
def environment():
    return StaticEnvironment()


@pytest.fixture
def context(environment):
    host = create_memory_host(environment=environment)
    return PluginContext.create(CONFIG, host)


class TestCreate:
    """Test construction and validation."""

    def test_create_valid(self, context):
        """Should expose every configured attribute."""
        assert context.file == CONFIG["file"]
        assert context.slug == "my-plugin"
        assert context.prefix == "mp_"
        assert context.text_domain == "my-plugin"
        assert context.version == "1.0.0"

    @pytest.mark.parametrize("key", REQUIRED_KEYS)
    def test_missing_single_key(self, key):
        """Should name exactly the omitted key."""
        config = {k: v for k, v in CONFIG.items() if k != key}

        with pytest.raises(MissingConfigurationError) as exc_info:
            PluginContext.create(config)

        assert exc_info.value.missing == [key]
        assert key in str(exc_info.value)

    def test_missing_all_keys(self):
        """Should name every missing key, not just the first."""
        with pytest.raises(MissingConfigurationError) as exc_info:
            PluginContext.create({})

        assert exc_info.value.missing == list(REQUIRED_KEYS)
        assert str(exc_info.value) == (
            "Missing required config keys: file, slug, prefix, text_domain, version"
        )

    def test_empty_value_counts_as_missing(self):
        """Empty strings and None are treated as missing."""
        config = dict(CONFIG, slug="", version=None)

        with pytest.raises(MissingConfigurationError) as exc_info:
            PluginContext.create(config)

        assert exc_info.value.missing == ["slug", "version"]

    def test_non_string_value(self):
        """Should reject non-string values."""
        with pytest.raises(ConfigurationError, match="must be a string"):
            PluginContext.create(dict(CONFIG, version=1))

    def test_immutable(self, context):
        """Attributes cannot be reassigned after creation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            context.prefix = "other_"

    def test_equality_ignores_host(self, context):
        """Two contexts built from the same literal are equal."""
        assert PluginContext.create(CONFIG) == context

    def test_basename(self, context):
        assert context.basename == "my-plugin/plugin.py"


class TestDerivations:
    """Test prefixed identifiers."""

    def test_prefixed_keys(self, context):
        assert context.hook("x") == "mp_x"
        assert context.option_key("settings") == "mp_settings"
        assert context.transient_key("cache") == "mp_cache"
        assert context.cron_hook("daily_task") == "mp_daily_task"

    def test_meta_key(self, context):
        assert context.meta_key("x") == "_mp_x"

    def test_asset_handle(self, context):
        assert context.asset_handle("admin") == "my-plugin-admin"


class TestTableName:
    """Test scoped table names."""

    def test_site_scope(self):
        host = create_memory_host(prefix="wp_3_", base_prefix="wp_")
        context = PluginContext.create(CONFIG, host)

        assert context.table_name("orders") == "wp_3_mp_orders"

    def test_network_scope_uses_base_prefix(self):
        host = create_memory_host(prefix="wp_3_", base_prefix="wp_", multisite=True)
        context = PluginContext.create(CONFIG, host)

        assert context.table_name("orders", scope="network") == "wp_mp_orders"

    def test_network_scope_falls_back_to_site_prefix(self):
        """Hosts without a base prefix use the site prefix."""
        host = create_memory_host(prefix="wp_3_", base_prefix=None)
        context = PluginContext.create(CONFIG, host)

        assert context.table_name("orders", scope="network") == "wp_3_mp_orders"

    def test_unknown_scope(self, context):
        with pytest.raises(ContextError, match="Unknown table scope"):
            context.table_name("orders", scope="galaxy")

    def test_requires_host(self):
        with pytest.raises(ContextError):
            PluginContext.create(CONFIG).table_name("orders")


class TestPathAndUrl:
    """Test memoized path/URL resolution."""

    def test_path(self, context):
        assert context.path() == "/var/www/wp-content/plugins/my-plugin/"
        assert context.path("routes/web.py") == (
            "/var/www/wp-content/plugins/my-plugin/routes/web.py"
        )

    def test_path_strips_leading_separators(self, context):
        assert context.path("/sub") == context.path("sub")
        assert context.path("\\sub") == context.path("sub")

    def test_path_memoized(self, context, environment):
        """The host is asked once; results stay identical."""
        first = context.path("assets")
        second = context.path("assets")

        assert first == second
        assert environment.path_lookups == 1

    def test_url(self, context, environment):
        assert context.url() == "https://example.test/wp-content/plugins/my-plugin/"
        assert context.url("/assets/app.js") == context.url("assets/app.js")
        assert environment.url_lookups == 1

    def test_path_without_host(self):
        """Falls back to the entry file's directory."""
        context = PluginContext.create(CONFIG)
        expected = os.path.dirname(os.path.abspath(CONFIG["file"])) + os.sep

        assert context.path() == expected

    def test_url_without_host(self):
        with pytest.raises(ContextError, match="without a host"):
            PluginContext.create(CONFIG).url()
