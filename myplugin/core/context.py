"""
Plugin Context - identity and namespacing for the plugin.

This module provides the single source of truth for plugin identity.

Key features:
- Validated construction from a config mapping
- Immutable identity (slug, prefix, text domain, version, entry file)
- Prefixed identifiers for hooks, options, transients, cron, meta, assets
- Site/network scoped table names
- Memoized base path and URL resolved through the host
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from myplugin.host import Host


REQUIRED_KEYS = ("file", "slug", "prefix", "text_domain", "version")

SITE_SCOPE = "site"
NETWORK_SCOPE = "network"


class ContextError(Exception):
    """Base exception for context-related errors."""

    pass


class ConfigurationError(ContextError):
    """Raised when the context config is invalid."""

    pass


class MissingConfigurationError(ConfigurationError):
    """
    Raised when required config keys are missing.

    Attributes:
        missing: Every missing key, in declaration order
    """

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required config keys: {', '.join(missing)}")


@dataclass(frozen=True)
class PluginContext:
    """
    Immutable plugin identity.

    Attributes:
        file: Absolute path to the plugin entry file
        slug: Plugin slug (e.g., 'my-plugin')
        prefix: Prefix for hooks, options and tables (e.g., 'mp_')
        text_domain: Text domain for translations
        version: Plugin version string
        host: Host the identity resolves paths, URLs and tables against
    """

    file: str
    slug: str
    prefix: str
    text_domain: str
    version: str
    host: "Host | None" = field(default=None, compare=False, repr=False)

    @classmethod
    def create(
        cls, config: Mapping[str, Any], host: "Host | None" = None
    ) -> "PluginContext":
        """
        Create a PluginContext with validation.

        Args:
            config: Mapping with keys file, slug, prefix, text_domain, version
            host: Host used for path, URL and table name resolution

        Returns:
            The created PluginContext

        Raises:
            MissingConfigurationError: If any required key is missing
            ConfigurationError: If a value is not a string
        """
        missing = [key for key in REQUIRED_KEYS if config.get(key) in (None, "")]
        if missing:
            raise MissingConfigurationError(missing)

        for key in REQUIRED_KEYS:
            if not isinstance(config[key], str):
                raise ConfigurationError(
                    f"Config key '{key}' must be a string, "
                    f"got {type(config[key]).__name__}"
                )

        return cls(
            file=config["file"],
            slug=config["slug"],
            prefix=config["prefix"],
            text_domain=config["text_domain"],
            version=config["version"],
            host=host,
        )

    @property
    def basename(self) -> str:
        """Plugin basename relative to the plugins directory (e.g., 'my-plugin/plugin.py')."""
        entry = PurePath(self.file)
        return f"{entry.parent.name}/{entry.name}"

    @cached_property
    def _base_path(self) -> str:
        if self.host is None:
            return os.path.dirname(os.path.abspath(self.file)) + os.sep
        return self.host.environment.plugin_dir_path(self.file)

    @cached_property
    def _base_url(self) -> str:
        if self.host is None:
            raise ContextError("Cannot resolve plugin URL without a host")
        return self.host.environment.plugin_dir_url(self.file)

    def path(self, relative_path: str = "") -> str:
        """
        Get the absolute path to the plugin directory or a file within it.

        Args:
            relative_path: Optional path to append, leading separators ignored

        Returns:
            The absolute path
        """
        if relative_path == "":
            return self._base_path
        return self._base_path + relative_path.lstrip("/\\")

    def url(self, relative_path: str = "") -> str:
        """
        Get the URL of the plugin directory or a file within it.

        Args:
            relative_path: Optional path to append, leading slashes ignored

        Returns:
            The URL

        Raises:
            ContextError: If the context has no host
        """
        if relative_path == "":
            return self._base_url
        return self._base_url + relative_path.lstrip("/")

    def hook(self, name: str) -> str:
        """Prefixed hook name (e.g., 'mp_my_hook')."""
        return self.prefix + name

    def option_key(self, key: str) -> str:
        """Prefixed option key (e.g., 'mp_settings')."""
        return self.prefix + key

    def transient_key(self, key: str) -> str:
        """Prefixed transient key (e.g., 'mp_cache')."""
        return self.prefix + key

    def cron_hook(self, name: str) -> str:
        """Prefixed cron hook name (e.g., 'mp_daily_task')."""
        return self.prefix + name

    def meta_key(self, key: str) -> str:
        """
        Prefixed meta key.

        Meta keys start with an underscore so hosts hide them from
        custom field listings.

        Args:
            key: Meta key without prefix

        Returns:
            The prefixed meta key (e.g., '_mp_data')
        """
        return "_" + self.prefix + key

    def asset_handle(self, handle: str) -> str:
        """Asset handle for scripts and styles (e.g., 'my-plugin-admin')."""
        return self.slug + "-" + handle

    def table_name(self, name: str, scope: str = SITE_SCOPE) -> str:
        """
        Create a fully prefixed database table name.

        Combines the host table prefix, the plugin prefix and the name.
        Network scope uses the host base prefix when the host reports one
        and falls back to the site prefix otherwise.

        Args:
            name: Table name without prefixes
            scope: 'site' (default) or 'network'

        Returns:
            The full table name (e.g., 'wp_mp_products')

        Raises:
            ContextError: If the context has no host or scope is unknown
        """
        if scope not in (SITE_SCOPE, NETWORK_SCOPE):
            raise ContextError(f"Unknown table scope: {scope}")

        if self.host is None:
            raise ContextError("Cannot resolve table names without a host")

        database = self.host.database
        host_prefix = (
            database.base_prefix
            if scope == NETWORK_SCOPE and database.base_prefix is not None
            else database.prefix
        )

        return host_prefix + self.prefix + name
