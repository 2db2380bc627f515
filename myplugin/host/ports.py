"""
Host Ports.

Narrow interfaces over the host the plugin runs inside. Production
adapters talk to the real host storage; in-memory adapters back tests.

Key features:
- OptionStore: persisted key-value options
- Database: bulk LIKE deletes and table drops on host-managed tables
- Scheduler: scheduled task registry
- RewriteRules: URL rewrite rule table with explicit flush
- Environment: host version, plugin paths/URLs, activation state, i18n
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class HostError(Exception):
    """Base exception for host adapter errors."""

    pass


class Table(Enum):
    """
    Host-managed tables the plugin touches.

    Each value is (table suffix, key column, global).
    Global tables are shared by every site of a network install.
    """

    OPTIONS = ("options", "option_name", False)
    SITEMETA = ("sitemeta", "meta_key", True)
    USERMETA = ("usermeta", "meta_key", True)
    POSTMETA = ("postmeta", "meta_key", False)

    @property
    def suffix(self) -> str:
        return self.value[0]

    @property
    def key_column(self) -> str:
        return self.value[1]

    @property
    def is_global(self) -> bool:
        return self.value[2]


def esc_like(text: str) -> str:
    """
    Escape LIKE wildcards so text matches literally.

    Args:
        text: Raw text

    Returns:
        Text with backslash, percent and underscore escaped
    """
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class OptionStore(ABC):
    """Persisted key-value options."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or default when the option is unset."""

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether the option is set."""

    @abstractmethod
    def update(self, key: str, value: Any) -> None:
        """Create or overwrite an option."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete an option, returning True if it existed."""


class Database(ABC):
    """Bulk operations on host-managed tables."""

    @property
    @abstractmethod
    def prefix(self) -> str:
        """Table prefix of the current site (e.g., 'wp_')."""

    @property
    @abstractmethod
    def base_prefix(self) -> str | None:
        """Network-wide table prefix, or None if the host has none."""

    @property
    @abstractmethod
    def is_multisite(self) -> bool:
        """Whether the host is a network (multisite) install."""

    def table(self, table: Table) -> str:
        """
        Resolve the physical name of a host table.

        Args:
            table: Host table

        Returns:
            Prefixed table name
        """
        if table.is_global and self.base_prefix is not None:
            return self.base_prefix + table.suffix
        return self.prefix + table.suffix

    @abstractmethod
    def delete_like(self, table: Table, *patterns: str) -> int:
        """
        Delete rows whose key column matches any LIKE pattern.

        Args:
            table: Host table to delete from
            *patterns: LIKE patterns, already escaped with esc_like

        Returns:
            Number of rows removed
        """

    @abstractmethod
    def drop_table(self, name: str) -> None:
        """Drop a table; dropping an absent table is a no-op."""


class Scheduler(ABC):
    """Scheduled task registry."""

    @abstractmethod
    def schedule(self, hook: str, timestamp: int, args: Sequence[Any] = ()) -> None:
        """Schedule a single run of hook at timestamp."""

    @abstractmethod
    def clear(self, hook: str) -> int:
        """Unschedule every run of hook, returning how many were removed."""


@dataclass(frozen=True)
class RewriteRule:
    """
    A URL rewrite rule.

    Attributes:
        regex: Pattern matched against the request path
        query: Query string the request is rewritten to
        position: 'top' or 'bottom' of the rule table
    """

    regex: str
    query: str
    position: str = "bottom"


class RewriteRules(ABC):
    """Host rewrite rule table."""

    @abstractmethod
    def add(self, regex: str, query: str, position: str = "bottom") -> None:
        """Register a rewrite rule (takes effect after flush)."""

    @abstractmethod
    def rules(self) -> list[RewriteRule]:
        """Registered rules, top rules first."""

    @abstractmethod
    def flush(self) -> None:
        """Regenerate the persisted rule table."""


@dataclass(frozen=True)
class Notice:
    """An admin notice queued for display."""

    message: str
    level: str = "error"


class Environment(ABC):
    """
    Host runtime environment.

    Exposes host facts and the few host operations that are not storage.
    """

    def __init__(self):
        self._notices: list[Notice] = []

    @property
    @abstractmethod
    def host_version(self) -> str:
        """Version of the host application."""

    @property
    def debug(self) -> bool:
        """Host debug flag."""
        return False

    @property
    def is_cli(self) -> bool:
        """Whether the host runs from its command line."""
        return False

    @property
    def uninstalling(self) -> bool:
        """Set by the host only while it is deleting the plugin."""
        return False

    @abstractmethod
    def plugin_dir_path(self, file: str) -> str:
        """Directory path of a plugin entry file, with trailing separator."""

    @abstractmethod
    def plugin_dir_url(self, file: str) -> str:
        """Directory URL of a plugin entry file, with trailing slash."""

    @abstractmethod
    def deactivate_plugin(self, basename: str) -> None:
        """Mark the plugin inactive in the host."""

    def translate(self, text: str, domain: str) -> str:
        """Translate text in the given text domain."""
        return text

    def add_notice(self, message: str, level: str = "error") -> None:
        """Queue an admin notice."""
        self._notices.append(Notice(message=message, level=level))

    def notices(self) -> list[Notice]:
        """Queued admin notices."""
        return list(self._notices)
