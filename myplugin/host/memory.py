"""
In-Memory Host.

This module provides a complete host kept in process memory, used by the
test suite and for dry runs.

Key features:
- Host tables as row lists with LIKE matching that honours escapes
- Statement log of every destructive operation
- Options stored in the options table, so bulk deletes see them
- Static environment with configurable version and plugin locations
- Failure injection per table for best-effort cleanup paths
"""

import copy
import re
from pathlib import PurePath
from typing import Any

from myplugin.host import Host
from myplugin.host.cron import OptionScheduler
from myplugin.host.ports import Database, Environment, HostError, OptionStore, Table
from myplugin.host.rewrite import OptionRewriteRules


def like_to_regex(pattern: str, escape: str = "\\") -> re.Pattern:
    """
    Compile a SQL LIKE pattern.

    Args:
        pattern: LIKE pattern ('%' any run, '_' one character)
        escape: Escape character that makes the next character literal

    Returns:
        Compiled regex matching the whole string
    """
    parts = []
    chars = iter(pattern)
    for char in chars:
        if char == escape:
            parts.append(re.escape(next(chars, escape)))
        elif char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


class InMemoryDatabase(Database):
    """
    Host tables held in dictionaries.

    Attributes:
        rows: physical table name -> list of {key column: value, ...}
        custom_tables: names of plugin-created tables
        statements: log of destructive operations as (verb, target, args)
    """

    def __init__(
        self,
        prefix: str = "wp_",
        base_prefix: str | None = "wp_",
        multisite: bool = False,
    ):
        self._prefix = prefix
        self._base_prefix = base_prefix
        self._multisite = multisite
        self.rows: dict[str, list[dict[str, Any]]] = {}
        self.custom_tables: set[str] = set()
        self.statements: list[tuple[str, str, tuple[str, ...]]] = []
        self._failing: set[str] = set()

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def base_prefix(self) -> str | None:
        return self._base_prefix

    @property
    def is_multisite(self) -> bool:
        return self._multisite

    def fail_on(self, name: str) -> None:
        """Make every destructive operation on a physical table raise."""
        self._failing.add(name)

    def _check(self, name: str) -> None:
        if name in self._failing:
            raise HostError(f"Simulated failure on table {name}")

    def insert(self, table: Table, key: str, value: Any = "", **columns: Any) -> None:
        """Insert a row keyed by the table's key column."""
        row = {table.key_column: key, "value": value, **columns}
        self.rows.setdefault(self.table(table), []).append(row)

    def keys(self, table: Table) -> list[str]:
        """Keys currently stored in a host table."""
        column = table.key_column
        return [row[column] for row in self.rows.get(self.table(table), [])]

    def create_table(self, name: str) -> None:
        self.custom_tables.add(name)

    def delete_like(self, table: Table, *patterns: str) -> int:
        name = self.table(table)
        self.statements.append(("DELETE", name, patterns))
        self._check(name)

        matchers = [like_to_regex(p) for p in patterns]
        column = table.key_column
        rows = self.rows.get(name, [])
        kept = [
            row for row in rows if not any(m.fullmatch(row[column]) for m in matchers)
        ]
        self.rows[name] = kept
        return len(rows) - len(kept)

    def drop_table(self, name: str) -> None:
        self.statements.append(("DROP", name, ()))
        self._check(name)
        self.custom_tables.discard(name)


class InMemoryOptionStore(OptionStore):
    """Options kept as rows of the in-memory options table."""

    def __init__(self, database: InMemoryDatabase):
        self._database = database
        self.writes: list[str] = []

    def _rows(self) -> list[dict[str, Any]]:
        return self._database.rows.setdefault(self._database.table(Table.OPTIONS), [])

    def _find(self, key: str) -> dict[str, Any] | None:
        for row in self._rows():
            if row["option_name"] == key:
                return row
        return None

    def get(self, key: str, default: Any = None) -> Any:
        row = self._find(key)
        if row is None:
            return default
        return copy.deepcopy(row["value"])

    def has(self, key: str) -> bool:
        return self._find(key) is not None

    def update(self, key: str, value: Any) -> None:
        self.writes.append(key)
        row = self._find(key)
        if row is None:
            self._database.insert(Table.OPTIONS, key, copy.deepcopy(value))
        else:
            row["value"] = copy.deepcopy(value)

    def delete(self, key: str) -> bool:
        rows = self._rows()
        kept = [row for row in rows if row["option_name"] != key]
        removed = len(rows) - len(kept)
        rows[:] = kept
        return removed > 0


class StaticEnvironment(Environment):
    """
    Environment with fixed host facts.

    Attributes:
        deactivated: basenames passed to deactivate_plugin, in call order
    """

    def __init__(
        self,
        host_version: str = "6.4.2",
        plugins_dir: str = "/var/www/wp-content/plugins",
        plugins_url: str = "https://example.test/wp-content/plugins",
        debug: bool = False,
        is_cli: bool = False,
        uninstalling: bool = False,
        translations: dict[str, str] | None = None,
    ):
        super().__init__()
        self._host_version = host_version
        self.plugins_dir = plugins_dir.rstrip("/")
        self.plugins_url = plugins_url.rstrip("/")
        self._debug = debug
        self._is_cli = is_cli
        self._uninstalling = uninstalling
        self._translations = translations or {}
        self.deactivated: list[str] = []
        self.path_lookups = 0
        self.url_lookups = 0

    @property
    def host_version(self) -> str:
        return self._host_version

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def is_cli(self) -> bool:
        return self._is_cli

    @property
    def uninstalling(self) -> bool:
        return self._uninstalling

    def plugin_dir_path(self, file: str) -> str:
        self.path_lookups += 1
        return f"{self.plugins_dir}/{PurePath(file).parent.name}/"

    def plugin_dir_url(self, file: str) -> str:
        self.url_lookups += 1
        return f"{self.plugins_url}/{PurePath(file).parent.name}/"

    def deactivate_plugin(self, basename: str) -> None:
        self.deactivated.append(basename)

    def translate(self, text: str, domain: str) -> str:
        return self._translations.get(text, text)


def create_memory_host(
    prefix: str = "wp_",
    base_prefix: str | None = "wp_",
    multisite: bool = False,
    environment: Environment | None = None,
) -> Host:
    """
    Build a Host entirely in memory.

    Args:
        prefix: Site table prefix
        base_prefix: Network table prefix (None for hosts without one)
        multisite: Whether the host is a network install
        environment: Environment to use (StaticEnvironment by default)

    Returns:
        Host wired with in-memory adapters
    """
    database = InMemoryDatabase(prefix=prefix, base_prefix=base_prefix, multisite=multisite)
    options = InMemoryOptionStore(database)
    return Host(
        options=options,
        database=database,
        scheduler=OptionScheduler(options),
        rewrites=OptionRewriteRules(options),
        environment=environment or StaticEnvironment(),
    )
