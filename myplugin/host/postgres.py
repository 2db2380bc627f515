"""
PostgreSQL Host Adapters.

This module provides production adapters for hosts whose tables live in
PostgreSQL.

Key features:
- Bulk LIKE deletes composed with psycopg.sql (identifiers quoted, patterns bound)
- DROP TABLE IF EXISTS for custom tables
- Options table access with JSON-encoded values and upsert writes
- Local environment: plugin paths/URLs, active plugin list, gettext catalogs
"""

import gettext
import json
import os
from pathlib import Path
from typing import Any

import psycopg
from psycopg import sql

from myplugin.host.ports import Database, Environment, HostError, OptionStore, Table

ACTIVE_PLUGINS_OPTION = "active_plugins"


class PostgresDatabase(Database):
    """Host tables in a PostgreSQL database."""

    def __init__(
        self,
        conn: psycopg.Connection,
        prefix: str = "wp_",
        base_prefix: str | None = None,
        multisite: bool = False,
    ):
        """
        Initialize PostgresDatabase.

        Args:
            conn: Open psycopg connection (autocommit recommended)
            prefix: Site table prefix
            base_prefix: Network table prefix, None if the host has none
            multisite: Whether the host is a network install
        """
        self._conn = conn
        self._prefix = prefix
        self._base_prefix = base_prefix
        self._multisite = multisite

    @classmethod
    def connect(cls, conninfo: str, **kwargs: Any) -> "PostgresDatabase":
        """
        Open a connection and wrap it.

        Args:
            conninfo: libpq connection string or URI
            **kwargs: Forwarded to PostgresDatabase

        Returns:
            PostgresDatabase instance

        Raises:
            HostError: If the connection cannot be opened
        """
        try:
            conn = psycopg.connect(conninfo, autocommit=True)
        except psycopg.Error as e:
            raise HostError(f"Failed to connect to database: {e}") from e
        return cls(conn, **kwargs)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def base_prefix(self) -> str | None:
        return self._base_prefix

    @property
    def is_multisite(self) -> bool:
        return self._multisite

    def execute(self, query: sql.Composable, params: tuple[Any, ...] = ()) -> int:
        """
        Run one statement.

        Returns:
            Number of affected rows

        Raises:
            HostError: If the statement fails
        """
        try:
            with self._conn.cursor() as cur:
                cur.execute(query, params)
                return cur.rowcount
        except psycopg.Error as e:
            raise HostError(f"Database statement failed: {e}") from e

    def fetch_one(self, query: sql.Composable, params: tuple[Any, ...] = ()) -> tuple | None:
        try:
            with self._conn.cursor() as cur:
                cur.execute(query, params)
                return cur.fetchone()
        except psycopg.Error as e:
            raise HostError(f"Database query failed: {e}") from e

    def delete_like(self, table: Table, *patterns: str) -> int:
        if not patterns:
            return 0

        column = sql.Identifier(table.key_column)
        conditions = sql.SQL(" OR ").join(
            sql.SQL("{} LIKE %s").format(column) for _ in patterns
        )
        query = sql.SQL("DELETE FROM {} WHERE {}").format(
            sql.Identifier(self.table(table)), conditions
        )
        return self.execute(query, tuple(patterns))

    def drop_table(self, name: str) -> None:
        self.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(sql.Identifier(name)))


class PostgresOptionStore(OptionStore):
    """Options in the host options table, values stored as JSON text."""

    def __init__(self, database: PostgresDatabase):
        self._database = database

    def _table(self) -> sql.Identifier:
        return sql.Identifier(self._database.table(Table.OPTIONS))

    def _fetch(self, key: str) -> tuple | None:
        query = sql.SQL("SELECT option_value FROM {} WHERE option_name = %s").format(
            self._table()
        )
        return self._database.fetch_one(query, (key,))

    def get(self, key: str, default: Any = None) -> Any:
        row = self._fetch(key)
        if row is None:
            return default

        try:
            return json.loads(row[0])
        except (TypeError, ValueError):
            # Values written by the host itself may be plain strings
            return row[0]

    def has(self, key: str) -> bool:
        return self._fetch(key) is not None

    def update(self, key: str, value: Any) -> None:
        query = sql.SQL(
            "INSERT INTO {} (option_name, option_value, autoload) VALUES (%s, %s, %s) "
            "ON CONFLICT (option_name) DO UPDATE SET option_value = EXCLUDED.option_value"
        ).format(self._table())
        self._database.execute(query, (key, json.dumps(value), "yes"))

    def delete(self, key: str) -> bool:
        query = sql.SQL("DELETE FROM {} WHERE option_name = %s").format(self._table())
        return self._database.execute(query, (key,)) > 0


class LocalEnvironment(Environment):
    """
    Environment for a host whose plugins sit on the local filesystem.

    The active plugin list is kept in the 'active_plugins' option.
    """

    def __init__(
        self,
        options: OptionStore,
        host_version: str,
        plugins_url: str,
        debug: bool = False,
        is_cli: bool = False,
        uninstalling: bool = False,
        languages_dir: str | None = None,
    ):
        super().__init__()
        self._options = options
        self._host_version = host_version
        self._plugins_url = plugins_url.rstrip("/")
        self._debug = debug
        self._is_cli = is_cli
        self._uninstalling = uninstalling
        self._languages_dir = languages_dir
        self._catalogs: dict[str, gettext.NullTranslations] = {}

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
        return str(Path(file).resolve().parent) + os.sep

    def plugin_dir_url(self, file: str) -> str:
        return f"{self._plugins_url}/{Path(file).resolve().parent.name}/"

    def active_plugins(self) -> list[str]:
        return list(self._options.get(ACTIVE_PLUGINS_OPTION, []) or [])

    def activate_plugin(self, basename: str) -> None:
        active = self.active_plugins()
        if basename not in active:
            active.append(basename)
            self._options.update(ACTIVE_PLUGINS_OPTION, active)

    def deactivate_plugin(self, basename: str) -> None:
        active = self.active_plugins()
        if basename in active:
            active.remove(basename)
            self._options.update(ACTIVE_PLUGINS_OPTION, active)

    def translate(self, text: str, domain: str) -> str:
        if domain not in self._catalogs:
            self._catalogs[domain] = gettext.translation(
                domain, localedir=self._languages_dir, fallback=True
            )
        return self._catalogs[domain].gettext(text)
