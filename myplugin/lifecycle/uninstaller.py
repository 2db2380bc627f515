"""
Plugin Uninstaller.

This module removes every trace of the plugin from host storage.

Key features:
- Options (and network options on multisite)
- Transients with their timeout records
- Custom tables
- User and post meta
- Independent passes: a failing pass never stops the others
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from myplugin.core.context import PluginContext
from myplugin.host import Host, Table, esc_like
from myplugin.lifecycle.errors import UninstallError

logger = logging.getLogger(__name__)

# Custom tables (without prefixes)
CUSTOM_TABLES: tuple[str, ...] = (
    # "orders",
    # "items",
)


@dataclass
class UninstallReport:
    """
    Outcome of an uninstall run.

    Attributes:
        removed: pass name -> rows (or tables) removed
        errors: pass name -> error message, for passes that failed
    """

    removed: dict[str, int] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def uninstall(
    context: PluginContext,
    host: Host,
    tables: Iterable[str] = CUSTOM_TABLES,
) -> UninstallReport:
    """
    Run uninstall logic.

    Args:
        context: Plugin context
        host: Host
        tables: Custom table names without prefixes

    Returns:
        UninstallReport with per-pass results
    """
    tables = tuple(tables)
    passes: list[tuple[str, Callable[[], int]]] = [
        ("options", lambda: remove_options(context, host)),
        ("transients", lambda: remove_transients(context, host)),
        ("tables", lambda: drop_tables(context, host, tables)),
        ("user_meta", lambda: remove_user_meta(context, host)),
        ("post_meta", lambda: remove_post_meta(context, host)),
    ]

    report = UninstallReport()
    for name, run in passes:
        try:
            report.removed[name] = run()
        except Exception as e:
            logger.warning("Uninstall pass %s failed for %s: %s", name, context.slug, e)
            report.errors[name] = str(e)

    return report


def remove_options(context: PluginContext, host: Host) -> int:
    """Delete every option starting with the plugin prefix."""
    database = host.database
    pattern = esc_like(context.prefix) + "%"

    removed = database.delete_like(Table.OPTIONS, pattern)

    # Multisite: network options
    if database.is_multisite:
        removed += database.delete_like(Table.SITEMETA, pattern)

    return removed


def remove_transients(context: PluginContext, host: Host) -> int:
    """Delete the plugin's transients and their timeouts."""
    database = host.database
    prefix = esc_like(context.prefix)

    removed = database.delete_like(
        Table.OPTIONS,
        esc_like("_transient_") + prefix + "%",
        esc_like("_transient_timeout_") + prefix + "%",
    )

    if database.is_multisite:
        removed += database.delete_like(
            Table.SITEMETA,
            esc_like("_site_transient_") + prefix + "%",
            esc_like("_site_transient_timeout_") + prefix + "%",
        )

    return removed


def drop_tables(context: PluginContext, host: Host, tables: Iterable[str]) -> int:
    """
    Drop custom tables.

    Every table is attempted; failures are collected and raised together.

    Raises:
        UninstallError: If any table could not be dropped
    """
    dropped = 0
    failures = []

    for table in tables:
        table_name = context.table_name(table)
        try:
            host.database.drop_table(table_name)
            dropped += 1
        except Exception as e:
            failures.append(f"{table_name}: {e}")

    if failures:
        raise UninstallError("Failed to drop tables: " + "; ".join(failures))

    return dropped


def remove_user_meta(context: PluginContext, host: Host) -> int:
    """Delete user meta whose key starts with the meta prefix."""
    return host.database.delete_like(Table.USERMETA, esc_like(context.meta_key("")) + "%")


def remove_post_meta(context: PluginContext, host: Host) -> int:
    """Delete post meta whose key starts with the meta prefix."""
    return host.database.delete_like(Table.POSTMETA, esc_like(context.meta_key("")) + "%")
