"""
Uninstall handler.

Runs when the plugin is deleted from the host. Respects the user
preference for keeping data, which defaults to keeping it.
"""

import logging
from collections.abc import Iterable
from typing import Any

from myplugin.core.context import PluginContext
from myplugin.host import Host
from myplugin.lifecycle.activator import KEEP_DATA_OPTION
from myplugin.lifecycle.uninstaller import CUSTOM_TABLES, UninstallReport, uninstall
from myplugin.plugin import plugin_config

logger = logging.getLogger(__name__)


def opted_out(keep_data: Any) -> bool:
    """
    Check whether a stored keep-data preference explicitly opts out.

    Only False, or the empty string some hosts store for false, opts out.
    Any other value, including None and 0, keeps the data.
    """
    return keep_data is False or keep_data == ""


def run(host: Host, tables: Iterable[str] = CUSTOM_TABLES) -> UninstallReport | None:
    """
    Uninstall entry point.

    Args:
        host: Host deleting the plugin
        tables: Custom table names without prefixes

    Returns:
        UninstallReport, or None when nothing was removed
    """
    # Only the host's deletion flow may remove data
    if not host.environment.uninstalling:
        return None

    context = PluginContext.create(plugin_config(), host)

    keep_data = host.options.get(context.option_key(KEEP_DATA_OPTION), True)
    if not opted_out(keep_data):
        logger.info("Keeping %s data on uninstall", context.slug)
        return None

    return uninstall(context, host, tables)
