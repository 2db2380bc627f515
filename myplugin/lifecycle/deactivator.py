"""
Plugin Deactivator.

Clears the plugin's scheduled tasks and flushes rewrite rules. The host
does not handle failures on this path, so nothing here raises.
"""

import logging
from collections.abc import Iterable

from myplugin.core.context import PluginContext
from myplugin.host import Host

logger = logging.getLogger(__name__)

# Scheduled hook names without prefix
SCHEDULED_HOOKS = (
    "daily_cleanup",
    "weekly_report",
)


def deactivate(
    context: PluginContext,
    host: Host,
    scheduled_hooks: Iterable[str] = SCHEDULED_HOOKS,
) -> None:
    """
    Run deactivation logic.

    Args:
        context: Plugin context
        host: Host
        scheduled_hooks: Hook names (without prefix) to unschedule
    """
    clear_scheduled_hooks(context, host, scheduled_hooks)

    try:
        host.rewrites.flush()
    except Exception as e:
        logger.warning("Failed to flush rewrite rules for %s: %s", context.slug, e)


def clear_scheduled_hooks(
    context: PluginContext,
    host: Host,
    scheduled_hooks: Iterable[str] = SCHEDULED_HOOKS,
) -> int:
    """
    Unschedule every listed cron hook.

    Args:
        context: Plugin context
        host: Host
        scheduled_hooks: Hook names (without prefix)

    Returns:
        Number of scheduled runs removed
    """
    removed = 0

    for hook in scheduled_hooks:
        prefixed_hook = context.cron_hook(hook)
        try:
            removed += host.scheduler.clear(prefixed_hook)
        except Exception as e:
            logger.warning("Failed to clear scheduled hook %s: %s", prefixed_hook, e)

    return removed
