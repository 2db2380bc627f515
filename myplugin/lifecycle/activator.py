"""
Plugin Activator.

Runs when the host activates the plugin.

Steps, in order:
1. Check platform requirements (fatal: deactivate and raise)
2. Register rewrite rules from the routes file (skipped on any problem)
3. Store default options, never overwriting existing values
4. Flush rewrite rules
"""

import logging
import os

from myplugin.core.context import PluginContext
from myplugin.host import Host
from myplugin.lifecycle.errors import RequirementsError
from myplugin.lifecycle.requirements import (
    DEFAULT_REQUIREMENTS,
    Requirements,
    unmet_requirements,
)
from myplugin.routing.adapter import RewriteAdapter
from myplugin.routing.loader import load_routes
from myplugin.routing.router import MinimalRouter
from myplugin.support.helpers import translate

logger = logging.getLogger(__name__)

ROUTES_FILE = "routes/web.py"

VERSION_OPTION = "version"
KEEP_DATA_OPTION = "keep_data_on_uninstall"


def activate(
    context: PluginContext,
    host: Host,
    requirements: Requirements = DEFAULT_REQUIREMENTS,
    python_version: str | None = None,
) -> None:
    """
    Run activation logic.

    Args:
        context: Plugin context
        host: Host
        requirements: Minimum platform versions
        python_version: Interpreter version (defaults to the running one)

    Raises:
        RequirementsError: If the platform is unsupported. The plugin has
            already been deactivated when this is raised.
    """
    if unmet_requirements(requirements, host, python_version):
        host.environment.deactivate_plugin(context.basename)
        raise RequirementsError(
            translate(context, host, "Plugin Activation Error"),
            translate(context, host, "This plugin requires Python %s+ and host version %s+")
            % (requirements.python, requirements.host),
        )

    register_rewrite_rules(context, host)

    try:
        set_defaults(context, host)
    except Exception as e:
        logger.warning("Failed to store default options for %s: %s", context.slug, e)

    try:
        host.rewrites.flush()
    except Exception as e:
        logger.warning("Failed to flush rewrite rules for %s: %s", context.slug, e)


def register_rewrite_rules(context: PluginContext, host: Host) -> int:
    """
    Register rewrite rules from the routes file.

    A missing routes file, or one without a callable `routes`, is skipped
    silently. Any other failure is logged and skipped.

    Args:
        context: Plugin context
        host: Host

    Returns:
        Number of rewrite rules registered
    """
    try:
        routes_path = context.path(ROUTES_FILE)
        if not os.path.isfile(routes_path):
            return 0

        callback = load_routes(routes_path, module_prefix=context.prefix.rstrip("_"))

        if not callable(callback):
            return 0

        router = MinimalRouter()
        callback(router)

        adapter = RewriteAdapter(context, host.rewrites)
        return len(adapter.register_rewrite_rules(router.routes))

    except Exception as e:
        logger.warning("Skipping rewrite rules for %s: %s", context.slug, e)
        return 0


def set_defaults(context: PluginContext, host: Host) -> None:
    """
    Store default options once.

    Args:
        context: Plugin context
        host: Host
    """
    options = host.options

    # Version for migrations
    if not options.has(context.option_key(VERSION_OPTION)):
        options.update(context.option_key(VERSION_OPTION), context.version)

    # Keep data on uninstall unless the user opts out
    if not options.has(context.option_key(KEEP_DATA_OPTION)):
        options.update(context.option_key(KEEP_DATA_OPTION), True)
