"""
Plugin entry point.

Builds the plugin context and attaches the lifecycle callbacks to the
host. The host calls register() once when it loads the plugin.
"""

from pathlib import Path
from typing import Any

from myplugin import __version__
from myplugin.bootstrap import bootstrap
from myplugin.core.context import PluginContext
from myplugin.host import Host
from myplugin.lifecycle.activator import activate
from myplugin.lifecycle.deactivator import deactivate
from myplugin.lifecycle.requirements import check_requirements_on_init

PLUGIN_NAME = "My Plugin"


def plugin_config() -> dict[str, Any]:
    """The plugin identity. Single source of truth for prefixing."""
    return {
        "file": str(Path(__file__).resolve()),
        "slug": "my-plugin",
        "prefix": "myplugin_",
        "text_domain": "my-plugin",
        "version": __version__,
    }


def register(host: Host) -> PluginContext:
    """
    Register the plugin with its host.

    Args:
        host: Host loading the plugin

    Returns:
        The plugin context
    """
    context = PluginContext.create(plugin_config(), host)
    hooks = host.hooks

    hooks.register_activation_hook(context.basename, lambda: activate(context, host))
    hooks.register_deactivation_hook(context.basename, lambda: deactivate(context, host))

    # Deactivate with a notice if the platform stops meeting requirements
    hooks.add_action(
        "admin_init", lambda: check_requirements_on_init(context, host, PLUGIN_NAME)
    )

    hooks.add_action("plugins_loaded", lambda: bootstrap(context, host))

    return context
