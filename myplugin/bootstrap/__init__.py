"""
Bootstrap - register and boot the framework service providers.

Boot sequence:
1. Requirements gate, context, lifecycle hooks (entry point)
2. Core providers in dependency order (this module)
3. CLI phase when the host runs from its command line
4. Extra providers named in the settings file
5. One boot pass across every provider
6. The "<prefix>booted" action, fired with the Application
"""

import importlib

from myplugin.bootstrap.application import Application, BootstrapError, ServiceProvider
from myplugin.bootstrap.providers import CORE_PROVIDERS, CliServiceProvider
from myplugin.config import Settings, load_settings
from myplugin.core.context import PluginContext
from myplugin.host import Host

BOOTED_ACTION = "booted"


def resolve_provider(reference: str) -> type[ServiceProvider]:
    """
    Resolve a 'module:Class' provider reference.

    Args:
        reference: Dotted module path and class name separated by ':'

    Returns:
        The provider class

    Raises:
        BootstrapError: If the reference is malformed, cannot be imported,
            or does not name a ServiceProvider subclass
    """
    module_name, sep, class_name = reference.partition(":")
    if not sep or not module_name or not class_name:
        raise BootstrapError(
            f"Invalid provider reference: {reference!r}. Expected 'module:Class'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise BootstrapError(f"Cannot import provider module {module_name}: {e}") from e

    provider = getattr(module, class_name, None)
    if not isinstance(provider, type) or not issubclass(provider, ServiceProvider):
        raise BootstrapError(f"{reference} is not a ServiceProvider subclass")

    return provider


def bootstrap(
    context: PluginContext,
    host: Host,
    settings: Settings | None = None,
) -> Application:
    """
    Bootstrap the application.

    Args:
        context: Plugin context
        host: Host
        settings: Settings (loaded from the bundled file when omitted)

    Returns:
        The booted Application

    Raises:
        BootstrapError: If a provider cannot be resolved or registered
    """
    settings = settings or load_settings(debug=host.environment.debug)
    app = Application(context, host, settings)

    # Order matters: dependencies must be registered before dependents
    for provider_class in CORE_PROVIDERS:
        app.register(provider_class())

    if host.environment.is_cli:
        app.register(CliServiceProvider())

    for reference in settings.providers:
        app.register(resolve_provider(reference)())

    app.boot()

    # Extensions receive the booted application here
    host.hooks.do_action(context.hook(BOOTED_ACTION), app)

    return app


__all__ = [
    "BOOTED_ACTION",
    "Application",
    "BootstrapError",
    "ServiceProvider",
    "bootstrap",
    "resolve_provider",
]
