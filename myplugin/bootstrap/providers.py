"""
Core Service Providers.

Registered in dependency order; each phase requires the previous one.
Phases without bindings here are framework extension points: extra
providers hook into them through the settings file.
"""

import logging

from myplugin.bootstrap.application import Application, ServiceProvider
from myplugin.bootstrap.services import HookManager, Translator
from myplugin.config import Settings
from myplugin.host import Database
from myplugin.lifecycle.activator import ROUTES_FILE
from myplugin.routing.loader import LoaderError, load_routes
from myplugin.routing.router import MinimalRouter

logger = logging.getLogger(__name__)


# Phase 1: Foundation


class ConfigServiceProvider(ServiceProvider):
    """Binds the settings record."""

    def register(self, app: Application) -> None:
        app.bind(Settings, app.settings)


class I18nServiceProvider(ServiceProvider):
    """Binds the translator for the plugin text domain."""

    requires = (ConfigServiceProvider,)

    def register(self, app: Application) -> None:
        app.bind(Translator, Translator(app.context.text_domain, app.host.environment))


class HookServiceProvider(ServiceProvider):
    """Binds the prefixed hook manager."""

    requires = (I18nServiceProvider,)

    def register(self, app: Application) -> None:
        app.bind(HookManager, HookManager(app.context, app.host.hooks))


# Phase 2: Security (depends on i18n for messages)


class SecurityServiceProvider(ServiceProvider):
    """Nonces, capability gate and sanitizers (framework)."""

    requires = (HookServiceProvider,)


# Phase 3: HTTP (depends on security)


class HttpServiceProvider(ServiceProvider):
    """Request, response and middleware pipeline (framework)."""

    requires = (SecurityServiceProvider,)


# Phase 4: Validation + Views


class ValidationServiceProvider(ServiceProvider):
    """Validator and form requests (framework)."""

    requires = (HttpServiceProvider,)


class ViewsServiceProvider(ServiceProvider):
    """View factory (framework)."""

    requires = (ValidationServiceProvider,)


# Phase 5: Database + Migrations


class DatabaseServiceProvider(ServiceProvider):
    """Binds the host database."""

    requires = (ViewsServiceProvider,)

    def register(self, app: Application) -> None:
        app.bind(Database, app.host.database)


class MigrationsServiceProvider(ServiceProvider):
    """Migrator (framework)."""

    requires = (DatabaseServiceProvider,)


# Phase 6: Routing


class RoutingServiceProvider(ServiceProvider):
    """Binds a router filled from the routes file at boot."""

    requires = (MigrationsServiceProvider,)

    def register(self, app: Application) -> None:
        app.bind(MinimalRouter, MinimalRouter())

    def boot(self, app: Application) -> None:
        routes_path = app.context.path(ROUTES_FILE)
        try:
            callback = load_routes(routes_path, module_prefix=app.context.prefix.rstrip("_"))
        except LoaderError as e:
            logger.debug("no routes loaded: %s", e)
            return

        if callable(callback):
            callback(app.make(MinimalRouter))


# Phase 7: CLI (only when the host runs from its command line)


class CliServiceProvider(ServiceProvider):
    """Command registration (framework)."""

    requires = (RoutingServiceProvider,)


CORE_PROVIDERS: tuple[type[ServiceProvider], ...] = (
    ConfigServiceProvider,
    I18nServiceProvider,
    HookServiceProvider,
    SecurityServiceProvider,
    HttpServiceProvider,
    ValidationServiceProvider,
    ViewsServiceProvider,
    DatabaseServiceProvider,
    MigrationsServiceProvider,
    RoutingServiceProvider,
)
