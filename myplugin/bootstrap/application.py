"""
Application.

Holds the providers registered for one plugin load and the typed
services they bind.

Key features:
- Ordered provider registration with declared prerequisites
- Typed service bindings (keyed by class, never by string)
- Single boot pass across providers in registration order
"""

import logging
from typing import Any, TypeVar

from myplugin.config import Settings
from myplugin.core.context import PluginContext
from myplugin.host import Host

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BootstrapError(Exception):
    """Base exception for bootstrap errors."""

    pass


class ServiceProvider:
    """
    Base class for service providers.

    Attributes:
        requires: Provider classes that must be registered first
    """

    requires: tuple[type["ServiceProvider"], ...] = ()

    def register(self, app: "Application") -> None:
        """Bind services. Must not use services of later providers."""

    def boot(self, app: "Application") -> None:
        """Run once every provider is registered."""


class Application:
    """Provider registry and service bindings for one plugin load."""

    def __init__(self, context: PluginContext, host: Host, settings: Settings):
        self.context = context
        self.host = host
        self.settings = settings
        self._providers: list[ServiceProvider] = []
        self._services: dict[type, Any] = {}
        self._booted = False

    @property
    def providers(self) -> list[ServiceProvider]:
        return list(self._providers)

    @property
    def booted(self) -> bool:
        return self._booted

    def is_registered(self, provider_class: type[ServiceProvider]) -> bool:
        return any(type(p) is provider_class for p in self._providers)

    def register(self, provider: ServiceProvider) -> None:
        """
        Register a provider.

        Args:
            provider: Provider instance

        Raises:
            BootstrapError: If a prerequisite is missing or the app is booted
        """
        provider_class = type(provider)

        if self.is_registered(provider_class):
            logger.debug("provider %s already registered, skipping", provider_class.__name__)
            return

        if self._booted:
            raise BootstrapError(
                f"Cannot register {provider_class.__name__} after boot"
            )

        for dependency in provider.requires:
            if not self.is_registered(dependency):
                raise BootstrapError(
                    f"{provider_class.__name__} requires {dependency.__name__} "
                    f"to be registered first"
                )

        provider.register(self)
        self._providers.append(provider)

    def bind(self, service_type: type[T], instance: T) -> None:
        """Bind a service instance under its type."""
        self._services[service_type] = instance

    def make(self, service_type: type[T]) -> T:
        """
        Resolve a bound service.

        Raises:
            BootstrapError: If nothing is bound to service_type
        """
        try:
            return self._services[service_type]
        except KeyError as e:
            raise BootstrapError(f"No service bound for {service_type.__name__}") from e

    def boot(self) -> None:
        """Boot every registered provider once, in registration order."""
        if self._booted:
            return

        for provider in self._providers:
            provider.boot(self)

        self._booted = True
