"""Services bound by the core providers."""

from collections.abc import Callable
from typing import Any

from myplugin.core.context import PluginContext
from myplugin.host import Environment, HookRegistry
from myplugin.host.hooks import DEFAULT_PRIORITY


class Translator:
    """Translates text in the plugin text domain."""

    def __init__(self, text_domain: str, environment: Environment):
        self.text_domain = text_domain
        self._environment = environment

    def __call__(self, text: str) -> str:
        return self._environment.translate(text, self.text_domain)


class HookManager:
    """
    Plugin-scoped view of the host hook registry.

    Plugin hooks are namespaced with the context prefix; host hooks
    ('init', 'admin_init', ...) are reached with the *_host methods.
    """

    def __init__(self, context: PluginContext, hooks: HookRegistry):
        self._context = context
        self._hooks = hooks

    def add_action(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._hooks.add_action(self._context.hook(name), callback, priority)

    def do_action(self, name: str, *args: Any) -> None:
        self._hooks.do_action(self._context.hook(name), *args)

    def has_action(self, name: str) -> bool:
        return self._hooks.has_action(self._context.hook(name))

    def add_host_action(
        self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._hooks.add_action(hook, callback, priority)
