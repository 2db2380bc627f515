"""
Host Hook Registry.

This module provides the host action system plugins attach callbacks to.

Key features:
- Priority-based execution (lower priority = earlier execution)
- Registration order as tie-breaker
- Activation/deactivation hooks keyed by plugin basename
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DEFAULT_PRIORITY = 10


@dataclass
class Action:
    """
    Represents a registered action callback.

    Attributes:
        callback: The callback function
        priority: Lower priority executes first
        registration_order: Tie-breaker for same priority (lower = earlier)
    """

    callback: Callable[..., Any]
    priority: int
    registration_order: int


class HookRegistry:
    """
    In-process action dispatcher.

    Callbacks run synchronously; an exception raised by a callback
    propagates to whoever fired the action.
    """

    def __init__(self):
        self._actions: dict[str, list[Action]] = {}
        self._registration_counter = 0

    def add_action(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """
        Attach a callback to a hook.

        Args:
            hook: Hook name
            callback: Callable invoked with the action arguments
            priority: Execution priority (lower runs first)
        """
        order = self._registration_counter
        self._registration_counter += 1

        actions = self._actions.setdefault(hook, [])
        actions.append(
            Action(callback=callback, priority=priority, registration_order=order)
        )
        actions.sort(key=lambda a: (a.priority, a.registration_order))

    def remove_action(self, hook: str, callback: Callable[..., Any]) -> bool:
        """
        Detach a callback from a hook.

        Returns:
            True if the callback was attached
        """
        actions = self._actions.get(hook, [])
        remaining = [a for a in actions if a.callback is not callback]
        self._actions[hook] = remaining
        return len(remaining) != len(actions)

    def has_action(self, hook: str) -> bool:
        return bool(self._actions.get(hook))

    def do_action(self, hook: str, *args: Any) -> None:
        """
        Run every callback attached to a hook.

        Args:
            hook: Hook name
            *args: Arguments passed to each callback
        """
        # Snapshot so callbacks may attach further actions
        for action in list(self._actions.get(hook, [])):
            action.callback(*args)

    def register_activation_hook(
        self, basename: str, callback: Callable[[], Any]
    ) -> None:
        """Attach a callback fired when the plugin is activated."""
        self.add_action(f"activate_{basename}", callback)

    def register_deactivation_hook(
        self, basename: str, callback: Callable[[], Any]
    ) -> None:
        """Attach a callback fired when the plugin is deactivated."""
        self.add_action(f"deactivate_{basename}", callback)
