"""
Minimal Router.

A route collector used where the full framework is not booted (plugin
activation). It records declarations only; it never dispatches.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


@dataclass
class Route:
    """
    A declared route.

    Attributes:
        methods: Upper-case HTTP methods
        path: Normalized path without leading/trailing slashes ('' is root)
        action: Handler reference, opaque to the collector
        route_name: Optional route name
    """

    methods: tuple[str, ...]
    path: str
    action: Any
    route_name: str | None = None

    def name(self, route_name: str) -> "Route":
        """Name the route. Returns the route for chaining."""
        self.route_name = route_name
        return self


def _join(*segments: str) -> str:
    return "/".join(s.strip("/") for s in segments if s.strip("/"))


class MinimalRouter:
    """Collects routes declared by a routes file."""

    def __init__(self):
        self._routes: list[Route] = []
        self._prefixes: list[str] = []

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    def match(self, methods: Iterable[str], path: str, action: Any = None) -> Route:
        """
        Declare a route for several methods.

        Args:
            methods: HTTP methods
            path: Route path, may contain {param} placeholders
            action: Handler reference

        Returns:
            The declared Route
        """
        route = Route(
            methods=tuple(m.upper() for m in methods),
            path=_join(*self._prefixes, path),
            action=action,
        )
        self._routes.append(route)
        return route

    def get(self, path: str, action: Any = None) -> Route:
        return self.match(["GET"], path, action)

    def post(self, path: str, action: Any = None) -> Route:
        return self.match(["POST"], path, action)

    def put(self, path: str, action: Any = None) -> Route:
        return self.match(["PUT"], path, action)

    def patch(self, path: str, action: Any = None) -> Route:
        return self.match(["PATCH"], path, action)

    def delete(self, path: str, action: Any = None) -> Route:
        return self.match(["DELETE"], path, action)

    def any(self, path: str, action: Any = None) -> Route:
        return self.match(HTTP_METHODS, path, action)

    def group(self, prefix: str, callback: Callable[["MinimalRouter"], Any]) -> None:
        """
        Declare routes under a shared path prefix.

        Args:
            prefix: Path prefix for every route declared in callback
            callback: Called with this router
        """
        self._prefixes.append(prefix)
        try:
            callback(self)
        finally:
            self._prefixes.pop()
