"""
Rewrite Adapter.

This module turns collected routes into host rewrite rules.

Key features:
- {param} placeholders become capture groups
- Query vars namespaced with the plugin prefix
- One rule per distinct path (rewrite rules ignore the HTTP method)
"""

import re
from urllib.parse import quote

from myplugin.core.context import PluginContext
from myplugin.host.ports import RewriteRule, RewriteRules
from myplugin.routing.router import Route

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class RewriteAdapter:
    """Registers routes as rewrite rules on the host."""

    def __init__(self, context: PluginContext, rewrites: RewriteRules):
        self.context = context
        self.rewrites = rewrites

    def compile(self, route: Route) -> RewriteRule:
        """
        Build the rewrite rule for a route.

        Args:
            route: Declared route

        Returns:
            RewriteRule placed at the top of the rule table
        """
        params: list[str] = []
        pattern_parts: list[str] = []
        last = 0

        for match in _PLACEHOLDER.finditer(route.path):
            pattern_parts.append(re.escape(route.path[last : match.start()]))
            pattern_parts.append("([^/]+)")
            params.append(match.group(1))
            last = match.end()
        pattern_parts.append(re.escape(route.path[last:]))

        pattern = "".join(pattern_parts)
        regex = f"^{pattern}/?$" if pattern else "^/?$"

        route_key = route.route_name or route.path or "/"
        query = f"index.php?{self.context.hook('route')}={quote(route_key, safe='/.')}"
        for index, param in enumerate(params, start=1):
            query += f"&{self.context.hook(param)}=$matches[{index}]"

        return RewriteRule(regex=regex, query=query, position="top")

    def register_rewrite_rules(self, routes: list[Route]) -> list[RewriteRule]:
        """
        Register every route with the host.

        Args:
            routes: Collected routes

        Returns:
            Rules registered, in declaration order
        """
        registered: list[RewriteRule] = []
        seen: set[str] = set()

        for route in routes:
            rule = self.compile(route)
            if rule.regex in seen:
                continue
            seen.add(rule.regex)

            self.rewrites.add(rule.regex, rule.query, rule.position)
            registered.append(rule)

        return registered
