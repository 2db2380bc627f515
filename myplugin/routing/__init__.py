"""
Routing declarations.

Collects routes from the plugin routes file and registers them as host
rewrite rules. Request dispatch belongs to the framework.
"""

from myplugin.routing.adapter import RewriteAdapter
from myplugin.routing.loader import LoaderError, load_routes
from myplugin.routing.router import MinimalRouter, Route

__all__ = ["LoaderError", "MinimalRouter", "RewriteAdapter", "Route", "load_routes"]
