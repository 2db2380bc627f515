"""
Tests for route collection and rewrite rules.

This test suite covers:
1. Route declaration and grouping
2. Route to rewrite rule compilation
3. Routes file loading
"""

import sys
import types

import pytest

from myplugin.core.context import PluginContext
from myplugin.host.memory import create_memory_host
from myplugin.routing import (
    LoaderError,
    MinimalRouter,
    RewriteAdapter,
    load_routes,
)

CONFIG = {
    "file": "/var/www/wp-content/plugins/my-plugin/plugin.py",
    "slug": "my-plugin",
    "prefix": "mp_",
    "text_domain": "my-plugin",
    "version": "1.0.0",
}


@pytest.fixture
def host():
    return create_memory_host()


@pytest.fixture
def adapter(host):
    return RewriteAdapter(PluginContext.create(CONFIG, host), host.rewrites)


class TestMinimalRouter:
    """Test route declaration."""

    def test_methods(self):
        router = MinimalRouter()
        router.get("/a")
        router.post("/b")
        router.put("/c")
        router.patch("/d")
        router.delete("/e")

        assert [r.methods for r in router.routes] == [
            ("GET",),
            ("POST",),
            ("PUT",),
            ("PATCH",),
            ("DELETE",),
        ]

    def test_any_and_match(self):
        router = MinimalRouter()

        assert router.any("/x").methods == ("GET", "POST", "PUT", "PATCH", "DELETE")
        assert router.match(["get", "post"], "/y").methods == ("GET", "POST")

    def test_paths_normalized(self):
        router = MinimalRouter()

        assert router.get("/products/").path == "products"
        assert router.get("/").path == ""

    def test_name_chains(self):
        route = MinimalRouter().get("/products", "index").name("products.index")

        assert route.route_name == "products.index"
        assert route.action == "index"

    def test_group(self):
        router = MinimalRouter()

        def account(r):
            r.get("/dashboard")
            r.group("settings", lambda inner: inner.post("/save"))

        router.group("/account/", account)
        router.get("/after")

        assert [r.path for r in router.routes] == [
            "account/dashboard",
            "account/settings/save",
            "after",
        ]


class TestRewriteAdapter:
    """Test rewrite rule compilation."""

    def test_static_route(self, adapter):
        rule = adapter.compile(MinimalRouter().get("/products"))

        assert rule.regex == "^products/?$"
        assert rule.query == "index.php?mp_route=products"
        assert rule.position == "top"

    def test_root_route(self, adapter):
        rule = adapter.compile(MinimalRouter().get("/"))

        assert rule.regex == "^/?$"
        assert rule.query == "index.php?mp_route=/"

    def test_parameters(self, adapter):
        route = MinimalRouter().get("/shop/{category}/{slug}").name("shop.item")

        rule = adapter.compile(route)

        assert rule.regex == "^shop/([^/]+)/([^/]+)/?$"
        assert rule.query == (
            "index.php?mp_route=shop.item"
            "&mp_category=$matches[1]&mp_slug=$matches[2]"
        )

    def test_register_dedupes_paths(self, adapter, host):
        router = MinimalRouter()
        router.get("/products/{id}").name("products.show")
        router.post("/products/{id}").name("products.update")

        registered = adapter.register_rewrite_rules(router.routes)

        assert len(registered) == 1
        assert host.rewrites.rules() == registered


class TestLoadRoutes:
    """Test routes file loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "web.py"
        path.write_text("def routes(router):\n    router.get('/a')\n")

        callback = load_routes(path)
        router = MinimalRouter()
        callback(router)

        assert [r.path for r in router.routes] == ["a"]
        assert "myplugin_routes_web" not in sys.modules

    def test_without_routes(self, tmp_path):
        path = tmp_path / "web.py"
        path.write_text("x = 1\n")

        assert load_routes(path) is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoaderError, match="not found"):
            load_routes(tmp_path / "web.py")

    def test_import_failure(self, tmp_path):
        path = tmp_path / "web.py"
        path.write_text("import does_not_exist_anywhere\n")

        with pytest.raises(LoaderError, match="Failed to load"):
            load_routes(path)

    def test_existing_module_restored(self, tmp_path, monkeypatch):
        """A module already registered under the same name is left in place."""
        existing = types.ModuleType("myplugin_routes_web")
        monkeypatch.setitem(sys.modules, "myplugin_routes_web", existing)
        path = tmp_path / "web.py"
        path.write_text("def routes(router):\n    router.get('/a')\n")

        assert load_routes(path) is not None
        assert sys.modules["myplugin_routes_web"] is existing
