"""Tests for output helpers."""

import pytest

from myplugin.core.context import PluginContext
from myplugin.host.memory import StaticEnvironment, create_memory_host
from myplugin.support.helpers import (
    escape_attr,
    escape_html,
    escape_js,
    escape_url,
    kses,
    translate,
)


class TestEscaping:
    """Test output escaping."""

    def test_escape_html(self):
        assert escape_html('<a href="x">&</a>') == '&lt;a href="x"&gt;&amp;&lt;/a&gt;'

    def test_escape_attr(self):
        assert escape_attr('say "hi"') == "say &quot;hi&quot;"

    @pytest.mark.parametrize(
        "url",
        ["javascript:alert(1)", " JavaScript:alert(1)", "data:text/html,x"],
    )
    def test_escape_url_rejects_unsafe_schemes(self, url):
        assert escape_url(url) == ""

    def test_escape_url(self):
        assert escape_url("https://example.test/?a=1&b=2") == (
            "https://example.test/?a=1&amp;b=2"
        )
        assert escape_url("/relative") == "/relative"

    def test_escape_js(self):
        assert escape_js('He said "</script>"') == (
            'He said \\"\\u003c/script\\u003e\\"'
        )


class TestKses:
    """Test HTML allowlist filtering."""

    def test_post(self):
        """Post markup survives; scripts and event handlers do not."""
        html_text = (
            '<p onclick="steal()">Hi <script>alert(1)</script>'
            "<strong>there</strong></p>"
        )

        assert kses(html_text) == "<p>Hi <strong>there</strong></p>"

    def test_data(self):
        """Only inline markup and its attributes survive."""
        html_text = (
            '<p><strong>Bold</strong> '
            '<a href="https://example.test" onclick="steal()">link</a>'
            '<img src="x.png"></p>'
        )

        assert kses(html_text, "data") == (
            '<strong>Bold</strong> <a href="https://example.test">link</a>'
        )

    def test_strip(self):
        html_text = "<p>Hello <b>world</b><script>bad()</script></p>"

        assert kses(html_text, "strip") == "Hello world"

    def test_unknown_context_uses_post(self):
        assert kses("<em>x</em>", "galaxy") == "<em>x</em>"


def test_translate():
    host = create_memory_host(environment=StaticEnvironment(translations={"Save": "Sichern"}))
    context = PluginContext.create(
        {
            "file": "/plugins/my-plugin/plugin.py",
            "slug": "my-plugin",
            "prefix": "mp_",
            "text_domain": "my-plugin",
            "version": "1.0.0",
        },
        host,
    )

    assert translate(context, host, "Save") == "Sichern"
    assert translate(context, host, "Cancel") == "Cancel"
