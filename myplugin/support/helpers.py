"""
Output helpers.

Escaping for text rendered into host admin screens, HTML filtering, and
translation in the plugin text domain.
"""

import html
import json
from urllib.parse import urlsplit

import nh3

from myplugin.core.context import PluginContext
from myplugin.host import Host

SAFE_URL_SCHEMES = ("http", "https", "mailto", "ftp", "")


def escape_html(text: str) -> str:
    """Escape for HTML text content."""
    return html.escape(text, quote=False)


def escape_attr(text: str) -> str:
    """Escape for an HTML attribute value."""
    return html.escape(text, quote=True)


def escape_url(url: str) -> str:
    """
    Escape a URL for output.

    Args:
        url: URL to escape

    Returns:
        Attribute-escaped URL, or '' for unsafe schemes (e.g., 'javascript:')
    """
    url = url.strip()
    if urlsplit(url).scheme.lower() not in SAFE_URL_SCHEMES:
        return ""
    return html.escape(url, quote=True)


def escape_js(text: str) -> str:
    """Escape for a JavaScript string literal (without surrounding quotes)."""
    return json.dumps(text)[1:-1].replace("<", "\\u003c").replace(">", "\\u003e")


def translate(context: PluginContext, host: Host, text: str) -> str:
    """Translate text in the plugin text domain."""
    return host.environment.translate(text, context.text_domain)


# Inline markup allowed in comment-like data ('data' context)
DATA_TAGS = {
    "a",
    "abbr",
    "acronym",
    "b",
    "blockquote",
    "cite",
    "code",
    "del",
    "em",
    "i",
    "q",
    "s",
    "strike",
    "strong",
}
DATA_ATTRIBUTES = {
    "a": {"href", "title"},
    "abbr": {"title"},
    "acronym": {"title"},
    "blockquote": {"cite"},
    "del": {"datetime"},
    "q": {"cite"},
}


def kses(html_text: str, context: str = "post") -> str:
    """
    Filter HTML to an allowlist of tags and attributes.

    Args:
        html_text: HTML to filter
        context: 'post' (post content markup), 'data' (inline markup
            only) or 'strip' (no tags). Unknown contexts use 'post'.

    Returns:
        Filtered HTML
    """
    if context == "data":
        return nh3.clean(
            html_text, tags=DATA_TAGS, attributes=DATA_ATTRIBUTES, link_rel=None
        )
    if context == "strip":
        return nh3.clean(html_text, tags=set(), attributes={}, link_rel=None)
    return nh3.clean(html_text, link_rel=None)
