"""Utilities for rendering head markup partials."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape
from requests.utils import requote_uri


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "partials"

ALLOWED_PROTOCOLS = frozenset(
    {"http", "https", "ftp", "ftps", "mailto", "news", "irc", "gopher", "nntp", "feed", "telnet"}
)


def esc_attr(value: Any) -> Markup:
    """Escape a value for use inside a double-quoted HTML attribute."""
    return escape("" if value is None else str(value))


def esc_url(url: Any) -> Markup:
    """Normalise and escape a URL for an ``href``/``src`` attribute.

    Unsafe characters are percent-encoded and URLs using a protocol outside
    :data:`ALLOWED_PROTOCOLS` collapse to an empty string.
    """
    text = "" if url is None else str(url).strip()
    if not text:
        return Markup("")
    scheme = urlsplit(text).scheme.lower()
    if scheme and scheme not in ALLOWED_PROTOCOLS:
        return Markup("")
    return escape(requote_uri(text))


class MarkupFormatter:
    """Render HTML partials using Jinja2 with attribute-aware filters."""

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters.setdefault("esc_attr", esc_attr)
        self.env.filters.setdefault("esc_url", esc_url)

    def render(self, name: str, **context: Any) -> str:
        """Render the partial ``<name>.html`` with the given context."""
        template = self.env.get_template(f"{name}.html")
        return template.render(**context)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return lambda **context: self.render(name, **context)


__all__ = ["ALLOWED_PROTOCOLS", "TEMPLATE_DIR", "MarkupFormatter", "esc_attr", "esc_url"]
