"""Stylesheet preload and print links emitted into the document head.

Template-specific stylesheets are loaded from the body, so the head hints the
browser to fetch the ones the current view will need. The set is skipped in
AMP mode, where stylesheets are inlined.
"""

from __future__ import annotations

from collections.abc import Iterable
import sys
from typing import TextIO

from .core.context import PRIMARY_SIDEBAR, PageContext, StyleRegistry, ThemeOptions
from .core.diagnostics import DiagnosticEmitter, LoggingEmitter
from .core.exceptions import MissingStyleRegistration
from .core.hooks import HookRegistry
from .core.markup import MarkupFormatter
from .panels import panel_count


DEFAULT_PREFIX = "wprig"
PRINT_STYLES = "print-styles"


def preload_stylesheet_uri(styles: StyleRegistry, handle: str) -> str:
    """Return the cache-busted URI of a registered stylesheet."""
    return styles.get(handle).preload_uri


def _wanted_handles(
    context: PageContext,
    options: ThemeOptions,
    hooks: HookRegistry | None,
) -> Iterable[str]:
    if context.is_singular and not context.is_front_page:
        yield "singular"

    if context.is_sidebar_active(PRIMARY_SIDEBAR) and not context.is_front_page:
        yield "widgets"

    if (
        not context.password_required
        and not context.is_front_page
        and context.is_singular
        and (context.comments_open or context.comment_count > 0)
    ):
        yield "comments"

    if (context.is_front_page and panel_count(options, hooks) != 0) or context.customize_preview:
        yield "front-page"


def collect_preloads(
    context: PageContext,
    options: ThemeOptions,
    styles: StyleRegistry,
    hooks: HookRegistry | None = None,
    *,
    prefix: str = DEFAULT_PREFIX,
    emitter: DiagnosticEmitter | None = None,
) -> dict[str, str]:
    """Return the stylesheets to preload, keyed by registered handle."""
    if context.is_amp:
        return {}

    diagnostics = emitter or LoggingEmitter()
    preloads: dict[str, str] = {}
    for name in _wanted_handles(context, options, hooks):
        handle = f"{prefix}-{name}"
        try:
            preloads[handle] = preload_stylesheet_uri(styles, handle)
        except MissingStyleRegistration as exc:
            diagnostics.warning(f"Skipping preload for unregistered stylesheet '{handle}'", exc)
            continue
        diagnostics.event("preload", {"handle": handle, "href": preloads[handle]})
    return preloads


def render_preloads(preloads: dict[str, str], formatter: MarkupFormatter | None = None) -> str:
    """Render one preload ``<link>`` line per entry."""
    formatter = formatter or MarkupFormatter()
    return "".join(
        formatter.preload_link(handle=handle, href=href) + "\n"
        for handle, href in preloads.items()
    )


def add_body_style(
    context: PageContext,
    options: ThemeOptions,
    styles: StyleRegistry,
    hooks: HookRegistry | None = None,
    *,
    prefix: str = DEFAULT_PREFIX,
    stream: TextIO | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Write the preload links for the current view and return the markup."""
    preloads = collect_preloads(
        context, options, styles, hooks, prefix=prefix, emitter=emitter
    )
    markup = render_preloads(preloads)
    if markup:
        (stream or sys.stdout).write(markup)
    return markup


def add_print_stylesheet(
    styles: StyleRegistry,
    *,
    prefix: str = DEFAULT_PREFIX,
    stream: TextIO | None = None,
    emitter: DiagnosticEmitter | None = None,
    formatter: MarkupFormatter | None = None,
) -> str:
    """Write the print-only stylesheet link and return the markup."""
    handle = f"{prefix}-{PRINT_STYLES}"
    try:
        href = preload_stylesheet_uri(styles, handle)
    except MissingStyleRegistration as exc:
        (emitter or LoggingEmitter()).warning(
            f"Skipping print stylesheet, '{handle}' is not registered", exc
        )
        return ""

    formatter = formatter or MarkupFormatter()
    markup = formatter.print_stylesheet(href=href) + "\n"
    (stream or sys.stdout).write(markup)
    return markup


__all__ = [
    "DEFAULT_PREFIX",
    "PRINT_STYLES",
    "add_body_style",
    "add_print_stylesheet",
    "collect_preloads",
    "preload_stylesheet_uri",
    "render_preloads",
]
