"""Front-page panel helpers."""

from __future__ import annotations

from collections.abc import Callable

from .core.context import PageContext, ThemeOptions
from .core.hooks import HookRegistry


FRONT_PAGE_SECTIONS_HOOK = "wprig_front_page_sections"
DEFAULT_FRONT_PAGE_SECTIONS = 4


def front_page_sections(hooks: HookRegistry | None = None) -> int:
    """Return the number of front-page sections after filtering."""
    if hooks is None:
        return DEFAULT_FRONT_PAGE_SECTIONS
    return int(hooks.apply_filters(FRONT_PAGE_SECTIONS_HOOK, DEFAULT_FRONT_PAGE_SECTIONS))


def panel_count(
    options: ThemeOptions,
    hooks: HookRegistry | None = None,
    *,
    has_panel: Callable[[int], object] | None = None,
) -> int:
    """Count the front-page panels holding content.

    Panels are numbered from 1 up to the filtered section count. By default a
    panel counts when the ``panel_<n>`` theme option is truthy; ``has_panel``
    replaces that check.
    """
    if has_panel is None:
        def has_panel(index: int) -> object:
            return options.get(f"panel_{index}")

    total = front_page_sections(hooks)
    return sum(1 for index in range(1, total + 1) if has_panel(index))


def is_frontpage(context: PageContext) -> bool:
    """Return True on a static front page, False on the blog posts index."""
    return context.is_front_page and not context.is_home


__all__ = [
    "DEFAULT_FRONT_PAGE_SECTIONS",
    "FRONT_PAGE_SECTIONS_HOOK",
    "front_page_sections",
    "is_frontpage",
    "panel_count",
]
