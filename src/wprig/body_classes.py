"""Body class computation for the theme's ``<body>`` element."""

from __future__ import annotations

from collections.abc import Iterable

from .core.context import PRIMARY_SIDEBAR, PageContext, ThemeOptions


DEFAULT_COLORSCHEME = "light"
COLORSCHEMES = ("light", "dark", "custom")


def sanitize_colorscheme(value: object) -> str:
    """Return ``value`` when it names a known colour scheme, else ``light``."""
    if isinstance(value, str) and value in COLORSCHEMES:
        return value
    return DEFAULT_COLORSCHEME


def body_classes(
    classes: Iterable[str],
    context: PageContext,
    options: ThemeOptions,
) -> list[str]:
    """Append the theme's state classes to the existing body classes."""
    result = list(classes)

    # Blogs with more than one published author.
    if context.is_multi_author:
        result.append("group-blog")

    if not context.is_singular:
        result.append("hfeed")

    if context.customize_preview:
        result.append("wprig-customizer")

    if context.is_front_page and context.show_on_front != "posts":
        result.append("wprig-front-page")

    if context.has_header_image:
        result.append("has-header-image")

    if context.is_sidebar_active(PRIMARY_SIDEBAR) and not context.is_page:
        result.append("has-sidebar")

    if context.is_page or context.is_archive:
        if options.get("page_layout") == "one-column":
            result.append("page-one-column")
        else:
            result.append("page-two-column")

    # Site title and tagline hidden from the customizer.
    if context.header_textcolor == "blank":
        result.append("title-tagline-hidden")

    colors = sanitize_colorscheme(options.get("colorscheme", DEFAULT_COLORSCHEME))
    result.append(f"colors-{colors}")

    return result


__all__ = ["COLORSCHEMES", "DEFAULT_COLORSCHEME", "body_classes", "sanitize_colorscheme"]
