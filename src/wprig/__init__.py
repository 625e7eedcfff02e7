"""Presentation helpers for the wprig theme."""

from __future__ import annotations

from wprig.body_classes import body_classes, sanitize_colorscheme
from wprig.core import (
    HookRegistry,
    LoggingEmitter,
    MissingStyleRegistration,
    NullEmitter,
    PageContext,
    ScriptRegistry,
    StyleRegistry,
    StyleRegistryEntry,
    ThemeConfig,
    ThemeConfigError,
    ThemeError,
    ThemeOptions,
    load_theme_config,
)
from wprig.head import (
    add_body_style,
    add_print_stylesheet,
    collect_preloads,
    preload_stylesheet_uri,
)
from wprig.panels import is_frontpage, panel_count
from wprig.script_loader import (
    ScriptTag,
    add_loading_attribute,
    filter_script_loader_tag,
    parse_script_tag,
)
from wprig.theme import Theme, register_theme_hooks, theme_from_config
from wprig.version import get_version


__version__ = get_version()

__all__ = [
    "HookRegistry",
    "LoggingEmitter",
    "MissingStyleRegistration",
    "NullEmitter",
    "PageContext",
    "ScriptRegistry",
    "ScriptTag",
    "StyleRegistry",
    "StyleRegistryEntry",
    "Theme",
    "ThemeConfig",
    "ThemeConfigError",
    "ThemeError",
    "ThemeOptions",
    "__version__",
    "add_body_style",
    "add_loading_attribute",
    "add_print_stylesheet",
    "body_classes",
    "collect_preloads",
    "filter_script_loader_tag",
    "is_frontpage",
    "load_theme_config",
    "panel_count",
    "parse_script_tag",
    "preload_stylesheet_uri",
    "register_theme_hooks",
    "sanitize_colorscheme",
    "theme_from_config",
]
