"""Host-facing primitives shared by the theme helpers."""

from __future__ import annotations

from .config import PageConfig, ScriptConfig, StyleConfig, ThemeConfig, load_theme_config
from .context import (
    PRIMARY_SIDEBAR,
    PageContext,
    ScriptRegistration,
    ScriptRegistry,
    StyleRegistry,
    StyleRegistryEntry,
    ThemeOptions,
)
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import MissingStyleRegistration, ThemeConfigError, ThemeError
from .hooks import DEFAULT_PRIORITY, HookRegistry, hooked


__all__ = [
    "DEFAULT_PRIORITY",
    "PRIMARY_SIDEBAR",
    "DiagnosticEmitter",
    "HookRegistry",
    "LoggingEmitter",
    "MissingStyleRegistration",
    "NullEmitter",
    "PageConfig",
    "PageContext",
    "ScriptConfig",
    "ScriptRegistration",
    "ScriptRegistry",
    "StyleConfig",
    "StyleRegistry",
    "StyleRegistryEntry",
    "ThemeConfig",
    "ThemeConfigError",
    "ThemeError",
    "ThemeOptions",
    "hooked",
    "load_theme_config",
]
