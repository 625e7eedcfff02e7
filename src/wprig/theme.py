"""Hook wiring subscribing the theme helpers to the host render points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from .body_classes import body_classes
from .core.config import ThemeConfig
from .core.context import PageContext, ScriptRegistry, StyleRegistry, ThemeOptions
from .core.diagnostics import DiagnosticEmitter, LoggingEmitter
from .core.hooks import HookRegistry, hooked
from .head import DEFAULT_PREFIX, add_body_style, add_print_stylesheet
from .panels import FRONT_PAGE_SECTIONS_HOOK, panel_count
from .script_loader import SCRIPT_LOADER_TAG_HOOK, filter_script_loader_tag


BODY_CLASS_HOOK = "body_class"
HEAD_HOOK = "wp_head"


@dataclass
class Theme:
    """Theme-wide configuration bound to a hook registry.

    Hooks receive the page context as an extra argument:
    ``apply_filters("body_class", classes, context)`` and
    ``do_action("wp_head", context, stream)``.
    """

    options: ThemeOptions = field(default_factory=ThemeOptions)
    styles: StyleRegistry = field(default_factory=StyleRegistry)
    scripts: ScriptRegistry = field(default_factory=ScriptRegistry)
    prefix: str = DEFAULT_PREFIX
    emitter: DiagnosticEmitter = field(default_factory=LoggingEmitter)
    hooks: HookRegistry | None = None

    def register(self, hooks: HookRegistry) -> HookRegistry:
        """Subscribe the theme callbacks to ``hooks``."""
        self.hooks = hooks
        hooks.collect_from(self)
        return hooks

    @hooked(BODY_CLASS_HOOK, accepted_args=2)
    def body_class(self, classes: list[str], context: PageContext) -> list[str]:
        return body_classes(classes, context, self.options)

    @hooked(SCRIPT_LOADER_TAG_HOOK, accepted_args=2)
    def script_loader_tag(self, tag: str, handle: str) -> str:
        return filter_script_loader_tag(tag, handle, self.scripts, emitter=self.emitter)

    # Preloads run before the print stylesheet: callbacks sharing a priority
    # are collected in attribute name order.
    @hooked(HEAD_HOOK, accepted_args=2)
    def head_preloads(self, context: PageContext, stream: TextIO | None = None) -> None:
        add_body_style(
            context,
            self.options,
            self.styles,
            self.hooks,
            prefix=self.prefix,
            stream=stream,
            emitter=self.emitter,
        )

    @hooked(HEAD_HOOK, accepted_args=2)
    def head_print_stylesheet(self, context: PageContext, stream: TextIO | None = None) -> None:
        _ = context
        add_print_stylesheet(self.styles, prefix=self.prefix, stream=stream, emitter=self.emitter)

    def panel_count(self) -> int:
        """Return the number of populated front-page panels."""
        return panel_count(self.options, self.hooks)


def register_theme_hooks(hooks: HookRegistry, theme: Theme | None = None) -> Theme:
    """Create (or reuse) a theme and subscribe it to ``hooks``."""
    theme = theme or Theme()
    theme.register(hooks)
    return theme


def theme_from_config(
    config: ThemeConfig,
    hooks: HookRegistry | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> Theme:
    """Build a theme from configuration and subscribe it to ``hooks``."""
    hooks = hooks if hooks is not None else HookRegistry()
    sections = config.sections
    if sections is not None:
        hooks.add_filter(FRONT_PAGE_SECTIONS_HOOK, lambda _default: sections)

    theme = Theme(
        options=config.theme_options(),
        styles=config.style_registry(),
        scripts=config.script_registry(),
        prefix=config.prefix,
        emitter=emitter or LoggingEmitter(),
    )
    return register_theme_hooks(hooks, theme)


__all__ = [
    "BODY_CLASS_HOOK",
    "HEAD_HOOK",
    "Theme",
    "register_theme_hooks",
    "theme_from_config",
]
