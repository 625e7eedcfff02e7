from __future__ import annotations

import io

from conftest import RecordingEmitter

from wprig.core.config import ThemeConfig
from wprig.core.context import PageContext, ScriptRegistry, StyleRegistry, ThemeOptions
from wprig.core.hooks import HookRegistry
from wprig.theme import BODY_CLASS_HOOK, HEAD_HOOK, Theme, register_theme_hooks, theme_from_config


def _theme(styles: StyleRegistry, emitter: RecordingEmitter) -> tuple[Theme, HookRegistry]:
    scripts = ScriptRegistry()
    scripts.register("wprig-navigation", "navigation.js", "1", defer=True)
    theme = Theme(
        options=ThemeOptions(colorscheme="dark", panel_1=3),
        styles=styles,
        scripts=scripts,
        emitter=emitter,
    )
    hooks = HookRegistry()
    register_theme_hooks(hooks, theme)
    return theme, hooks


def test_register_subscribes_render_hooks(styles: StyleRegistry, emitter: RecordingEmitter) -> None:
    _, hooks = _theme(styles, emitter)
    assert hooks.has_filter(BODY_CLASS_HOOK)
    assert hooks.has_filter("script_loader_tag")
    assert hooks.has_action(HEAD_HOOK)


def test_body_class_filter(styles: StyleRegistry, emitter: RecordingEmitter) -> None:
    _, hooks = _theme(styles, emitter)
    result = hooks.apply_filters(BODY_CLASS_HOOK, ["home"], PageContext(is_singular=True))
    assert result == ["home", "colors-dark"]


def test_script_loader_tag_filter(styles: StyleRegistry, emitter: RecordingEmitter) -> None:
    _, hooks = _theme(styles, emitter)
    tag = '<script src="navigation.js?ver=1"></script>\n'
    result = hooks.apply_filters("script_loader_tag", tag, "wprig-navigation")
    assert result == '<script src="navigation.js?ver=1" defer></script>\n'


def test_head_action_writes_preloads_then_print(
    styles: StyleRegistry, emitter: RecordingEmitter
) -> None:
    theme, hooks = _theme(styles, emitter)
    stream = io.StringIO()
    hooks.do_action(HEAD_HOOK, PageContext(is_front_page=True), stream)

    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert 'id="wprig-front-page-preload"' in lines[0]
    assert 'id="print-styles"' in lines[1]
    assert theme.panel_count() == 1


def test_theme_from_config_applies_sections(emitter: RecordingEmitter) -> None:
    config = ThemeConfig.model_validate(
        {
            "options": {"panel_1": 1, "panel_2": 1, "panel_3": 1},
            "sections": 2,
            "styles": {"wprig-front-page": {"src": "front-page.css", "version": 3}},
        }
    )
    theme = theme_from_config(config, emitter=emitter)

    assert theme.panel_count() == 2
    assert theme.styles.get("wprig-front-page").preload_uri == "front-page.css?ver=3"
