from __future__ import annotations

from pathlib import Path
import textwrap

import pytest

from wprig.core.config import ThemeConfig, load_theme_config
from wprig.core.exceptions import ThemeConfigError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "theme.yml"
    path.write_text(textwrap.dedent(content).strip() + "\n", encoding="utf-8")
    return path


def test_load_theme_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        options:
          colorscheme: dark
          panel_1: 12
        styles:
          wprig-singular:
            src: /css/singular.css
            version: 1.2
        scripts:
          wprig-navigation:
            src: /js/navigation.js
            async: true
        page:
          is_singular: true
          active_sidebars: [sidebar-1]
        """,
    )
    config = load_theme_config(path)

    assert config.prefix == "wprig"
    assert config.theme_options().get("colorscheme") == "dark"
    assert config.style_registry().get("wprig-singular").preload_uri == "/css/singular.css?ver=1.2"

    scripts = config.script_registry()
    assert scripts.get_data("wprig-navigation", "async") is True
    assert scripts.get_data("wprig-navigation", "defer") is False

    context = config.page.to_context()
    assert context.is_singular
    assert context.is_sidebar_active("sidebar-1")


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config = load_theme_config(_write(tmp_path, ""))
    assert config == ThemeConfig()


@pytest.mark.parametrize(
    "content",
    [
        "options: [unclosed",
        "- just\n- a list",
        "unknown_key: 1",
        "page:\n  comment_count: -1",
        "styles:\n  wprig-singular:\n    version: 1",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, content: str) -> None:
    with pytest.raises(ThemeConfigError):
        load_theme_config(_write(tmp_path, content))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ThemeConfigError) as excinfo:
        load_theme_config(tmp_path / "absent.yml")
    assert isinstance(excinfo.value.__cause__, OSError)
