"""Configuration models describing a theme and a page to preview.

ThemeConfig

`prefix` (`str`)
: Prefix of the theme's registered asset handles (`wprig-singular`, ...).

`options` (`dict[str, Any]`)
: Theme modifications such as `colorscheme`, `page_layout` or `panel_1`.

`sections` (`int | None`)
: Override for the number of front-page sections. When set, it is applied
  through the `wprig_front_page_sections` filter.

`styles` (`dict[str, StyleConfig]`)
: Registered stylesheets keyed by handle.

`scripts` (`dict[str, ScriptConfig]`)
: Registered scripts keyed by handle, with their `async`/`defer` flags.

`page` (`PageConfig`)
: Query flags of the page being rendered.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .context import PageContext, ScriptRegistry, StyleRegistry, ThemeOptions
from .exceptions import ThemeConfigError


class StyleConfig(BaseModel):
    """Stylesheet registration."""

    model_config = ConfigDict(extra="forbid")

    src: str
    version: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def _stringify_version(cls, value: Any) -> Any:
        if isinstance(value, int | float):
            return str(value)
        return value


class ScriptConfig(StyleConfig):
    """Script registration with loader flags."""

    src: str = ""
    async_: bool = Field(default=False, alias="async")
    defer: bool = False


class PageConfig(BaseModel):
    """Query flags of the page being rendered."""

    model_config = ConfigDict(extra="forbid")

    is_front_page: bool = False
    is_home: bool = False
    is_singular: bool = False
    is_archive: bool = False
    is_page: bool = False
    is_multi_author: bool = False
    active_sidebars: list[str] = Field(default_factory=list)
    is_amp: bool = False
    comments_open: bool = False
    comment_count: int = Field(default=0, ge=0)
    password_required: bool = False
    customize_preview: bool = False
    has_header_image: bool = False
    header_textcolor: str = ""
    show_on_front: str = "posts"

    def to_context(self) -> PageContext:
        """Build the immutable page context handed to the helpers."""
        data = self.model_dump()
        data["active_sidebars"] = frozenset(self.active_sidebars)
        return PageContext(**data)


class ThemeConfig(BaseModel):
    """Theme configuration loaded from YAML."""

    model_config = ConfigDict(extra="forbid")

    prefix: str = "wprig"
    options: dict[str, Any] = Field(default_factory=dict)
    sections: int | None = None
    styles: dict[str, StyleConfig] = Field(default_factory=dict)
    scripts: dict[str, ScriptConfig] = Field(default_factory=dict)
    page: PageConfig = Field(default_factory=PageConfig)

    def theme_options(self) -> ThemeOptions:
        return ThemeOptions(self.options)

    def style_registry(self) -> StyleRegistry:
        registry = StyleRegistry()
        for handle, style in self.styles.items():
            registry.register(handle, style.src, style.version)
        return registry

    def script_registry(self) -> ScriptRegistry:
        registry = ScriptRegistry()
        for handle, script in self.scripts.items():
            registry.register(
                handle,
                script.src,
                script.version,
                **{"async": script.async_, "defer": script.defer},
            )
        return registry


def load_theme_config(path: Path | str) -> ThemeConfig:
    """Read and validate a YAML theme configuration file."""
    source = Path(path)
    try:
        payload = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ThemeConfigError(f"Unable to read theme configuration '{source}'") from exc
    except yaml.YAMLError as exc:
        raise ThemeConfigError(f"Invalid YAML in theme configuration '{source}'") from exc

    if not isinstance(payload, dict):
        raise ThemeConfigError(f"Theme configuration '{source}' must be a mapping")

    try:
        return ThemeConfig.model_validate(payload)
    except ValidationError as exc:
        raise ThemeConfigError(f"Invalid theme configuration '{source}': {exc}") from exc


__all__ = [
    "PageConfig",
    "ScriptConfig",
    "StyleConfig",
    "ThemeConfig",
    "load_theme_config",
]
