"""Request-scoped host state shared by the theme helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import MissingStyleRegistration


PRIMARY_SIDEBAR = "sidebar-1"


@dataclass(frozen=True, slots=True)
class PageContext:
    """Read-only snapshot of the query flags for the page being rendered."""

    is_front_page: bool = False
    is_home: bool = False
    is_singular: bool = False
    is_archive: bool = False
    is_page: bool = False
    is_multi_author: bool = False
    active_sidebars: frozenset[str] = frozenset()
    is_amp: bool = False
    comments_open: bool = False
    comment_count: int = 0
    password_required: bool = False
    customize_preview: bool = False
    has_header_image: bool = False
    header_textcolor: str = ""
    show_on_front: str = "posts"

    def is_sidebar_active(self, sidebar: str = PRIMARY_SIDEBAR) -> bool:
        """Return True when the given widget area holds widgets."""
        return sidebar in self.active_sidebars


class ThemeOptions(Mapping[str, Any]):
    """Immutable view over the theme modifications stored by the host."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None, **extra: Any) -> None:
        merged = dict(values or {})
        merged.update(extra)
        self._values = merged

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"ThemeOptions({self._values!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored option or ``default`` when the key is unset."""
        return self._values.get(key, default)


@dataclass(frozen=True, slots=True)
class StyleRegistryEntry:
    """Registered stylesheet as known to the host asset registry."""

    handle: str
    src: str
    version: str = ""

    @property
    def preload_uri(self) -> str:
        """Return the cache-busted URI used by preload and print links."""
        return f"{self.src}?ver={self.version}"


@dataclass(slots=True)
class StyleRegistry:
    """Lookup table of registered stylesheets keyed by handle."""

    entries: MutableMapping[str, StyleRegistryEntry] = field(default_factory=dict)

    def register(self, handle: str, src: str, version: str | int | float = "") -> StyleRegistryEntry:
        """Register a stylesheet and return its entry."""
        entry = StyleRegistryEntry(handle=handle, src=src, version=str(version))
        self.entries[handle] = entry
        return entry

    def lookup(self, handle: str) -> StyleRegistryEntry | None:
        """Return the registered entry when available."""
        return self.entries.get(handle)

    def get(self, handle: str) -> StyleRegistryEntry:
        """Retrieve a registered entry or raise :class:`MissingStyleRegistration`."""
        try:
            return self.entries[handle]
        except KeyError as exc:
            raise MissingStyleRegistration(handle) from exc

    def __contains__(self, handle: object) -> bool:
        return handle in self.entries

    def handles(self) -> Iterable[str]:
        """Iterate over registered handles in registration order."""
        return iter(self.entries)


@dataclass(frozen=True, slots=True)
class ScriptRegistration:
    """Registered script together with its loader metadata."""

    handle: str
    src: str = ""
    version: str = ""
    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ScriptRegistry:
    """Lookup table of registered scripts keyed by handle."""

    entries: MutableMapping[str, ScriptRegistration] = field(default_factory=dict)

    def register(
        self,
        handle: str,
        src: str = "",
        version: str | int | float = "",
        **data: Any,
    ) -> ScriptRegistration:
        """Register a script; keyword arguments become loader metadata."""
        registration = ScriptRegistration(
            handle=handle, src=src, version=str(version), data=dict(data)
        )
        self.entries[handle] = registration
        return registration

    def add_data(self, handle: str, key: str, value: Any) -> bool:
        """Attach metadata to an existing registration."""
        registration = self.entries.get(handle)
        if registration is None:
            return False
        data = dict(registration.data)
        data[key] = value
        self.entries[handle] = ScriptRegistration(
            handle=registration.handle,
            src=registration.src,
            version=registration.version,
            data=data,
        )
        return True

    def get_data(self, handle: str, key: str) -> Any:
        """Return metadata for a script, ``False`` when unknown."""
        registration = self.entries.get(handle)
        if registration is None:
            return False
        return registration.data.get(key, False)


__all__ = [
    "PRIMARY_SIDEBAR",
    "PageContext",
    "ScriptRegistration",
    "ScriptRegistry",
    "StyleRegistry",
    "StyleRegistryEntry",
    "ThemeOptions",
]
