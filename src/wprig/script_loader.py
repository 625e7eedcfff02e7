"""Add ``async``/``defer`` loading attributes to rendered script tags."""

from __future__ import annotations

from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import Tag

from .core.context import ScriptRegistry
from .core.diagnostics import DiagnosticEmitter, LoggingEmitter


SCRIPT_LOADER_TAG_HOOK = "script_loader_tag"
LOADING_ATTRIBUTES = ("async", "defer")


@dataclass(slots=True)
class ScriptTag:
    """Structured view over the targeted ``<script>`` element of a tag."""

    attributes: dict[str, str] = field(default_factory=dict)
    inline: str = ""

    def has_attribute(self, name: str) -> bool:
        """Return True when ``name`` is already set on the element."""
        return name in self.attributes


def _find_target(soup: BeautifulSoup) -> Tag | None:
    element = soup.find("script", src=True)
    if isinstance(element, Tag):
        return element
    for candidate in soup.find_all("script"):
        if isinstance(candidate, Tag) and not candidate.contents:
            return candidate
    return None


def _parse(markup: str) -> Tag | None:
    if not markup.rstrip().endswith("</script>"):
        return None
    soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    return _find_target(soup)


def _offset(markup: str, line: int, column: int) -> int:
    lines = markup.split("\n")
    return sum(len(text) + 1 for text in lines[: line - 1]) + column


def _opening_tag_end(markup: str, start: int) -> int:
    """Return the index of the ``>`` closing the tag opened at ``start``."""
    quote = None
    for index in range(start, len(markup)):
        char = markup[index]
        if quote is not None:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == ">":
            return index
    return -1


def parse_script_tag(markup: str) -> ScriptTag | None:
    """Parse the targeted script of ``markup``; None when there is none.

    The target is the first script with a ``src``, else the first empty one.
    """
    element = _parse(markup)
    if element is None:
        return None
    attributes = {name: str(value) for name, value in element.attrs.items()}
    return ScriptTag(attributes=attributes, inline=element.get_text())


def add_loading_attribute(markup: str, wants_async: bool, wants_defer: bool) -> str:
    """Return ``markup`` with at most one of ``async``/``defer`` added.

    Only the first requested attribute (``async`` before ``defer``) is
    considered. It is skipped when the element already carries it. Otherwise
    it is inserted at the end of the element's opening tag, leaving the rest
    of the markup byte for byte as given. Markup without a target script is
    returned untouched.
    """
    requested = {"async": wants_async, "defer": wants_defer}
    for attribute in LOADING_ATTRIBUTES:
        if not requested[attribute]:
            continue

        element = _parse(markup)
        if element is not None and not element.has_attr(attribute):
            start = _offset(markup, element.sourceline or 1, element.sourcepos or 0)
            end = _opening_tag_end(markup, start)
            if end != -1:
                if markup[end - 1] == "/":
                    end -= 1
                return f"{markup[:end]} {attribute}{markup[end:]}"

        # Only allow async or defer, not both.
        break

    return markup


def filter_script_loader_tag(
    tag: str,
    handle: str,
    scripts: ScriptRegistry,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Apply the loading attributes registered for ``handle`` to ``tag``."""
    wants_async = bool(scripts.get_data(handle, "async"))
    wants_defer = bool(scripts.get_data(handle, "defer"))
    if not (wants_async or wants_defer):
        return tag

    result = add_loading_attribute(tag, wants_async, wants_defer)
    if result is not tag:
        attribute = "async" if wants_async else "defer"
        (emitter or LoggingEmitter()).event(
            "script_attribute", {"handle": handle, "attribute": attribute}
        )
    return result


__all__ = [
    "LOADING_ATTRIBUTES",
    "SCRIPT_LOADER_TAG_HOOK",
    "ScriptTag",
    "add_loading_attribute",
    "filter_script_loader_tag",
    "parse_script_tag",
]
