from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from wprig.core.context import StyleRegistry


class RecordingEmitter:
    """Diagnostic emitter capturing messages for assertions."""

    debug_enabled = False

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def styles() -> StyleRegistry:
    registry = StyleRegistry()
    base = "https://example.com/wp-content/themes/wprig/assets/css"
    for name in ("singular", "widgets", "comments", "front-page", "print-styles"):
        registry.register(f"wprig-{name}", f"{base}/{name}.css", "20180514")
    return registry
