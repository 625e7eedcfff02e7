"""Custom exception hierarchy for the theme helpers."""

from __future__ import annotations


class ThemeError(RuntimeError):
    """Base exception for theme helper failures."""


class MissingStyleRegistration(ThemeError, LookupError):
    """Raised when a stylesheet handle has not been registered."""

    def __init__(self, handle: str) -> None:
        super().__init__(f"Stylesheet '{handle}' is not registered")
        self.handle = handle


class ThemeConfigError(ThemeError):
    """Raised when a theme configuration file cannot be loaded."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "MissingStyleRegistration",
    "ThemeConfigError",
    "ThemeError",
    "exception_hint",
    "exception_messages",
]
