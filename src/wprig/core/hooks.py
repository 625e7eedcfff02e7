"""Filter and action registry modelling the host's extension points.

Callbacks are grouped per hook name and executed synchronously in ascending
priority, keeping registration order for callbacks sharing a priority.

`Filters`
: :meth:`HookRegistry.apply_filters` threads a value through every callback
  and returns the final value.

`Actions`
: :meth:`HookRegistry.do_action` invokes every callback for its side effects.

Callbacks receive at most ``accepted_args`` positional arguments, so a filter
registered with ``accepted_args=1`` only sees the filtered value even when the
hook is applied with extra context.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import count
import logging
from typing import Any, cast


logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

HookCallable = Callable[..., Any]


@dataclass(frozen=True)
class HookCallback:
    """Callback registered against a hook name."""

    priority: int
    sequence: int
    name: str
    callback: HookCallable
    accepted_args: int = 1

    def invoke(self, args: tuple[Any, ...]) -> Any:
        """Call the callback with the arguments it accepts."""
        return self.callback(*args[: max(self.accepted_args, 0)])


@dataclass(frozen=True)
class HookDefinition:
    """Descriptor installed on callables by :func:`hooked`."""

    hook: str
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = 1


class HookRegistry:
    """Container gathering filter and action callbacks."""

    def __init__(self) -> None:
        self._callbacks: dict[str, list[HookCallback]] = {}
        self._sequence = count()

    def add_filter(
        self,
        hook: str,
        callback: HookCallable,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        """Subscribe ``callback`` to ``hook``."""
        if not callable(callback):
            msg = f"Callback registered for '{hook}' must be callable"
            raise TypeError(msg)
        entry = HookCallback(
            priority=priority,
            sequence=next(self._sequence),
            name=getattr(callback, "__name__", callback.__class__.__name__),
            callback=callback,
            accepted_args=accepted_args,
        )
        bucket = self._callbacks.setdefault(hook, [])
        bucket.append(entry)
        bucket.sort(key=lambda item: (item.priority, item.sequence))

    add_action = add_filter

    def remove_filter(
        self, hook: str, callback: HookCallable, priority: int = DEFAULT_PRIORITY
    ) -> bool:
        """Unsubscribe ``callback``; return whether anything was removed."""
        bucket = self._callbacks.get(hook, [])
        kept = [
            entry
            for entry in bucket
            if not (entry.callback == callback and entry.priority == priority)
        ]
        removed = len(kept) != len(bucket)
        if kept:
            self._callbacks[hook] = kept
        else:
            self._callbacks.pop(hook, None)
        return removed

    remove_action = remove_filter

    def has_filter(self, hook: str, callback: HookCallable | None = None) -> bool:
        """Return whether ``hook`` (or ``callback`` on it) is subscribed."""
        bucket = self._callbacks.get(hook, [])
        if callback is None:
            return bool(bucket)
        return any(entry.callback == callback for entry in bucket)

    has_action = has_filter

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Pass ``value`` through every callback registered for ``hook``."""
        for entry in tuple(self._callbacks.get(hook, ())):
            logger.debug("applying filter %s -> %s", hook, entry.name)
            value = entry.invoke((value, *args))
        return value

    def do_action(self, hook: str, *args: Any) -> None:
        """Invoke every callback registered for ``hook``."""
        for entry in tuple(self._callbacks.get(hook, ())):
            logger.debug("running action %s -> %s", hook, entry.name)
            entry.invoke(args)

    def collect_from(self, owner: Any) -> None:
        """Register callables decorated with :func:`hooked` found on ``owner``."""
        for attribute in dir(owner):
            handler = getattr(owner, attribute)
            definition = getattr(handler, "__hook_definition__", None)
            if definition is None and hasattr(handler, "__func__"):
                definition = getattr(handler.__func__, "__hook_definition__", None)
            if isinstance(definition, HookDefinition):
                self.add_filter(
                    definition.hook,
                    handler,
                    priority=definition.priority,
                    accepted_args=definition.accepted_args,
                )

    def describe(self) -> list[dict[str, object]]:
        """Return a serialisable snapshot of the registered callbacks."""
        entries: list[dict[str, object]] = []
        for hook in sorted(self._callbacks):
            for order, entry in enumerate(self._callbacks[hook]):
                entries.append(
                    {
                        "hook": hook,
                        "name": entry.name,
                        "priority": entry.priority,
                        "accepted_args": entry.accepted_args,
                        "order": order,
                    }
                )
        return entries


def hooked(
    hook: str, *, priority: int = DEFAULT_PRIORITY, accepted_args: int = 1
) -> Callable[[HookCallable], HookCallable]:
    """Decorator marking a callable for :meth:`HookRegistry.collect_from`."""
    definition = HookDefinition(hook=hook, priority=priority, accepted_args=accepted_args)

    def decorator(handler: HookCallable) -> HookCallable:
        cast(Any, handler).__hook_definition__ = definition
        return handler

    return decorator


__all__ = [
    "DEFAULT_PRIORITY",
    "HookCallback",
    "HookDefinition",
    "HookRegistry",
    "hooked",
]
