"""
Hook bus for logger lifecycle notifications

A single channel carrying HookEvents tagged with a HookKind. Subscribers
pick the kinds they care about and are called synchronously, in
subscription order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, FrozenSet, List, Optional, Tuple

from scoped_logger.core.log_level import LogLevel

if TYPE_CHECKING:
    from scoped_logger.core.scope import Scope


class HookKind(Enum):
    """Kinds of lifecycle notifications."""

    BEFORE_EMIT = "before_emit"
    AFTER_EMIT = "after_emit"
    MESSAGE_EMITTED = "message_emitted"
    SCOPE_BEGIN = "scope_begin"
    SCOPE_END = "scope_end"


ALL_KINDS: FrozenSet[HookKind] = frozenset(HookKind)


@dataclass(frozen=True)
class HookEvent:
    """
    Payload of a hook notification.

    Attributes:
        kind: What happened
        logger: The logger publishing the event
        scope: The scope involved (scope events only)
        params: Trailing parameters. BEFORE_EMIT carries the raw emit
            arguments; MESSAGE_EMITTED carries the final text for sinks and
            the forwarded arguments for composite loggers
        level: Level of the emit call (emit events only)
    """

    kind: HookKind
    logger: Any
    scope: Optional["Scope"] = None
    params: Tuple[Any, ...] = ()
    level: Optional[LogLevel] = None


HookCallback = Callable[[HookEvent], None]


class HookBus:
    """
    Publish/subscribe channel for HookEvents.

    Exceptions raised by subscribers propagate to the publisher.

    Example:
        bus = HookBus()
        unsubscribe = bus.subscribe(print, HookKind.MESSAGE_EMITTED)
        ...
        unsubscribe()
    """

    def __init__(self):
        self._subscribers: List[Tuple[HookCallback, FrozenSet[HookKind]]] = []

    def subscribe(self, callback: HookCallback, *kinds: HookKind) -> Callable[[], None]:
        """
        Subscribe a callback.

        Args:
            callback: Called with each matching HookEvent
            kinds: Kinds to receive; all kinds if none are given

        Returns:
            Function that removes this subscription

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        entry = (callback, frozenset(kinds) if kinds else ALL_KINDS)
        self._subscribers.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return unsubscribe

    def unsubscribe(self, callback: HookCallback) -> bool:
        """
        Remove every subscription of a callback.

        Returns:
            True if anything was removed
        """
        before = len(self._subscribers)
        self._subscribers = [s for s in self._subscribers if s[0] is not callback]
        return len(self._subscribers) != before

    def publish(self, event: HookEvent) -> None:
        """Deliver an event to the matching subscribers."""
        for callback, kinds in list(self._subscribers):
            if event.kind in kinds:
                callback(event)

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscribers.clear()

    def __len__(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"HookBus(subscribers={len(self._subscribers)})"
