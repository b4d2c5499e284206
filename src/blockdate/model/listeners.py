"""Keyed event-listener registration.

``listen`` returns a ListenerKey that is the only handle needed to remove the
listener again. Removing a key more than once is harmless.
"""

import dataclasses
import itertools
from collections.abc import Callable
from typing import Any, Optional


_key_counter = itertools.count(1)


@dataclasses.dataclass(frozen=True)
class ListenerKey:
    """Opaque handle for one listener registration."""

    key_id: int
    event_type: str


class Listenable:
    """Mixin for objects that emit named events to registered handlers."""

    @property
    def listeners(self) -> dict[ListenerKey, Callable[[Any], None]]:
        """Registered handlers by key, created on first use."""
        try:
            return self.__dict__["_blockdate_listeners"]
        except KeyError:
            registry: dict[ListenerKey, Callable[[Any], None]] = {}
            self.__dict__["_blockdate_listeners"] = registry
            return registry

    def listen(self, event_type: str, handler: Callable[[Any], None]) -> ListenerKey:
        """Register handler for event_type and return its key."""
        key = ListenerKey(next(_key_counter), event_type)
        self.listeners[key] = handler
        return key

    def unlisten_by_key(self, key: Optional[ListenerKey]) -> bool:
        """Remove a listener. Returns False if it was already removed."""
        if key is None:
            return False
        return self.listeners.pop(key, None) is not None

    def listener_count(self, event_type: Optional[str] = None) -> int:
        """Number of live listeners, optionally for a single event type."""
        return sum(
            1 for key in self.listeners
            if event_type is None or key.event_type == event_type
        )

    def dispatch(self, event_type: str, event: Any) -> None:
        """Call every handler registered for event_type."""
        handlers = [
            handler for key, handler in list(self.listeners.items())
            if key.event_type == event_type
        ]
        for handler in handlers:
            handler(event)
