"""Change notifications from blocks to the host editor.

Module-level state mirrors the host's single event stream: one listener list,
one current undo group, one enabled counter.
"""

import dataclasses
import uuid
from collections.abc import Callable
from typing import Optional

from textual import log


@dataclasses.dataclass
class BlockChange:
    """A field value on a block changed."""

    block_id: str
    element: str
    name: Optional[str]
    old_value: Optional[str]
    new_value: Optional[str]
    group: str = ""

    @property
    def is_null(self) -> bool:
        """True if the event records no actual change."""
        return self.old_value == self.new_value


_listeners: list[Callable[[BlockChange], None]] = []
_group: str = ""
_disabled: int = 0


def add_listener(callback: Callable[[BlockChange], None]) -> None:
    """Subscribe callback to every fired event."""
    if callback not in _listeners:
        _listeners.append(callback)


def remove_listener(callback: Callable[[BlockChange], None]) -> None:
    """Unsubscribe callback. Does nothing if it was never subscribed."""
    if callback in _listeners:
        _listeners.remove(callback)


def fire(event: BlockChange) -> None:
    """Send event to all listeners, unless events are disabled."""
    if not is_enabled():
        return
    if not event.group:
        event.group = _group
    log.debug("event fired", event=event)
    for callback in list(_listeners):
        callback(event)


def get_group() -> str:
    """Current undo group id, or empty string if events are not grouped."""
    return _group


def set_group(state: bool | str) -> None:
    """Start a new undo group (True), end grouping (False) or join an id."""
    global _group
    if isinstance(state, bool):
        _group = uuid.uuid4().hex if state else ""
    else:
        _group = state


def disable() -> None:
    """Stop firing events. Calls nest, each must be matched by enable()."""
    global _disabled
    _disabled += 1


def enable() -> None:
    global _disabled
    _disabled = max(0, _disabled - 1)


def is_enabled() -> bool:
    return _disabled == 0


def reset() -> None:
    """Drop all listeners, grouping and disabling."""
    global _group, _disabled
    _listeners.clear()
    _group = ""
    _disabled = 0
