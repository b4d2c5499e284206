"""Open and close the calendar overlay for date fields.

One OverlayController serves every field on a workspace. It holds at most one
subscription to a calendar widget's change event, and holds it exactly while
the overlay it opened is showing.
"""

import dataclasses
import datetime
import enum
from collections.abc import Callable
from typing import Optional, Protocol, TYPE_CHECKING

from textual import log

from blockdate import config
from blockdate.model import dates, events, host, listeners, locales


if TYPE_CHECKING:
    from blockdate.model import field_date


CHANGE = "change"
"""Event type emitted by calendar widgets when the user picks a date."""


class OverlayState(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclasses.dataclass
class ChangeEvent:
    """Sent by a calendar widget. date is None when the user cleared it."""

    date: Optional[datetime.date]


class CalendarWidget(Protocol):
    """What the overlay needs from a calendar widget."""

    def set_allow_none(self, allow: bool) -> None: ...

    def set_show_week_num(self, show: bool) -> None: ...

    def render_into(self, container: host.OverlayContainer) -> None: ...

    def set_date(self, date: Optional[datetime.date]) -> None: ...

    def get_date(self) -> Optional[datetime.date]: ...

    def get_size(self) -> host.Size: ...

    def listen(
        self, event_type: str, handler: Callable[[ChangeEvent], None]
    ) -> listeners.ListenerKey: ...

    def unlisten_by_key(self, key: Optional[listeners.ListenerKey]) -> bool: ...


class OverlayController:
    """Shows a calendar widget in the host overlay slot on behalf of a field."""

    slot: host.WidgetSlot
    widget_factory: Callable[[], CalendarWidget]
    resolver: Callable[[], None]
    picker: Optional[CalendarWidget]
    change_key: Optional[listeners.ListenerKey]
    """Subscription to the picker's change event while the overlay is open."""
    field: Optional["field_date.DateField"]
    """Field the overlay was opened for."""

    def __init__(
        self,
        slot: host.WidgetSlot,
        widget_factory: Callable[[], CalendarWidget],
        resolver: Callable[[], None] = locales.resolve,
    ) -> None:
        self.slot = slot
        self.widget_factory = widget_factory
        self.resolver = resolver
        self.picker = None
        self.change_key = None
        self.field = None

    def is_open_for(self, field: "field_date.DateField") -> bool:
        return self.field is field and self.slot.is_owner(field)

    def open(self, field: "field_date.DateField") -> None:
        """Show the calendar under field, closing any other overlay first."""
        rtl = field.is_rtl()
        # Evicts the previous owner, which runs its release callback.
        self.slot.acquire(field, rtl, self._widget_dispose)
        # Measure before the picker is added.
        viewport_bbox = self.slot.viewport_bbox()
        anchor_bbox = field.get_scaled_bbox()
        picker = self.create_widget(field)
        self.slot.position_with_anchor(
            viewport_bbox, anchor_bbox, picker.get_size(), rtl
        )
        self.change_key = picker.listen(CHANGE, self._on_change)
        self.picker = picker
        self.field = field
        field.overlay_state = OverlayState.OPEN
        log.debug("date overlay opened", value=field.get_value())

    def create_widget(self, field: "field_date.DateField") -> CalendarWidget:
        """Build a calendar widget in the overlay container, seeded with field."""
        self.resolver()
        picker = self.widget_factory()
        picker.set_allow_none(config.settings.allow_none)
        picker.set_show_week_num(config.settings.show_week_num)
        picker.render_into(self.slot.container)
        picker.set_date(dates.parse_iso(field.get_value()))
        return picker

    def _on_change(self, event: ChangeEvent) -> None:
        """Close the overlay, then hand the picked date to the field."""
        field = self.field
        new_value = dates.to_iso(event.date) if event.date else ""
        self.slot.hide()
        if field is not None:
            field.set_value(new_value)

    def close(self, field: "field_date.DateField") -> None:
        """Close the overlay if field owns it. Otherwise do nothing."""
        self.slot.release(field)

    def dispose(self, field: "field_date.DateField") -> None:
        """Field is being destroyed."""
        self.close(field)

    def _widget_dispose(self) -> None:
        """Release callback run by the slot whenever our overlay is hidden."""
        if self.picker is not None:
            self.picker.unlisten_by_key(self.change_key)
        events.set_group(False)
        if self.field is not None:
            self.field.overlay_state = OverlayState.CLOSED
        log.debug("date overlay closed")
        self.change_key = None
        self.picker = None
        self.field = None
