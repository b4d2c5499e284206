"""Calendar widget shown in the date field overlay.

The picker shows the seed date spelled out with the active locale symbols,
an input box for typing a date and buttons for today and (optionally) no
date. Picking a date sends a single change event to its listeners.
"""

import datetime
from collections.abc import Callable
from typing import Optional

from textual import app, containers, widgets
from textual.css import query

from blockdate.features import validators
from blockdate.model import dates, host, listeners, locales, messages, overlay


class DatePicker(containers.Vertical):
    """Pick a date by typing it or pressing a button."""

    WIDTH = 36
    HEIGHT = 9

    DEFAULT_CSS = """
    DatePicker.blockdate-date-picker {
        width: 36;
        height: 9;
        border: round $primary;
        background: $panel;
        padding: 0 1;
    }
    DatePicker .blockdate-heading {
        width: 100%;
        text-style: bold;
    }
    DatePicker .blockdate-weekdays {
        width: 100%;
        color: $text-muted;
    }
    DatePicker .blockdate-error {
        width: 100%;
        color: $error;
    }
    DatePicker .blockdate-buttons {
        height: 1;
    }
    DatePicker .blockdate-buttons Button {
        height: 1;
        min-width: 8;
        border: none;
        margin: 0 1 0 0;
    }
    DatePicker.-rtl .blockdate-heading {
        text-align: right;
    }
    """

    date: Optional[datetime.date]
    allow_none: bool
    show_week_num: bool
    symbols: locales.SymbolTable
    """Locale symbols, fixed when the picker is created."""
    change_listeners: listeners.Listenable

    def __init__(self) -> None:
        super().__init__(classes="blockdate-date-picker")
        self.date = None
        self.allow_none = True
        self.show_week_num = True
        self.symbols = locales.get_active()
        self.change_listeners = listeners.Listenable()
        if self.symbols.rtl:
            self.add_class("-rtl")

    def compose(self) -> app.ComposeResult:
        """Layout the picker."""
        yield widgets.Label(self._heading(), classes="blockdate-heading")
        yield widgets.Label(self._weekday_header(), classes="blockdate-weekdays")
        yield widgets.Input(
            value=dates.to_iso(self.date) if self.date else "",
            placeholder="YYYY-MM-DD",
            validators=[validators.DateValidator()],
            validate_on=["submitted"],
            classes="blockdate-input",
        )
        yield widgets.Label("", classes="blockdate-error")
        with containers.HorizontalGroup(classes="blockdate-buttons"):
            yield widgets.Button(messages.text("TODAY"), id="blockdate-today")
            none_button = widgets.Button(messages.text("NONE"), id="blockdate-none")
            none_button.display = self.allow_none
            yield none_button

    def on_mount(self) -> None:
        self.query_one(".blockdate-input", widgets.Input).focus()

    def _heading(self) -> str:
        if self.date is None:
            return messages.text("DATE_PROMPT")
        return self.symbols.format_long(self.date)

    def _weekday_header(self) -> str:
        names = list(self.symbols.ordered_short_weekdays())
        if self.show_week_num:
            names.insert(0, "#")
        return " ".join(names)

    def _update_display(self) -> None:
        """Refresh child widgets after a setting changed."""
        try:
            heading = self.query_one(".blockdate-heading", widgets.Label)
        except query.NoMatches:
            return
        heading.update(self._heading())
        self.query_one(".blockdate-weekdays", widgets.Label).update(
            self._weekday_header()
        )
        self.query_one(".blockdate-input", widgets.Input).value = (
            dates.to_iso(self.date) if self.date else ""
        )
        self.query_one("#blockdate-none", widgets.Button).display = self.allow_none

    # Calendar widget interface used by the overlay controller.

    def set_allow_none(self, allow: bool) -> None:
        self.allow_none = allow
        self._update_display()

    def set_show_week_num(self, show: bool) -> None:
        self.show_week_num = show
        self._update_display()

    def render_into(self, container: host.OverlayContainer) -> None:
        container.mount_widget(self)

    def set_date(self, date: Optional[datetime.date]) -> None:
        self.date = date
        self._update_display()

    def get_date(self) -> Optional[datetime.date]:
        return self.date

    def get_size(self) -> host.Size:
        return host.Size(self.WIDTH, self.HEIGHT)

    def listen(
        self, event_type: str, handler: Callable[[overlay.ChangeEvent], None]
    ) -> listeners.ListenerKey:
        return self.change_listeners.listen(event_type, handler)

    def unlisten_by_key(self, key: Optional[listeners.ListenerKey]) -> bool:
        return self.change_listeners.unlisten_by_key(key)

    def pick(self, date: Optional[datetime.date]) -> None:
        """Select date (None to clear) and tell listeners."""
        self.date = date
        self.change_listeners.dispatch(overlay.CHANGE, overlay.ChangeEvent(date))

    # Textual event handlers.

    def on_input_submitted(self, event: widgets.Input.Submitted) -> None:
        """Pick the typed date if it is valid."""
        event.stop()
        result = event.validation_result
        if result is not None and not result.is_valid:
            self.query_one(".blockdate-error", widgets.Label).update(
                "; ".join(result.failure_descriptions)
            )
            return
        self.pick(dates.parse_iso(event.value))

    def on_button_pressed(self, event: widgets.Button.Pressed) -> None:
        event.stop()
        if event.button.id == "blockdate-today":
            self.pick(datetime.date.today())
        elif event.button.id == "blockdate-none":
            self.pick(None)
