"""Pytest fixtures."""

import datetime
import pathlib
from typing import Optional

import pytest

from blockdate import config
from blockdate.model import blocks, events, host, listeners, locales, messages, overlay


TEST_FOLDER = pathlib.Path(__file__).parent
DATA_FOLDER = TEST_FOLDER / "data"


class FakeCalendar(listeners.Listenable):
    """Calendar widget that records how the overlay used it."""

    created: list["FakeCalendar"] = []

    def __init__(self) -> None:
        self.symbols = locales.get_active()
        self.date: Optional[datetime.date] = None
        self.allow_none = True
        self.show_week_num = True
        self.container: Optional[host.OverlayContainer] = None
        FakeCalendar.created.append(self)

    def set_allow_none(self, allow: bool) -> None:
        self.allow_none = allow

    def set_show_week_num(self, show: bool) -> None:
        self.show_week_num = show

    def render_into(self, container: host.OverlayContainer) -> None:
        self.container = container
        container.mount_widget(self)

    def set_date(self, date: Optional[datetime.date]) -> None:
        self.date = date

    def get_date(self) -> Optional[datetime.date]:
        return self.date

    def get_size(self) -> host.Size:
        return host.Size(width=20, height=8)

    def pick(self, date: Optional[datetime.date]) -> None:
        """Simulate the user choosing date."""
        self.dispatch(overlay.CHANGE, overlay.ChangeEvent(date))


@pytest.fixture(autouse=True)
def reset_process_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test fresh settings, locale, messages and event bus."""
    monkeypatch.setattr(config, "settings", config.Settings())
    locales.reset()
    messages.reset()
    events.reset()
    FakeCalendar.created = []


@pytest.fixture
def slot() -> host.WidgetSlot:
    """Overlay slot with an 80x24 viewport."""
    return host.WidgetSlot(viewport=host.BBox(top=0, bottom=24, left=0, right=80))


@pytest.fixture
def workspace(slot: host.WidgetSlot) -> blocks.Workspace:
    """Workspace whose fields open FakeCalendar widgets."""
    return blocks.Workspace(FakeCalendar, slot=slot, rtl=False)


@pytest.fixture
def fired_events() -> list[events.BlockChange]:
    """Every event fired on the bus during the test."""
    fired: list[events.BlockChange] = []
    events.add_listener(fired.append)
    return fired
