"""Test locale symbol selection for calendar widgets."""

import datetime

from blockdate.model import blocks, locales, messages

from conftest import FakeCalendar


def test_message_key() -> None:
    """Table names map to message catalog keys."""
    assert locales.message_key("DateTimeSymbols_pt_BR") == "pt.br"
    assert locales.message_key("DateTimeSymbols_he") == "he"
    assert locales.message_key("DateTimePatterns_de") is None


def test_resolve_matches_installed_language() -> None:
    # Arrange
    messages.install_language("de")
    # Act
    locales.resolve()
    # Assert
    assert locales.get_active() is locales.DateTimeSymbols_de


def test_resolve_region_language() -> None:
    # Arrange
    messages.install_language("pt-BR")
    # Act
    locales.resolve()
    # Assert
    assert locales.get_active() is locales.DateTimeSymbols_pt_BR


def test_resolve_miss_keeps_active_table() -> None:
    """Nothing installed that matches, so nothing changes."""
    # Arrange
    messages.install_language("he")
    locales.resolve()
    messages.reset()
    messages.install_language("nl")
    # Act
    locales.resolve()
    # Assert
    assert locales.get_active() is locales.DateTimeSymbols_he


def test_last_match_wins() -> None:
    """With several matches, the table enumerated last is used."""
    # Arrange
    catalog = {"de": {"TODAY": "Heute"}, "fr": {"TODAY": "Aujourd'hui"}}
    tables = {
        "DateTimeSymbols_fr": locales.DateTimeSymbols_fr,
        "DateTimeSymbols_de": locales.DateTimeSymbols_de,
    }
    # Act
    locales.resolve(tables, catalog)
    # Assert
    assert locales.get_active() is locales.DateTimeSymbols_de


def test_active_table_outlives_field(workspace: blocks.Workspace) -> None:
    """Opening one field switches the table for widgets created later."""
    # Arrange
    messages.install_language("fr")
    first = workspace.new_block("date_value").get_field("DATE")
    second = workspace.new_block("date_value").get_field("DATE")
    # Act
    first.activate()
    first.dispose()
    messages.reset()
    second.activate()
    # Assert
    assert [picker.symbols for picker in FakeCalendar.created] == [
        locales.DateTimeSymbols_fr,
        locales.DateTimeSymbols_fr,
    ]


def test_format_long() -> None:
    date = datetime.date(2026, 10, 19)
    assert locales.DateTimeSymbols_en.format_long(date) == "Monday, 19 October 2026"
    assert locales.DateTimeSymbols_de.format_long(date) == "Montag, 19 Oktober 2026"


def test_ordered_weekdays() -> None:
    assert locales.DateTimeSymbols_en.ordered_short_weekdays()[0] == "Sun"
    assert locales.DateTimeSymbols_de.ordered_short_weekdays()[0] == "Mo."
