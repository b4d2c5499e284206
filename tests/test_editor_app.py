"""Test the date field inside the Textual block editor."""

import asyncio
import datetime

from blockdate import config
from blockdate.model import locales, overlay
from blockdate.view import date_picker, editor_app


def test_pick_date_in_editor() -> None:
    """Pressing a field opens a picker, picking a date updates the block."""
    # Arrange
    config.settings.initial_dates = ["2024-03-01"]

    async def run_editor() -> tuple[str, int, int, overlay.OverlayState]:
        app = editor_app.BlockEditor()
        async with app.run_test() as pilot:
            await pilot.pause()
            button = app.query_one(editor_app.FieldButton)
            field = button.field
            # Act
            field.activate()
            await pilot.pause()
            open_pickers = len(app.query(date_picker.DatePicker))
            picker = app.query_one(date_picker.DatePicker)
            picker.pick(datetime.date(2024, 12, 25))
            await pilot.pause()
            return (
                field.get_value(),
                open_pickers,
                len(app.query(date_picker.DatePicker)),
                field.overlay_state,
            )

    value, open_pickers, pickers_after, state = asyncio.run(run_editor())
    # Assert
    assert value == "2024-12-25"
    assert open_pickers == 1
    assert pickers_after == 0
    assert state == overlay.OverlayState.CLOSED


def test_escape_closes_overlay_and_language_applies() -> None:
    """Closing the overlay keeps the value. The picker uses German symbols."""
    # Arrange
    config.settings.initial_dates = ["2024-03-01"]
    config.settings.language = "de"

    async def run_editor() -> tuple[str, locales.SymbolTable, overlay.OverlayState]:
        app = editor_app.BlockEditor()
        async with app.run_test() as pilot:
            await pilot.pause()
            field = app.query_one(editor_app.FieldButton).field
            field.activate()
            await pilot.pause()
            symbols = app.query_one(date_picker.DatePicker).symbols
            # Act
            app.action_close_overlay()
            await pilot.pause()
            return field.get_value(), symbols, field.overlay_state

    value, symbols, state = asyncio.run(run_editor())
    # Assert
    assert value == "2024-03-01"
    assert symbols is locales.DateTimeSymbols_de
    assert state == overlay.OverlayState.CLOSED
