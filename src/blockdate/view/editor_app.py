"""Block editor application hosting date fields."""

from typing import Optional

from textual import app, containers, widgets

import blockdate.view
from blockdate import config
from blockdate.model import blocks, events, field_date, host, messages
from blockdate.view import date_picker, overlay


class FieldButton(widgets.Button):
    """Shows a date field's text on a block. Pressing it opens the calendar."""

    field: field_date.DateField

    def __init__(self, field: field_date.DateField) -> None:
        super().__init__(field.get_text(), classes="field-button")
        self.field = field

    def refresh_text(self) -> None:
        self.label = self.field.get_text()


class BlockRow(containers.HorizontalGroup):
    """One block on the workspace."""

    block: blocks.Block

    def __init__(self, block: blocks.Block) -> None:
        super().__init__(classes="block-row")
        self.block = block

    def compose(self) -> app.ComposeResult:
        yield widgets.Label(self.block.block_type, classes="block-label")
        for field in self.block.fields.values():
            yield FieldButton(field)


class BlockEditor(app.App):
    """Workspace of date blocks with a log of change events."""

    CSS_PATH = blockdate.view.CSS_FOLDER / "editor.tcss"
    TITLE = "Block Date Editor"
    BINDINGS = [
        ("escape", "close_overlay", "Close Calendar"),
        ("n", "new_block", "New Date Block"),
        ("r", "new_range_block", "New Range Block"),
        ("delete", "delete_block", "Delete Last Block"),
    ]

    workspace: Optional[blocks.Workspace]
    slot: Optional[overlay.TextualWidgetSlot]

    def __init__(self) -> None:
        super().__init__()
        self.workspace = None
        self.slot = None

    def compose(self) -> app.ComposeResult:
        """Add widgets to screen."""
        yield widgets.Header()
        yield containers.VerticalScroll(id="workspace")
        yield widgets.RichLog(id="event-log", markup=True)
        yield overlay.OverlayLayer(id="overlay-layer")
        yield widgets.Footer()

    def on_mount(self) -> None:
        """Build the workspace and its initial blocks."""
        messages.install_language(config.settings.language)
        self.slot = overlay.TextualWidgetSlot(
            self.query_one("#overlay-layer", overlay.OverlayLayer)
        )
        self.workspace = blocks.Workspace(
            date_picker.DatePicker,
            slot=self.slot,
            rtl=config.settings.rtl,
            bbox_provider=self.field_bbox,
        )
        events.add_listener(self.on_block_change)
        for date in config.settings.initial_dates:
            self.add_block("date_value", date)

    def on_unmount(self) -> None:
        events.remove_listener(self.on_block_change)
        if self.workspace is not None:
            self.workspace.clear()

    def add_block(self, block_type: str, date: Optional[str] = None) -> blocks.Block:
        """Create a block and show it on the workspace."""
        assert self.workspace is not None
        block = self.workspace.new_block(block_type, y=len(self.workspace.blocks))
        if date is not None:
            events.disable()
            try:
                for name in block.fields:
                    block.set_field_value(name, date)
            finally:
                events.enable()
        self.query_one("#workspace").mount(BlockRow(block))
        return block

    def field_bbox(self, field: field_date.DateField) -> host.BBox:
        """Screen region of the button showing field."""
        for button in self.query(FieldButton):
            if button.field is field:
                region = button.region
                return host.BBox(
                    top=region.y, bottom=region.bottom, left=region.x, right=region.right
                )
        return host.BBox(0, 0, 0, 0)

    def on_button_pressed(self, event: widgets.Button.Pressed) -> None:
        if isinstance(event.button, FieldButton):
            event.button.field.activate()

    def on_block_change(self, event: events.BlockChange) -> None:
        """Show the new value on the block and log the event."""
        for button in self.query(FieldButton):
            if button.field.owner is not None and (
                button.field.owner.block_id == event.block_id
            ):
                button.refresh_text()
        self.query_one("#event-log", widgets.RichLog).write(
            f"[green]{event.name}[/] {event.old_value} -> [bold]{event.new_value}[/]"
        )

    def action_close_overlay(self) -> None:
        if self.slot is not None:
            self.slot.hide()

    def action_new_block(self) -> None:
        self.add_block("date_value")

    def action_new_range_block(self) -> None:
        self.add_block("date_range")

    def action_delete_block(self) -> None:
        """Dispose the most recently added block."""
        rows = list(self.query(BlockRow))
        if not rows:
            return
        row = rows[-1]
        row.block.dispose()
        row.remove()
