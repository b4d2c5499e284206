"""Minimal block and workspace model hosting date fields.

Blocks are built from JSON definitions listing their fields. Saved blocks keep
only the values of serializable fields, as plain strings.
"""

import uuid
from collections.abc import Callable
from typing import Any, Optional

from textual import log

from blockdate import config
from blockdate.model import events, field_date, fields, host, overlay  # noqa: F401


BLOCK_DEFINITIONS: dict[str, dict[str, Any]] = {
    "date_value": {
        "message": "date %1",
        "args": [{"type": "field_date", "name": "DATE"}],
    },
    "date_range": {
        "message": "from %1 to %2",
        "args": [
            {"type": "field_date", "name": "START"},
            {"type": "field_date", "name": "END"},
        ],
    },
}
"""Block types by name. field_date args may give a default "date"."""


class Block:
    """A block on a workspace, owning named fields."""

    block_id: str
    block_type: str
    workspace: Optional["Workspace"]
    fields: dict[str, Any]
    x: int
    y: int

    def __init__(
        self,
        workspace: "Workspace",
        block_type: str,
        block_id: Optional[str] = None,
        x: int = 0,
        y: int = 0,
    ) -> None:
        self.workspace = workspace
        self.block_type = block_type
        self.block_id = block_id or uuid.uuid4().hex
        self.fields = {}
        self.x = x
        self.y = y
        definition = BLOCK_DEFINITIONS.get(block_type)
        if definition is not None:
            for arg in definition["args"]:
                self.append_field(arg["name"], fields.from_json(arg))

    def append_field(self, name: str, field: Any) -> Any:
        """Add field to the block under name."""
        if name in self.fields:
            raise ValueError(f"Block {self.block_id} already has field {name!r}.")
        field.set_source_block(self, name)
        self.fields[name] = field
        return field

    def get_field(self, name: str) -> Optional[Any]:
        return self.fields.get(name)

    def get_field_value(self, name: str) -> Optional[str]:
        field = self.get_field(name)
        return None if field is None else field.get_value()

    def set_field_value(self, name: str, value: Optional[str]) -> None:
        """Set a field's value. Raises KeyError if the block has no such field."""
        self.fields[name].set_value(value)

    def notify_field_change(
        self, field: Any, old_value: Optional[str], new_value: Optional[str]
    ) -> None:
        """Record a field change on the host event bus."""
        events.fire(
            events.BlockChange(
                block_id=self.block_id,
                element="field",
                name=field.name,
                old_value=old_value,
                new_value=new_value,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize block, keeping only serializable field values."""
        return {
            "id": self.block_id,
            "type": self.block_type,
            "x": self.x,
            "y": self.y,
            "fields": {
                name: field.get_value()
                for name, field in self.fields.items()
                if getattr(field, "SERIALIZABLE", False)
            },
        }

    def dispose(self) -> None:
        """Destroy the block and its fields."""
        for field in self.fields.values():
            field.dispose()
        if self.workspace is not None:
            self.workspace.blocks.pop(self.block_id, None)
        self.workspace = None


class Workspace:
    """Blocks plus the host services their fields use."""

    slot: host.WidgetSlot
    overlay: overlay.OverlayController
    rtl: bool
    blocks: dict[str, Block]
    bbox_provider: Optional[Callable[[Any], host.BBox]]
    """Returns a field's on-screen box. Falls back to the block's grid position."""

    def __init__(
        self,
        widget_factory: Callable[[], overlay.CalendarWidget],
        slot: Optional[host.WidgetSlot] = None,
        rtl: Optional[bool] = None,
        bbox_provider: Optional[Callable[[Any], host.BBox]] = None,
    ) -> None:
        self.slot = slot if slot is not None else host.WidgetSlot()
        self.overlay = overlay.OverlayController(self.slot, widget_factory)
        self.rtl = config.settings.rtl if rtl is None else rtl
        self.blocks = {}
        self.bbox_provider = bbox_provider

    def new_block(
        self,
        block_type: str,
        block_id: Optional[str] = None,
        x: int = 0,
        y: int = 0,
    ) -> Block:
        block = Block(self, block_type, block_id, x, y)
        self.blocks[block.block_id] = block
        return block

    def get_block(self, block_id: str) -> Optional[Block]:
        return self.blocks.get(block_id)

    def field_bbox(self, field: Any) -> host.BBox:
        """Screen bounding box of a field."""
        if self.bbox_provider is not None:
            return self.bbox_provider(field)
        block = field.owner
        left = block.x if block is not None else 0
        top = block.y if block is not None else 0
        return host.BBox(
            top=top, bottom=top + 1, left=left, right=left + len(field.get_text())
        )

    def to_dict(self) -> dict[str, Any]:
        return {"blocks": [block.to_dict() for block in self.blocks.values()]}

    def load_dict(self, data: dict[str, Any]) -> list[Block]:
        """Create blocks from serialized data, without firing change events."""
        loaded = []
        events.disable()
        try:
            for block_data in data.get("blocks", []):
                block = self.new_block(
                    block_data["type"],
                    block_data.get("id"),
                    block_data.get("x", 0),
                    block_data.get("y", 0),
                )
                for name, value in block_data.get("fields", {}).items():
                    if name in block.fields:
                        block.set_field_value(name, value)
                    else:
                        log.warning("ignoring unknown field", block=block.block_id, field=name)
                loaded.append(block)
        finally:
            events.enable()
        return loaded

    def clear(self) -> None:
        """Dispose every block."""
        for block in list(self.blocks.values()):
            block.dispose()

