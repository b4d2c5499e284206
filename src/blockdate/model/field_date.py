"""Date input field.

The value is always a canonical YYYY-MM-DD string. Activating the field shows
a calendar widget in the host overlay; picking a date there sets the value.
"""

from collections.abc import Callable
from typing import Any, Optional, TYPE_CHECKING

from textual import log

from blockdate.model import dates, fields, host, listeners, overlay


if TYPE_CHECKING:
    from blockdate.model import blocks


Validator = Callable[[str], Optional[str]]


class DateField:
    """Editable field holding a calendar date."""

    SERIALIZABLE = True
    """Saved with the block. Editable fields should also be serializable."""
    CURSOR = "text"
    """Mouse cursor style over the field."""

    value: str
    validator: Optional[Validator]
    """Optional check run on every change after the built-in date check.

    Takes a canonical date string and returns a date string to use instead, or
    None to abort the change.
    """
    owner: Optional["blocks.Block"]
    name: Optional[str]
    overlay_state: overlay.OverlayState
    disposed: bool

    def __init__(
        self, value: Optional[str] = None, validator: Optional[Validator] = None
    ) -> None:
        """Start with value, or today's date if value is missing or invalid."""
        initial = self.do_class_validation(value)
        if initial is None:
            initial = dates.today_iso()
        self.value = initial
        self.validator = validator
        self.owner = None
        self.name = None
        self.overlay_state = overlay.OverlayState.CLOSED
        self.disposed = False

    @classmethod
    def from_json(cls, options: dict[str, Any]) -> "DateField":
        """Construct a DateField from a JSON arg object with a 'date' key."""
        return cls(options.get("date"))

    def __repr__(self) -> str:
        return f"DateField({self.value!r})"

    @staticmethod
    def do_class_validation(new_value: Optional[str]) -> Optional[str]:
        """Ensure that new_value is a canonical date, or return None."""
        return dates.validate(new_value)

    validate = do_class_validation

    def set_source_block(self, block: "blocks.Block", name: str) -> None:
        """Attach the field to the block that contains it."""
        self.owner = block
        self.name = name

    @property
    def controller(self) -> Optional[overlay.OverlayController]:
        """Overlay controller of the workspace the field's block is on."""
        if self.owner is None or self.owner.workspace is None:
            return None
        return self.owner.workspace.overlay

    @property
    def subscription_token(self) -> Optional[listeners.ListenerKey]:
        """Change subscription held for this field while its overlay is open."""
        controller = self.controller
        if controller is None or not controller.is_open_for(self):
            return None
        return controller.change_key

    def get_value(self) -> Optional[str]:
        return self.value

    def get_text(self) -> str:
        """Text shown on the block."""
        return self.value or ""

    def set_value(self, new_value: Optional[str]) -> None:
        """Change the value, notifying the owning block if it changed.

        Invalid values, and values the validator rejects, leave the field
        unchanged.
        """
        validated = self.do_class_validation(new_value)
        if validated is None:
            log.debug("rejected date value", value=new_value)
            return
        if self.validator is not None:
            local = self.validator(validated)
            if local is None:
                log.debug("validator aborted date change", value=validated)
                return
            validated = self.do_class_validation(local)
            if validated is None:
                log.debug("validator returned invalid date", value=local)
                return
        if validated == self.value:
            return
        old_value = self.value
        self.value = validated
        if self.owner is not None:
            self.owner.notify_field_change(self, old_value, validated)

    def is_rtl(self) -> bool:
        if self.owner is None or self.owner.workspace is None:
            return False
        return self.owner.workspace.rtl

    def get_scaled_bbox(self) -> host.BBox:
        """Bounding box of the field on screen."""
        if self.owner is None or self.owner.workspace is None:
            return host.BBox(0, 0, 0, 0)
        return self.owner.workspace.field_bbox(self)

    def activate(self) -> None:
        """Show the calendar overlay for this field."""
        controller = self.controller
        if controller is None or self.disposed:
            log.warning("date field has no workspace, cannot show calendar")
            return
        controller.open(self)

    def dispose(self) -> None:
        """Close the overlay if this field owns it and detach from the block."""
        if self.disposed:
            return
        controller = self.controller
        if controller is not None:
            controller.dispose(self)
        self.owner = None
        self.disposed = True


fields.register("field_date", DateField)
