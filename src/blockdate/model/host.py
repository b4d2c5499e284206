"""Overlay slot and positioning services provided by the host editor.

The host shows at most one overlay at a time. A field that wants to show one
acquires the WidgetSlot; acquiring evicts the previous owner, whose release
callback runs before the new owner takes over. Only the current owner can
release the slot.
"""

import dataclasses
from collections.abc import Callable
from typing import Any, Optional, Protocol

from textual import log


@dataclasses.dataclass(frozen=True)
class BBox:
    """Axis-aligned bounding box in screen coordinates, y growing downward."""

    top: int
    bottom: int
    left: int
    right: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclasses.dataclass(frozen=True)
class Size:
    """Rendered size of an overlay widget."""

    width: int
    height: int


@dataclasses.dataclass(frozen=True)
class Placement:
    """Where the overlay was put: top-left corner and visible height."""

    x: int
    y: int
    height: int


def calculate_x(viewport: BBox, anchor: BBox, size: Size, rtl: bool) -> int:
    """Horizontal position lined up with the anchor, kept inside the viewport."""
    if rtl:
        x = anchor.right - size.width
        x = min(x, viewport.right - size.width)
        x = max(x, viewport.left)
    else:
        x = anchor.left
        x = min(x, viewport.right - size.width)
        x = max(x, viewport.left)
    return x


def calculate_y(viewport: BBox, anchor: BBox, size: Size) -> int:
    """Below the anchor, or above it if the widget would overflow the viewport."""
    if anchor.bottom + size.height >= viewport.bottom:
        return anchor.top - size.height
    return anchor.bottom


def position_with_anchor(
    viewport: BBox, anchor: BBox, size: Size, rtl: bool
) -> Placement:
    """Best-fit placement of a widget of the given size next to anchor."""
    y = calculate_y(viewport, anchor, size)
    x = calculate_x(viewport, anchor, size, rtl)
    if y < 0:
        return Placement(x, 0, size.height + y)
    return Placement(x, y, size.height)


class OverlayContainer(Protocol):
    """Where overlay widgets are rendered."""

    def mount_widget(self, widget: Any) -> None: ...

    def clear(self) -> None: ...

    def move_to(self, placement: Optional[Placement]) -> None: ...


class MemoryContainer:
    """Overlay container that just records what is in it."""

    children: list[Any]
    placement: Optional[Placement]

    def __init__(self) -> None:
        self.children = []
        self.placement = None

    def mount_widget(self, widget: Any) -> None:
        self.children.append(widget)

    def clear(self) -> None:
        self.children.clear()

    def move_to(self, placement: Optional[Placement]) -> None:
        self.placement = placement


class WidgetSlot:
    """The single process-wide overlay slot.

    Fields never talk to the container directly while another field owns the
    slot. ``hide`` releases whatever owner is current; ``release`` only acts on
    behalf of the current owner.
    """

    container: OverlayContainer
    owner: Optional[Any]
    rtl: bool
    position: Optional[Placement]
    _on_release: Optional[Callable[[], None]]
    _viewport: BBox

    def __init__(
        self,
        container: Optional[OverlayContainer] = None,
        viewport: Optional[BBox] = None,
    ) -> None:
        self.container = container if container is not None else MemoryContainer()
        self._viewport = viewport or BBox(top=0, bottom=24, left=0, right=80)
        self.owner = None
        self.rtl = False
        self.position = None
        self._on_release = None

    def viewport_bbox(self) -> BBox:
        """Bounding box of the visible area."""
        return self._viewport

    def set_viewport(self, viewport: BBox) -> None:
        self._viewport = viewport

    def is_visible(self) -> bool:
        return self.owner is not None

    def is_owner(self, owner: Any) -> bool:
        return owner is not None and self.owner is owner

    def acquire(
        self,
        owner: Any,
        rtl: bool = False,
        on_release: Optional[Callable[[], None]] = None,
    ) -> bool:
        """Take the slot for owner, evicting any previous owner first."""
        self.hide()
        self.owner = owner
        self.rtl = rtl
        self._on_release = on_release
        log.debug("overlay slot acquired", owner=owner)
        return True

    def release(self, owner: Any) -> bool:
        """Hide the overlay if owner holds the slot. Returns True if it did."""
        if not self.is_owner(owner):
            return False
        self.hide()
        return True

    def hide(self) -> None:
        """Hide the overlay, running the owner's release callback."""
        if self.owner is None:
            return
        log.debug("overlay slot released", owner=self.owner)
        self.owner = None
        self.position = None
        self.container.move_to(None)
        on_release, self._on_release = self._on_release, None
        if on_release is not None:
            on_release()
        self.container.clear()

    def position_with_anchor(
        self, viewport: BBox, anchor: BBox, size: Size, rtl: bool
    ) -> Placement:
        """Place the overlay container next to anchor."""
        self.position = position_with_anchor(viewport, anchor, size, rtl)
        self.container.move_to(self.position)
        return self.position
