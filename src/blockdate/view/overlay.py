"""Textual implementation of the host overlay slot."""

from typing import Any, Optional

from textual import containers

from blockdate.model import host


class OverlayLayer(containers.Container):
    """Floating container above the workspace that holds the open calendar."""

    DEFAULT_CSS = """
    OverlayLayer {
        layer: overlay;
        dock: top;
        display: none;
        width: auto;
        height: auto;
        background: transparent;
    }
    """

    def mount_widget(self, widget: Any) -> None:
        self.mount(widget)
        self.display = True

    def clear(self) -> None:
        self.remove_children()
        self.display = False

    def move_to(self, placement: Optional[host.Placement]) -> None:
        if placement is None:
            self.styles.offset = (0, 0)
            return
        self.styles.offset = (placement.x, placement.y)
        self.styles.max_height = placement.height


class TextualWidgetSlot(host.WidgetSlot):
    """Overlay slot whose viewport is the screen the layer is shown on."""

    layer: OverlayLayer

    def __init__(self, layer: OverlayLayer) -> None:
        super().__init__(container=layer)
        self.layer = layer

    def viewport_bbox(self) -> host.BBox:
        size = self.layer.screen.size
        return host.BBox(top=0, bottom=size.height, left=0, right=size.width)
