"""Panel screen.

Composites every visible panel into a single PIL image, in the order
the panels were registered, so later panels (overlays) draw on top.
"""

import logging
from PIL import Image, ImageDraw

from statestack.ui.panel import Panel, load_font

log = logging.getLogger("statestack.ui.screens")

WIDTH = 640
HEIGHT = 480

BG = (0, 0, 0)


class PanelScreen:
    """Renders a set of panels into one frame."""

    def __init__(self, panels: list[Panel] | None = None,
                 width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self._panels: dict[str, Panel] = {}
        self._font = load_font()
        for panel in panels or []:
            self.add(panel)

    def add(self, panel: Panel) -> Panel:
        if panel.name in self._panels:
            raise ValueError(f"duplicate panel name: {panel.name}")
        self._panels[panel.name] = panel
        return panel

    def get(self, name: str) -> Panel:
        return self._panels[name]

    def names(self) -> list[str]:
        return list(self._panels)

    def visible_panels(self) -> list[Panel]:
        return [p for p in self._panels.values() if p.visible]

    def render(self) -> Image.Image:
        """Render the current frame."""
        img = Image.new("RGB", (self.width, self.height), BG)
        draw = ImageDraw.Draw(img)
        for panel in self._panels.values():
            panel.render(draw, self._font)
        return img
