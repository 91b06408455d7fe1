"""Toggleable UI panels.

A panel is the simplest visual element a UiVisibilityState can drive:
a titled, filled rectangle that is only drawn while ``visible`` is set.
"""

import logging
from PIL import ImageDraw, ImageFont

log = logging.getLogger("statestack.ui.panel")

TEXT = (220, 220, 220)
BORDER = (80, 80, 80)


def load_font(size: int = 14) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype(
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", size
        )
    except OSError:
        return ImageFont.load_default()


class Panel:
    """A titled rectangle with a visibility flag."""

    def __init__(self, name: str, title: str | None = None,
                 color: tuple[int, int, int] = (40, 40, 40),
                 rect: tuple[int, int, int, int] = (0, 0, 320, 240)):
        self.name = name
        self.title = title if title is not None else name.replace("_", " ").title()
        self.color = tuple(color)
        self.rect = tuple(rect)  # (x, y, width, height)
        self.visible = False

    @classmethod
    def from_config(cls, name: str, cfg: dict) -> "Panel":
        """Build a panel from a ``panels:`` entry of the config."""
        return cls(
            name,
            title=cfg.get("title"),
            color=tuple(cfg.get("color", (40, 40, 40))),
            rect=tuple(cfg.get("rect", (0, 0, 320, 240))),
        )

    def render(self, draw: ImageDraw.ImageDraw, font: ImageFont.ImageFont | None = None) -> None:
        """Draw the panel onto ``draw``. Hidden panels draw nothing."""
        if not self.visible:
            return
        x, y, w, h = self.rect
        draw.rectangle([x, y, x + w - 1, y + h - 1], fill=self.color, outline=BORDER)
        draw.text((x + 10, y + 10), self.title, fill=TEXT, font=font or load_font())

    def __repr__(self) -> str:
        state = "visible" if self.visible else "hidden"
        return f"<Panel {self.name!r} {state}>"
