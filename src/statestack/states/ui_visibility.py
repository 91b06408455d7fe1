"""UI visibility state.

Shows a UI element while the state is active and hides it otherwise.
Useful for menu screens, pause overlays, dialogue boxes or HUD variants
that should only be visible while a specific state is on top.
"""

from __future__ import annotations
import logging
from typing import Protocol

from statestack.core.errors import InvalidStateError
from statestack.states.base import State

log = logging.getLogger("statestack.states.ui_visibility")


class VisualElement(Protocol):
    """Anything with a settable visibility flag."""

    visible: bool


class UiVisibilityState(State):
    """Toggles a single UI element on enter/exit."""

    name = "ui_visibility"

    def __init__(self, element: VisualElement, name: str | None = None):
        if element is None:
            raise InvalidStateError("UiVisibilityState requires a UI element")
        self._element = element
        if name is not None:
            self.name = name

    @property
    def element(self) -> VisualElement:
        return self._element

    def on_enter(self) -> None:
        self._element.visible = True
        log.debug("%s: element shown", self.name)

    def on_exit(self) -> None:
        self._element.visible = False
        log.debug("%s: element hidden", self.name)
