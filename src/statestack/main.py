#!/usr/bin/env python3
"""statestack demo console driver.

Wires the pieces together the way a host application would:
  1. Loads panel definitions from config
  2. Builds one UiVisibilityState per push, over the named panel
  3. Initializes a StateManager with the configured initial panel
  4. Reads commands from stdin and renders frames on request

Commands:
  push <panel>    show a panel on top of the current one
  pop             return to the previous panel
  show            print the stack and the visible panels
  render <path>   save the current frame as an image
  quit            stop
"""

import logging
import sys
from typing import TextIO

from statestack.config import load_config
from statestack.core.event_bus import STATE_PUSHED, EventBus
from statestack.core.logging_config import setup_logging
from statestack.core.state_manager import StateManager
from statestack.states.ui_visibility import UiVisibilityState
from statestack.ui.panel import Panel
from statestack.ui.screens import PanelScreen

log = logging.getLogger("statestack.main")


class PanelStateManager(StateManager):
    """State manager whose initial state shows the configured panel."""

    def __init__(self, screen: PanelScreen, initial: str, event_bus: EventBus | None = None):
        super().__init__(event_bus=event_bus)
        self._screen = screen
        self._initial = initial

    def get_initial_state(self) -> UiVisibilityState:
        return UiVisibilityState(self._screen.get(self._initial), name=self._initial)


class StateStackDemo:
    """Demo host application."""

    def __init__(self, config: dict, out: TextIO | None = None):
        self.config = config
        self.out = out or sys.stdout
        self.event_bus = EventBus()
        self.transitions = 0

        display = config.get("display", {})
        self.screen = PanelScreen(
            [Panel.from_config(name, cfg or {}) for name, cfg in config["panels"].items()],
            width=display.get("width", 640),
            height=display.get("height", 480),
        )
        self.states = PanelStateManager(self.screen, config["initial"],
                                        event_bus=self.event_bus)

        self.event_bus.subscribe_transitions(self._on_transition)

        # Initial state must be pushed before any command is accepted
        self.states.initialize()

    # --- Event handlers ---

    def _on_transition(self, event_type: str, data: dict) -> None:
        self.transitions += 1
        if event_type == STATE_PUSHED:
            log.debug("pushed %s over %s", data["state"], data["previous"])
        else:
            log.debug("popped %s, exposed %s", data["state"], data["exposed"])

    # --- Commands ---

    def push(self, panel_name: str) -> bool:
        try:
            panel = self.screen.get(panel_name)
        except KeyError:
            log.warning("Unknown panel: %s", panel_name)
            return False
        self.states.push(UiVisibilityState(panel, name=panel_name))
        return True

    def pop(self) -> None:
        self.states.pop()

    def describe(self) -> str:
        stack = " > ".join(s.name for s in self.states.states()) or "(empty)"
        visible = ", ".join(p.name for p in self.screen.visible_panels()) or "(none)"
        return f"stack: {stack}\nvisible: {visible}"

    def render(self, path: str) -> bool:
        try:
            self.screen.render().save(path)
        except (OSError, ValueError) as exc:
            log.warning("Could not save frame to %s: %s", path, exc)
            return False
        log.info("Frame saved to %s", path)
        return True

    def handle(self, line: str) -> bool:
        """Run one command line. Return False when the driver should stop."""
        parts = line.split()
        if not parts:
            return True
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("quit", "exit"):
            return False
        if cmd == "push" and len(args) == 1:
            self.push(args[0])
        elif cmd == "pop" and not args:
            self.pop()
        elif cmd == "show" and not args:
            print(self.describe(), file=self.out)
        elif cmd == "render" and len(args) == 1:
            self.render(args[0])
        else:
            log.warning("Unrecognized command: %s", line.strip())
        return True

    def run(self, stream: TextIO) -> None:
        for line in stream:
            if not self.handle(line):
                break
        log.info("Stopped with %d state(s) on the stack", self.states.depth)


def main() -> None:
    setup_logging()
    log.info("=== statestack demo ===")

    config = load_config()
    demo = StateStackDemo(config)
    print(demo.describe())
    try:
        demo.run(sys.stdin)
    except KeyboardInterrupt:
        log.info("Interrupted, stopping...")


if __name__ == "__main__":
    main()
