from __future__ import annotations

import io
from pathlib import Path

from PIL import Image

from statestack.main import StateStackDemo

CONFIG = {
    "display": {"width": 120, "height": 80},
    "initial": "main_menu",
    "panels": {
        "main_menu": {"color": [30, 60, 120], "rect": [0, 0, 120, 80]},
        "pause": {"color": [90, 90, 90], "rect": [20, 20, 60, 40]},
    },
}


def _demo() -> tuple[StateStackDemo, io.StringIO]:
    out = io.StringIO()
    return StateStackDemo(CONFIG, out=out), out


def test_demo_starts_with_initial_panel_visible() -> None:
    demo, _ = _demo()
    assert demo.states.depth == 1
    assert demo.states.current.name == "main_menu"
    assert [p.name for p in demo.screen.visible_panels()] == ["main_menu"]


def test_push_and_pop_commands_toggle_panels() -> None:
    demo, out = _demo()
    demo.run(io.StringIO("push pause\nshow\npop\nshow\n"))
    lines = out.getvalue().splitlines()
    assert lines == [
        "stack: main_menu > pause",
        "visible: pause",
        "stack: main_menu",
        "visible: main_menu",
    ]


def test_unknown_panel_and_command_are_ignored() -> None:
    demo, _ = _demo()
    assert demo.push("missing") is False
    assert demo.handle("dance") is True
    assert demo.states.depth == 1


def test_unwritable_render_target_is_reported_not_raised(tmp_path: Path) -> None:
    demo, _ = _demo()
    assert demo.render(str(tmp_path / "frame.unknownext")) is False
    assert demo.handle(f"render {tmp_path / 'missing' / 'frame.png'}") is True
    demo.run(io.StringIO(f"render {tmp_path / 'x.nope'}\npush pause\n"))
    assert demo.states.current.name == "pause"


def test_transitions_are_observed_through_event_bus() -> None:
    demo, _ = _demo()
    assert demo.transitions == 1
    demo.run(io.StringIO("push pause\npop\npop\npop\n"))
    assert demo.transitions == 4


def test_quit_stops_processing() -> None:
    demo, _ = _demo()
    demo.run(io.StringIO("quit\npush pause\n"))
    assert demo.states.depth == 1


def test_popping_everything_reports_empty_stack() -> None:
    demo, _ = _demo()
    demo.handle("pop")
    demo.handle("pop")
    assert demo.describe() == "stack: (empty)\nvisible: (none)"


def test_render_command_writes_frame(tmp_path: Path) -> None:
    demo, _ = _demo()
    target = tmp_path / "frame.png"
    demo.handle(f"render {target}")
    assert demo.render(str(target)) is True
    with Image.open(target) as img:
        assert img.size == (120, 80)
