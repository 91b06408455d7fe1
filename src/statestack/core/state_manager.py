"""Stack-based state manager.

Coordinates layered or temporary application states such as menus,
pause screens, dialogues and cutscenes. The state on top of the stack
is the only active one.

The manager:
  - pushes one initial state when initialize() is called
  - calls on_exit() on the outgoing state before on_enter() on the
    incoming one, for both push and pop
  - re-enters the exposed state when the state above it is popped

Hooks may themselves call push()/pop(); the stack is already consistent
when a hook runs, so nested transitions see the right ``current``. The
manager remembers which state has entered without exiting, so a nested
transition never exits or enters the same state twice.
"""

from __future__ import annotations
import logging
from typing import Callable

from statestack.core.errors import InvalidStateError, StateStackError
from statestack.core.event_bus import STATE_POPPED, STATE_PUSHED, EventBus
from statestack.states.base import State

log = logging.getLogger("statestack.state_manager")

StateFactory = Callable[[], State]


def _label(state: State) -> str:
    return getattr(state, "name", None) or type(state).__name__


def _validate(state: State) -> None:
    if state is None:
        raise InvalidStateError("cannot push a missing state")
    for hook in ("on_enter", "on_exit"):
        if not callable(getattr(state, hook, None)):
            raise InvalidStateError(
                f"{type(state).__name__} does not implement {hook}()"
            )


class StateManager:
    """Owns the state stack and drives enter/exit transitions."""

    def __init__(
        self,
        initial_state_factory: StateFactory | None = None,
        event_bus: EventBus | None = None,
    ):
        self.event_bus = event_bus
        self._initial_state_factory = initial_state_factory
        self._stack: list[State] = []
        # Entered and not yet exited; None while a transition is between hooks
        self._active: State | None = None
        self._initialized = False

    # --- Read-only accessors ---

    @property
    def current(self) -> State | None:
        """The active state, or None when the stack is empty."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def is_empty(self) -> bool:
        return not self._stack

    @property
    def initialized(self) -> bool:
        return self._initialized

    def states(self) -> tuple[State, ...]:
        """Return a bottom-first snapshot of the stack."""
        return tuple(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    # --- Initialization ---

    def get_initial_state(self) -> State:
        """Return the state pushed by initialize().

        Subclasses override this when no factory is passed in. It runs
        before the host has finished wiring itself up, so the returned
        state should not rely on collaborators that may not exist yet.
        """
        raise StateStackError(
            f"{type(self).__name__} has no initial state factory; "
            "pass one to initialize() or override get_initial_state()"
        )

    def initialize(self, factory: StateFactory | None = None) -> State:
        """Push the initial state. Must be called exactly once."""
        if self._initialized:
            raise StateStackError("state manager is already initialized")

        factory = factory or self._initial_state_factory or self.get_initial_state
        state = factory()
        if state is None:
            raise InvalidStateError("initial state factory returned None")
        _validate(state)

        self._initialized = True
        log.info("Initial state → %s", _label(state))
        self.push(state)
        return state

    # --- Transitions ---

    def push(self, state: State) -> None:
        """Push a state; the active state (if any) exits, then it enters."""
        _validate(state)

        previous = self._deactivate()

        self._stack.append(state)
        depth = len(self._stack)
        log.info("Push → %s (depth %d)", _label(state), depth)
        self._activate(state)

        self._publish(STATE_PUSHED, {
            "state": state,
            "previous": previous,
            "depth": depth,
        })

    def pop(self) -> None:
        """Pop the active state and re-enter the one below it.

        Popping an empty stack does nothing.
        """
        if not self._stack:
            log.debug("Pop on empty stack ignored")
            return

        top = self._stack.pop()
        depth = len(self._stack)
        log.info("Pop ← %s (depth %d)", _label(top), depth)
        if top is self._active:
            self._active = None
            self._run_hook(top, "on_exit")

        # on_exit may itself have pushed or popped
        exposed = self.current
        if exposed is not None and exposed is not self._active:
            self._deactivate()
            self._activate(exposed)

        self._publish(STATE_POPPED, {
            "state": top,
            "exposed": exposed,
            "depth": depth,
        })

    # --- Internals ---

    def _deactivate(self) -> State | None:
        """Exit the active state, plus anything its on_exit made active."""
        first = self._active
        while self._active is not None:
            active, self._active = self._active, None
            self._run_hook(active, "on_exit")
        return first

    def _activate(self, state: State) -> None:
        self._active = state
        self._run_hook(state, "on_enter")

    def _run_hook(self, state: State, hook: str) -> None:
        try:
            getattr(state, hook)()
        except Exception:
            log.exception("%s.%s() failed", _label(state), hook)
            raise

    def _publish(self, event_type: str, data: dict) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event_type, data)
