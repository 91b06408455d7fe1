"""Stack-based state machine for layered application modes."""

from statestack.core.errors import InvalidStateError, StateStackError
from statestack.core.state_manager import StateManager
from statestack.states.base import State
from statestack.states.ui_visibility import UiVisibilityState

__all__ = [
    "InvalidStateError",
    "State",
    "StateManager",
    "StateStackError",
    "UiVisibilityState",
]
