"""Transition events.

The StateManager publishes one event per completed push or pop. The
payload is a dict:

  state_pushed  {"state", "previous", "depth"}
  state_popped  {"state", "exposed", "depth"}

``previous``/``exposed`` is None when there was no state below.
"""

import logging
import threading
from typing import Any, Callable

log = logging.getLogger("statestack.event_bus")

STATE_PUSHED = "state_pushed"
STATE_POPPED = "state_popped"
TRANSITION_EVENTS = (STATE_PUSHED, STATE_POPPED)


def _callback_name(callback: Callable) -> str:
    return getattr(callback, "__name__", repr(callback))


class EventBus:
    """Publish/subscribe channel for state transitions.

    Delivery is synchronous, on the thread that pushed or popped. A
    failing subscriber is logged and skipped; it never interrupts the
    transition that published the event.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Callable]] = {}
        self._lock = threading.Lock()

    def subscribe(self, event_type: str, callback: Callable) -> Callable[[], None]:
        """Register ``callback(data)``. Returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.setdefault(event_type, []).append(callback)
        log.debug("Subscribed to '%s': %s", event_type, _callback_name(callback))
        return lambda: self.unsubscribe(event_type, callback)

    def subscribe_transitions(self, callback: Callable[[str, dict], None]) -> Callable[[], None]:
        """Register ``callback(event_type, data)`` for every push and pop."""
        handles = [
            self.subscribe(event_type, lambda data, t=event_type: callback(t, data))
            for event_type in TRANSITION_EVENTS
        ]

        def unsubscribe() -> None:
            for handle in handles:
                handle()

        return unsubscribe

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        with self._lock:
            if event_type in self._subscribers:
                self._subscribers[event_type] = [
                    cb for cb in self._subscribers[event_type] if cb is not callback
                ]

    def publish(self, event_type: str, data: Any = None) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get(event_type, []))

        for callback in callbacks:
            try:
                callback(data)
            except Exception:
                log.exception(
                    "Error in %s handler %s", event_type, _callback_name(callback)
                )
