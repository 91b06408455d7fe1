from __future__ import annotations

from statestack.core.event_bus import STATE_POPPED, STATE_PUSHED, EventBus


def test_publish_delivers_to_subscribers_in_order() -> None:
    bus = EventBus()
    received: list[tuple[str, object]] = []
    bus.subscribe("tick", lambda data: received.append(("first", data)))
    bus.subscribe("tick", lambda data: received.append(("second", data)))
    bus.publish("tick", 1)
    assert received == [("first", 1), ("second", 1)]


def test_unsubscribe_stops_delivery() -> None:
    bus = EventBus()
    received: list[object] = []

    def handler(data: object) -> None:
        received.append(data)

    bus.subscribe("tick", handler)
    bus.unsubscribe("tick", handler)
    bus.publish("tick", 1)
    assert received == []


def test_failing_subscriber_does_not_block_others() -> None:
    bus = EventBus()
    received: list[object] = []

    def broken(data: object) -> None:
        raise RuntimeError("boom")

    bus.subscribe("tick", broken)
    bus.subscribe("tick", received.append)
    bus.publish("tick", "x")
    assert received == ["x"]


def test_publish_without_subscribers_is_noop() -> None:
    EventBus().publish("nothing", None)


def test_subscribe_returns_unsubscribe_handle() -> None:
    bus = EventBus()
    received: list[object] = []
    cancel = bus.subscribe("tick", received.append)
    bus.publish("tick", 1)
    cancel()
    bus.publish("tick", 2)
    assert received == [1]


def test_subscribe_transitions_receives_both_kinds() -> None:
    bus = EventBus()
    seen: list[tuple[str, object]] = []
    cancel = bus.subscribe_transitions(lambda kind, data: seen.append((kind, data)))
    bus.publish(STATE_PUSHED, {"depth": 1})
    bus.publish(STATE_POPPED, {"depth": 0})
    bus.publish("other", None)
    cancel()
    bus.publish(STATE_PUSHED, {"depth": 1})
    assert seen == [(STATE_PUSHED, {"depth": 1}), (STATE_POPPED, {"depth": 0})]
