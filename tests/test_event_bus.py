import pytest

from enclosures.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_silent():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []

    def handler(sender, **kwargs):
        calls.append(kwargs)

    bus.subscribe("ping", handler)
    bus.emit("ping", n=1)
    bus.unsubscribe("ping", handler)
    bus.emit("ping", n=2)
    assert calls == [{"n": 1}]


def test_held_emits_are_delivered_in_order_on_exit():
    bus = EventBus()
    calls = []
    bus.subscribe("a", lambda sender, **kwargs: calls.append(("a", kwargs)))
    bus.subscribe("b", lambda sender, **kwargs: calls.append(("b", kwargs)))

    with bus.held():
        bus.emit("a", n=1)
        with bus.held():
            bus.emit("b", n=2)
        assert calls == []

    assert calls == [("a", {"n": 1}), ("b", {"n": 2})]


def test_held_emits_are_dropped_when_block_raises():
    bus = EventBus()
    calls = []
    bus.subscribe("a", lambda sender, **kwargs: calls.append(kwargs))

    with pytest.raises(RuntimeError):
        with bus.held():
            bus.emit("a", n=1)
            raise RuntimeError("boom")

    assert calls == []
    bus.emit("a", n=2)
    assert calls == [{"n": 2}]
