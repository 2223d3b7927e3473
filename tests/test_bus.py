from dataclasses import FrozenInstanceError, dataclass

import pytest

from graduates.bus import CommandBus, EventBus, HandlerNotFoundError, QueryBus


@dataclass(frozen=True)
class Ping:
    value: str


@dataclass(frozen=True)
class Pong:
    value: str


def test_query_bus_routes_by_message_type():
    bus = QueryBus()
    bus.register(Ping, lambda q: f"ping:{q.value}")
    bus.register(Pong, lambda q: f"pong:{q.value}")

    assert bus.execute(Ping("x")) == "ping:x"
    assert bus.execute(Pong("y")) == "pong:y"


def test_unregistered_message_raises():
    bus = CommandBus()

    with pytest.raises(HandlerNotFoundError) as exc_info:
        bus.execute(Ping("x"))

    assert exc_info.value.message_type is Ping
    assert "Ping" in str(exc_info.value)


def test_registering_again_replaces_handler():
    bus = CommandBus()
    bus.register(Ping, lambda c: 1)
    bus.register(Ping, lambda c: 2)

    assert bus.execute(Ping("x")) == 2


def test_handler_errors_propagate():
    bus = CommandBus()

    def fail(_command):
        raise RuntimeError("boom")

    bus.register(Ping, fail)

    with pytest.raises(RuntimeError, match="boom"):
        bus.execute(Ping("x"))


def test_event_bus_calls_subscribers_in_order_once():
    bus = EventBus()
    calls = []

    def first(event):
        calls.append(("first", event.value))

    def second(event):
        calls.append(("second", event.value))

    bus.subscribe(Ping, first)
    bus.subscribe(Ping, second)
    bus.subscribe(Ping, first)

    assert bus.publish(Ping("hi")) is None
    bus.publish(Pong("ignored"))

    assert calls == [("first", "hi"), ("second", "hi")]


def test_messages_are_immutable():
    with pytest.raises(FrozenInstanceError):
        Ping("x").value = "y"
