"""Tests for EventBus."""

from __future__ import annotations

from keycalc.core.event_bus import EventBus
from keycalc.core.events import INPUT_EVENTS, Event, EventType


def _event(event_type=EventType.DIGIT, data="1"):
    return Event(type=event_type, data=data, timestamp=0.0)


def test_subscribe_and_publish():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.DIGIT, received.append)
    event = _event()
    bus.publish(event)
    assert received == [event]


def test_only_matching_type_is_delivered():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.CLEAR, received.append)
    bus.publish(_event(EventType.DIGIT))
    assert received == []


def test_unsubscribe():
    bus = EventBus()
    received = []
    handler = received.append
    bus.subscribe(EventType.DIGIT, handler)
    bus.unsubscribe(EventType.DIGIT, handler)
    bus.publish(_event())
    assert received == []


def test_unsubscribe_unknown_handler_is_ignored():
    bus = EventBus()
    bus.unsubscribe(EventType.DIGIT, print)


def test_subscribe_many():
    bus = EventBus()
    received = []
    bus.subscribe_many(INPUT_EVENTS, received.append)
    for etype in INPUT_EVENTS:
        assert bus.handler_count(etype) == 1
    bus.publish(_event(EventType.CALCULATE, None))
    bus.publish(_event(EventType.STATE_CHANGED, None))
    assert [e.type for e in received] == [EventType.CALCULATE]
    bus.unsubscribe_many(INPUT_EVENTS, received.append)
    assert bus.handler_count(EventType.CALCULATE) == 0


def test_handler_exception_does_not_crash_bus(caplog):
    bus = EventBus()

    def bad_handler(e):
        raise RuntimeError("oops")

    received = []
    bus.subscribe(EventType.DIGIT, bad_handler)
    bus.subscribe(EventType.DIGIT, received.append)
    bus.publish(_event())
    assert len(received) == 1  # second handler still ran
    assert "EventBus handler error" in caplog.text


def test_no_handlers_does_not_raise():
    bus = EventBus()
    bus.publish(_event(EventType.APP_QUIT, None))
