import logging

from core.event_bus import EventBus


def test_fire_calls_handlers_in_order():
    bus = EventBus()
    calls = []
    bus.register("loaded", lambda x: calls.append(("a", x)))
    bus.register("loaded", lambda x: calls.append(("b", x)))

    bus.fire("loaded", 1)

    assert calls == [("a", 1), ("b", 1)]


def test_failing_handler_is_logged_and_others_still_run(caplog):
    bus = EventBus()
    calls = []

    def bad(*_):
        raise RuntimeError("boom")

    bus.register("changed", bad)
    bus.register("changed", lambda: calls.append("ok"))

    with caplog.at_level(logging.ERROR, logger="core.event_bus"):
        bus.fire("changed")

    assert calls == ["ok"]
    assert "boom" in caplog.text


def test_unregister_during_dispatch():
    bus = EventBus()
    calls = []

    def once():
        calls.append("once")
        bus.unregister("tick", once)

    bus.register("tick", once)
    bus.fire("tick")
    bus.fire("tick")

    assert calls == ["once"]
    bus.unregister("tick", once)


def test_clear():
    bus = EventBus()
    calls = []
    bus.register("x", lambda: calls.append(1))
    bus.clear()
    bus.fire("x")
    assert calls == []
