"""Tests for Relay enter/leave dispatch."""

import pytest

from breakpoints.services import EventHub, Relay, RelayConfigError


class Recorder:
    def __init__(self):
        self.calls = []

    def cb(self, tag):
        return lambda: self.calls.append(tag)


def _relay(config):
    hub = EventHub()
    return hub, Relay(hub, config)


def test_enter_leave_and_inside_transitions():
    rec = Recorder()
    hub, relay = _relay({"small medium": {"enter": rec.cb("enter"), "leave": rec.cb("leave")}})
    hub.trigger("change", "medium", "large")
    assert rec.calls == ["enter"]
    hub.trigger("change", "large", "medium")
    assert rec.calls == ["enter", "leave"]
    hub.trigger("change", "small", "medium")
    assert rec.calls == ["enter", "leave"]


def test_bare_callable_is_enter_only():
    rec = Recorder()
    hub, relay = _relay({"small": rec.cb("small")})
    entry = relay.entries[0]
    assert entry.breakpoints == frozenset({"small"})
    assert entry.leave is None
    hub.trigger("change", "small", None)
    hub.trigger("change", "medium", "small")  # no leave registered
    assert rec.calls == ["small"]


def test_first_region_enters_from_none():
    rec = Recorder()
    hub, _ = _relay({"a": rec.cb("a"), "b": rec.cb("b")})
    hub.trigger("change", "a", None)
    assert rec.calls == ["a"]


def test_leaving_to_none_fires_leave():
    rec = Recorder()
    hub, _ = _relay({"large": {"enter": rec.cb("enter"), "leave": rec.cb("leave")}})
    hub.trigger("change", "large", "medium")
    hub.trigger("change", None, "large")
    assert rec.calls == ["enter", "leave"]


def test_multiple_entries_fire_in_config_order():
    rec = Recorder()
    hub, _ = _relay(
        {
            "small": {"enter": rec.cb("small+"), "leave": rec.cb("small-")},
            "medium large": {"enter": rec.cb("wide+"), "leave": rec.cb("wide-")},
        }
    )
    hub.trigger("change", "medium", "small")
    assert rec.calls == ["small-", "wide+"]


def test_unknown_region_never_matches():
    rec = Recorder()
    hub, _ = _relay({"ghost": rec.cb("ghost")})
    hub.trigger("change", "small", None)
    hub.trigger("change", "medium", "small")
    assert rec.calls == []


def test_same_current_and_previous_in_set_fires_nothing():
    rec = Recorder()
    hub, _ = _relay({"small": {"enter": rec.cb("enter"), "leave": rec.cb("leave")}})
    hub.trigger("change", "small", "small")
    assert rec.calls == []


def test_destroy_stops_dispatch_and_is_idempotent():
    rec = Recorder()
    hub, relay = _relay({"small": rec.cb("small")})
    other = Relay(hub, {"small": rec.cb("other")})
    relay.destroy()
    assert relay.listener is None
    assert relay.entries == ()
    hub.trigger("change", "small", None)
    assert rec.calls == ["other"]
    relay.destroy()
    other.destroy()
    assert not hub.has_subscribers("change")


def test_destroy_only_removes_own_subscription():
    hub = EventHub()
    seen = []
    hub.on("change", lambda *a: seen.append(a))
    relay = Relay(hub, {"x": lambda: None})
    assert hub.subscriber_count("change") == 2
    relay.destroy()
    assert hub.subscriber_count("change") == 1
    hub.trigger("change", "x", None)
    assert seen == [("x", None)]


def test_destroy_from_enter_callback_stops_remaining_entries():
    rec = Recorder()
    hub = EventHub()
    holder = {}

    def stop():
        rec.calls.append("stop")
        holder["relay"].destroy()

    holder["relay"] = Relay(hub, {"a": stop, "a b": rec.cb("second")})
    hub.trigger("change", "a", None)
    assert rec.calls == ["stop"]


@pytest.mark.parametrize(
    "value",
    [
        42,
        {"leave": lambda: None},
        {"enter": "not callable"},
        {"enter": lambda: None, "leave": 3},
    ],
)
def test_malformed_config_rejected(value):
    with pytest.raises(RelayConfigError):
        Relay(EventHub(), {"small": value})
