"""Tests for BreakpointListener transitions, debounce wiring and teardown."""

import pytest

from breakpoints.config.settings import runtime_settings
from breakpoints.services import BreakpointListener, ImmediateScheduler, Relay, ResizeSignal

from tests.factories import FakeViewport, ManualScheduler

REGIONS = {"small": 400, "medium": 800, "large": 9999}


def _make(width=100, regions=REGIONS, debounce_ms=50):
    viewport = FakeViewport(width)
    sched = ManualScheduler()
    listener = BreakpointListener(
        regions, viewport.read, viewport.signal, sched, debounce_ms=debounce_ms
    )
    events = []
    listener.on("change", lambda current, previous: events.append((current, previous)))
    return listener, viewport, sched, events


def test_initial_region_computed_without_event():
    listener, _, _, events = _make(width=500)
    assert listener.current == "medium"
    assert listener.previous is None
    assert events == []


def test_get_breakpoint_uses_stored_order():
    listener, *_ = _make()
    assert [r.name for r in listener.breakpoints] == ["small", "medium", "large"]
    assert listener.get_breakpoint(399) == "small"
    assert listener.get_breakpoint(400) == "medium"
    assert listener.get_breakpoint(10_000) is None


def test_transition_fires_single_change_with_current_and_previous():
    listener, viewport, sched, events = _make(width=100)
    viewport.resize(600)
    sched.advance(50)
    assert events == [("medium", "small")]
    assert (listener.current, listener.previous) == ("medium", "small")


def test_same_region_resize_fires_nothing():
    listener, viewport, sched, events = _make(width=100)
    viewport.resize(150)
    sched.advance(50)
    listener.recompute()
    assert events == []
    assert listener.previous is None


def test_resize_burst_is_debounced_to_last_width():
    listener, viewport, sched, events = _make(width=100)
    for width in (500, 900, 300, 700):
        viewport.resize(width)
        sched.advance(10)
    assert events == []
    sched.advance(50)
    # only the final width (700 -> medium) is evaluated
    assert events == [("medium", "small")]


def test_transition_beyond_last_bound_reports_none():
    listener, viewport, sched, events = _make(width=9000)
    viewport.resize(12000)
    sched.advance(50)
    assert events == [(None, "large")]
    viewport.resize(50)
    sched.advance(50)
    assert events[-1] == ("small", None)


def test_scenario_widths_sequence():
    state = {"width": 50}
    signal = ResizeSignal()
    listener = BreakpointListener(
        {"a": 100, "b": 200}, lambda: state["width"], signal, ImmediateScheduler()
    )
    events = []
    listener.on("change", lambda *args: events.append(args))
    assert listener.current == "a"
    for width in (50, 150, 250):
        state["width"] = width
        signal.emit()
    assert events == [("b", "a"), (None, "b")]


def test_empty_regions_never_change():
    listener, viewport, sched, events = _make(width=10, regions={})
    assert listener.current is None
    viewport.resize(5000)
    sched.advance(50)
    assert events == []


def test_destroy_detaches_and_clears_state():
    listener, viewport, sched, events = _make(width=100)
    viewport.resize(600)  # pending debounced recompute
    listener.destroy()
    assert listener.current is None
    assert listener.previous is None
    assert listener.destroyed
    assert viewport.signal.listener_count() == 0
    sched.advance(100)
    viewport.resize(5000)
    sched.advance(100)
    listener.recompute()
    assert events == []
    assert listener.current is None


def test_destroy_twice_is_safe():
    listener, *_ = _make()
    listener.destroy()
    listener.destroy()
    assert listener.current is None


def test_debounce_falls_back_to_runtime_settings():
    runtime_settings.debounce_ms = 120
    viewport = FakeViewport(100)
    sched = ManualScheduler()
    listener = BreakpointListener(REGIONS, viewport.read, viewport.signal, sched)
    assert listener.debounce_ms == 120
    runtime_settings.debounce_ms = 5  # later changes do not apply retroactively
    assert listener.debounce_ms == 120
    viewport.resize(600)
    sched.advance(119)
    assert listener.current == "small"
    sched.advance(1)
    assert listener.current == "medium"


def test_all_subscriber_sees_change():
    listener, viewport, sched, _ = _make(width=100)
    seen = []
    listener.on("all", lambda *args: seen.append(args))
    viewport.resize(900)
    sched.advance(50)
    assert seen == [("change", "large", "small")]


def test_relay_shortcut_binds_to_listener():
    listener, viewport, sched, _ = _make(width=100)
    hits = []
    relay = listener.relay({"medium": lambda: hits.append("enter")})
    assert isinstance(relay, Relay)
    assert relay.listener is listener
    viewport.resize(600)
    sched.advance(50)
    assert hits == ["enter"]


def test_callback_error_propagates_but_state_is_updated():
    listener, viewport, sched, _ = _make(width=100)

    def bad(current, previous):
        raise RuntimeError("handler failed")

    listener.on("change", bad)
    viewport.resize(600)
    with pytest.raises(RuntimeError):
        sched.advance(50)
    assert listener.current == "medium"
