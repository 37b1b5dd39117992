"""Service layer exports.

Responsibilities:
 - EventHub publish/subscribe core
 - BreakpointListener (width -> region transitions)
 - Relay (region enter/leave callbacks)
 - Debounce / scheduling primitives
"""

from .event_hub import ALL_EVENTS, CHANGE_EVENT, EventHub, Subscription, TraceEntry  # noqa: F401
from .scheduling import (  # noqa: F401
    Debouncer,
    ImmediateScheduler,
    ResizeSignal,
    ResizeSource,
    Scheduler,
)
from .relay import Relay, RelayConfigError, RelayEntry  # noqa: F401
from .breakpoint_listener import BreakpointListener  # noqa: F401

__all__ = [
    "ALL_EVENTS",
    "CHANGE_EVENT",
    "EventHub",
    "Subscription",
    "TraceEntry",
    "Debouncer",
    "ImmediateScheduler",
    "ResizeSignal",
    "ResizeSource",
    "Scheduler",
    "Relay",
    "RelayConfigError",
    "RelayEntry",
    "BreakpointListener",
]
