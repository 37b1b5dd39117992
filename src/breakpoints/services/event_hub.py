"""EventHub core.

Lightweight synchronous publish/subscribe mechanism keyed by event name.

Goals:
 - Ordered dispatch (subscription order per event)
 - Callbacks may subscribe/unsubscribe themselves or others while a trigger
   is in progress without skipping still-valid entries or crashing
 - Bulk removal by event name, by callback, by context, or everything
 - Reserved ``"all"`` event receiving every trigger (event name prepended)
 - Optional tracing ring buffer (disabled by default)

Each event's subscriber list is an immutable tuple. ``on`` and ``off`` swap in
a new tuple; ``trigger`` walks the tuple it captured when it started, so edits
made by a running callback only affect later triggers.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Callable, Deque, Dict, Optional, Tuple

__all__ = [
    "ALL_EVENTS",
    "CHANGE_EVENT",
    "EventHub",
    "Subscription",
    "TraceEntry",
]

_logger = logging.getLogger(__name__)

ALL_EVENTS = "all"
CHANGE_EVENT = "change"


@dataclass(frozen=True)
class Subscription:
    callback: Callable[..., Any]
    context: Any = None

    def matches(self, callback: Optional[Callable[..., Any]], context: Any) -> bool:
        # Bound methods are recreated on every attribute access, compare by equality.
        if callback is not None and self.callback != callback:
            return False
        if context is not None and self.context is not context:
            return False
        return True


@dataclass(frozen=True)
class TraceEntry:
    name: str
    timestamp: float
    summary: str


def _split(events: str) -> list[str]:
    return events.split()


class EventHub:
    """Named-event dispatcher with mutation-safe iteration and optional tracing.

    Intended to be used directly or as a base class (``BreakpointListener``
    inherits it). Not thread-safe: subscriber edits must happen on the same
    thread that triggers.
    """

    DEFAULT_TRACE_CAPACITY = 50

    def __init__(self) -> None:
        self._callbacks: Dict[str, Tuple[Subscription, ...]] = {}
        self._tracing_enabled: bool = False
        self._trace_capacity: int = self.DEFAULT_TRACE_CAPACITY
        self._traces: Deque[TraceEntry] = deque(maxlen=self._trace_capacity)

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def on(
        self, events: str, callback: Optional[Callable[..., Any]], context: Any = None
    ) -> "EventHub":
        """Bind ``callback`` to one or more space separated ``events``.

        ``context`` is stored as an identity token so that ``off`` can remove
        every callback registered on behalf of one owner.
        """
        if callback is None:
            return self
        sub = Subscription(callback=callback, context=context)
        for name in _split(events):
            self._callbacks[name] = self._callbacks.get(name, ()) + (sub,)
        return self

    def off(
        self,
        events: Optional[str] = None,
        callback: Optional[Callable[..., Any]] = None,
        context: Any = None,
    ) -> "EventHub":
        """Remove one or many callbacks.

        With no arguments every subscription goes. With only ``events`` every
        subscription for those names goes. Otherwise only subscriptions matching
        ``callback`` and/or ``context`` are dropped; the rest are re-bound in
        their original order.
        """
        if not self._callbacks:
            return self
        if events is None and callback is None and context is None:
            self._callbacks = {}
            return self
        names = _split(events) if events is not None else list(self._callbacks)
        for name in names:
            subs = self._callbacks.pop(name, None)
            if not subs or (callback is None and context is None):
                continue
            for sub in subs:
                if not sub.matches(callback, context):
                    self.on(name, sub.callback, sub.context)
        return self

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def trigger(self, events: str, *args: Any) -> "EventHub":
        """Fire every callback bound to each of the space separated ``events``.

        Callbacks receive ``args``; ``"all"`` callbacks receive the event name
        first. Exceptions raised by callbacks propagate to the caller.
        """
        names = _split(events)
        if self._tracing_enabled:
            for name in names:
                self._record_trace(name, args)
        if not self._callbacks:
            return self
        catch_all = self._callbacks.get(ALL_EVENTS, ())
        for name in names:
            for sub in self._callbacks.get(name, ()):
                sub.callback(*args)
            for sub in catch_all:
                sub.callback(name, *args)
        return self

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def has_subscribers(self, event: Optional[str] = None) -> bool:
        if event is None:
            return any(self._callbacks.values())
        return bool(self._callbacks.get(event))

    def subscriber_count(self, event: str) -> int:
        return len(self._callbacks.get(event, ()))

    def list_events(self) -> list[str]:
        return [name for name, subs in self._callbacks.items() if subs]

    # ------------------------------------------------------------------
    # Tracing API
    # ------------------------------------------------------------------
    def enable_tracing(self, enabled: bool = True, *, capacity: int | None = None) -> None:
        """Enable or disable trigger tracing.

        Parameters
        ----------
        enabled: bool
            New tracing state.
        capacity: int | None
            Optional new ring buffer capacity (keeps the newest entries).
        """
        self._tracing_enabled = enabled
        if capacity is not None and capacity != self._trace_capacity:
            self._trace_capacity = capacity
            self._traces = deque(self._traces, maxlen=capacity)

    def clear_traces(self) -> None:
        self._traces.clear()

    def recent_traces(self) -> list[TraceEntry]:
        return list(self._traces)

    @property
    def tracing_enabled(self) -> bool:
        return self._tracing_enabled

    def _record_trace(self, name: str, args: Tuple[Any, ...]) -> None:
        if not args:
            summary = "-"
        else:
            text = ", ".join(repr(a) for a in args)
            summary = text if len(text) <= 40 else text[:37] + "..."
        self._traces.append(TraceEntry(name=name, timestamp=perf_counter(), summary=summary))
        _logger.debug("trigger %s (%s)", name, summary)
