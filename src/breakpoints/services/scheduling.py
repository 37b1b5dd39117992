"""Debounce and scheduling primitives.

The listener never talks to a timer or a windowing toolkit directly. It is
handed two collaborators:

 - a ``Scheduler`` able to run a callable after a delay and cancel it again;
 - a ``ResizeSource`` announcing that the width *may* have changed.

``Debouncer`` combines a scheduler with a callable: every call cancels the
pending run and schedules a fresh one, so only the last call inside a quiet
window executes (last-event-wins).

Concrete implementations here are Qt-free: ``ResizeSignal`` for in-process
hosts and ``ImmediateScheduler`` for headless replay. Qt-backed versions live
in ``breakpoints.qt.adapters``.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol

__all__ = [
    "Scheduler",
    "ResizeSource",
    "Debouncer",
    "ResizeSignal",
    "ImmediateScheduler",
]


class Scheduler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def schedule_after(self, delay_ms: int, fn: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class ResizeSource(Protocol):
    def add_listener(self, fn: Callable[[], None]) -> None: ...

    def remove_listener(self, fn: Callable[[], None]) -> None: ...


class Debouncer:
    """Callable wrapper delaying ``fn`` until ``delay_ms`` of inactivity."""

    def __init__(self, delay_ms: int, fn: Callable[[], None], scheduler: Scheduler) -> None:
        self._delay_ms = max(0, int(delay_ms))
        self._fn = fn
        self._scheduler = scheduler
        self._handle: Any = None
        self._pending = False

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        return self._pending

    def __call__(self, *_args: Any) -> None:
        self.cancel()
        self._pending = True
        self._handle = self._scheduler.schedule_after(self._delay_ms, self._fire)

    def cancel(self) -> None:
        if self._pending:
            self._scheduler.cancel(self._handle)
        self._handle = None
        self._pending = False

    def _fire(self) -> None:
        self._handle = None
        self._pending = False
        self._fn()


class ResizeSignal:
    """In-process ``ResizeSource``; hosts call ``emit()`` when the width may have changed."""

    def __init__(self) -> None:
        self._listeners: List[Callable[[], None]] = []

    def add_listener(self, fn: Callable[[], None]) -> None:
        self._listeners.append(fn)

    def remove_listener(self, fn: Callable[[], None]) -> None:
        for i, existing in enumerate(self._listeners):
            if existing is fn:
                self._listeners.pop(i)
                break

    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self) -> None:
        # Snapshot first so listeners may detach while being notified.
        for fn in list(self._listeners):
            fn()


class ImmediateScheduler:
    """Runs scheduled callables synchronously, ignoring the delay.

    Useful where no real event loop exists (batch replay, scripts). Handles are
    always None and ``cancel`` has nothing to do.
    """

    def schedule_after(self, delay_ms: int, fn: Callable[[], None]) -> Optional[Any]:
        fn()
        return None

    def cancel(self, handle: Any) -> None:
        return None
