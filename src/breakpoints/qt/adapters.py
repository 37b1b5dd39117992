"""PyQt6 collaborators for ``BreakpointListener``.

Provides the concrete scheduler and resize signal a Qt host needs:

 - ``QtScheduler``: pool of single-shot ``QTimer`` objects. A cancelled or
   fired timer goes back to the pool and is restarted for the next call, so a
   debounced listener keeps exactly one timer no matter how many resizes it sees.
 - ``WidgetResizeSignal``: event filter reacting to ``QEvent.Type.Resize`` on
   one widget. The filter is installed only while listeners are registered.
 - ``listen_to_widget``: wires both around ``widget.width``.

Tests drive resize events through real widgets on the ``offscreen`` platform.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from PyQt6.QtCore import QEvent, QObject, QTimer
from PyQt6.QtWidgets import QWidget

from ..design.regions import RegionDefinitions
from ..services.breakpoint_listener import BreakpointListener

__all__ = [
    "QtScheduler",
    "QtTimerHandle",
    "WidgetResizeSignal",
    "listen_to_widget",
]


class QtTimerHandle:
    """Handle returned by ``QtScheduler.schedule_after``."""

    __slots__ = ("timer", "fn")

    def __init__(self, timer: QTimer, fn: Callable[[], None]) -> None:
        self.timer = timer
        self.fn = fn


class QtScheduler:
    """``Scheduler`` backed by reusable single-shot QTimers."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent
        self._idle: List[QTimer] = []
        self._active: Dict[QTimer, QtTimerHandle] = {}

    def schedule_after(self, delay_ms: int, fn: Callable[[], None]) -> QtTimerHandle:
        timer = self._idle.pop() if self._idle else self._new_timer()
        handle = QtTimerHandle(timer, fn)
        self._active[timer] = handle
        timer.start(max(0, int(delay_ms)))
        return handle

    def cancel(self, handle: Optional[QtTimerHandle]) -> None:
        # A stale handle must not stop a timer already reused for another call.
        if handle is None or self._active.get(handle.timer) is not handle:
            return
        handle.timer.stop()
        self._release(handle.timer)

    def is_pending(self, handle: Optional[QtTimerHandle]) -> bool:
        return handle is not None and self._active.get(handle.timer) is handle

    def active_count(self) -> int:
        return len(self._active)

    def timer_count(self) -> int:
        return len(self._active) + len(self._idle)

    def _new_timer(self) -> QTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._on_timeout(timer))  # type: ignore[attr-defined]
        return timer

    def _on_timeout(self, timer: QTimer) -> None:
        handle = self._active.get(timer)
        if handle is None:
            return
        self._release(timer)
        handle.fn()

    def _release(self, timer: QTimer) -> None:
        self._active.pop(timer, None)
        self._idle.append(timer)


class WidgetResizeSignal(QObject):
    """``ResizeSource`` for a single widget, implemented as an event filter."""

    def __init__(self, widget: QWidget) -> None:
        super().__init__(widget)
        self._widget: Optional[QWidget] = widget
        self._listeners: List[Callable[[], None]] = []
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def add_listener(self, fn: Callable[[], None]) -> None:
        self._listeners.append(fn)
        if self._widget is not None and not self._installed:
            self._widget.installEventFilter(self)
            self._installed = True

    def remove_listener(self, fn: Callable[[], None]) -> None:
        for i, existing in enumerate(self._listeners):
            if existing is fn:
                self._listeners.pop(i)
                break
        if not self._listeners:
            self._uninstall()

    def listener_count(self) -> int:
        return len(self._listeners)

    def detach(self) -> None:
        self._listeners.clear()
        self._uninstall()
        self._widget = None

    def _uninstall(self) -> None:
        if self._installed and self._widget is not None:
            self._widget.removeEventFilter(self)
        self._installed = False

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        if self._widget is not None and event.type() == QEvent.Type.Resize:
            for fn in list(self._listeners):
                fn()
        return False


def listen_to_widget(
    widget: QWidget,
    breakpoints: RegionDefinitions,
    *,
    debounce_ms: int | None = None,
    scheduler: Optional[QtScheduler] = None,
) -> BreakpointListener:
    """Create a listener tracking ``widget``'s width.

    ``listener.destroy()`` removes the resize filter from the widget; the
    filter object and the scheduler's timer are parented to the widget.
    """
    signal = WidgetResizeSignal(widget)
    return BreakpointListener(
        breakpoints,
        widget.width,
        signal,
        scheduler or QtScheduler(widget),
        debounce_ms=debounce_ms,
    )
