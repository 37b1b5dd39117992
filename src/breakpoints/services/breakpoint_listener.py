"""Breakpoint listener.

Turns a continuous, debounced width signal into discrete region transitions.
Whenever the active region differs from the last one computed, a ``"change"``
event fires carrying ``(current, previous)``.

NOTE: regions must be given in *ascending* order of upper bound.

Example::

    listener = BreakpointListener(
        {"small": 400, "medium": 800, "large": 1024, "gutter": 9999},
        width_source=window_width,
        resize_signal=signal,
        scheduler=scheduler,
    )
    listener.on("change", lambda current, previous: ...)
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional, Tuple

from ..config.settings import runtime_settings
from ..design.regions import Region, RegionDefinitions, classify_width, normalize_regions
from .event_hub import CHANGE_EVENT, EventHub
from .relay import Relay, RelayConfigValue
from .scheduling import Debouncer, ResizeSource, Scheduler

__all__ = ["BreakpointListener", "CHANGE_EVENT"]

_logger = logging.getLogger(__name__)


class BreakpointListener(EventHub):
    """Tracks the active region and fires ``"change"`` on transitions.

    State:
        ``current`` is None when the width is beyond the largest bound (or no
        regions exist); ``previous`` is the last distinct region before
        ``current`` (None initially).
    """

    def __init__(
        self,
        breakpoints: Optional[RegionDefinitions],
        width_source: Callable[[], float],
        resize_signal: ResizeSource,
        scheduler: Scheduler,
        *,
        debounce_ms: int | None = None,
    ) -> None:
        super().__init__()
        self._breakpoints: Tuple[Region, ...] = normalize_regions(breakpoints)
        self._width_source = width_source
        self._resize_signal: Optional[ResizeSource] = resize_signal
        self._destroyed = False
        self.previous: Optional[str] = None
        self.current: Optional[str] = self.get_breakpoint(width_source())
        if debounce_ms is None:
            debounce_ms = runtime_settings.debounce_ms
        self._on_resize_debounced = Debouncer(debounce_ms, self.recompute, scheduler)
        resize_signal.add_listener(self._on_resize_debounced)
        _logger.debug(
            "listener attached (regions=%d, debounce=%dms, current=%r)",
            len(self._breakpoints),
            self._on_resize_debounced.delay_ms,
            self.current,
        )

    @property
    def breakpoints(self) -> Tuple[Region, ...]:
        return self._breakpoints

    @property
    def debounce_ms(self) -> int:
        return self._on_resize_debounced.delay_ms

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def get_breakpoint(self, width: float) -> Optional[str]:
        """Return the first region whose upper bound is greater than ``width``."""
        return classify_width(self._breakpoints, width)

    def recompute(self) -> None:
        """Re-read the width and fire ``"change"`` if the region moved.

        Does nothing once the listener has been destroyed.
        """
        if self._destroyed:
            return
        candidate = self.get_breakpoint(self._width_source())
        if candidate == self.current:
            return
        self.previous = self.current
        self.current = candidate
        _logger.debug("breakpoint change %r -> %r", self.previous, self.current)
        self.trigger(CHANGE_EVENT, self.current, self.previous)

    def relay(self, config: Mapping[str, RelayConfigValue]) -> Relay:
        """Shortcut for ``Relay(self, config)``."""
        return Relay(self, config)

    def destroy(self) -> None:
        """Detach from the resize signal and reset tracked state. Safe to repeat."""
        if self._resize_signal is not None:
            self._resize_signal.remove_listener(self._on_resize_debounced)
            self._resize_signal = None
        self._on_resize_debounced.cancel()
        self._destroyed = True
        self.current = None
        self.previous = None
        _logger.debug("listener destroyed")

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        names = ", ".join(f"{r.name}<{r.upper_bound}" for r in self._breakpoints)
        return f"BreakpointListener([{names}], current={self.current!r})"
