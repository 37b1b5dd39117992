"""Relay: region-scoped enter/leave callbacks on top of a listener.

A relay subscribes to a listener's ``"change"`` event and fans it out to
entries keyed by one or more region names. An entry's ``enter`` runs when the
listener moves *into* its set of regions from outside it; ``leave`` (optional)
runs when the listener moves *out of* the set. Moves within the set, or
entirely outside it, run nothing.

Configuration::

    relay = Relay(listener, {
        "small": {"enter": on_small, "leave": off_small},
        "medium large": on_wide,          # bare callable == enter only
    })

Region names unknown to the listener are accepted; they simply never match.
Entries are fixed at construction; destroy and recreate to change them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, FrozenSet, Mapping, Optional, Tuple, Union

from .event_hub import CHANGE_EVENT

if TYPE_CHECKING:  # pragma: no cover
    from .event_hub import EventHub

__all__ = [
    "Relay",
    "RelayEntry",
    "RelayConfigError",
    "RelayConfigValue",
]

_logger = logging.getLogger(__name__)

RelayCallback = Callable[[], Any]
RelayConfigValue = Union[RelayCallback, Mapping[str, Optional[RelayCallback]]]


class RelayConfigError(ValueError):
    """Raised when a relay configuration value cannot be turned into an entry."""


@dataclass(frozen=True)
class RelayEntry:
    breakpoints: FrozenSet[str]
    enter: RelayCallback
    leave: Optional[RelayCallback] = None

    def includes(self, name: Optional[str]) -> bool:
        return name is not None and name in self.breakpoints


def _build_entry(key: str, value: RelayConfigValue) -> RelayEntry:
    names = frozenset(key.split())
    if callable(value):
        return RelayEntry(breakpoints=names, enter=value)
    if not isinstance(value, Mapping):
        raise RelayConfigError(
            f"Relay entry {key!r} must be a callable or a mapping with 'enter', "
            f"got {type(value).__name__}"
        )
    enter = value.get("enter")
    leave = value.get("leave")
    if not callable(enter):
        raise RelayConfigError(f"Relay entry {key!r} requires a callable 'enter'")
    if leave is not None and not callable(leave):
        raise RelayConfigError(f"Relay entry {key!r} has a non-callable 'leave'")
    return RelayEntry(breakpoints=names, enter=enter, leave=leave)


class Relay:
    """Dispatches region enter/leave callbacks for one listener."""

    def __init__(self, listener: "EventHub", config: Mapping[str, RelayConfigValue]) -> None:
        self._entries: Tuple[RelayEntry, ...] = tuple(
            _build_entry(key, value) for key, value in config.items()
        )
        self._listener: Optional["EventHub"] = listener
        listener.on(CHANGE_EVENT, self._on_change, self)
        _logger.debug("relay attached with %d entries", len(self._entries))

    @property
    def entries(self) -> Tuple[RelayEntry, ...]:
        return self._entries

    @property
    def listener(self) -> Optional["EventHub"]:
        return self._listener

    def _on_change(self, current: Optional[str], previous: Optional[str]) -> None:
        for entry in self._entries:
            if self._listener is None:  # destroyed by an earlier callback
                break
            now_in = entry.includes(current)
            was_in = entry.includes(previous)
            if now_in and not was_in:
                entry.enter()
            elif was_in and not now_in and entry.leave is not None:
                entry.leave()

    def destroy(self) -> None:
        """Unsubscribe from the listener and drop entries. Safe to repeat."""
        if self._listener is not None:
            self._listener.off(CHANGE_EVENT, self._on_change, self)
            self._listener = None
            _logger.debug("relay detached")
        self._entries = ()
