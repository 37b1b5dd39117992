"""Breakpoints public API.

Detects which named width region ("breakpoint") a viewport currently falls
into, notifies observers when it changes, and runs region-scoped enter/leave
callbacks.

Design Principles:
- Core is pure Python (no Qt import); Qt hosts use ``breakpoints.qt``.
- Collaborators (width source, resize signal, scheduler) are injected.
- Keep exports minimal & stable; deeper modules remain importable.
"""

from __future__ import annotations

from .config.settings import DEFAULT_DEBOUNCE_MS, runtime_settings  # noqa: F401
from .design.regions import (  # noqa: F401
    DEFAULT_REGIONS,
    Region,
    classify_width,
    normalize_regions,
    parse_regions,
)
from .services import (  # noqa: F401
    BreakpointListener,
    Debouncer,
    EventHub,
    ImmediateScheduler,
    Relay,
    RelayConfigError,
    ResizeSignal,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_DEBOUNCE_MS",
    "runtime_settings",
    "DEFAULT_REGIONS",
    "Region",
    "classify_width",
    "normalize_regions",
    "parse_regions",
    "BreakpointListener",
    "Debouncer",
    "EventHub",
    "ImmediateScheduler",
    "Relay",
    "RelayConfigError",
    "ResizeSignal",
]
