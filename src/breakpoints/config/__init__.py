"""Configuration exports."""

from .settings import (  # noqa: F401
    DEFAULT_DEBOUNCE_MS,
    BreakpointSettings,
    load_settings,
    runtime_settings,
)

__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "BreakpointSettings",
    "load_settings",
    "runtime_settings",
]
