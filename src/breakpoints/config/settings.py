"""Process-wide configuration for breakpoint listeners.

The debounce delay is the only tunable. Listeners receive an explicit
``debounce_ms`` where the caller has one; the value held by ``runtime_settings`` is
read once, at listener construction, only when no explicit value is passed.
Changing it later does not alter listeners that already exist.

Environment:
    BREAKPOINTS_DEBOUNCE_MS  overrides the default delay (integer milliseconds).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "DEBOUNCE_ENV_VAR",
    "BreakpointSettings",
    "runtime_settings",
    "load_settings",
]

DEFAULT_DEBOUNCE_MS: Final = 50  # milliseconds
DEBOUNCE_ENV_VAR: Final = "BREAKPOINTS_DEBOUNCE_MS"


@dataclass
class BreakpointSettings:
    """Mutable settings container.

    Attributes
    ----------
    debounce_ms: int
        Quiet period (ms) a width signal must observe before a recompute runs.
    """

    debounce_ms: int = DEFAULT_DEBOUNCE_MS

    def __post_init__(self) -> None:
        if self.debounce_ms < 0:
            raise ValueError("debounce_ms must be >= 0")


def load_settings(environ: dict[str, str] | None = None) -> BreakpointSettings:
    """Build settings from the environment (``os.environ`` by default)."""
    env = os.environ if environ is None else environ
    raw = env.get(DEBOUNCE_ENV_VAR)
    if raw is None or not raw.strip():
        return BreakpointSettings()
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{DEBOUNCE_ENV_VAR} must be an integer, got {raw!r}") from exc
    return BreakpointSettings(debounce_ms=value)


runtime_settings = load_settings()
