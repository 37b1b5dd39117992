"""Qt integration (requires PyQt6)."""

from .adapters import QtScheduler, WidgetResizeSignal, listen_to_widget  # noqa: F401

__all__ = ["QtScheduler", "WidgetResizeSignal", "listen_to_widget"]
