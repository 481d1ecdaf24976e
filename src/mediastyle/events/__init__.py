"""Event system: bus and event types for metric changes and resolution."""

from mediastyle.events.bus import EventBus
from mediastyle.events.types import MetricsChanged, StylesResolved

__all__ = [
    "EventBus",
    "MetricsChanged",
    "StylesResolved",
]
