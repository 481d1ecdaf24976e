"""Conditional rendering: pass a payload through only when a query matches."""

from __future__ import annotations

from typing import Generic, TypeVar

from mediastyle.binding import MetricsProvider
from mediastyle.conditions import matches
from mediastyle.model.metrics import MetricsSnapshot
from mediastyle.model.query import MediaQuery

T = TypeVar("T")


def render_when(query: MediaQuery, payload: T, snapshot: MetricsSnapshot) -> T | None:
    """Return *payload* unchanged if *query* matches *snapshot*, else None."""
    if matches(query, snapshot):
        return payload
    return None


def use_media_query(query: MediaQuery, provider: MetricsProvider) -> bool:
    """Evaluate *query* against the provider's current snapshot."""
    return matches(query, provider.snapshot())


class MediaQueryGate(Generic[T]):
    """Wraps a payload that should only render while *query* matches."""

    def __init__(self, query: MediaQuery, provider: MetricsProvider) -> None:
        self.query = query
        self.provider = provider

    def __call__(self, payload: T) -> T | None:
        return render_when(self.query, payload, self.provider.snapshot())
