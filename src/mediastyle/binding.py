"""Metrics providers and the binding that re-resolves styles when they change.

The resolver itself never reads metrics; a StyleBinding pulls a snapshot
from its provider when asked to refresh, or accepts one pushed by the host,
and re-resolves only when the snapshot differs from the last one.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from mediastyle.events.bus import EventBus
from mediastyle.events.types import MetricsChanged, StylesResolved
from mediastyle.model.layer import LayerSource, as_layer_source
from mediastyle.model.metrics import MetricsSnapshot
from mediastyle.stylesheet.merge import deep_merge
from mediastyle.stylesheet.resolver import normalize_layers, select_styles

logger = logging.getLogger("mediastyle.binding")


@runtime_checkable
class MetricsProvider(Protocol):
    """Supplies the current device metrics on demand."""

    def snapshot(self) -> MetricsSnapshot: ...


class StaticMetricsProvider:
    """A provider holding one snapshot until the host replaces it."""

    def __init__(self, snapshot: MetricsSnapshot) -> None:
        self._snapshot = snapshot

    def snapshot(self) -> MetricsSnapshot:
        return self._snapshot

    def update(self, snapshot: MetricsSnapshot) -> None:
        self._snapshot = snapshot


class StyleBinding:
    """Keeps a composite style in step with a metrics provider.

    Styles are resolved on first access and again after each refresh or
    notify that brings a different snapshot.
    """

    def __init__(
        self,
        source: LayerSource | Any,
        provider: MetricsProvider,
        bus: EventBus | None = None,
    ) -> None:
        self.source = as_layer_source(source)
        self.provider = provider
        self.bus = bus or EventBus()
        self._snapshot: MetricsSnapshot | None = None
        self._styles: dict[str, Any] | None = None

    @property
    def snapshot(self) -> MetricsSnapshot | None:
        """The snapshot the current styles were resolved against."""
        return self._snapshot

    @property
    def styles(self) -> dict[str, Any]:
        if self._styles is None:
            self.refresh()
        assert self._styles is not None
        return self._styles

    def refresh(self) -> bool:
        """Pull the provider's snapshot; return True if styles were re-resolved."""
        return self.notify(self.provider.snapshot())

    def notify(self, snapshot: MetricsSnapshot) -> bool:
        """Apply a pushed snapshot; return True if styles were re-resolved.

        State only changes once resolution succeeds, so a failed attempt is
        retried on the next refresh.
        """
        if self._styles is not None and snapshot == self._snapshot:
            return False
        layers = normalize_layers(self.source, snapshot)
        selected = select_styles(layers, snapshot)
        styles = deep_merge(*selected)

        previous = self._snapshot
        self._snapshot = snapshot
        self._styles = styles
        logger.debug(
            "Binding refreshed: %d of %d layers match %gx%g",
            len(selected),
            len(layers),
            snapshot.width,
            snapshot.height,
        )
        self.bus.emit(MetricsChanged(previous=previous, current=snapshot))
        self.bus.emit(
            StylesResolved(
                snapshot=snapshot, layer_count=len(layers), matched_count=len(selected)
            )
        )
        return True
