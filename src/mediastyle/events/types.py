"""Event types emitted by a StyleBinding."""

from __future__ import annotations

from dataclasses import dataclass

from mediastyle.model.metrics import MetricsSnapshot


@dataclass(frozen=True)
class MetricsChanged:
    previous: MetricsSnapshot | None
    current: MetricsSnapshot


@dataclass(frozen=True)
class StylesResolved:
    snapshot: MetricsSnapshot
    layer_count: int
    matched_count: int
