"""Layered style resolution: filter layers by media query, then merge."""

from __future__ import annotations

import logging
from typing import Any

from mediastyle.conditions import matches
from mediastyle.errors import LayerError
from mediastyle.model.layer import (
    Builder,
    LayerSource,
    Single,
    StyleFragment,
    StyleLayer,
    as_layer_source,
)
from mediastyle.model.metrics import MetricsSnapshot
from mediastyle.stylesheet.merge import deep_merge
from mediastyle.units import ResponsiveUnits

__all__ = ["Stylesheet", "normalize_layers", "resolve", "select_styles"]

logger = logging.getLogger("mediastyle.stylesheet")


def normalize_layers(source: Any, snapshot: MetricsSnapshot) -> list[StyleLayer]:
    """Flatten a layer source into an ordered list of layers.

    A Builder is called with the ResponsiveUnits for *snapshot*; it may
    return a single layer or a sequence of layers, but not another builder.
    """
    source = as_layer_source(source)
    if isinstance(source, Builder):
        units = ResponsiveUnits.from_snapshot(snapshot)
        built = as_layer_source(source.fn(units))
        if isinstance(built, Builder):
            raise LayerError("a layer builder must return layers, not another builder")
        source = built
    if isinstance(source, Single):
        return [source.layer]
    return list(source.layers)


def select_styles(
    layers: list[StyleLayer], snapshot: MetricsSnapshot
) -> list[StyleFragment]:
    """Return the styles of the layers whose query matches, in order."""
    return [layer.style for layer in layers if matches(layer.query, snapshot)]


def resolve(source: LayerSource | Any, snapshot: MetricsSnapshot) -> dict[str, Any]:
    """Resolve *source* against *snapshot* into one composite style.

    Matching layers are merged in order; later layers override earlier
    ones property by property. No matching layers gives an empty dict.
    """
    layers = normalize_layers(source, snapshot)
    styles = select_styles(layers, snapshot)
    logger.debug(
        "Resolved %d of %d layers for %gx%g@%g",
        len(styles),
        len(layers),
        snapshot.width,
        snapshot.height,
        snapshot.pixel_density,
    )
    return deep_merge(*styles)


class Stylesheet:
    """A reusable layer source that can be resolved against any snapshot."""

    def __init__(self, source: LayerSource | Any) -> None:
        self.source = as_layer_source(source)

    def layers(self, snapshot: MetricsSnapshot) -> list[StyleLayer]:
        return normalize_layers(self.source, snapshot)

    def resolve(self, snapshot: MetricsSnapshot) -> dict[str, Any]:
        return resolve(self.source, snapshot)

    def __repr__(self) -> str:
        return f"Stylesheet({self.source!r})"
