"""Style layer model and the tagged layer sources accepted by the resolver."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Union

from mediastyle.errors import LayerError
from mediastyle.model.query import MediaQuery

if TYPE_CHECKING:
    from mediastyle.units import ResponsiveUnits

StyleFragment = Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True)
class StyleLayer:
    """A style fragment guarded by a media query.

    ``style`` maps a style-block name to its properties. The query defaults
    to the empty query, which matches every snapshot.
    """

    style: StyleFragment
    query: MediaQuery = field(default_factory=MediaQuery)

    def __post_init__(self) -> None:
        if not isinstance(self.style, Mapping):
            raise LayerError(f"style must be a mapping, got {type(self.style).__name__}")
        for block, props in self.style.items():
            if not isinstance(props, Mapping):
                raise LayerError(
                    f"style block {block!r} must be a mapping, got {type(props).__name__}"
                )
        if not isinstance(self.query, MediaQuery):
            raise LayerError(f"query must be a MediaQuery, got {type(self.query).__name__}")


@dataclass(frozen=True)
class Single:
    """One layer."""

    layer: StyleLayer


@dataclass(frozen=True)
class Many:
    """An ordered sequence of layers."""

    layers: tuple[StyleLayer, ...]


@dataclass(frozen=True)
class Builder:
    """A function from responsive units to a layer or sequence of layers."""

    fn: Callable[[ResponsiveUnits], Any]


LayerSource = Union[Single, Many, Builder]


def as_layer_source(value: Any) -> LayerSource:
    """Convert a caller-supplied value into a tagged layer source.

    Accepts an existing Single/Many/Builder, a StyleLayer, a sequence of
    StyleLayers, or a callable (treated as a builder).
    """
    if isinstance(value, (Single, Many, Builder)):
        return value
    if isinstance(value, StyleLayer):
        return Single(value)
    if callable(value):
        return Builder(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        layers = tuple(value)
        for index, layer in enumerate(layers):
            if not isinstance(layer, StyleLayer):
                raise LayerError(
                    f"layer {index} must be a StyleLayer, got {type(layer).__name__}"
                )
        return Many(layers)
    raise LayerError(f"cannot build a layer source from {type(value).__name__}")
