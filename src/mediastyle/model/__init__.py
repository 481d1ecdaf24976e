"""mediastyle model layer -- public type re-exports."""

from mediastyle.model.diagnostic import Diagnostic, Severity
from mediastyle.model.layer import (
    Builder,
    LayerSource,
    Many,
    Single,
    StyleFragment,
    StyleLayer,
    as_layer_source,
)
from mediastyle.model.metrics import MetricsSnapshot, Orientation, Platform
from mediastyle.model.query import MediaQuery

__all__ = [
    # metrics
    "Orientation",
    "Platform",
    "MetricsSnapshot",
    # query
    "MediaQuery",
    # layer
    "StyleFragment",
    "StyleLayer",
    "Single",
    "Many",
    "Builder",
    "LayerSource",
    "as_layer_source",
    # diagnostic
    "Severity",
    "Diagnostic",
]
