"""mediastyle -- media-query driven style layers for responsive UIs."""

__version__ = "0.1.0"

from mediastyle.breakpoints import BREAKPOINTS, BreakpointQueries, BreakpointTable  # noqa: E402
from mediastyle.conditions import matches, parse_query  # noqa: E402
from mediastyle.model import (  # noqa: E402
    Builder,
    Many,
    MediaQuery,
    MetricsSnapshot,
    Orientation,
    Platform,
    Single,
    StyleLayer,
)
from mediastyle.stylesheet import Stylesheet, deep_merge, resolve  # noqa: E402
from mediastyle.units import ResponsiveUnits  # noqa: E402

__all__ = [
    "__version__",
    "BREAKPOINTS",
    "BreakpointQueries",
    "BreakpointTable",
    "Builder",
    "Many",
    "MediaQuery",
    "MetricsSnapshot",
    "Orientation",
    "Platform",
    "ResponsiveUnits",
    "Single",
    "StyleLayer",
    "Stylesheet",
    "deep_merge",
    "matches",
    "parse_query",
    "resolve",
]
