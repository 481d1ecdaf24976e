"""MediaQuery model: a declarative condition over device metrics."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any

from mediastyle.errors import InvalidQueryError
from mediastyle.model.metrics import Orientation, Platform

# Metric name -> (min field, max field).
INTERVALS: dict[str, tuple[str, str]] = {
    "width": ("min_width", "max_width"),
    "height": ("min_height", "max_height"),
    "short_side": ("min_short_side", "max_short_side"),
    "aspect_ratio": ("min_aspect_ratio", "max_aspect_ratio"),
    "pixel_density": ("min_pixel_density", "max_pixel_density"),
}

BOUND_FIELDS = frozenset(name for pair in INTERVALS.values() for name in pair)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class MediaQuery:
    """A set of optional constraints on a MetricsSnapshot.

    Every field defaults to None, meaning "unconstrained". An empty query
    matches every snapshot. Interval bounds are inclusive on both sides.
    """

    min_width: float | None = None
    max_width: float | None = None
    min_height: float | None = None
    max_height: float | None = None
    min_short_side: float | None = None
    max_short_side: float | None = None
    min_aspect_ratio: float | None = None
    max_aspect_ratio: float | None = None
    min_pixel_density: float | None = None
    max_pixel_density: float | None = None
    orientation: Orientation | None = None
    platform: Platform | None = None
    guard: bool | None = None

    def __post_init__(self) -> None:
        for metric, (lo_name, hi_name) in INTERVALS.items():
            lo = getattr(self, lo_name)
            hi = getattr(self, hi_name)
            for name, value in ((lo_name, lo), (hi_name, hi)):
                if value is None:
                    continue
                if not _is_number(value):
                    raise InvalidQueryError(f"{name} must be a number, got {value!r}")
                if not math.isfinite(value):
                    raise InvalidQueryError(f"{name} must be finite, got {value!r}")
            if lo is not None and hi is not None and lo > hi:
                raise InvalidQueryError(
                    f"{lo_name}={lo!r} is greater than {hi_name}={hi!r}; "
                    f"no {metric} can satisfy both"
                )
        if self.orientation is not None and not isinstance(self.orientation, Orientation):
            raise InvalidQueryError(f"orientation must be an Orientation, got {self.orientation!r}")
        if self.platform is not None and not isinstance(self.platform, Platform):
            raise InvalidQueryError(f"platform must be a Platform, got {self.platform!r}")
        if self.guard is not None and not isinstance(self.guard, bool):
            raise InvalidQueryError(f"guard must be a bool, got {self.guard!r}")

    @property
    def is_empty(self) -> bool:
        return not self.bounds()

    def bounds(self) -> dict[str, Any]:
        """Return only the fields that are set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


# Query keys accepted in style documents: snake_case field names plus the
# camelCase spellings used by React Native style authors.
QUERY_KEY_ALIASES: dict[str, str] = {
    **{f.name: f.name for f in fields(MediaQuery)},
    "minWidth": "min_width",
    "maxWidth": "max_width",
    "minHeight": "min_height",
    "maxHeight": "max_height",
    "minShortSide": "min_short_side",
    "maxShortSide": "max_short_side",
    "minAspectRatio": "min_aspect_ratio",
    "maxAspectRatio": "max_aspect_ratio",
    "minPixelRatio": "min_pixel_density",
    "maxPixelRatio": "max_pixel_density",
    "minPixelDensity": "min_pixel_density",
    "maxPixelDensity": "max_pixel_density",
    "condition": "guard",
}
