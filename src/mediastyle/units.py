"""Viewport-relative units: percentages of the screen converted to pixels."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Union

from mediastyle.model.metrics import MetricsSnapshot

Percent = Union[int, float, str]

_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def round_to_nearest_pixel(value: float, pixel_density: float = 1.0) -> float:
    """Round a layout size to the nearest physical pixel (halves round up)."""
    return math.floor(value * pixel_density + 0.5) / pixel_density


def parse_percent(percent: Percent) -> float:
    """Return the numeric part of *percent*.

    Numbers pass through unchanged. Strings are read up to the first
    non-numeric character, so ``"50%"`` and ``"50vw"`` both give 50.
    """
    if isinstance(percent, bool):
        raise ValueError(f"Not a percentage: {percent!r}")
    if isinstance(percent, (int, float)):
        return float(percent)
    match = _LEADING_NUMBER_RE.match(percent)
    if match is None:
        raise ValueError(f"Not a percentage: {percent!r}")
    return float(match.group(1))


@dataclass(frozen=True)
class ResponsiveUnits:
    """Percentage-of-viewport helpers for one set of metrics."""

    width: float
    height: float
    pixel_density: float = 1.0

    @classmethod
    def from_snapshot(cls, snapshot: MetricsSnapshot) -> ResponsiveUnits:
        return cls(
            width=snapshot.width,
            height=snapshot.height,
            pixel_density=snapshot.pixel_density,
        )

    def vw(self, percent: Percent) -> float:
        """*percent* of the viewport width, in pixels."""
        return round_to_nearest_pixel(self.width * parse_percent(percent) / 100, self.pixel_density)

    def vh(self, percent: Percent) -> float:
        """*percent* of the viewport height, in pixels."""
        return round_to_nearest_pixel(self.height * parse_percent(percent) / 100, self.pixel_density)
