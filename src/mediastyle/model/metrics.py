"""Device metrics model: Orientation, Platform, and MetricsSnapshot."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from mediastyle.errors import InvalidMetricsError


class Orientation(Enum):
    """Viewport orientation derived from width and height."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class Platform(Enum):
    """Host platform identifiers."""

    IOS = "ios"
    ANDROID = "android"
    MACOS = "macos"
    WINDOWS = "windows"
    WEB = "web"


def _check_positive(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidMetricsError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidMetricsError(f"{name} must be positive and finite, got {value!r}")


@dataclass(frozen=True)
class MetricsSnapshot:
    """Device metrics captured at one point in time.

    Attributes:
        width: Viewport width in device-independent pixels.
        height: Viewport height in device-independent pixels.
        pixel_density: Physical pixels per device-independent pixel.
        platform: Host platform, or None when unknown.
    """

    width: float
    height: float
    pixel_density: float = 1.0
    platform: Platform | None = None

    def __post_init__(self) -> None:
        _check_positive("width", self.width)
        _check_positive("height", self.height)
        _check_positive("pixel_density", self.pixel_density)
        if self.platform is not None and not isinstance(self.platform, Platform):
            raise InvalidMetricsError(f"platform must be a Platform, got {self.platform!r}")

    @property
    def orientation(self) -> Orientation:
        """Landscape when strictly wider than tall, portrait otherwise."""
        if self.width > self.height:
            return Orientation.LANDSCAPE
        return Orientation.PORTRAIT

    @property
    def short_side(self) -> float:
        return min(self.width, self.height)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
