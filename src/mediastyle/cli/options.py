"""Shared CLI options for describing a device."""

from __future__ import annotations

from typing import Callable

import click

from mediastyle.config import MediaStyleConfig
from mediastyle.errors import InvalidMetricsError
from mediastyle.model.metrics import MetricsSnapshot, Platform

DEFAULTS = MediaStyleConfig()


def metrics_options(fn: Callable) -> Callable:
    """Add --width/--height/--density/--platform options to a command."""
    fn = click.option(
        "--platform",
        type=click.Choice([p.value for p in Platform]),
        default=DEFAULTS.platform,
        show_default=True,
        help="Host platform",
    )(fn)
    fn = click.option(
        "--density", type=float, default=DEFAULTS.pixel_density, show_default=True,
        help="Pixel density",
    )(fn)
    fn = click.option(
        "--height", type=float, default=DEFAULTS.height, show_default=True,
        help="Viewport height (dp)",
    )(fn)
    fn = click.option(
        "--width", type=float, default=DEFAULTS.width, show_default=True,
        help="Viewport width (dp)",
    )(fn)
    return fn


def build_snapshot(width: float, height: float, density: float, platform: str) -> MetricsSnapshot:
    """Build a snapshot from CLI options, turning bad values into usage errors."""
    try:
        return MetricsSnapshot(
            width=width, height=height, pixel_density=density, platform=Platform(platform)
        )
    except InvalidMetricsError as exc:
        raise click.BadParameter(str(exc)) from exc
