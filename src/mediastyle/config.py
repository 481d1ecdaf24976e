"""Static configuration: CLI device defaults and the breakpoint table."""

from __future__ import annotations

from dataclasses import dataclass, field

from mediastyle.breakpoints import BREAKPOINTS, BreakpointTable


@dataclass(frozen=True)
class MediaStyleConfig:
    """Defaults used when the CLI is not given device metrics."""

    width: float = 390
    height: float = 844
    pixel_density: float = 3.0
    platform: str = "ios"
    indent: int = 2  # JSON output indent for `mediastyle resolve`
    breakpoints: BreakpointTable = field(default_factory=lambda: BREAKPOINTS)
