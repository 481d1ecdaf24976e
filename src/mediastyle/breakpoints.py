"""Named breakpoints and the helpers that build MediaQueries from them.

Breakpoints are compared against the viewport's short side, so a layout
keeps its breakpoint when the device rotates. Sizes are written for the
largest layout first and smaller layouts override it:

    at_most('sm')        -> short side 0 .. 600
    above('sm')          -> short side 601 .. inf
    between('xs', 'sm')  -> short side 341 .. 600
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from mediastyle.errors import UnknownBreakpointError
from mediastyle.model.query import MediaQuery

__all__ = [
    "BREAKPOINTS",
    "BreakpointQueries",
    "BreakpointTable",
    "above",
    "at_most",
    "below",
    "between",
    "down",
    "preset",
    "up",
]


class BreakpointTable:
    """An ordered, read-only mapping of breakpoint names to pixel thresholds.

    Thresholds must be integers in strictly ascending order.
    """

    def __init__(self, thresholds: Mapping[str, int]) -> None:
        previous: tuple[str, int] | None = None
        for name, value in thresholds.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Breakpoint {name!r} must be an integer, got {value!r}")
            if previous is not None and value <= previous[1]:
                raise ValueError(
                    f"Breakpoint {name!r} ({value}) must be greater than "
                    f"{previous[0]!r} ({previous[1]})"
                )
            previous = (name, value)
        self._thresholds = dict(thresholds)

    def threshold(self, name: str) -> int:
        """Return the threshold for *name*."""
        try:
            return self._thresholds[name]
        except KeyError:
            known = ", ".join(self._thresholds) or "none"
            raise UnknownBreakpointError(
                f"Unknown breakpoint {name!r} (known: {known})"
            ) from None

    def names(self) -> list[str]:
        return list(self._thresholds)

    def __contains__(self, name: object) -> bool:
        return name in self._thresholds

    def __iter__(self) -> Iterator[str]:
        return iter(self._thresholds)

    def __len__(self) -> int:
        return len(self._thresholds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BreakpointTable):
            return NotImplemented
        return list(self._thresholds.items()) == list(other._thresholds.items())

    def __hash__(self) -> int:
        return hash(tuple(self._thresholds.items()))

    def __repr__(self) -> str:
        return f"BreakpointTable({self._thresholds!r})"


BREAKPOINTS = BreakpointTable({"xs": 340, "sm": 600})


class BreakpointQueries:
    """MediaQuery factories bound to a BreakpointTable."""

    def __init__(self, table: BreakpointTable = BREAKPOINTS) -> None:
        self.table = table

    def at_most(self, bp: str) -> MediaQuery:
        """Short side from 0 up to and including the threshold."""
        return MediaQuery(max_short_side=self.table.threshold(bp))

    def above(self, bp: str) -> MediaQuery:
        """Short side strictly greater than the threshold."""
        return MediaQuery(min_short_side=self.table.threshold(bp) + 1)

    def below(self, bp: str) -> MediaQuery:
        """Same query as :meth:`at_most`."""
        return MediaQuery(max_short_side=self.table.threshold(bp))

    def between(self, start: str, end: str) -> MediaQuery:
        """Short side above the smaller threshold, up to the larger one.

        Argument order does not matter.
        """
        low, high = sorted((self.table.threshold(start), self.table.threshold(end)))
        return MediaQuery(min_short_side=low + 1, max_short_side=high)

    up = above
    down = below

    def preset(self, bp: str) -> MediaQuery:
        """The shorthand query for a breakpoint name, i.e. ``at_most(bp)``."""
        return self.at_most(bp)


_default = BreakpointQueries()

at_most = _default.at_most
above = _default.above
below = _default.below
between = _default.between
up = _default.up
down = _default.down
preset = _default.preset
