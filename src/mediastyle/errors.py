"""Exception types raised by mediastyle."""

from __future__ import annotations


class MediaStyleError(Exception):
    """Base class for all mediastyle errors."""


class InvalidQueryError(MediaStyleError, ValueError):
    """Raised when a MediaQuery is constructed with malformed bounds."""


class InvalidMetricsError(MediaStyleError, ValueError):
    """Raised when a MetricsSnapshot is constructed with malformed metrics."""


class LayerError(MediaStyleError, TypeError):
    """Raised when a style layer or layer source has the wrong shape."""


class UnknownBreakpointError(MediaStyleError, KeyError):
    """Raised when a breakpoint name is not in the table."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class QuerySyntaxError(MediaStyleError, ValueError):
    """Raised when a query expression cannot be parsed."""

    def __init__(self, message: str, clause: str | None = None) -> None:
        self.clause = clause
        super().__init__(message)


class DocumentError(MediaStyleError):
    """Raised when a style document cannot be loaded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
