"""JSON style documents.

A document is a list of layers, a single layer, or an object with a
``"layers"`` list. Each layer looks like::

    {"query": {"max_short_side": 600}, "style": {"title": {"fontSize": 14}}}

``query`` may also be a query expression such as
``"short_side<=600 && orientation=portrait"``, or be left out entirely.
String values written as viewport units (``"50vw"``, ``"25vh"``) are
converted to pixels for the snapshot being resolved.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from mediastyle.errors import DocumentError
from mediastyle.model.layer import Builder, LayerSource, Many, Single, StyleLayer
from mediastyle.units import ResponsiveUnits
from mediastyle.validation import ValidationError, validate_or_raise
from mediastyle.validation.rules import build_query

__all__ = ["document_layers", "load_path", "loads", "parse_document", "read_document"]

_UNIT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))\s*(vw|vh)\s*$")


def document_layers(data: Any) -> list[Any]:
    """Return the raw layer list of a decoded document."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if "layers" in data:
            layers = data["layers"]
            if not isinstance(layers, list):
                raise DocumentError("'layers' must be a list")
            return layers
        return [data]
    raise DocumentError(f"Document must be an object or a list, got {type(data).__name__}")


def _has_units(value: Any) -> bool:
    if isinstance(value, str):
        return _UNIT_RE.match(value) is not None
    if isinstance(value, dict):
        return any(_has_units(v) for v in value.values())
    if isinstance(value, list):
        return any(_has_units(v) for v in value)
    return False


def _apply_units(value: Any, units: ResponsiveUnits) -> Any:
    if isinstance(value, str):
        match = _UNIT_RE.match(value)
        if match is None:
            return value
        number, unit = match.groups()
        return units.vw(number) if unit == "vw" else units.vh(number)
    if isinstance(value, dict):
        return {k: _apply_units(v, units) for k, v in value.items()}
    if isinstance(value, list):
        return [_apply_units(v, units) for v in value]
    return value


def parse_document(data: Any) -> LayerSource:
    """Validate a decoded document and build its layer source.

    Raises DocumentError when the document has validation errors.
    """
    raw_layers = document_layers(data)
    try:
        validate_or_raise(raw_layers)
    except ValidationError as exc:
        raise DocumentError(str(exc)) from exc

    pairs = [(build_query(raw.get("query")), raw["style"]) for raw in raw_layers]

    if any(_has_units(style) for _query, style in pairs):

        def build(units: ResponsiveUnits) -> list[StyleLayer]:
            return [
                StyleLayer(style=_apply_units(style, units), query=query)
                for query, style in pairs
            ]

        return Builder(build)

    layers = tuple(StyleLayer(style=style, query=query) for query, style in pairs)
    if isinstance(data, dict) and "layers" not in data:
        return Single(layers[0])
    return Many(layers)


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}") from exc


def loads(text: str) -> LayerSource:
    """Parse a JSON document string."""
    return parse_document(_decode(text))


def read_document(path: str | Path) -> Any:
    """Read a document file and decode its JSON without validating it.

    Unreadable files, non-UTF-8 text and invalid JSON raise DocumentError.
    """
    path = Path(path)
    try:
        return _decode(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise DocumentError(f"Not UTF-8 text: {exc.reason} at byte {exc.start}", path=str(path)) from exc
    except OSError as exc:
        raise DocumentError(f"Cannot read file: {exc.strerror or exc}", path=str(path)) from exc
    except DocumentError as exc:
        raise DocumentError(str(exc), path=str(path)) from exc


def load_path(path: str | Path) -> LayerSource:
    """Read and parse a JSON document file."""
    data = read_document(path)
    try:
        return parse_document(data)
    except DocumentError as exc:
        raise DocumentError(str(exc), path=str(path)) from exc
