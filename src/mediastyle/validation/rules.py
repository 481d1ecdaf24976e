"""Validation rules for raw style documents.

Each rule is a function taking the list of raw (JSON-decoded) layers and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from mediastyle.conditions import parse_query
from mediastyle.errors import LayerError, MediaStyleError
from mediastyle.model.diagnostic import Diagnostic, Severity
from mediastyle.model.metrics import Orientation, Platform
from mediastyle.model.query import BOUND_FIELDS, INTERVALS, QUERY_KEY_ALIASES, MediaQuery

LAYER_KEYS = frozenset({"query", "style"})

_ORIENTATIONS = frozenset(o.value for o in Orientation)
_PLATFORMS = frozenset(p.value for p in Platform)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mapping_queries(layers: list[Any]) -> list[tuple[int, dict[str, Any]]]:
    """Return (index, query) for layers whose query is a JSON object."""
    found = []
    for index, layer in enumerate(layers):
        if isinstance(layer, dict) and isinstance(layer.get("query"), dict):
            found.append((index, layer["query"]))
    return found


def _canonical_items(query: dict[str, Any]) -> list[tuple[str, str, Any]]:
    """Return (raw key, field name, value) for recognised query keys."""
    return [
        (key, QUERY_KEY_ALIASES[key], value)
        for key, value in query.items()
        if key in QUERY_KEY_ALIASES
    ]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_query(raw: Any) -> MediaQuery:
    """Build a MediaQuery from a raw document query (object or expression).

    Raises MediaStyleError subclasses for anything the rules below report
    as an error.
    """
    if raw is None:
        return MediaQuery()
    if isinstance(raw, str):
        return parse_query(raw)
    if not isinstance(raw, dict):
        raise LayerError(f"query must be an object or expression, got {type(raw).__name__}")
    values: dict[str, Any] = {}
    for _key, name, value in _canonical_items(raw):
        if value is None:
            continue
        if name == "orientation":
            value = Orientation(value)
        elif name == "platform":
            value = Platform(value)
        values[name] = value
    return MediaQuery(**values)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_layer_shape(layers: list[Any]) -> list[Diagnostic]:
    """Every layer is an object with a ``style`` object of style-block objects."""
    diagnostics: list[Diagnostic] = []
    for index, layer in enumerate(layers):
        if not isinstance(layer, dict):
            diagnostics.append(
                Diagnostic(
                    rule="check_layer_shape",
                    severity=Severity.ERROR,
                    message=f"Layer must be an object, got {type(layer).__name__}.",
                    layer=index,
                    fix='Write the layer as {"query": {...}, "style": {...}}.',
                )
            )
            continue
        for key in layer:
            if key not in LAYER_KEYS:
                diagnostics.append(
                    Diagnostic(
                        rule="check_layer_shape",
                        severity=Severity.WARNING,
                        message=f"Unknown layer key '{key}' is ignored.",
                        layer=index,
                        field=key,
                    )
                )
        if "style" not in layer:
            diagnostics.append(
                Diagnostic(
                    rule="check_layer_shape",
                    severity=Severity.ERROR,
                    message="Layer has no 'style'.",
                    layer=index,
                    fix="Add a 'style' object mapping block names to properties.",
                )
            )
            continue
        style = layer["style"]
        if not isinstance(style, dict):
            diagnostics.append(
                Diagnostic(
                    rule="check_layer_shape",
                    severity=Severity.ERROR,
                    message=f"'style' must be an object, got {type(style).__name__}.",
                    layer=index,
                    field="style",
                )
            )
            continue
        for block, props in style.items():
            if not isinstance(props, dict):
                diagnostics.append(
                    Diagnostic(
                        rule="check_layer_shape",
                        severity=Severity.ERROR,
                        message=(
                            f"Style block '{block}' must be an object, "
                            f"got {type(props).__name__}."
                        ),
                        layer=index,
                        field=block,
                    )
                )
    return diagnostics


def check_query_syntax(layers: list[Any]) -> list[Diagnostic]:
    """Queries are objects with known keys or parseable query expressions."""
    diagnostics: list[Diagnostic] = []
    for index, layer in enumerate(layers):
        if not isinstance(layer, dict) or layer.get("query") is None:
            continue
        query = layer["query"]
        if isinstance(query, str):
            try:
                parse_query(query)
            except MediaStyleError as exc:
                diagnostics.append(
                    Diagnostic(
                        rule="check_query_syntax",
                        severity=Severity.ERROR,
                        message=f"Invalid query expression: {exc}",
                        layer=index,
                        field="query",
                    )
                )
        elif isinstance(query, dict):
            seen: dict[str, str] = {}
            for key in query:
                name = QUERY_KEY_ALIASES.get(key)
                if name is not None and name in seen:
                    diagnostics.append(
                        Diagnostic(
                            rule="check_query_syntax",
                            severity=Severity.ERROR,
                            message=f"'{key}' and '{seen[name]}' both set {name}.",
                            layer=index,
                            field=key,
                        )
                    )
                if name is not None:
                    seen[name] = key
                if key not in QUERY_KEY_ALIASES:
                    diagnostics.append(
                        Diagnostic(
                            rule="check_query_syntax",
                            severity=Severity.ERROR,
                            message=f"Unknown query key '{key}'.",
                            layer=index,
                            field=key,
                            fix="Use a field such as max_short_side or orientation.",
                        )
                    )
        else:
            diagnostics.append(
                Diagnostic(
                    rule="check_query_syntax",
                    severity=Severity.ERROR,
                    message=(
                        "'query' must be an object or a query expression, "
                        f"got {type(query).__name__}."
                    ),
                    layer=index,
                    field="query",
                )
            )
    return diagnostics


def check_bound_types(layers: list[Any]) -> list[Diagnostic]:
    """Interval bounds are finite numbers."""
    diagnostics: list[Diagnostic] = []
    for index, query in _mapping_queries(layers):
        for key, name, value in _canonical_items(query):
            if name not in BOUND_FIELDS or value is None:
                continue
            if not _is_number(value) or not math.isfinite(value):
                diagnostics.append(
                    Diagnostic(
                        rule="check_bound_types",
                        severity=Severity.ERROR,
                        message=f"'{key}' must be a finite number, got {value!r}.",
                        layer=index,
                        field=key,
                    )
                )
    return diagnostics


def check_bound_order(layers: list[Any]) -> list[Diagnostic]:
    """A minimum bound is not greater than its maximum."""
    diagnostics: list[Diagnostic] = []
    for index, query in _mapping_queries(layers):
        values = {
            name: value
            for _key, name, value in _canonical_items(query)
            if _is_number(value)
        }
        for metric, (lo_name, hi_name) in INTERVALS.items():
            lo = values.get(lo_name)
            hi = values.get(hi_name)
            if lo is not None and hi is not None and lo > hi:
                diagnostics.append(
                    Diagnostic(
                        rule="check_bound_order",
                        severity=Severity.ERROR,
                        message=f"{lo_name}={lo} is greater than {hi_name}={hi}.",
                        layer=index,
                        field=metric,
                        fix="Swap the bounds or remove one of them.",
                    )
                )
    return diagnostics


def check_enum_values(layers: list[Any]) -> list[Diagnostic]:
    """``orientation`` and ``platform`` use known values."""
    diagnostics: list[Diagnostic] = []
    for index, query in _mapping_queries(layers):
        for key, name, value in _canonical_items(query):
            if value is None:
                continue
            if name == "orientation" and (not isinstance(value, str) or value not in _ORIENTATIONS):
                diagnostics.append(
                    Diagnostic(
                        rule="check_enum_values",
                        severity=Severity.ERROR,
                        message=f"Unknown orientation {value!r}.",
                        layer=index,
                        field=key,
                        fix=f"Use one of: {', '.join(sorted(_ORIENTATIONS))}.",
                    )
                )
            elif name == "platform" and (not isinstance(value, str) or value not in _PLATFORMS):
                diagnostics.append(
                    Diagnostic(
                        rule="check_enum_values",
                        severity=Severity.ERROR,
                        message=f"Unknown platform {value!r}.",
                        layer=index,
                        field=key,
                        fix=f"Use one of: {', '.join(sorted(_PLATFORMS))}.",
                    )
                )
    return diagnostics


def check_guard_type(layers: list[Any]) -> list[Diagnostic]:
    """The guard is a boolean."""
    diagnostics: list[Diagnostic] = []
    for index, query in _mapping_queries(layers):
        for key, name, value in _canonical_items(query):
            if name == "guard" and value is not None and not isinstance(value, bool):
                diagnostics.append(
                    Diagnostic(
                        rule="check_guard_type",
                        severity=Severity.ERROR,
                        message=f"'{key}' must be true or false, got {value!r}.",
                        layer=index,
                        field=key,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Semantic rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_never_matches(layers: list[Any]) -> list[Diagnostic]:
    """Warn about layers whose query can never match any snapshot."""
    diagnostics: list[Diagnostic] = []
    for index, layer in enumerate(layers):
        if not isinstance(layer, dict):
            continue
        try:
            query = build_query(layer.get("query"))
        except (MediaStyleError, ValueError, TypeError):
            # Reported by the structural rules.
            continue
        reason = ""
        if query.guard is False:
            reason = "its guard is false"
        elif (
            query.orientation is Orientation.LANDSCAPE
            and query.max_aspect_ratio is not None
            and query.max_aspect_ratio <= 1
        ):
            reason = "landscape needs an aspect ratio above 1"
        elif (
            query.orientation is Orientation.PORTRAIT
            and query.min_aspect_ratio is not None
            and query.min_aspect_ratio > 1
        ):
            reason = "portrait needs an aspect ratio of at most 1"
        if reason:
            diagnostics.append(
                Diagnostic(
                    rule="check_never_matches",
                    severity=Severity.WARNING,
                    message=f"Layer can never apply: {reason}.",
                    layer=index,
                    field="query",
                )
            )
    return diagnostics


def check_empty_style(layers: list[Any]) -> list[Diagnostic]:
    """Note layers that contribute nothing."""
    diagnostics: list[Diagnostic] = []
    for index, layer in enumerate(layers):
        if isinstance(layer, dict) and layer.get("style") == {}:
            diagnostics.append(
                Diagnostic(
                    rule="check_empty_style",
                    severity=Severity.INFO,
                    message="Layer has an empty style.",
                    layer=index,
                    field="style",
                )
            )
    return diagnostics


RuleFunc = Callable[[list[Any]], list[Diagnostic]]

ALL_RULES: list[RuleFunc] = [
    check_layer_shape,
    check_query_syntax,
    check_bound_types,
    check_bound_order,
    check_enum_values,
    check_guard_type,
    check_never_matches,
    check_empty_style,
]
