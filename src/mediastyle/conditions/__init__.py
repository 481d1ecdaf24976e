"""Media query evaluator and query expression parser.

Grammar:
    QueryExpr = Clause ( '&&' Clause )*
    Clause    = Field '=' Literal | Metric ( '>=' | '<=' ) Number
    Field     = any MediaQuery field, e.g. 'max_short_side', 'orientation'
    Metric    = 'width' | 'height' | 'short_side' | 'aspect_ratio' | 'pixel_density'

``width>=600`` is shorthand for ``min_width=600`` and ``width<=600`` for
``max_width=600``.
"""

from __future__ import annotations

from dataclasses import fields

from mediastyle.errors import InvalidQueryError, QuerySyntaxError
from mediastyle.model.metrics import MetricsSnapshot, Orientation, Platform
from mediastyle.model.query import BOUND_FIELDS, INTERVALS, MediaQuery

__all__ = ["evaluate_query", "is_in_interval", "matches", "parse_query"]

_QUERY_FIELDS = frozenset(f.name for f in fields(MediaQuery))


def is_in_interval(
    value: float, minimum: float | None = None, maximum: float | None = None
) -> bool:
    """Return True if *value* lies in [minimum, maximum]; None bounds are open."""
    return (minimum is None or value >= minimum) and (maximum is None or value <= maximum)


def matches(query: MediaQuery, snapshot: MetricsSnapshot) -> bool:
    """Evaluate *query* against *snapshot*.

    Every interval bound is inclusive. Orientation and platform must equal
    the snapshot's when set. A guard of False never matches.
    """
    for metric, (lo_name, hi_name) in INTERVALS.items():
        if not is_in_interval(
            getattr(snapshot, metric), getattr(query, lo_name), getattr(query, hi_name)
        ):
            return False
    if query.orientation is not None and query.orientation is not snapshot.orientation:
        return False
    if query.platform is not None and query.platform is not snapshot.platform:
        return False
    if query.guard is not None and not query.guard:
        return False
    return True


def _parse_clause(clause: str) -> tuple[str, str, str]:
    """Parse a single clause like 'orientation=landscape' or 'width>=600'.

    Returns (key, operator, literal).
    """
    clause = clause.strip()

    # Two-character operators first so '>=' is not split on '='
    for operator in (">=", "<=", "="):
        if operator in clause:
            idx = clause.index(operator)
            key = clause[:idx].strip()
            literal = clause[idx + len(operator):].strip()
            if not key or not literal:
                raise QuerySyntaxError(f"Incomplete clause: {clause!r}", clause)
            return key, operator, literal

    raise QuerySyntaxError(f"Invalid clause (no operator found): {clause!r}", clause)


def _coerce_literal(name: str, literal: str, clause: str) -> object:
    if name in BOUND_FIELDS:
        try:
            number = float(literal)
        except ValueError:
            raise QuerySyntaxError(f"{name} expects a number, got {literal!r}", clause) from None
        return int(number) if number.is_integer() else number
    if name == "orientation":
        try:
            return Orientation(literal.lower())
        except ValueError:
            raise QuerySyntaxError(f"Unknown orientation: {literal!r}", clause) from None
    if name == "platform":
        try:
            return Platform(literal.lower())
        except ValueError:
            raise QuerySyntaxError(f"Unknown platform: {literal!r}", clause) from None
    # guard
    lowered = literal.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise QuerySyntaxError(f"guard expects true or false, got {literal!r}", clause)


def parse_query(expr: str) -> MediaQuery:
    """Parse a query expression into a MediaQuery.

    Empty/whitespace-only expressions yield the empty query.
    """
    if not expr or not expr.strip():
        return MediaQuery()

    values: dict[str, object] = {}
    for clause in expr.split("&&"):
        key, operator, literal = _parse_clause(clause)
        if operator == "=":
            name = key
            if name not in _QUERY_FIELDS:
                raise QuerySyntaxError(f"Unknown query field: {key!r}", clause.strip())
        else:
            if key not in INTERVALS:
                raise QuerySyntaxError(
                    f"'{operator}' needs a metric ({', '.join(INTERVALS)}), got {key!r}",
                    clause.strip(),
                )
            lo_name, hi_name = INTERVALS[key]
            name = lo_name if operator == ">=" else hi_name
        if name in values:
            raise QuerySyntaxError(f"{name} is set more than once", clause.strip())
        values[name] = _coerce_literal(name, literal, clause.strip())

    try:
        return MediaQuery(**values)
    except InvalidQueryError as exc:
        raise QuerySyntaxError(str(exc)) from exc


def evaluate_query(expr: str, snapshot: MetricsSnapshot) -> bool:
    """Parse *expr* and evaluate it against *snapshot*."""
    return matches(parse_query(expr), snapshot)
