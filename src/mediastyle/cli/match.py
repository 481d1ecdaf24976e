"""CLI commands: mediastyle match / breakpoints -- work with single queries."""

from __future__ import annotations

import sys

import click

from mediastyle.breakpoints import BreakpointQueries
from mediastyle.cli.options import DEFAULTS, build_snapshot, metrics_options
from mediastyle.conditions import evaluate_query
from mediastyle.errors import QuerySyntaxError


@click.command()
@click.argument("expression")
@metrics_options
def match(expression: str, width: float, height: float, density: float, platform: str) -> None:
    """Evaluate a query EXPRESSION such as 'short_side<=600 && orientation=portrait'.

    Exits with code 0 on a match and 1 otherwise.
    """
    snapshot = build_snapshot(width, height, density, platform)
    try:
        hit = evaluate_query(expression, snapshot)
    except QuerySyntaxError as exc:
        click.echo(f"Query error: {exc}", err=True)
        sys.exit(2)
    click.echo("match" if hit else "no match")
    sys.exit(0 if hit else 1)


@click.command()
def breakpoints() -> None:
    """Show the breakpoint table and the short-side range of each helper."""
    table = DEFAULTS.breakpoints
    queries = BreakpointQueries(table)
    for name in table:
        above = queries.above(name)
        click.echo(
            f"{name:<4} {table.threshold(name):>6}   "
            f"at_most: 0..{table.threshold(name)}   above: {above.min_short_side}.."
        )
