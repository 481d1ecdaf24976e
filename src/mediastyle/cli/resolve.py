"""CLI command: mediastyle resolve -- print the composite style for a device."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from mediastyle.cli.options import DEFAULTS, build_snapshot, metrics_options
from mediastyle.errors import DocumentError
from mediastyle.stylesheet import load_path
from mediastyle.stylesheet import resolve as resolve_styles


@click.command()
@click.argument("stylefile", type=click.Path(exists=True, dir_okay=False))
@metrics_options
@click.option("--indent", type=int, default=DEFAULTS.indent, show_default=True, help="JSON indent")
def resolve(
    stylefile: str, width: float, height: float, density: float, platform: str, indent: int
) -> None:
    """Resolve a style document against the given device metrics.

    Prints the composite style as JSON.
    """
    snapshot = build_snapshot(width, height, density, platform)
    try:
        source = load_path(Path(stylefile))
    except DocumentError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    composite = resolve_styles(source, snapshot)
    click.echo(json.dumps(composite, indent=indent or None, sort_keys=True))
