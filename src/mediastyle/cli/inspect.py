"""CLI command: mediastyle inspect -- show which layers apply to a device."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from mediastyle.cli.options import build_snapshot, metrics_options
from mediastyle.conditions import matches
from mediastyle.errors import DocumentError
from mediastyle.stylesheet import load_path, normalize_layers


def _describe(bounds: dict) -> str:
    if not bounds:
        return "(always)"
    parts = []
    for name, value in bounds.items():
        parts.append(f"{name}={getattr(value, 'value', value)}")
    return " && ".join(parts)


@click.command()
@click.argument("stylefile", type=click.Path(exists=True, dir_okay=False))
@metrics_options
def inspect(stylefile: str, width: float, height: float, density: float, platform: str) -> None:
    """List the layers of a style document and whether each one matches."""
    snapshot = build_snapshot(width, height, density, platform)
    try:
        layers = normalize_layers(load_path(Path(stylefile)), snapshot)
    except DocumentError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(
        f"Device: {snapshot.width:g}x{snapshot.height:g} @{snapshot.pixel_density:g}x "
        f"{snapshot.orientation.value} {platform}"
    )
    click.echo(f"Short side: {snapshot.short_side:g}  Aspect ratio: {snapshot.aspect_ratio:.3f}")
    click.echo()

    matched = 0
    for index, layer in enumerate(layers):
        hit = matches(layer.query, snapshot)
        matched += hit
        mark = "MATCH" if hit else "skip "
        blocks = ", ".join(layer.style) or "-"
        click.echo(f"  [{index}] {mark}  {_describe(layer.query.bounds())}  blocks: {blocks}")

    click.echo()
    click.echo(f"{matched} of {len(layers)} layer(s) match")
