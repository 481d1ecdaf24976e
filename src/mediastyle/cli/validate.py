"""CLI command: mediastyle validate -- check a style document."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from mediastyle.errors import DocumentError
from mediastyle.model.diagnostic import Severity
from mediastyle.stylesheet.document import document_layers, read_document
from mediastyle.validation import severity_counts
from mediastyle.validation import validate as run_validate


@click.command()
@click.argument("stylefile", type=click.Path(exists=True, dir_okay=False))
def validate(stylefile: str) -> None:
    """Validate a JSON style document.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    path = Path(stylefile)

    try:
        layers = document_layers(read_document(path))
    except DocumentError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(layers)
    if not diagnostics:
        click.echo(f"OK: {path.name} is valid ({len(layers)} layer(s), 0 diagnostics)")
        return

    for diag in diagnostics:
        click.echo(str(diag))

    counts = severity_counts(diagnostics)
    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )
    if counts[Severity.ERROR]:
        sys.exit(1)
