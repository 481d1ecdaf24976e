"""mediastyle CLI entry point: Click group with subcommands."""

import logging

import click

from mediastyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mediastyle")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log resolution details")
def cli(verbose: bool) -> None:
    """mediastyle - resolve media-query style layers against device metrics."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from mediastyle.cli.resolve import resolve  # noqa: E402
from mediastyle.cli.validate import validate  # noqa: E402
from mediastyle.cli.inspect import inspect  # noqa: E402
from mediastyle.cli.match import breakpoints, match  # noqa: E402

cli.add_command(resolve)
cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(match)
cli.add_command(breakpoints)
