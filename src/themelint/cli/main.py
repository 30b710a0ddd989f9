"""Themelint CLI entry point: Click group with subcommands."""

import click

from themelint import __version__


@click.group()
@click.version_option(version=__version__, prog_name="themelint")
def cli() -> None:
    """Themelint - keeps the API of Sass theme mixins consistent."""


# Import and register subcommands
from themelint.cli.lint import lint  # noqa: E402
from themelint.cli.inspect import inspect  # noqa: E402

cli.add_command(lint)
cli.add_command(inspect)
