"""CLI command: themelint inspect -- display the theme mixins of a file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from themelint.parser import ParseError, parse_scss
from themelint.validation import component_name_from_path, locate_theme_mixins


@click.command()
@click.argument("scssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(scssfile: str) -> None:
    """Parse a Sass file and list its theme mixins.

    Shows the component name derived from the file name and, for each public
    theme mixin, its kind, arguments and number of statements.
    """
    path = Path(scssfile)

    try:
        root = parse_scss(path.read_text(encoding="utf-8"), file=str(path))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    component_name = component_name_from_path(str(path))
    click.echo(f"File:      {path}")
    click.echo(f"Component: {component_name or '(not a theme file)'}")

    mixins = list(locate_theme_mixins(root))
    click.echo(f"Mixins:    {len(mixins)}")
    click.echo()

    for mixin in mixins:
        node = mixin.node
        line = node.source.line if node.source else 0
        statements = len(node.nodes or [])
        parts = [
            f"  {mixin.kind.value}",
            f"line={line}",
            f"args=({', '.join(mixin.args)})",
            f"statements={statements}",
        ]
        click.echo("  ".join(parts))
