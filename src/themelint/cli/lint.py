"""CLI command: themelint lint -- check (or fix) theme mixins in Sass files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from themelint.config import LintConfig
from themelint.model.diagnostic import Severity
from themelint.parser import ParseError, parse_scss
from themelint.printer import to_scss
from themelint.validation import lint_root

logger = logging.getLogger(__name__)


def collect_files(paths: tuple[str, ...]) -> list[Path]:
    """Expand directories into the ``.scss`` files below them, sorted."""
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(path.rglob("*.scss")))
        else:
            files.append(path)
    return files


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--fix", is_flag=True, help="Repair fixable problems in place")
@click.option("--disable", is_flag=True, help="Turn the theme mixin check off")
@click.option("--warn", is_flag=True, help="Report problems as warnings")
@click.option("-v", "--verbose", is_flag=True, help="Log every checked mixin")
def lint(paths: tuple[str, ...], fix: bool, disable: bool, warn: bool, verbose: bool) -> None:
    """Check that theme mixins in PATHS follow the theme mixin API.

    Directories are searched for .scss files.  Exits with code 1 if any
    error is reported or a file cannot be parsed.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = LintConfig(
        enabled=not disable,
        fix=fix,
        severity=Severity.WARNING if warn else Severity.ERROR,
    )

    errors = 0
    warnings = 0
    failed = 0
    fixed = 0

    for path in collect_files(paths):
        try:
            source = path.read_text(encoding="utf-8")
            root = parse_scss(source, file=str(path))
        except ParseError as exc:
            click.echo(f"{exc.location}: parse error: {exc}", err=True)
            failed += 1
            continue

        diagnostics = lint_root(root, config)
        for diag in diagnostics:
            click.echo(str(diag))
        errors += sum(1 for d in diagnostics if d.is_error)
        warnings += sum(1 for d in diagnostics if d.is_warning)

        if config.fix:
            output = to_scss(root)
            if output != source:
                path.write_text(output, encoding="utf-8")
                logger.info("Wrote %s", path)
                fixed += 1

    summary = f"Summary: {errors} error(s), {warnings} warning(s)"
    if config.fix:
        summary += f", {fixed} file(s) fixed"
    if failed:
        summary += f", {failed} file(s) could not be parsed"
    click.echo(summary)

    if errors or failed:
        sys.exit(1)
