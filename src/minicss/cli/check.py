"""CLI command: minicss check -- parse a stylesheet and report errors."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from minicss.cli.show import echo_diagnostic
from minicss.config import MinicssConfig
from minicss.errors import ParseError
from minicss.parser import parse_file


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default=MinicssConfig.encoding, help="Source file encoding")
def check(cssfile: str, encoding: str) -> None:
    """Parse a stylesheet without printing it.

    Exits with code 0 if the file parses, or code 1 after printing the
    diagnostics if it does not.
    """
    css_path = Path(cssfile)
    try:
        sheet = parse_file(css_path, encoding=encoding, sink=echo_diagnostic)
    except ParseError:
        sys.exit(1)

    click.echo(
        f"OK: {css_path.name} ({len(sheet.rules)} rule(s), "
        f"{sheet.declaration_count} declaration(s))"
    )
