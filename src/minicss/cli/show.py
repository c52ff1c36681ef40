"""CLI command: minicss show -- parse a stylesheet and print its rules."""

from __future__ import annotations

import sys

import click

from minicss.config import MinicssConfig
from minicss.errors import ParseError
from minicss.parser import parse_file


def echo_diagnostic(text: str) -> None:
    click.echo(text, err=True)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default=MinicssConfig.encoding, help="Source file encoding")
def show(cssfile: str, encoding: str) -> None:
    """Parse a stylesheet and print each rule with its declarations."""
    try:
        sheet = parse_file(cssfile, encoding=encoding, sink=echo_diagnostic)
    except ParseError:
        sys.exit(1)

    click.echo(sheet.render(), nl=False)
