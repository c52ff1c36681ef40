"""minicss CLI entry point: Click group with subcommands."""

import logging

import click

from minicss import __version__
from minicss.config import MinicssConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="minicss")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=MinicssConfig.log_level,
    help="Logging level",
)
def cli(log_level: str) -> None:
    """minicss - parse a small subset of CSS and report syntax errors."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from minicss.cli.check import check  # noqa: E402
from minicss.cli.show import show  # noqa: E402

cli.add_command(show)
cli.add_command(check)
