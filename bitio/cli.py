"""Command-line interface for bitio using Click command groups."""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from bitio import __version__
from bitio.config import get_config


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """bitio: bit-level encoding tools (unary, Rice, zigzag)."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=get_config().LOG_FORMAT)


# Register subcommands
from bitio.commands.encode import encode  # noqa: E402
from bitio.commands.decode import decode  # noqa: E402
from bitio.commands.dump import dump  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(dump)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
