"""CLI command showing a file's bytes in bit-reader order.

Each byte is printed in hex and as an LSB-first bit string, the order in
which :class:`bitio.reader.BitReader` hands bits to callers.

Examples
--------
  bitio dump residuals.rice
  bitio dump residuals.rice --limit 0 --width 4
"""

from __future__ import annotations

from pathlib import Path

import click

from bitio.config import Config
from bitio.streams import open_bit_reader
from bitio.utils import format_dump


@click.command(name="dump")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "limit",
    "--limit",
    type=click.IntRange(min=0),
    default=Config.DEFAULT_DUMP_LIMIT,
    show_default=True,
    help="Maximum number of bytes to show (0 for all)",
)
@click.option(
    "width",
    "--width",
    type=click.IntRange(min=1),
    default=Config.DEFAULT_DUMP_WIDTH,
    show_default=True,
    help="Bytes per line",
)
def dump(input_path: Path, limit: int, width: int) -> None:
    """Print the bytes of INPUT_PATH with LSB-first bit strings."""

    try:
        with open_bit_reader(input_path) as inp:
            data = inp.read(limit if limit > 0 else -1)
            truncated = limit > 0 and bool(inp.read(1))
    except OSError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)

    for line in format_dump(data, width):
        click.echo(line)
    if truncated:
        click.echo(f"... (showing first {limit} bytes)")
