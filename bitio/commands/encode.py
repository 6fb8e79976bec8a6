"""CLI command for Rice-encoding a list of signed integers.

Reads whitespace-separated integers from a text file, maps them through
zigzag and writes a single Rice frame to the output file.

Examples
--------
  bitio encode residuals.txt residuals.rice
  bitio encode residuals.txt residuals.rice --rice-parameter 2 --force
"""

from __future__ import annotations

from pathlib import Path

import click

from bitio.config import Config
from bitio.errors import BitIOError
from bitio.rice import rice_code_length, write_frame
from bitio.streams import open_bit_writer
from bitio.utils import ensure_dir, parse_integers
from bitio.zigzag import encode_zigzag


@click.command(name="encode")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "rice_parameter",
    "-k",
    "--rice-parameter",
    type=click.IntRange(0, Config.MAX_RICE_PARAMETER),
    default=Config.DEFAULT_RICE_PARAMETER,
    show_default=True,
    help="Rice parameter k (M = 2**k)",
)
@click.option(
    "force",
    "--force",
    is_flag=True,
    help="Overwrite the output file if it exists",
)
def encode(input_path: Path, output_path: Path, rice_parameter: int, force: bool) -> None:
    """Encode integers from INPUT_PATH into a Rice frame at OUTPUT_PATH."""

    try:
        if output_path.exists() and not force:
            raise click.ClickException(f"Output exists: {output_path}. Use --force to overwrite.")

        values = parse_integers(input_path.read_text(encoding="utf-8"))
        payload_bits = sum(rice_code_length(encode_zigzag(v), rice_parameter) for v in values)

        ensure_dir(output_path.parent)
        with open_bit_writer(output_path) as out:
            write_frame(out, values, rice_parameter)

        size = output_path.stat().st_size
        click.echo(f"Values: {len(values)} | k={rice_parameter} | payload: {payload_bits} bits")
        click.secho(f"OK: wrote {size} bytes to {output_path}", fg="green")
    except click.ClickException:
        raise
    except (BitIOError, OSError, ValueError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
