"""CLI command for decoding a Rice frame back into integers.

Examples
--------
  bitio decode residuals.rice
  bitio decode residuals.rice --output residuals.txt
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from bitio.errors import BitIOError
from bitio.rice import read_frame
from bitio.streams import open_bit_reader
from bitio.utils import ensure_dir

_LOGGER = logging.getLogger(__name__)


@click.command(name="decode")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "output",
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Write values to this file instead of stdout",
)
def decode(input_path: Path, output: Path | None) -> None:
    """Decode the Rice frame in INPUT_PATH, one integer per line."""

    try:
        with open_bit_reader(input_path) as inp:
            frame = read_frame(inp)
            trailing = inp.read()
        if trailing:
            _LOGGER.warning("Ignoring %d trailing bytes after frame", len(trailing))

        text = "".join(f"{v}\n" for v in frame.values)
        if output is None:
            click.echo(text, nl=False)
        else:
            ensure_dir(output.parent)
            output.write_text(text, encoding="utf-8")
            click.echo(f"Values: {len(frame)} | k={frame.parameter}")
            click.secho(f"OK: wrote {output}", fg="green")
    except click.ClickException:
        raise
    except (BitIOError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
