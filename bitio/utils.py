"""Shared utilities for the command-line tools.

Covers directory creation, parsing integer text files and rendering bytes
in the order the bit reader consumes them.
"""

from __future__ import annotations

from pathlib import Path

from bitio.config import Config


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)


def parse_integers(text: str) -> list[int]:
    """Parse whitespace-separated (optionally comma-separated) integers.

    Raises ``ValueError`` naming the first token that is not an integer.
    """

    values: list[int] = []
    for token in text.replace(",", " ").split():
        try:
            values.append(int(token, 10))
        except ValueError:
            raise ValueError(f"Not an integer: {token!r}") from None
    return values


def lsb_first_bits(value: int) -> str:
    """Render a byte as eight ``0``/``1`` characters, bit 0 first.

    >>> lsb_first_bits(0x43)
    '11000010'
    """

    return "".join("1" if (value >> i) & 1 else "0" for i in range(Config.BITS_PER_BYTE))


def format_dump(data: bytes, width: int = Config.DEFAULT_DUMP_WIDTH) -> list[str]:
    """Format ``data`` as dump lines of ``width`` bytes each.

    Each line holds the byte offset, the hex bytes and their LSB-first bit
    strings.
    """

    if width <= 0:
        raise ValueError("width must be positive")
    lines: list[str] = []
    for offset in range(0, len(data), width):
        chunk = data[offset:offset + width]
        hex_part = " ".join(f"{b:02x}" for b in chunk)
        bit_part = " ".join(lsb_first_bits(b) for b in chunk)
        lines.append(f"{offset:08x}  {hex_part:<{width * 3 - 1}}  {bit_part}")
    return lines
