"""Signed Rice sequences and self-describing Rice frames.

Rice codes only represent non-negative integers. The helpers here run signed
values through the zigzag mapping first, which is how callers such as
lossless audio residual coders use the codec.

A *frame* is the container the command-line tools read and write::

    count      32-bit binary field, number of values
    parameter   5-bit binary field, Rice parameter k (0-31)
    values     count x Rice(zigzag(value), k)
    padding    zero bits up to the next byte boundary

Public API:
- RiceFrame
- rice_code_length
- write_signed_rice / read_signed_rice
- write_frame / read_frame
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from bitio.config import Config
from bitio.errors import PreconditionViolation, require_non_negative, require_width
from bitio.reader import BitReader
from bitio.writer import BitWriter
from bitio.zigzag import decode_zigzag, encode_zigzag

_LOGGER = logging.getLogger(__name__)


@dataclass
class RiceFrame:
    """Decoded frame contents."""

    parameter: int
    values: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)


def rice_code_length(value: int, num_fixed_bits: int) -> int:
    """Return the number of bits ``write_rice(value, num_fixed_bits)`` emits."""

    require_non_negative(value, "value")
    require_width(num_fixed_bits, Config.MAX_RICE_PARAMETER, "num_fixed_bits")
    return (value >> num_fixed_bits) + 1 + num_fixed_bits


def write_signed_rice(writer: BitWriter, values: Iterable[int], num_fixed_bits: int) -> int:
    """Write each signed 32-bit value as ``Rice(zigzag(value))``.

    Returns the number of values written.
    """

    written = 0
    for value in values:
        writer.write_rice(encode_zigzag(value), num_fixed_bits)
        written += 1
    return written


def read_signed_rice(reader: BitReader, count: int, num_fixed_bits: int) -> list[int]:
    """Read ``count`` values written by :func:`write_signed_rice`."""

    require_non_negative(count, "count")
    return [decode_zigzag(reader.read_rice(num_fixed_bits)) for _ in range(count)]


def write_frame(writer: BitWriter, values: Iterable[int], num_fixed_bits: int) -> int:
    """Write a complete frame and realign to a byte boundary.

    Returns the number of values in the frame.
    """

    # Validate everything before the header goes out
    codes = [encode_zigzag(v) for v in values]
    max_count = (1 << Config.FRAME_COUNT_BITS) - 1
    if len(codes) > max_count:
        raise PreconditionViolation(f"A frame holds at most {max_count} values, got {len(codes)}")
    require_width(num_fixed_bits, Config.MAX_RICE_PARAMETER, "num_fixed_bits")
    if not codes:
        _LOGGER.warning("Writing an empty Rice frame")

    writer.write_binary(len(codes), Config.FRAME_COUNT_BITS)
    writer.write_binary(num_fixed_bits, Config.FRAME_PARAMETER_BITS)
    for code in codes:
        writer.write_rice(code, num_fixed_bits)
    writer.flush_and_realign()
    _LOGGER.debug("Wrote Rice frame: %d values, k=%d", len(codes), num_fixed_bits)
    return len(codes)


def read_frame(reader: BitReader) -> RiceFrame:
    """Read one frame written by :func:`write_frame`.

    The reader is left on the byte boundary after the frame's padding, ready
    for the next frame.
    """

    count = reader.read_binary(Config.FRAME_COUNT_BITS)
    parameter = reader.read_binary(Config.FRAME_PARAMETER_BITS)
    values = read_signed_rice(reader, count, parameter)
    reader.realign_to_byte_boundary()
    _LOGGER.debug("Read Rice frame: %d values, k=%d", count, parameter)
    return RiceFrame(parameter=parameter, values=values)
