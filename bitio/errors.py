"""Exceptions raised by the bit codec.

Transport failures are not represented here: an ``OSError`` raised by the
underlying stream propagates to the caller unchanged.
"""

from __future__ import annotations


class BitIOError(Exception):
    """Base class for errors raised by bitio itself."""


class EndOfStream(BitIOError, EOFError):
    """The byte source ran out while a read still needed bits.

    Bits consumed by the failed read are not pushed back; the reader must be
    discarded or reset with :meth:`BitReader.reset_state` before reuse.
    """


class PreconditionViolation(BitIOError, ValueError):
    """An argument is outside the range an operation accepts.

    Raised before any bit is written or read.
    """


def require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise PreconditionViolation(f"{name} must be non-negative, got {value}")


def require_width(num_bits: int, maximum: int, name: str) -> None:
    if not 0 <= num_bits <= maximum:
        raise PreconditionViolation(f"{name} must be between 0 and {maximum}, got {num_bits}")
