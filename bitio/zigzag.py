"""Zigzag mapping between signed and unsigned 32-bit integers.

Interleaves non-negative and negative values so that small magnitudes of
either sign get small codes: ``0, -1, 1, -2, 2, ...`` map to
``0, 1, 2, 3, 4, ...``. Rice coding only handles non-negative values, so
signed data goes through :func:`encode_zigzag` before
:meth:`~bitio.writer.BitWriter.write_rice`.
"""

from __future__ import annotations

from bitio.config import INT32_MAX, INT32_MIN, UINT32_MASK
from bitio.errors import PreconditionViolation


def encode_zigzag(value: int) -> int:
    """Map a signed 32-bit ``value`` to its unsigned zigzag code."""

    if not INT32_MIN <= value <= INT32_MAX:
        raise PreconditionViolation(f"value {value} is outside the signed 32-bit range")
    # Python's >> is arithmetic, so value >> 31 is 0 or -1
    return ((value << 1) ^ (value >> 31)) & UINT32_MASK


def decode_zigzag(code: int) -> int:
    """Inverse of :func:`encode_zigzag`.

    ``code`` may be given unsigned or as the same 32 bits read as a signed
    integer, so ``decode_zigzag(-1) == decode_zigzag(0xFFFFFFFF)``.
    """

    if not INT32_MIN <= code <= UINT32_MASK:
        raise PreconditionViolation(f"code {code} is outside the 32-bit range")
    code &= UINT32_MASK
    return (code >> 1) ^ -(code & 1)
