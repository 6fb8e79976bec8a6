"""Write-side bit accumulator.

:class:`BitWriter` packs bits into a pending byte and hands every completed
byte to a :class:`~bitio.byteio.ByteSink`. Bits are packed least significant
bit first within each byte, and multi-bit fields are emitted least
significant bit first, so the low bit of a field lands at the lowest unfilled
position of the pending byte.

Example
-------
>>> from bitio.byteio import BufferByteSink
>>> sink = BufferByteSink()
>>> w = BitWriter(sink)
>>> w.write_binary(3, 2)
>>> w.write_unary(2)
>>> w.flush_and_realign()
>>> list(sink.getvalue())
[19]
"""

from __future__ import annotations

from bitio.byteio import ByteSink
from bitio.config import BYTE_MASK, Config
from bitio.errors import require_non_negative, require_width


def _supports_close(sink: ByteSink) -> bool:
    return callable(getattr(sink, "close", None))


class BitWriter:
    """Bit-packing writer bound to a single byte sink.

    Invariants between calls: ``0 <= pending_bit_count < 8`` and every bit of
    the pending byte at or above ``pending_bit_count`` is zero.

    A failing sink leaves the writer in an unspecified state; the exception
    propagates and the writer should be abandoned. Instances are not
    thread-safe.
    """

    def __init__(self, sink: ByteSink) -> None:
        self._sink = sink
        self._pending_byte = 0
        self._pending_bit_count = 0
        self._closed = False

    @property
    def pending_bit_count(self) -> int:
        """Number of bits buffered in the pending byte (0-7)."""

        return self._pending_bit_count

    @property
    def is_aligned(self) -> bool:
        return self._pending_bit_count == 0

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed writer")

    def _emit_pending(self) -> None:
        self._sink.write_byte(self._pending_byte)
        self._pending_byte = 0
        self._pending_bit_count = 0

    def write_bit(self, value: bool) -> None:
        """Write a single bit; any truthy ``value`` writes a ``1``."""

        self._check_open()
        if value:
            self._pending_byte |= 1 << self._pending_bit_count
        self._pending_bit_count += 1
        if self._pending_bit_count == Config.BITS_PER_BYTE:
            self._emit_pending()

    def write_zeroes(self, count: int) -> None:
        """Advance the bit position by ``count`` zero bits.

        The pending byte is emitted as-is when the run crosses its end, and a
        zero byte is emitted for every further whole byte the run covers.
        """

        self._check_open()
        require_non_negative(count, "count")
        if count + self._pending_bit_count < Config.BITS_PER_BYTE:
            self._pending_bit_count += count
            return

        bits_remaining = count - (Config.BITS_PER_BYTE - self._pending_bit_count)
        self._emit_pending()
        for _ in range(bits_remaining // Config.BITS_PER_BYTE):
            self._sink.write_byte(0)
        self._pending_bit_count = bits_remaining % Config.BITS_PER_BYTE

    def write_unary(self, value: int) -> None:
        """Write ``value`` zero bits followed by a terminating ``1`` bit."""

        self._check_open()
        require_non_negative(value, "value")
        # Run and terminator fit in the pending byte
        if value + self._pending_bit_count + 1 < Config.BITS_PER_BYTE:
            self._pending_byte |= 1 << (value + self._pending_bit_count)
            self._pending_bit_count += value + 1
        else:
            self.write_zeroes(value)
            self.write_bit(True)

    def write_binary(self, value: int, num_bits: int) -> None:
        """Write the low ``num_bits`` bits of ``value``, least significant first.

        Parameters
        ----------
        value:
            Any integer. Bits above ``num_bits - 1`` are ignored, so negative
            values are written in two's complement.
        num_bits:
            Field width, 0 to 32.
        """

        self._check_open()
        require_width(num_bits, Config.MAX_BINARY_BITS, "num_bits")
        value &= (1 << num_bits) - 1

        if num_bits + self._pending_bit_count < Config.BITS_PER_BYTE:
            self._pending_byte |= value << self._pending_bit_count
            self._pending_bit_count += num_bits
            return

        # Fill the pending byte, then whole bytes, then keep the tail pending
        bits_that_fit = Config.BITS_PER_BYTE - self._pending_bit_count
        self._pending_byte |= (value & ((1 << bits_that_fit) - 1)) << self._pending_bit_count
        self._emit_pending()
        value >>= bits_that_fit
        bits_remaining = num_bits - bits_that_fit
        while bits_remaining >= Config.BITS_PER_BYTE:
            self._sink.write_byte(value & BYTE_MASK)
            value >>= Config.BITS_PER_BYTE
            bits_remaining -= Config.BITS_PER_BYTE
        self._pending_byte = value
        self._pending_bit_count = bits_remaining

    def write_byte(self, value: int) -> None:
        """Write the low 8 bits of ``value``; same bits as ``write_binary(value, 8)``."""

        self._check_open()
        value &= BYTE_MASK
        if self._pending_bit_count == 0:
            self._sink.write_byte(value)
            return

        carried_bits = self._pending_bit_count
        bits_that_fit = Config.BITS_PER_BYTE - carried_bits
        self._pending_byte |= (value & ((1 << bits_that_fit) - 1)) << carried_bits
        self._emit_pending()
        self._pending_byte = value >> bits_that_fit
        self._pending_bit_count = carried_bits

    def write_rice(self, value: int, num_fixed_bits: int) -> None:
        """Write ``value`` as a Rice code with parameter ``k = num_fixed_bits``.

        The quotient ``value >> k`` is written in unary, followed by the
        remainder as a ``k``-bit binary field. ``value`` must be
        non-negative; map signed data through
        :func:`bitio.zigzag.encode_zigzag` first.
        """

        self._check_open()
        require_non_negative(value, "value")
        require_width(num_fixed_bits, Config.MAX_RICE_PARAMETER, "num_fixed_bits")
        self.write_unary(value >> num_fixed_bits)
        self.write_binary(value & ((1 << num_fixed_bits) - 1), num_fixed_bits)

    def flush_and_realign(self) -> None:
        """Emit the pending byte, zero-padded, if any bits are pending."""

        self._check_open()
        if self._pending_bit_count > 0:
            self._emit_pending()

    def close(self) -> None:
        """Flush pending bits and close the sink when it can be closed.

        The sink is closed even if the final flush fails. Closing twice is a
        no-op.
        """

        if self._closed:
            return
        try:
            self.flush_and_realign()
        finally:
            self._closed = True
            if _supports_close(self._sink):
                self._sink.close()  # type: ignore[attr-defined]
