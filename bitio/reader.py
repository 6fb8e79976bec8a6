"""Read-side bit accumulator.

:class:`BitReader` is the dual of :class:`~bitio.writer.BitWriter`: it pulls
bytes from a :class:`~bitio.byteio.ByteSource` and hands back bits and fields
in the same LSB-first order the writer produced them.

The reader holds the most recently fetched byte and the index of its next
unread bit. Index 8 means the byte is used up; the next bit read fetches a
new byte. The source is only consulted when a bit is actually needed, so
realigning never blocks on I/O.
"""

from __future__ import annotations

from bitio.byteio import END_OF_DATA, ByteSource
from bitio.config import Config
from bitio.errors import EndOfStream, require_width


class BitReader:
    """Bit-unpacking reader bound to a single byte source.

    When :class:`~bitio.errors.EndOfStream` is raised part-way through a
    field, the bits already consumed are lost. Call :meth:`reset_state` or
    discard the reader before reading again. Instances are not thread-safe.
    """

    def __init__(self, source: ByteSource) -> None:
        self._source = source
        self._current_byte = 0
        self._bit_position = Config.BITS_PER_BYTE

    @property
    def bits_remaining(self) -> int:
        """Unread bits left in the current byte (0-7)."""

        return Config.BITS_PER_BYTE - self._bit_position

    @property
    def is_aligned(self) -> bool:
        return self._bit_position == Config.BITS_PER_BYTE

    def _fetch(self) -> int:
        value = self._source.read_byte()
        if value == END_OF_DATA:
            raise EndOfStream("Unexpected end of data")
        return value

    def read_bit(self) -> bool:
        """Read one bit; ``True`` for ``1``."""

        if self._bit_position == Config.BITS_PER_BYTE:
            self._current_byte = self._fetch()
            self._bit_position = 0
        bit = (self._current_byte >> self._bit_position) & 1
        self._bit_position += 1
        return bit == 1

    def read_unary(self) -> int:
        """Count ``0`` bits up to the terminating ``1`` bit."""

        value = 0
        while not self.read_bit():
            value += 1
        return value

    def read_binary(self, num_bits: int) -> int:
        """Read an unsigned ``num_bits``-wide field, least significant bit first.

        Parameters
        ----------
        num_bits:
            Field width, 0 to 32. A width of 0 returns 0 without touching the
            source.

        Raises
        ------
        EndOfStream
            If the source is exhausted before the field is complete.
        """

        require_width(num_bits, Config.MAX_BINARY_BITS, "num_bits")

        # Field lies entirely within the current byte
        if self._bit_position + num_bits <= Config.BITS_PER_BYTE:
            value = (self._current_byte >> self._bit_position) & ((1 << num_bits) - 1)
            self._bit_position += num_bits
            return value

        bits_left = Config.BITS_PER_BYTE - self._bit_position
        value = self._current_byte >> self._bit_position
        shift = bits_left
        bits_remaining = num_bits - bits_left
        while bits_remaining >= Config.BITS_PER_BYTE:
            value |= self._fetch() << shift
            shift += Config.BITS_PER_BYTE
            bits_remaining -= Config.BITS_PER_BYTE

        if bits_remaining:
            self._current_byte = self._fetch()
            value |= (self._current_byte & ((1 << bits_remaining) - 1)) << shift
            self._bit_position = bits_remaining
        else:
            self._bit_position = Config.BITS_PER_BYTE
        return value

    def read_rice(self, num_fixed_bits: int) -> int:
        """Read a Rice code written with parameter ``k = num_fixed_bits``."""

        require_width(num_fixed_bits, Config.MAX_RICE_PARAMETER, "num_fixed_bits")
        quotient = self.read_unary()
        remainder = self.read_binary(num_fixed_bits)
        return (quotient << num_fixed_bits) + remainder

    def read_byte(self) -> int:
        """Read eight bits as a byte; same result as ``read_binary(8)``."""

        if self._bit_position == Config.BITS_PER_BYTE:
            return self._fetch()

        # Tail of the current byte, head of the next one
        bits_in_current = Config.BITS_PER_BYTE - self._bit_position
        value = self._current_byte >> self._bit_position
        self._current_byte = self._fetch()
        value |= (self._current_byte & ((1 << self._bit_position) - 1)) << bits_in_current
        return value

    def realign_to_byte_boundary(self) -> None:
        """Discard the unread bits of the current byte, if any."""

        self._bit_position = Config.BITS_PER_BYTE

    def reset_state(self) -> None:
        """Forget the cached byte so the next read fetches from the source.

        Use after the underlying source has been repositioned externally.
        """

        self._current_byte = 0
        self._bit_position = Config.BITS_PER_BYTE
