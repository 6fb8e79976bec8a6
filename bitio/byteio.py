"""Byte-level capability interfaces and their adapters.

The bit codec never talks to a file or socket directly. It writes through a
:class:`ByteSink` and reads through a :class:`ByteSource`, each a single
method protocol, so any transport can be plugged in by providing a small
adapter.

A source signals exhaustion by returning :data:`END_OF_DATA` rather than
raising; :class:`~bitio.reader.BitReader` turns that into
:class:`~bitio.errors.EndOfStream` only when a bit is actually needed.

Public API:
- ByteSink, ByteSource
- StreamByteSink, StreamByteSource
- BufferByteSink, BufferByteSource
- END_OF_DATA
"""

from __future__ import annotations

from typing import BinaryIO, Protocol

from bitio.config import BYTE_MASK

END_OF_DATA: int = -1


class ByteSink(Protocol):
    """Accepts one byte at a time."""

    def write_byte(self, value: int) -> None:  # pragma: no cover - protocol
        ...


class ByteSource(Protocol):
    """Produces one byte at a time, or :data:`END_OF_DATA` when exhausted."""

    def read_byte(self) -> int:  # pragma: no cover - protocol
        ...


class StreamByteSink:
    """Byte sink writing to a binary file object.

    Parameters
    ----------
    stream:
        Any object with ``write(bytes)``: an ``io.BytesIO``, a file opened in
        ``"wb"`` mode, ``socket.makefile("wb")``.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    def write_byte(self, value: int) -> None:
        self._stream.write(bytes((value & BYTE_MASK,)))

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        self._stream.close()


class StreamByteSource:
    """Byte source reading from a binary file object."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    def read_byte(self) -> int:
        chunk = self._stream.read(1)
        if not chunk:
            return END_OF_DATA
        return chunk[0]

    def close(self) -> None:
        self._stream.close()


class BufferByteSink:
    """In-memory byte sink; :meth:`getvalue` returns everything written."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_byte(self, value: int) -> None:
        self._buffer.append(value & BYTE_MASK)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class BufferByteSource:
    """In-memory byte source over any bytes-like object."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the next byte to be returned."""

        return self._pos

    def read_byte(self) -> int:
        if self._pos >= len(self._data):
            return END_OF_DATA
        value = self._data[self._pos]
        self._pos += 1
        return value
