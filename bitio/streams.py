"""File-like bit streams.

:class:`BitOutputStream` and :class:`BitInputStream` bind a
:class:`~bitio.writer.BitWriter` / :class:`~bitio.reader.BitReader` to a
binary file object and add the ordinary stream surface on top: byte-oriented
``write``/``read``, ``flush``, ``close`` and context manager support. Every
bit-level operation of the underlying accumulator stays available.

Example
-------
>>> import io
>>> buf = io.BytesIO()
>>> with BitOutputStream(buf) as out:
...     out.write_rice(42, 4)
...     out.flush_and_realign()
...     _ = out.write(b"ok")
...     data = buf.getvalue()
>>> with BitInputStream(io.BytesIO(data)) as inp:
...     value = inp.read_rice(4)
...     inp.realign_to_byte_boundary()
...     value, inp.read()
(42, b'ok')
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Optional

from bitio.byteio import StreamByteSink, StreamByteSource
from bitio.errors import EndOfStream
from bitio.reader import BitReader
from bitio.writer import BitWriter

_LOGGER = logging.getLogger(__name__)


class BitOutputStream(BitWriter):
    """Bit writer over a binary output stream.

    ``close()`` writes any pending bits (zero-padded to a whole byte) and
    then closes the wrapped stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._byte_sink = StreamByteSink(stream)
        super().__init__(self._byte_sink)

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write ``data`` byte by byte, shifted by any pending bits.

        Returns the number of bytes accepted.
        """

        view = memoryview(data).cast("B")
        for value in view:
            self.write_byte(value)
        return len(view)

    def flush(self) -> None:
        """Flush the wrapped stream; pending bits stay pending."""

        self._check_open()
        self._byte_sink.flush()

    def close(self) -> None:
        if self.closed:
            return
        if self.pending_bit_count:
            _LOGGER.debug("Padding %d pending bits on close", self.pending_bit_count)
        super().close()
        _LOGGER.debug("Closed bit output stream")

    def __enter__(self) -> BitOutputStream:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class BitInputStream(BitReader):
    """Bit reader over a binary input stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._byte_source = StreamByteSource(stream)
        self._closed = False
        super().__init__(self._byte_source)

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining bytes if ``size < 0``).

        Returns fewer bytes than requested when the stream ends, and ``b""``
        once it is exhausted. When the reader is not byte-aligned each byte
        is assembled from two source bytes.
        """

        if self._closed:
            raise ValueError("I/O operation on closed stream")
        out = bytearray()
        while size < 0 or len(out) < size:
            try:
                out.append(self.read_byte())
            except EndOfStream:
                break
        return bytes(out)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._byte_source.close()
        _LOGGER.debug("Closed bit input stream")

    def __enter__(self) -> BitInputStream:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def open_bit_writer(path: Path | str) -> BitOutputStream:
    """Create (or truncate) ``path`` and return a bit stream writing to it."""

    _LOGGER.debug("Opening %s for bit output", path)
    return BitOutputStream(open(path, "wb"))


def open_bit_reader(path: Path | str) -> BitInputStream:
    """Open ``path`` and return a bit stream reading from it."""

    _LOGGER.debug("Opening %s for bit input", path)
    return BitInputStream(open(path, "rb"))
