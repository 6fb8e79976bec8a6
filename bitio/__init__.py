"""
bitio: Bit-granular reading and writing of byte streams.

Packs and unpacks single bits, fixed-width binary fields, unary codes and
Rice codes (LSB first), with a zigzag mapping for signed values.
"""

__all__ = [
    "BitWriter",
    "BitReader",
    "BitOutputStream",
    "BitInputStream",
    "open_bit_writer",
    "open_bit_reader",
    # Byte transport
    "ByteSink",
    "ByteSource",
    "StreamByteSink",
    "StreamByteSource",
    "BufferByteSink",
    "BufferByteSource",
    "END_OF_DATA",
    # Errors
    "BitIOError",
    "EndOfStream",
    "PreconditionViolation",
    # Zigzag
    "encode_zigzag",
    "decode_zigzag",
    # Configuration
    "Config",
    "get_config",
    "__version__",
]

__version__ = "0.1.0"

from bitio.byteio import (
    END_OF_DATA,
    BufferByteSink,
    BufferByteSource,
    ByteSink,
    ByteSource,
    StreamByteSink,
    StreamByteSource,
)
from bitio.config import Config, get_config
from bitio.errors import BitIOError, EndOfStream, PreconditionViolation
from bitio.reader import BitReader
from bitio.streams import BitInputStream, BitOutputStream, open_bit_reader, open_bit_writer
from bitio.writer import BitWriter
from bitio.zigzag import decode_zigzag, encode_zigzag
