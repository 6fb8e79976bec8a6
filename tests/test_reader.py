import pytest

from bitio.byteio import BufferByteSource
from bitio.errors import EndOfStream, PreconditionViolation
from bitio.reader import BitReader


def make_reader(data: bytes) -> BitReader:
    return BitReader(BufferByteSource(data))


def test_read_bit_lsb_first():
    r = make_reader(bytes([0b10001101]))
    bits = [r.read_bit() for _ in range(8)]
    assert bits == [True, False, True, True, False, False, False, True]
    assert r.is_aligned


def test_read_bit_empty_source_raises():
    r = make_reader(b"")
    with pytest.raises(EndOfStream):
        r.read_bit()


def test_end_of_stream_is_eof_error():
    r = make_reader(b"")
    with pytest.raises(EOFError):
        r.read_byte()


def test_read_binary_zero_width_consumes_nothing():
    source = BufferByteSource(b"\xff")
    r = BitReader(source)
    assert r.read_binary(0) == 0
    assert source.position == 0


def test_read_binary_32_bits():
    r = make_reader(bytes([0x78, 0x56, 0x34, 0x12]))
    assert r.read_binary(32) == 0x12345678
    assert r.is_aligned


def test_read_binary_misaligned_span():
    r = make_reader(bytes([0xE5, 0x55]))
    assert r.read_binary(3) == 0b101
    assert r.read_binary(12) == 0xABC
    assert r.bits_remaining == 1
    assert r.read_bit() is False


def test_read_binary_within_byte():
    r = make_reader(bytes([0b11010110]))
    assert r.read_binary(2) == 0b10
    assert r.read_binary(3) == 0b101
    assert r.read_binary(3) == 0b110


def test_read_binary_short_tail_raises():
    r = make_reader(b"\xff")
    with pytest.raises(EndOfStream):
        r.read_binary(9)


def test_read_binary_missing_whole_byte_raises():
    r = make_reader(b"\xff\xff")
    with pytest.raises(EndOfStream):
        r.read_binary(24)


def test_read_byte_misaligned():
    r = make_reader(bytes([0xE5, 0x55]))
    r.read_binary(3)
    assert r.read_byte() == 0xBC
    assert r.bits_remaining == 5
    assert r.read_binary(4) == 0xA


def test_read_byte_misaligned_end_of_stream():
    r = make_reader(b"\xff")
    r.read_bit()
    with pytest.raises(EndOfStream):
        r.read_byte()


def test_read_unary_within_byte():
    r = make_reader(bytes([0b00010000]))
    assert r.read_unary() == 4


def test_read_unary_across_bytes():
    r = make_reader(bytes([0x00, 0x00, 0x01]))
    assert r.read_unary() == 16


def test_read_unary_unterminated_raises():
    r = make_reader(b"\x00")
    with pytest.raises(EndOfStream):
        r.read_unary()


def test_read_rice_literal():
    r = make_reader(bytes([84]))
    assert r.read_rice(4) == 42


def test_realign_discards_rest_of_byte():
    r = make_reader(bytes([0xFF, 0x0A]))
    r.read_bit()
    r.realign_to_byte_boundary()
    assert r.read_byte() == 0x0A


def test_realign_does_not_touch_source():
    source = BufferByteSource(bytes([0xFF, 0x0A]))
    r = BitReader(source)
    r.realign_to_byte_boundary()
    assert source.position == 0
    r.read_bit()
    r.realign_to_byte_boundary()
    assert source.position == 1
    assert r.is_aligned


def test_reset_state_fetches_fresh_byte():
    r = make_reader(bytes([0x01, 0x80]))
    assert r.read_bit() is True
    r.reset_state()
    assert r.is_aligned
    assert r.read_byte() == 0x80


def test_bits_remaining_tracks_position():
    r = make_reader(b"\x00")
    assert r.bits_remaining == 0
    r.read_binary(3)
    assert r.bits_remaining == 5


@pytest.mark.parametrize(
    "call",
    [
        lambda r: r.read_binary(33),
        lambda r: r.read_binary(-1),
        lambda r: r.read_rice(32),
        lambda r: r.read_rice(-1),
    ],
)
def test_precondition_violations(call):
    source = BufferByteSource(b"\xff\xff\xff\xff\xff")
    r = BitReader(source)
    with pytest.raises(PreconditionViolation):
        call(r)
    assert source.position == 0
