import pytest

from bitio.config import INT32_MAX, INT32_MIN, UINT32_MASK
from bitio.errors import PreconditionViolation
from bitio.zigzag import decode_zigzag, encode_zigzag


def test_zigzag_small_values():
    assert [encode_zigzag(v) for v in (0, -1, 1, -2, 2)] == [0, 1, 2, 3, 4]


def test_zigzag_extremes():
    assert encode_zigzag(INT32_MAX) == UINT32_MASK - 1
    assert encode_zigzag(INT32_MIN) == UINT32_MASK
    assert decode_zigzag(UINT32_MASK - 1) == INT32_MAX
    assert decode_zigzag(UINT32_MASK) == INT32_MIN


@pytest.mark.parametrize("value", list(range(-100, 100)) + [INT32_MIN, INT32_MIN + 1, INT32_MAX - 1, INT32_MAX])
def test_zigzag_involution(value: int):
    assert decode_zigzag(encode_zigzag(value)) == value


def test_zigzag_codes_are_unsigned():
    assert all(encode_zigzag(v) >= 0 for v in range(-1000, 1000, 7))


@pytest.mark.parametrize("value", [INT32_MAX + 1, INT32_MIN - 1, 2**40])
def test_encode_out_of_range(value: int):
    with pytest.raises(PreconditionViolation):
        encode_zigzag(value)


@pytest.mark.parametrize("code", [INT32_MIN - 1, UINT32_MASK + 1])
def test_decode_out_of_range(code: int):
    with pytest.raises(PreconditionViolation):
        decode_zigzag(code)


@pytest.mark.parametrize("signed_code, expected", [(-1, INT32_MIN), (-2, INT32_MAX), (INT32_MIN, 2**30)])
def test_decode_accepts_signed_view_of_code(signed_code: int, expected: int):
    assert decode_zigzag(signed_code) == expected
    assert decode_zigzag(signed_code & UINT32_MASK) == expected
