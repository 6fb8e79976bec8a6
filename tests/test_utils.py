from pathlib import Path

import pytest

from bitio.utils import ensure_dir, format_dump, lsb_first_bits, parse_integers


def test_parse_integers_mixed_separators():
    assert parse_integers(" 1, -2\n3\t+4 ") == [1, -2, 3, 4]


def test_parse_integers_empty():
    assert parse_integers("\n  \n") == []


def test_parse_integers_rejects_garbage():
    with pytest.raises(ValueError, match="0x10"):
        parse_integers("1 0x10")


def test_lsb_first_bits():
    assert lsb_first_bits(0x01) == "10000000"
    assert lsb_first_bits(0x80) == "00000001"
    assert lsb_first_bits(0x54) == "00101010"


def test_format_dump_lines():
    lines = format_dump(bytes([0x43, 0x54, 0xFF]), width=2)
    assert len(lines) == 2
    assert lines[0].startswith("00000000  43 54")
    assert lines[1].startswith("00000002  ff")
    assert lines[1].endswith("11111111")


def test_format_dump_rejects_bad_width():
    with pytest.raises(ValueError):
        format_dump(b"\x00", width=0)


def test_ensure_dir_nested(tmp_path: Path):
    target = tmp_path / "a" / "b"
    ensure_dir(target)
    ensure_dir(target)
    assert target.is_dir()
