import pytest

from dmrgw import golay2087


def test_encode_pins_table_entry():
    assert golay2087.encode(b"\x01") == b"\x01\x8e\xb0"


def test_encode_zero_is_all_zero():
    assert golay2087.encode(b"\x00") == b"\x00\x00\x00"


@pytest.mark.parametrize("value", range(256))
def test_round_trip(value):
    codeword = golay2087.encode(bytes([value]))
    assert len(codeword) == 3
    assert codeword[0] == value
    assert golay2087.decode(codeword) == value


def test_encode_ignores_trailing_bytes():
    assert golay2087.encode(b"\x2a\xff\xff") == golay2087.encode(b"\x2a")


def test_decode_ignores_unused_low_bits():
    codeword = bytearray(golay2087.encode(b"\x5c"))
    codeword[2] ^= 0x1F
    assert golay2087.decode(bytes(codeword)) == 0x5C


@pytest.mark.parametrize("value", [0x00, 0x37, 0xA5, 0xFF])
@pytest.mark.parametrize("byte_index,bit", [(0, 0x80), (0, 0x01), (0, 0x10), (1, 0x04)])
def test_single_bit_error_is_corrected(value, byte_index, bit):
    codeword = bytearray(golay2087.encode(bytes([value])))
    codeword[byte_index] ^= bit
    assert golay2087.decode(bytes(codeword)) == value


def test_encode_empty_raises():
    with pytest.raises(ValueError):
        golay2087.encode(b"")


def test_decode_short_raises():
    with pytest.raises(ValueError):
        golay2087.decode(b"\x01\x02")