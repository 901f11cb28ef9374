from itertools import combinations

import pytest

from dmrgw.qr1676 import decode, encode


def _flip(codeword: bytes, bits) -> bytes:
    value = int.from_bytes(codeword, "big")
    for bit in bits:
        # bit 0 of the 16-bit word is not part of the decoded 15 bits
        value ^= 1 << (bit + 1)
    return value.to_bytes(2, "big")


def test_encode_pins_table_values():
    assert encode(bytes([0x00])) == bytes([0x00, 0x00])
    assert encode(bytes([0x02])) == bytes([0x02, 0x73])
    assert encode(bytes([0xFE])) == bytes([0xFE, 0x5B])


def test_encode_ignores_lowest_input_bit():
    for value in range(128):
        assert encode(bytes([value << 1])) == encode(bytes([(value << 1) | 1]))


def test_encode_keeps_information_bits():
    for value in range(128):
        assert encode(bytes([value << 1]))[0] >> 1 == value


def test_round_trip_all_values():
    for value in range(128):
        codeword = encode(bytes([value << 1]))
        decoded = decode(codeword)
        assert decoded == codeword[0]
        assert decoded >> 1 == value


def test_single_bit_errors_corrected():
    for value in range(128):
        codeword = encode(bytes([value << 1]))
        for bit in range(15):
            assert decode(_flip(codeword, [bit])) >> 1 == value


def test_double_bit_errors_corrected():
    for value in range(0, 128, 5):
        codeword = encode(bytes([value << 1]))
        for bits in combinations(range(15), 2):
            assert decode(_flip(codeword, bits)) >> 1 == value


def test_encode_requires_data():
    with pytest.raises(ValueError):
        encode(b"")


def test_decode_requires_two_bytes():
    with pytest.raises(ValueError):
        decode(b"\x02")