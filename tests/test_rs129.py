import random

import pytest

from dmrgw import rs129


def _codeword(message: bytes) -> bytes:
    parity = rs129.encode(message)
    return message + bytes((parity[2], parity[1], parity[0]))


def _random_messages(count, seed=1234):
    rng = random.Random(seed)
    return [bytes(rng.randrange(256) for _ in range(9)) for _ in range(count)]


def test_encode_returns_three_bytes():
    assert len(rs129.encode(b"\x12\x34\x56\x78\x9a\xbc\xde\xf0\x11")) == 3


def test_zero_message_has_zero_parity():
    assert rs129.encode(bytes(9)) == bytes(3)


def test_encoding_is_linear():
    a, b = _random_messages(2)
    combined = bytes(x ^ y for x, y in zip(a, b))
    expected = bytes(x ^ y for x, y in zip(rs129.encode(a), rs129.encode(b)))
    assert rs129.encode(combined) == expected


@pytest.mark.parametrize("message", _random_messages(20))
def test_codeword_checks(message):
    assert rs129.check(_codeword(message)) is True


@pytest.mark.parametrize("position", range(12))
def test_corrupted_codeword_fails(position):
    word = bytearray(_codeword(b"\x01\x02\x03\x04\x05\x06\x07\x08\x09"))
    word[position] ^= 0x40
    assert rs129.check(bytes(word)) is False


def test_check_ignores_trailing_bytes():
    word = _codeword(b"ABCDEFGHI") + b"\xff\xff"
    assert rs129.check(word) is True


def test_check_too_short():
    with pytest.raises(ValueError):
        rs129.check(bytes(11))


def test_encode_rejects_non_byte():
    with pytest.raises(ValueError):
        rs129.encode([256])