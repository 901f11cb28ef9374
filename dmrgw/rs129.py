"""Reed-Solomon (12,9) code over GF(2^8) used to protect DMR link control."""

from collections.abc import Sequence

_NPAR = 3
_MESSAGE_LENGTH = 9
_CODEWORD_LENGTH = _MESSAGE_LENGTH + _NPAR

# Generator polynomial coefficients, lowest order first.
_POLY = (64, 56, 14, 1)

_PRIMITIVE = 0x11D


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = [0] * 512
    log = [0] * 256
    value = 1
    for power in range(255):
        exp[power] = value
        log[value] = power
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE
    for power in range(255, 511):
        exp[power] = exp[power - 255]
    return tuple(exp), tuple(log)


_EXP_TABLE, _LOG_TABLE = _build_tables()


def _gmult(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return _EXP_TABLE[_LOG_TABLE[a] + _LOG_TABLE[b]]


def encode(msg: Sequence[int]) -> bytes:
    """Return the three parity bytes for ``msg``.

    The result is ordered as the shift register holds it: index 0 is the
    lowest order parity byte, which is sent last in a codeword.
    """
    parity = [0] * _NPAR
    for byte in msg:
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte value: {byte}")
        feedback = byte ^ parity[_NPAR - 1]
        for j in range(_NPAR - 1, 0, -1):
            parity[j] = parity[j - 1] ^ _gmult(_POLY[j], feedback)
        parity[0] = _gmult(_POLY[0], feedback)
    return bytes(parity)


def check(data: Sequence[int]) -> bool:
    """Return whether the first twelve bytes of ``data`` form a valid codeword."""
    if len(data) < _CODEWORD_LENGTH:
        raise ValueError("RS(12,9) check needs twelve bytes")
    parity = encode(data[:_MESSAGE_LENGTH])
    return data[9] == parity[2] and data[10] == parity[1] and data[11] == parity[0]