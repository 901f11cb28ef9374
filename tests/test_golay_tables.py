from itertools import combinations

import pytest

from dmrgw.golay_tables import error_pattern, syndrome_1987

GENPOL = 0x0C75


def test_zero_pattern_has_zero_syndrome():
    assert syndrome_1987(0) == 0


def test_small_patterns_are_their_own_syndrome():
    for pattern in (1, 0x7FF, 0x400, 0x123):
        assert syndrome_1987(pattern) == pattern


@pytest.mark.parametrize("shift", range(8))
def test_multiples_of_generator_have_zero_syndrome(shift):
    assert syndrome_1987(GENPOL << shift) == 0


def test_syndrome_is_linear():
    pairs = [(0x12345, 0x54321), (0x7FFFF, 0x00800), (0x40000, 0x3ABCD)]
    for a, b in pairs:
        assert syndrome_1987(a ^ b) == syndrome_1987(a) ^ syndrome_1987(b)


def test_syndrome_fits_eleven_bits():
    for pattern in range(0, 1 << 19, 997):
        assert 0 <= syndrome_1987(pattern) < 2048


def test_negative_pattern_rejected():
    with pytest.raises(ValueError):
        syndrome_1987(-1)


def test_error_pattern_pins():
    assert error_pattern(0) == 0
    assert error_pattern(15) == 0x24020


def test_error_pattern_out_of_range():
    with pytest.raises(IndexError):
        error_pattern(2048)
    with pytest.raises(IndexError):
        error_pattern(-1)


@pytest.mark.parametrize("weight", [1, 2, 3])
def test_low_weight_errors_are_recovered(weight):
    for bits in combinations(range(19), weight):
        pattern = 0
        for bit in bits:
            pattern |= 1 << bit
        assert error_pattern(syndrome_1987(pattern)) == pattern


def test_error_pattern_has_same_syndrome():
    for syndrome in range(2048):
        pattern = error_pattern(syndrome)
        if pattern:
            assert syndrome_1987(pattern) == syndrome