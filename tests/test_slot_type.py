import pytest

from dmrgw.slot_type import SlotType

FRAME_LENGTH = 33


@pytest.mark.parametrize("fill", [0x00, 0xFF, 0x5A])
@pytest.mark.parametrize("color_code", range(16))
def test_round_trip_all_values(fill, color_code):
    frame = bytes([fill] * FRAME_LENGTH)
    for data_type in range(16):
        written = SlotType(color_code, data_type).write(frame)
        assert len(written) == FRAME_LENGTH
        assert SlotType.from_frame(written) == SlotType(color_code, data_type)


def test_write_leaves_other_bytes_untouched():
    frame = bytes(range(FRAME_LENGTH))
    written = SlotType(3, 1).write(frame)
    for index in range(FRAME_LENGTH):
        if index not in (12, 13, 19, 20):
            assert written[index] == frame[index]


def test_write_preserves_bits_outside_field():
    frame = bytes([0xFF] * FRAME_LENGTH)
    written = SlotType(0, 0).write(frame)
    assert written[12] & 0xC0 == 0xC0
    assert written[13] & 0x0F == 0x0F
    assert written[19] & 0xF0 == 0xF0
    assert written[20] & 0x03 == 0x03


def test_zero_slot_type_clears_field():
    frame = bytes([0xFF] * FRAME_LENGTH)
    written = SlotType(0, 0).write(frame)
    assert written[12] == 0xC0
    assert written[13] == 0x0F
    assert written[19] == 0xF0
    assert written[20] == 0x03


def test_write_does_not_modify_input():
    frame = bytearray(FRAME_LENGTH)
    SlotType(7, 9).write(frame)
    assert frame == bytearray(FRAME_LENGTH)


def test_single_bit_error_is_corrected():
    written = bytearray(SlotType(3, 6).write(bytes(FRAME_LENGTH)))
    written[12] ^= 0x08
    assert SlotType.from_frame(bytes(written)) == SlotType(3, 6)


def test_default_values():
    slot_type = SlotType()
    assert (slot_type.color_code, slot_type.data_type) == (0, 0)


def test_from_frame_short_raises():
    with pytest.raises(ValueError):
        SlotType.from_frame(bytes(20))


def test_write_short_raises():
    with pytest.raises(ValueError):
        SlotType(1, 1).write(bytes(10))