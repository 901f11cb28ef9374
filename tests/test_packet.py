import pytest

from dmrgw.packet import (
    FRAME_LENGTH,
    PACKET_LENGTH,
    DMRFrame,
    Flco,
    FrameKind,
    decode_frame,
    encode_frame,
)


def _frame(**kwargs):
    base = dict(
        slot_no=2,
        src_id=1234567,
        dst_id=91,
        flco=Flco.GROUP,
        kind=FrameKind.VOICE,
        n=3,
        seq_no=17,
        stream_id=0xDEADBEEF,
        data=bytes(range(FRAME_LENGTH)),
        ber=5,
        rssi=70,
    )
    base.update(kwargs)
    return DMRFrame(**base)


def test_packet_has_fixed_length_and_magic():
    packet = encode_frame(_frame(), 0)
    assert len(packet) == PACKET_LENGTH
    assert packet[:4] == b"DMRD"


def test_fields_are_placed_at_their_offsets():
    frame = _frame()
    packet = encode_frame(frame, 0x01020304)
    assert packet[4] == frame.seq_no
    assert int.from_bytes(packet[5:8], "big") == frame.src_id
    assert int.from_bytes(packet[8:11], "big") == frame.dst_id
    assert packet[11:15] == bytes((1, 2, 3, 4))
    assert packet[20:53] == frame.data
    assert packet[53] == frame.ber
    assert packet[54] == frame.rssi


def test_flag_byte_for_slot_two_group_voice_sync():
    packet = encode_frame(_frame(kind=FrameKind.VOICE_SYNC), 0)
    assert packet[15] == 0x90


def test_flag_byte_for_slot_one_private_voice():
    packet = encode_frame(_frame(slot_no=1, flco=Flco.USER_USER, n=3), 0)
    assert packet[15] == 0x43


@pytest.mark.parametrize("kind,data_type,n", [
    (FrameKind.VOICE, 0, 0),
    (FrameKind.VOICE, 0, 5),
    (FrameKind.VOICE_SYNC, 0, 0),
    (FrameKind.DATA_SYNC, 1, 0),
    (FrameKind.DATA_SYNC, 2, 0),
    (FrameKind.DATA_SYNC, 15, 0),
])
@pytest.mark.parametrize("slot_no", [1, 2])
@pytest.mark.parametrize("flco", [Flco.GROUP, Flco.USER_USER])
def test_round_trip(kind, data_type, n, slot_no, flco):
    frame = _frame(kind=kind, data_type=data_type, n=n, slot_no=slot_no, flco=flco)
    assert decode_frame(encode_frame(frame, 42)) == frame


def test_stream_id_round_trips_through_little_endian_field():
    frame = _frame(stream_id=0x12345678)
    packet = encode_frame(frame, 0)
    assert packet[16:20] == (0x12345678).to_bytes(4, "little")
    assert decode_frame(packet).stream_id == 0x12345678


def test_decode_ignores_trailing_bytes():
    frame = _frame()
    assert decode_frame(encode_frame(frame, 0) + b"extra") == frame


def test_encode_rejects_wrong_data_length():
    with pytest.raises(ValueError):
        encode_frame(_frame(data=b"\x00" * 10), 0)


def test_decode_rejects_other_packet_types():
    with pytest.raises(ValueError):
        decode_frame(b"DMRG" + bytes(51))


def test_decode_rejects_short_packet():
    packet = encode_frame(_frame(), 0)
    with pytest.raises(ValueError):
        decode_frame(packet[:40])