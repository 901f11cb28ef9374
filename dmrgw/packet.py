"""The 55-byte DMRD packet that carries one DMR burst between gateway peers."""

from dataclasses import dataclass, field
from enum import Enum, auto

PACKET_LENGTH = 55
FRAME_LENGTH = 33

_MAGIC = b"DMRD"

_SLOT2_FLAG = 0x80
_PRIVATE_FLAG = 0x40
_DATA_SYNC_FLAG = 0x20
_VOICE_SYNC_FLAG = 0x10
_LOW_NIBBLE = 0x0F


class Flco(Enum):
    """Whether a call is addressed to a talk group or to a single user."""

    GROUP = auto()
    USER_USER = auto()


class FrameKind(Enum):
    """How a burst is synchronised: voice, voice sync or data sync."""

    VOICE = auto()
    VOICE_SYNC = auto()
    DATA_SYNC = auto()


@dataclass
class DMRFrame:
    """One DMR burst with the routing information that travels with it.

    ``data_type`` is only meaningful for data sync bursts and ``n`` (the
    position in the voice superframe) only for plain voice bursts.
    """

    slot_no: int = 1
    src_id: int = 0
    dst_id: int = 0
    flco: Flco = Flco.GROUP
    kind: FrameKind = FrameKind.VOICE
    data_type: int = 0
    n: int = 0
    seq_no: int = 0
    stream_id: int = 0
    data: bytes = field(default=bytes(FRAME_LENGTH))
    ber: int = 0
    rssi: int = 0


def encode_frame(frame: DMRFrame, repeater_id: int = 0) -> bytes:
    """Build the DMRD packet for ``frame`` sent by ``repeater_id``."""
    if len(frame.data) != FRAME_LENGTH:
        raise ValueError(f"burst data must be {FRAME_LENGTH} bytes, got {len(frame.data)}")

    flags = 0x00 if frame.slot_no == 1 else _SLOT2_FLAG
    if frame.flco is not Flco.GROUP:
        flags |= _PRIVATE_FLAG

    if frame.kind is FrameKind.VOICE_SYNC:
        flags |= _VOICE_SYNC_FLAG
    elif frame.kind is FrameKind.VOICE:
        flags |= frame.n & _LOW_NIBBLE
    else:
        flags |= _DATA_SYNC_FLAG | (frame.data_type & _LOW_NIBBLE)

    return b"".join((
        _MAGIC,
        bytes((frame.seq_no & 0xFF,)),
        (frame.src_id & 0xFFFFFF).to_bytes(3, "big"),
        (frame.dst_id & 0xFFFFFF).to_bytes(3, "big"),
        (repeater_id & 0xFFFFFFFF).to_bytes(4, "big"),
        bytes((flags,)),
        (frame.stream_id & 0xFFFFFFFF).to_bytes(4, "little"),
        bytes(frame.data),
        bytes((frame.ber & 0xFF, frame.rssi & 0xFF)),
    ))


def decode_frame(packet: bytes) -> DMRFrame:
    """Parse a DMRD packet; raises ValueError if it is not a complete one."""
    if not packet.startswith(_MAGIC):
        raise ValueError("not a DMRD packet")
    if len(packet) < PACKET_LENGTH:
        raise ValueError(f"DMRD packet too short: {len(packet)} bytes")

    flags = packet[15]

    if flags & _DATA_SYNC_FLAG:
        kind, data_type, n = FrameKind.DATA_SYNC, flags & _LOW_NIBBLE, 0
    elif flags & _VOICE_SYNC_FLAG:
        kind, data_type, n = FrameKind.VOICE_SYNC, 0, 0
    else:
        kind, data_type, n = FrameKind.VOICE, 0, flags & _LOW_NIBBLE

    return DMRFrame(
        slot_no=2 if flags & _SLOT2_FLAG else 1,
        src_id=int.from_bytes(packet[5:8], "big"),
        dst_id=int.from_bytes(packet[8:11], "big"),
        flco=Flco.USER_USER if flags & _PRIVATE_FLAG else Flco.GROUP,
        kind=kind,
        data_type=data_type,
        n=n,
        seq_no=packet[4],
        stream_id=int.from_bytes(packet[16:20], "little"),
        data=bytes(packet[20:20 + FRAME_LENGTH]),
        ber=packet[53],
        rssi=packet[54],
    )