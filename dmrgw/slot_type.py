"""The slot type field of a DMR burst: colour code and data type."""

from dataclasses import dataclass

from dmrgw import golay2087

_MIN_FRAME_LENGTH = 21


@dataclass
class SlotType:
    """Colour code and data type carried in a burst's slot type field."""

    color_code: int = 0
    data_type: int = 0

    @classmethod
    def from_frame(cls, frame: bytes) -> "SlotType":
        """Read and error-correct the slot type field of ``frame``."""
        if len(frame) < _MIN_FRAME_LENGTH:
            raise ValueError("frame too short to hold a slot type field")

        codeword = bytes((
            ((frame[12] << 2) & 0xFC) | ((frame[13] >> 6) & 0x03),
            ((frame[13] << 2) & 0xC0) | ((frame[19] << 2) & 0x3C) | ((frame[20] >> 6) & 0x03),
            (frame[20] << 2) & 0xF0,
        ))

        code = golay2087.decode(codeword)
        return cls(color_code=(code >> 4) & 0x0F, data_type=code & 0x0F)

    def write(self, frame: bytes) -> bytes:
        """Return a copy of ``frame`` with this slot type encoded into it."""
        if len(frame) < _MIN_FRAME_LENGTH:
            raise ValueError("frame too short to hold a slot type field")

        value = ((self.color_code << 4) & 0xF0) | (self.data_type & 0x0F)
        st0, st1, st2 = golay2087.encode(bytes((value,)))

        out = bytearray(frame)
        out[12] = (out[12] & 0xC0) | ((st0 >> 2) & 0x3F)
        out[13] = (out[13] & 0x0F) | ((st0 << 6) & 0xC0) | ((st1 >> 2) & 0x30)
        out[19] = (out[19] & 0xF0) | ((st1 >> 2) & 0x0F)
        out[20] = (out[20] & 0x03) | ((st1 << 6) & 0xC0) | ((st2 >> 2) & 0x3C)
        return bytes(out)