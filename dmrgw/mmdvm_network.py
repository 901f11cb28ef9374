"""The UDP link between the gateway and the local MMDVM host."""

import logging
import socket
from collections import deque
from typing import Optional

from dmrgw.packet import DMRFrame, decode_frame, encode_frame

_log = logging.getLogger(__name__)

_BUFFER_LENGTH = 500


class MMDVMNetwork:
    """Exchanges DMRD, position, talker alias and config packets with the MMDVM host."""

    def __init__(
        self,
        rpt_address: str,
        rpt_port: int,
        local_address: str,
        local_port: int,
        debug: bool = False,
    ) -> None:
        if not rpt_address:
            raise ValueError("MMDVM host address must not be empty")
        if rpt_port <= 0:
            raise ValueError("MMDVM host port must be positive")

        self.local_address = local_address
        self.local_port = local_port
        self.debug = debug

        self._rpt_family: Optional[int] = None
        self._rpt_addr: Optional[tuple] = None
        try:
            infos = socket.getaddrinfo(rpt_address, rpt_port, type=socket.SOCK_DGRAM)
        except socket.gaierror:
            infos = []
        if infos:
            self._rpt_family = infos[0][0]
            self._rpt_addr = infos[0][4]

        self._socket: Optional[socket.socket] = None
        self._rx: deque[bytes] = deque()
        self._id = 0
        self._config: Optional[bytes] = None
        self._radio_position: Optional[bytes] = None
        self._talker_alias: Optional[bytes] = None

    @property
    def repeater_id(self) -> int:
        """Repeater id announced by the MMDVM host in its last config packet."""
        return self._id

    @property
    def config(self) -> Optional[bytes]:
        """Configuration first sent by the MMDVM host, without its header."""
        return self._config

    def open(self) -> None:
        """Open the socket; raises OSError if the host cannot be reached."""
        if self._rpt_addr is None:
            _log.error("Could not lookup the address of the MMDVM Host")
            raise OSError("could not look up the address of the MMDVM host")

        _log.info("MMDVM Network, Opening")

        infos = socket.getaddrinfo(
            self.local_address or None,
            self.local_port,
            self._rpt_family,
            socket.SOCK_DGRAM,
            0,
            socket.AI_PASSIVE,
        )
        family, kind, proto, _, sockaddr = infos[0]
        sock = socket.socket(family, kind, proto)
        try:
            sock.bind(sockaddr)
            sock.setblocking(False)
        except OSError:
            sock.close()
            raise
        self._socket = sock

    def read(self) -> Optional[DMRFrame]:
        """Return the next burst received from the MMDVM host, or None."""
        if not self._rx:
            return None
        packet = self._rx.popleft()
        try:
            return decode_frame(packet)
        except ValueError:
            return None

    def write(self, frame: DMRFrame) -> bool:
        """Send a burst to the MMDVM host."""
        packet = encode_frame(frame, 0)
        if self.debug:
            _log.debug("Network Transmitted %s", packet.hex(" "))
        self._send(packet)
        return True

    def read_radio_position(self) -> Optional[bytes]:
        """Return and clear the last radio position packet, if any."""
        data, self._radio_position = self._radio_position, None
        return data

    def read_talker_alias(self) -> Optional[bytes]:
        """Return and clear the last talker alias packet, if any."""
        data, self._talker_alias = self._talker_alias, None
        return data

    def write_beacon(self) -> bool:
        """Ask the MMDVM host to transmit a beacon."""
        return self._send(b"DMRB")

    def clock(self, ms: int) -> None:
        """Receive and dispatch at most one pending packet."""
        if self._socket is None:
            return

        try:
            payload, sender = self._socket.recvfrom(_BUFFER_LENGTH)
        except (BlockingIOError, InterruptedError):
            return
        except OSError as exc:
            _log.debug("MMDVM socket read failed: %s", exc)
            return
        if not payload:
            return

        if self._rpt_addr is None or tuple(sender[:2]) != tuple(self._rpt_addr[:2]):
            _log.info("MMDVM packet received from an invalid source")
            return

        if self.debug:
            _log.debug("Network Received %s", payload.hex(" "))

        tag = payload[:4]
        if tag == b"DMRD":
            self._rx.append(payload)
        elif tag == b"DMRG":
            self._radio_position = payload
        elif tag == b"DMRA":
            self._talker_alias = payload
        elif tag == b"DMRC" and len(payload) >= 8:
            self._id = int.from_bytes(payload[4:8], "big")
            if self._config is None:
                self._config = payload[8:]
            self._send(b"DMRP")
        else:
            _log.info("Unknown packet from the MMDVM %s", payload.hex(" "))

    def close(self) -> None:
        """Close the socket."""
        _log.info("MMDVM Network, Closing")
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> "MMDVMNetwork":
        self.open()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _send(self, data: bytes) -> bool:
        if self._socket is None or self._rpt_addr is None:
            raise RuntimeError("MMDVM network is not open")
        try:
            self._socket.sendto(data, self._rpt_addr)
        except OSError as exc:
            _log.error("MMDVM socket write failed: %s", exc)
            return False
        return True