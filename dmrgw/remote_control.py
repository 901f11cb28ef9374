"""UDP remote control commands for enabling networks and querying status."""

import logging
import re
import socket
from enum import Enum, auto
from typing import Any, Optional

_log = logging.getLogger(__name__)

_BUFFER_LENGTH = 100
_ENABLE_ARGS = 2
_DISABLE_ARGS = 2

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class RemoteCommand(Enum):
    """A command received over the remote control port."""

    ENABLE_NETWORK1 = auto()
    ENABLE_NETWORK2 = auto()
    ENABLE_NETWORK3 = auto()
    ENABLE_NETWORK4 = auto()
    ENABLE_NETWORK5 = auto()
    ENABLE_NETWORK6 = auto()
    ENABLE_NETWORK7 = auto()
    ENABLE_NETWORK8 = auto()
    ENABLE_XLX = auto()
    DISABLE_NETWORK1 = auto()
    DISABLE_NETWORK2 = auto()
    DISABLE_NETWORK3 = auto()
    DISABLE_NETWORK4 = auto()
    DISABLE_NETWORK5 = auto()
    DISABLE_NETWORK6 = auto()
    DISABLE_NETWORK7 = auto()
    DISABLE_NETWORK8 = auto()
    DISABLE_XLX = auto()
    CONNECTION_STATUS = auto()
    CONFIG_HOSTS = auto()
    NONE = auto()


_TARGETS = ("net1", "net2", "net3", "net4", "net5", "net6", "net7", "net8", "xlx")

_ENABLE = dict(zip(_TARGETS, (
    RemoteCommand.ENABLE_NETWORK1, RemoteCommand.ENABLE_NETWORK2, RemoteCommand.ENABLE_NETWORK3,
    RemoteCommand.ENABLE_NETWORK4, RemoteCommand.ENABLE_NETWORK5, RemoteCommand.ENABLE_NETWORK6,
    RemoteCommand.ENABLE_NETWORK7, RemoteCommand.ENABLE_NETWORK8, RemoteCommand.ENABLE_XLX,
)))

_DISABLE = dict(zip(_TARGETS, (
    RemoteCommand.DISABLE_NETWORK1, RemoteCommand.DISABLE_NETWORK2, RemoteCommand.DISABLE_NETWORK3,
    RemoteCommand.DISABLE_NETWORK4, RemoteCommand.DISABLE_NETWORK5, RemoteCommand.DISABLE_NETWORK6,
    RemoteCommand.DISABLE_NETWORK7, RemoteCommand.DISABLE_NETWORK8, RemoteCommand.DISABLE_XLX,
)))

# No command currently carries arguments that callers may query.
_COMMANDS_WITH_ARGS: frozenset = frozenset()


def parse_command(text: str, host: Any) -> tuple[RemoteCommand, list[str], str]:
    """Parse a command line into its command, arguments and reply text.

    ``host`` provides ``build_network_status_string()`` and
    ``build_network_hosts_string()`` for the status and hosts queries and
    may be None. Arguments are emptied for invalid commands.
    """
    args = [word for word in text.split(" ") if word]
    command = RemoteCommand.NONE
    reply = "OK"

    verb = args[0] if args else None
    if verb == "enable" and len(args) >= _ENABLE_ARGS:
        command = _ENABLE.get(args[1], RemoteCommand.NONE)
        if command is RemoteCommand.NONE:
            reply = "KO"
    elif verb == "disable" and len(args) >= _DISABLE_ARGS:
        command = _DISABLE.get(args[1], RemoteCommand.NONE)
        if command is RemoteCommand.NONE:
            reply = "KO"
    elif verb == "status":
        reply = host.build_network_status_string() if host is not None else "KO"
        command = RemoteCommand.CONNECTION_STATUS
    elif verb == "hosts":
        reply = host.build_network_hosts_string() if host is not None else "KO"
        command = RemoteCommand.CONFIG_HOSTS
    else:
        reply = "KO"

    if command is RemoteCommand.NONE:
        args = []
        _log.warning('Invalid remote command of "%s" received', text)
    else:
        _log.info('Valid remote command of "%s" received', text)

    return command, args, reply


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class RemoteControl:
    """Listens for remote control commands on a UDP port and answers them."""

    def __init__(self, host: Any, address: str, port: int) -> None:
        if port <= 0:
            raise ValueError("remote control port must be positive")
        self.host = host
        self.address = address
        self.port = port
        self._socket: Optional[socket.socket] = None
        self._command = RemoteCommand.NONE
        self._args: list[str] = []

    def open(self) -> None:
        """Bind the UDP socket; raises OSError on failure."""
        infos = socket.getaddrinfo(
            self.address or None, self.port, type=socket.SOCK_DGRAM, flags=socket.AI_PASSIVE
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

    def get_command(self) -> RemoteCommand:
        """Read and answer one pending command, or return NONE if there is none."""
        if self._socket is None:
            raise RuntimeError("remote control socket is not open")

        self._command = RemoteCommand.NONE
        self._args = []

        try:
            payload, sender = self._socket.recvfrom(_BUFFER_LENGTH)
        except (BlockingIOError, InterruptedError, ConnectionResetError):
            return self._command
        if not payload:
            return self._command

        text = payload.split(b"\0", 1)[0].decode("latin-1")
        self._command, self._args, reply = parse_command(text, self.host)
        self._socket.sendto(reply.encode("latin-1", errors="replace"), sender)
        return self._command

    def get_arg_count(self) -> int:
        """Number of arguments of the last command that callers may use."""
        if self._command not in _COMMANDS_WITH_ARGS:
            return 0
        return len(self._args)

    def get_arg_string(self, n: int) -> str:
        """Argument ``n`` of the last command, or an empty string."""
        if self._command not in _COMMANDS_WITH_ARGS or n >= len(self._args):
            return ""
        return self._args[n]

    def get_arg_uint(self, n: int) -> int:
        """Argument ``n`` read as an unsigned integer."""
        return _atoi(self.get_arg_string(n)) & 0xFFFFFFFF

    def get_arg_int(self, n: int) -> int:
        """Argument ``n`` read as a signed integer."""
        return _atoi(self.get_arg_string(n))

    def close(self) -> None:
        """Close the UDP socket."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> "RemoteControl":
        self.open()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()