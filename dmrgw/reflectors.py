"""The list of XLX reflectors read from a hosts file."""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

_log = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Reflector:
    """One reflector entry: its id, address and startup value."""

    id: str = "0"
    address: str = ""
    startup: int = 0


def _token(text: str, pos: int, delims: str) -> tuple[Optional[str], int]:
    """Return the next token from ``pos`` and where scanning continues."""
    end = len(text)
    while pos < end and text[pos] in delims:
        pos += 1
    if pos >= end:
        return None, end
    stop = pos
    while stop < end and text[stop] not in delims:
        stop += 1
    return text[pos:stop], min(stop + 1, end)


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _parse_line(line: str) -> Optional[Reflector]:
    if line.startswith("#"):
        return None
    reflector_id, pos = _token(line, 0, ";\r\n")
    address, pos = _token(line, pos, ";\r\n")
    startup, _ = _token(line, pos, "\r\n")
    if reflector_id is None or address is None or startup is None:
        return None
    return Reflector(reflector_id, address, _atoi(startup) & 0xFFFFFFFF)


class Reflectors:
    """Reflectors loaded from a ``id;address;startup`` hosts file."""

    def __init__(self, hosts_file: str, reload_time: int) -> None:
        self.hosts_file = hosts_file
        self._reflectors: list[Reflector] = []
        self._reload_ms = reload_time * 60 * 1000
        self._elapsed = 0
        self._running = reload_time > 0

    def load(self) -> bool:
        """Reread the hosts file; return whether any reflectors were found."""
        self._reflectors = []
        try:
            with open(self.hosts_file, encoding="utf-8", errors="replace") as fp:
                for line in fp:
                    reflector = _parse_line(line)
                    if reflector is not None:
                        self._reflectors.append(reflector)
        except OSError:
            pass

        _log.info("Loaded %u XLX reflectors", len(self._reflectors))
        return bool(self._reflectors)

    def find(self, reflector_id: str) -> Optional[Reflector]:
        """Return the reflector with the given id, or None."""
        for reflector in self._reflectors:
            if reflector.id == reflector_id:
                return reflector
        _log.info("Trying to find non existent XLX reflector with an id of %s", reflector_id)
        return None

    def clock(self, ms: int) -> None:
        """Advance the reload timer, reloading the file when it expires."""
        if not self._running:
            return
        self._elapsed += ms
        if self._reload_ms > 0 and self._elapsed >= self._reload_ms:
            self.load()
            self._elapsed = 0

    def __iter__(self) -> Iterator[Reflector]:
        return iter(self._reflectors)

    def __len__(self) -> int:
        return len(self._reflectors)