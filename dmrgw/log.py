"""Timestamped logging to a daily or single log file and to the console."""

import os
import sys
from datetime import date, datetime, timezone
from enum import IntEnum
from typing import IO, Optional, Union

# Total length of a formatted line, leaving room for the terminator.
_LINE_LIMIT = 499


class Level(IntEnum):
    """Severity of a log line; a configured level of 0 disables an output."""

    DEBUG = 1
    MESSAGE = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    FATAL = 6

    @property
    def letter(self) -> str:
        """The single letter that starts a line of this level."""
        return " DMIWEF"[self.value]


def format_line(level: Union[Level, int], when: datetime, message: str) -> str:
    """Build a log line such as ``M: 2024-01-31 12:00:00.000 text``."""
    level = Level(level)
    prefix = f"{level.letter}: {when:%Y-%m-%d %H:%M:%S}.{when.microsecond // 1000:03d} "
    return (prefix + message)[:_LINE_LIMIT]


class Logger:
    """Writes log lines to a file and to standard output by level."""

    def __init__(
        self,
        daemon: bool,
        file_path: str,
        file_root: str,
        file_level: int = Level.MESSAGE,
        display_level: int = Level.MESSAGE,
        rotate: bool = True,
    ) -> None:
        self.daemon = daemon
        self.file_path = file_path
        self.file_root = file_root
        self.file_level = int(file_level)
        self.display_level = 0 if daemon else int(display_level)
        self.rotate = rotate
        self._fp: Optional[IO[str]] = None
        self._date: Optional[date] = None

    @property
    def filename(self) -> Optional[str]:
        """Name of the currently open log file, if any."""
        return None if self._fp is None else self._fp.name

    def open(self) -> None:
        """Open the log file, switching to a new one at each UTC date change.

        Raises OSError when the file cannot be opened. Does nothing when
        file logging is disabled.
        """
        if self.file_level == 0:
            return

        if not self.rotate:
            if self._fp is None:
                self._open_file(os.path.join(self.file_path, f"{self.file_root}.log"))
            return

        today = datetime.now(timezone.utc).date()
        if today == self._date and self._fp is not None:
            return

        self._close_file()
        self._date = today
        name = f"{self.file_root}-{today:%Y-%m-%d}.log"
        self._open_file(os.path.join(self.file_path, name))

    def log(self, level: Union[Level, int], message: str) -> None:
        """Write ``message`` at ``level`` to every output that accepts it.

        A fatal message closes the log and exits with status 1.
        """
        level = Level(level)
        line = format_line(level, datetime.now(timezone.utc), message)

        if self.file_level != 0 and level >= self.file_level:
            try:
                self.open()
            except OSError:
                return
            assert self._fp is not None
            self._fp.write(line + "\n")
            self._fp.flush()

        if self.display_level != 0 and level >= self.display_level:
            sys.stdout.write(line + "\n")
            sys.stdout.flush()

        if level is Level.FATAL:
            self.close()
            raise SystemExit(1)

    def close(self) -> None:
        """Close the log file if it is open."""
        self._close_file()

    def __enter__(self) -> "Logger":
        self.open()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _open_file(self, path: str) -> None:
        self._fp = open(path, "a", encoding="utf-8")
        if self.daemon:
            os.dup2(self._fp.fileno(), sys.stderr.fileno())

    def _close_file(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None