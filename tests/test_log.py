import os
from datetime import datetime, timezone

import pytest

from dmrgw.log import Level, Logger, format_line


def test_format_line_layout():
    when = datetime(2024, 1, 2, 3, 4, 5, 678000)
    assert format_line(Level.ERROR, when, "hello") == "E: 2024-01-02 03:04:05.678 hello"


@pytest.mark.parametrize("level", list(Level))
def test_format_line_starts_with_level_letter(level):
    line = format_line(level, datetime(2020, 5, 6), "x")
    assert line[0] == level.letter
    assert line.endswith(" x")


def test_format_line_truncates_long_messages():
    line = format_line(Level.INFO, datetime(2020, 5, 6), "a" * 1000)
    assert len(line) < 500
    assert line.startswith("I: 2020-05-06 00:00:00.000 aaa")


def test_plain_file_receives_lines_at_or_above_level(tmp_path):
    logger = Logger(False, str(tmp_path), "gw", Level.WARNING, 0, False)
    logger.log(Level.INFO, "quiet")
    logger.log(Level.ERROR, "loud")
    logger.close()

    content = (tmp_path / "gw.log").read_text(encoding="utf-8")
    assert "loud" in content
    assert "quiet" not in content
    assert content.startswith("E: ")


def test_rotating_file_named_by_utc_date(tmp_path):
    with Logger(False, str(tmp_path), "gw", Level.DEBUG, 0, True) as logger:
        logger.log(Level.DEBUG, "entry")
        name = os.path.basename(logger.filename)
    today = datetime.now(timezone.utc).date()
    assert name == f"gw-{today:%Y-%m-%d}.log"
    assert "entry" in (tmp_path / name).read_text(encoding="utf-8")


def test_display_output(tmp_path, capsys):
    logger = Logger(False, str(tmp_path), "gw", 0, Level.MESSAGE, False)
    logger.log(Level.DEBUG, "hidden")
    logger.log(Level.MESSAGE, "shown")
    out = capsys.readouterr().out
    assert "shown" in out
    assert "hidden" not in out
    assert not (tmp_path / "gw.log").exists()


def test_daemon_disables_display(tmp_path, capsys):
    logger = Logger(True, str(tmp_path), "gw", 0, Level.DEBUG, False)
    logger.log(Level.ERROR, "nothing")
    assert capsys.readouterr().out == ""
    assert logger.display_level == 0


def test_open_fails_for_missing_directory(tmp_path):
    logger = Logger(False, str(tmp_path / "missing"), "gw", Level.DEBUG, 0, False)
    with pytest.raises(OSError):
        logger.open()


def test_fatal_exits(tmp_path):
    logger = Logger(False, str(tmp_path), "gw", Level.DEBUG, 0, False)
    with pytest.raises(SystemExit) as info:
        logger.log(Level.FATAL, "boom")
    assert info.value.code == 1
    assert "boom" in (tmp_path / "gw.log").read_text(encoding="utf-8")
    assert logger.filename is None