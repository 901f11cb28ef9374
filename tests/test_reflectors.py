from dmrgw.reflectors import Reflector, Reflectors


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_and_find(tmp_path):
    hosts = _write(tmp_path / "hosts.txt", "# comment\n4001;10.0.0.1;4001\nno separators\n")
    reflectors = Reflectors(hosts, 0)
    assert reflectors.load() is True
    assert len(reflectors) == 1
    assert reflectors.find("4001") == Reflector("4001", "10.0.0.1", 4001)


def test_find_missing_returns_none(tmp_path):
    hosts = _write(tmp_path / "hosts.txt", "4001;10.0.0.1;4001\n")
    reflectors = Reflectors(hosts, 0)
    reflectors.load()
    assert reflectors.find("950") is None


def test_startup_field_parsed_like_atoi(tmp_path):
    hosts = _write(tmp_path / "hosts.txt", "a;host;  7 trailing\nb;host;x\nc;host;3;more\n")
    reflectors = Reflectors(hosts, 0)
    reflectors.load()
    assert reflectors.find("a").startup == 7
    assert reflectors.find("b").startup == 0
    assert reflectors.find("c").startup == 3


def test_empty_and_missing_files_load_nothing(tmp_path):
    empty = Reflectors(_write(tmp_path / "empty.txt", "# only a comment\n"), 0)
    assert empty.load() is False
    missing = Reflectors(str(tmp_path / "absent.txt"), 0)
    assert missing.load() is False
    assert list(missing) == []


def test_clock_reloads_after_reload_time(tmp_path):
    path = tmp_path / "hosts.txt"
    _write(path, "1;one;0\n")
    reflectors = Reflectors(str(path), 1)
    reflectors.load()

    _write(path, "2;two;0\n")
    reflectors.clock(59_999)
    assert reflectors.find("2") is None
    reflectors.clock(1)
    assert reflectors.find("2") == Reflector("2", "two", 0)
    assert reflectors.find("1") is None


def test_clock_without_reload_time_never_reloads(tmp_path):
    path = tmp_path / "hosts.txt"
    _write(path, "1;one;0\n")
    reflectors = Reflectors(str(path), 0)
    reflectors.load()
    _write(path, "2;two;0\n")
    reflectors.clock(10_000_000)
    assert [r.id for r in reflectors] == ["1"]