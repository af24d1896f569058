import pytest

from cloudisk.config import IP, PORT, THREAD_NUM, read_config


def _write(tmp_path, text):
    path = tmp_path / "server.conf"
    path.write_text(text, encoding="utf-8")
    return path


def test_key_names_match_file_keys(tmp_path):
    path = _write(tmp_path, "ip=1.2.3.4\nport=21\nthread_num=2\n")
    table = read_config(path)
    assert [table.find(IP), table.find(PORT), table.find(THREAD_NUM)] == [
        "1.2.3.4",
        "21",
        "2",
    ]


def test_reads_all_settings(tmp_path):
    path = _write(tmp_path, "ip=127.0.0.1\nport=8080\nthread_num=4\n")
    table = read_config(path)
    assert table.find(IP) == "127.0.0.1"
    assert table.find(PORT) == "8080"
    assert table.find(THREAD_NUM) == "4"
    assert len(table) == 3


def test_accepts_string_path(tmp_path):
    path = _write(tmp_path, "ip=10.0.0.1")
    assert read_config(str(path)).find(IP) == "10.0.0.1"


def test_crlf_line_endings(tmp_path):
    path = tmp_path / "server.conf"
    path.write_bytes(b"port=8080\r\nip=127.0.0.1\r\n")
    table = read_config(path)
    assert table.find(PORT) == "8080"
    assert table.find(IP) == "127.0.0.1"


def test_lines_without_value_are_skipped(tmp_path):
    path = _write(tmp_path, "ip=127.0.0.1\n\njunk\nport=\n")
    table = read_config(path)
    assert len(table) == 1
    assert table.find("junk") is None
    assert table.find(PORT) is None


def test_text_after_second_equals_is_dropped(tmp_path):
    path = _write(tmp_path, "ip=b=c\n")
    assert read_config(path).find(IP) == "b"


def test_later_key_wins(tmp_path):
    path = _write(tmp_path, "port=8080\nport=9000\n")
    table = read_config(path)
    assert table.find(PORT) == "9000"
    assert len(table) == 1


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "absent.conf")