# tests/test_tobtool.py
import io
from importlib import import_module
from pathlib import Path

import pytest

EXAMPLE = str(Path(__file__).with_name("data") / "example_map.txt")


def run(capsys, *argv):
    tool = import_module("tobtool")
    tool.main(list(argv))
    return capsys.readouterr().out.splitlines()


def test_count_default_set(capsys):
    assert run(capsys, "count", EXAMPLE) == ["336"]


def test_count_part1(capsys):
    assert run(capsys, "count", EXAMPLE, "--part", "1") == ["7"]


def test_count_custom_slopes(capsys):
    assert run(capsys, "count", EXAMPLE, "--slope", "1,3", "--slope", "2,1") == ["14"]


def test_report_lines(capsys):
    out = run(capsys, "report", EXAMPLE)
    assert out[1] == "1\t3\t10\t7"
    assert out[-1] == "product\t336"


def test_count_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(Path(EXAMPLE).read_text()))
    assert run(capsys, "count") == ["336"]


@pytest.mark.parametrize("argv", [
    ("count", EXAMPLE, "--slope", "0,3"),
    ("count", "does/not/exist.txt"),
])
def test_errors_exit_nonzero(capsys, argv):
    with pytest.raises(SystemExit) as ei:
        run(capsys, *argv)
    assert ei.value.code == 1


def test_bad_marker_exits_nonzero(tmp_path, capsys):
    p = tmp_path / "bad.txt"
    p.write_text("..#\n.x.\n", encoding="utf-8")
    with pytest.raises(SystemExit) as ei:
        run(capsys, "count", str(p))
    assert ei.value.code == 1


def test_undecodable_map_exits_nonzero(tmp_path, capsys):
    p = tmp_path / "latin1.txt"
    p.write_bytes(b"..#\n.\xff.\n")
    with pytest.raises(SystemExit) as ei:
        run(capsys, "count", str(p))
    assert ei.value.code == 1


def test_undecodable_stdin_exits_nonzero(capsys, monkeypatch):
    raw = io.TextIOWrapper(io.BytesIO(b"..#\n.\xff.\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", raw)
    with pytest.raises(SystemExit) as ei:
        run(capsys, "count")
    assert ei.value.code == 1


def test_part1_rejects_explicit_slopes(capsys):
    with pytest.raises(SystemExit) as ei:
        run(capsys, "count", EXAMPLE, "--part", "1", "--slope", "2,1")
    assert ei.value.code == 2
