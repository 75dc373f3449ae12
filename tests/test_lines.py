import io

import pytest

from toboggan.errors import GridError
from toboggan.lines import read_lines, read_stream


def test_stream_strips_terminators_and_trailing_blanks():
    src = io.StringIO("..#\r\n#..\n\n\n")
    assert read_stream(src) == ["..#", "#.."]


def test_interior_blank_line_is_kept():
    assert read_stream(io.StringIO("..\n\n..\n")) == ["..", "", ".."]


def test_read_lines_from_file(tmp_path):
    p = tmp_path / "map.txt"
    p.write_text(".#\n#.\n", encoding="utf-8")
    assert read_lines(str(p)) == [".#", "#."]


def test_undecodable_file_is_a_grid_error(tmp_path):
    p = tmp_path / "map.txt"
    p.write_bytes(b".#\n\xff.\n")
    with pytest.raises(GridError):
        read_lines(str(p))
