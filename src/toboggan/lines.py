# src/toboggan/lines.py
# Line source for map files and stdin.

from typing import List, TextIO

from .errors import GridError


def _clean(raw_lines) -> List[str]:
    rows = [ln.rstrip("\r\n") for ln in raw_lines]
    # trailing blank lines are end-of-file padding; interior ones are kept
    # so the Grid can reject them
    while rows and not rows[-1]:
        rows.pop()
    return rows


def read_stream(stream: TextIO) -> List[str]:
    try:
        return _clean(stream)
    except UnicodeDecodeError as e:
        raise GridError(f"map input is not valid UTF-8: {e}") from None


def read_lines(path: str) -> List[str]:
    with open(path, encoding="utf-8") as f:
        return read_stream(f)
