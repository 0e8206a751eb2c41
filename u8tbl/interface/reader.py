#!/usr/bin/env python3
# u8tbl/interface/reader.py
from __future__ import annotations

"""
Turn delimited text lines into a grid of cells.
"""

import io
import sys
from typing import BinaryIO, Iterable, List, Optional, TextIO


def split_line(line: str, delimiter: str = " ") -> List[str]:
    """
    Split `line` on every occurrence of `delimiter`.

    Adjacent delimiters produce empty cells. The text after the last
    delimiter only becomes a cell when it is non-empty, so a trailing
    delimiter adds nothing and an empty line gives an empty row.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    cells = line.split(delimiter)
    if cells[-1] == "":
        cells.pop()
    return cells


def read_table(stream: Iterable[str], delimiter: str = " ") -> List[List[str]]:
    """Read every line of `stream` into a row; the trailing newline is not part of the last cell."""
    table: List[List[str]] = []
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        table.append(split_line(line, delimiter))
    return table


def read_stdin_table(delimiter: str = " ", *, stdin: Optional[TextIO] = None) -> List[List[str]]:
    """
    Read a table from standard input as UTF-8. Undecodable bytes are kept as
    surrogate escapes so they round-trip to the output unchanged.
    """
    stream = sys.stdin if stdin is None else stdin
    buffer: Optional[BinaryIO] = getattr(stream, "buffer", None)
    if buffer is None:
        return read_table(stream, delimiter)

    wrapper = io.TextIOWrapper(buffer, encoding="utf-8", errors="surrogateescape", newline="\n")
    try:
        return read_table(wrapper, delimiter)
    finally:
        # leave the underlying buffer open for the owner of `stream`
        wrapper.detach()
