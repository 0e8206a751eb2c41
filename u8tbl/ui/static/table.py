#!/usr/bin/env python3
# u8tbl/ui/static/table.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, TextIO

from u8tbl.ui.utils import cell_text, display_width, print_text
from .styles import StyleLike, TableFormat, TableType, resolve


def column_widths(rows: Iterable[Sequence[object]]) -> List[int]:
    """Compute display widths per column; short rows do not take part for missing columns."""
    widths: List[int] = []
    for row in rows:
        for col_idx, cell in enumerate(row):
            cell_width = display_width(cell)
            if col_idx >= len(widths):
                widths.append(cell_width)
            else:
                widths[col_idx] = max(widths[col_idx], cell_width)
    return widths


def _border(widths: Sequence[int], left: str, horizontal: str, middle: str,
            right: str, newline: str) -> str:
    # +2 leaves room for the padding on both sides of the cell
    runs = (horizontal * (width + 2) for width in widths)
    return f"{left}{middle.join(runs)}{right}{newline}"


def _render_row(row: Sequence[str], widths: Sequence[int], fmt: TableFormat) -> str:
    pad = fmt.padding
    parts = []
    for col_idx in range(max(len(row), len(widths))):
        cell = row[col_idx] if col_idx < len(row) else ""
        fill = pad * (widths[col_idx] - display_width(cell))
        parts.append(f"{pad}{cell}{pad}{fill}")
    # data lines end in a hard newline whatever the style's newline glyph is
    return f"{fmt.left_vertical}{fmt.middle_vertical.join(parts)}{fmt.right_vertical}\n"


def format_table(
    rows: Sequence[Sequence[object]],
    style: StyleLike = TableType.UNICODE,
) -> str:
    """
    Render rows as a table string in the given style.

    Rows may differ in length; missing cells render as empty cells padded to
    the full column width. An empty grid still yields the top and bottom
    border lines.

    `bytes` cells that are not valid UTF-8 come back as lone surrogates
    (``surrogateescape``) in the returned string, so a plain `print()` of it
    raises UnicodeEncodeError. `print_table` writes the original bytes back out.
    """
    fmt = resolve(style)
    str_rows: List[List[str]] = [[cell_text(cell) for cell in row] for row in rows]
    widths = column_widths(str_rows)

    lines: List[str] = [
        _border(widths, fmt.top_left, fmt.top_horizontal,
                fmt.top_middle, fmt.top_right, fmt.newline)
    ]

    separator = _border(widths, fmt.left_middle, fmt.middle_horizontal,
                        fmt.middle_middle, fmt.right_middle, fmt.newline)
    for row_idx, row in enumerate(str_rows):
        if row_idx != 0:
            lines.append(separator)
        lines.append(_render_row(row, widths, fmt))

    lines.append(_border(widths, fmt.bottom_left, fmt.bottom_horizontal,
                         fmt.bottom_middle, fmt.bottom_right, fmt.newline))
    return "".join(lines)


def print_table(
    rows: Sequence[Sequence[object]],
    style: StyleLike = TableType.UNICODE,
    *,
    file: Optional[TextIO] = None,
) -> None:
    """Print a formatted table, followed by a newline, to the given file."""
    print_text(format_table(rows, style), file=file)
