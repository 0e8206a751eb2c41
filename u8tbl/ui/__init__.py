#!/usr/bin/env python3
# u8tbl/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    strip_ansi,
    enable_windows_vt,
    colorize,
    PRINT_MUTEX,
    print_line,
    print_text,
    is_terminal,
    display_width,
    cell_text,
)
from .static import (
    STYLES,
    TableFormat,
    TableType,
    UnknownStyleError,
    parse_table_type,
    resolve,
    style_names,
    column_widths,
    format_table,
    print_table,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "print_text",
    "is_terminal",
    "display_width",
    "cell_text",
    "STYLES",
    "TableFormat",
    "TableType",
    "UnknownStyleError",
    "parse_table_type",
    "resolve",
    "style_names",
    "column_widths",
    "format_table",
    "print_table",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
