#!/usr/bin/env python3
# u8tbl/ui/static/__init__.py
from __future__ import annotations
from .styles import (
    STYLES,
    TableFormat,
    TableType,
    UnknownStyleError,
    parse_table_type,
    resolve,
    style_names,
)
from .table import column_widths, format_table, print_table
from .logging import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
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
