#!/usr/bin/env python3
# u8tbl/ui/utils/width.py
from __future__ import annotations

"""
Terminal display width of table cells.

A cell is measured by UTF-8 encoding it, decoding the bytes back into code
points and summing the per-code-point column widths (wide/fullwidth glyphs
count 2, combining marks and control characters count 0, everything else 1).

Known accuracy limitation: when the bytes are not valid UTF-8 (e.g. input
read with ``surrogateescape``) or the width tables cannot be loaded, the
byte length is returned instead. This never raises.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# width of a single code point; negative for non-printable ones
CharWidthFunc = Callable[[str], int]

_BACKEND_LOCK = threading.Lock()
_backend_loaded = False
_backend: Optional[CharWidthFunc] = None


def _load_backend() -> Optional[CharWidthFunc]:
    """Resolve the width table backend once per process; inert afterwards."""
    global _backend, _backend_loaded
    if _backend_loaded:
        return _backend

    with _BACKEND_LOCK:
        if not _backend_loaded:
            try:
                from wcwidth import wcwidth
            except ImportError as exc:
                logger.debug(
                    "Display width tables unavailable (%s); widths fall back to byte length.", exc)
                _backend = None
            else:
                _backend = wcwidth
            _backend_loaded = True
    return _backend


def cell_text(cell: object) -> str:
    """Text of a cell. Bytes are decoded as UTF-8, keeping bad bytes as surrogate escapes."""
    if isinstance(cell, str):
        return cell
    if isinstance(cell, (bytes, bytearray, memoryview)):
        return bytes(cell).decode("utf-8", "surrogateescape")
    return str(cell)


def encoded(cell: object) -> bytes:
    """UTF-8 bytes of a cell, restoring any surrogate-escaped input bytes."""
    if isinstance(cell, (bytes, bytearray, memoryview)):
        return bytes(cell)
    text = cell_text(cell)
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates outside the escape range
        return text.encode("utf-8", "surrogatepass")


def display_width(cell: object) -> int:
    """Number of terminal columns `cell` occupies."""
    raw = encoded(cell)
    backend = _load_backend()
    if backend is None:
        return len(raw)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return len(raw)
    return sum(max(backend(char), 0) for char in text)
