#!/usr/bin/env python3
# u8tbl/ui/utils/console.py
from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

# Single shared print mutex for all console output (tables and logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file: Optional[TextIO] = None, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    stream = sys.stdout if file is None else file
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def print_text(text: str = "", *, file: Optional[TextIO] = None, flush: bool = True) -> None:
    """
    Like print_line, but always UTF-8 encodes through the binary buffer when the
    stream has one. Undecodable input bytes (kept as surrogate escapes) are
    written back unchanged.
    """
    stream = sys.stdout if file is None else file
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        print_line(text, file=stream, flush=flush)
        return

    with PRINT_MUTEX:
        stream.flush()
        buffer.write(f"{text}\n".encode("utf-8", "surrogateescape"))
        if flush:
            buffer.flush()


def is_terminal(stream: object) -> bool:
    """Return True when `stream` is attached to an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except ValueError:  # closed stream
        return False
