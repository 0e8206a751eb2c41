#!/usr/bin/env python3
# u8tbl/settings/__init__.py
from __future__ import annotations

"""
Package for configuration.

Provides:
- Layered configuration loader with environment variable overrides (`config`).
"""


from .config import AppConfig, DEFAULTS, as_delimiter, load_config

__all__ = [
    "AppConfig",
    "DEFAULTS",
    "as_delimiter",
    "load_config",
]
