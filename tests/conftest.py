# tests/conftest.py
"""Shared fixtures: isolate configuration sources and the package logger."""

import logging

import pytest

from u8tbl.settings import DEFAULTS


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test in an empty directory with no u8tbl environment overrides."""
    for key in DEFAULTS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to a previous test's captured streams."""
    yield
    logger = logging.getLogger("u8tbl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
