#!/usr/bin/env python3
# u8tbl/settings/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, config.ini, config.json, config.toml
  3) Environment variables
  4) Command-line arguments (applied by the caller)

Validation:
  - TABLE_FORMAT: one of ascii/unicode/fancy/none/tsv/csv (any case); an
    unknown environment value is ignored with a warning
  - TABLE_DELIMITER: non-empty string; a literal '\\t' means a tab
  - LOG_LEVEL: None or one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH: None or normalized path
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from pathlib import Path
import configparser
import json
import logging
import os
import re
import tomllib  # stdlib in 3.11+

from u8tbl.ui import TableType, UnknownStyleError, parse_table_type

logger = logging.getLogger(__name__)

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "TABLE_FORMAT": "unicode",
    "TABLE_DELIMITER": " ",
    "LOG_LEVEL": None,              # 'DEBUG'/'INFO'/'WARNING'/'ERROR'/'CRITICAL'
    "LOG_FILE_PATH": None,
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    table_format: TableType
    delimiter: str
    log_level: str | None
    log_file_path: Path | None

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if len(v) >= 2 and v[0] == v[-1] and v[0] in "'\"":
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    try:
        with path.open(encoding="utf-8") as f:
            cfg.read_file(f)
    except FileNotFoundError:
        return {}
    except configparser.Error as exc:
        logger.warning("Ignoring unreadable %s: %s", path.name, exc)
        return {}
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring unreadable %s: %s", path.name, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        logger.warning("Ignoring unreadable %s: %s", path.name, exc)
        return {}


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'table': {'format': 'ascii'}} -> {'TABLE_FORMAT': 'ascii'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(cwd: Path) -> list[Path]:
    return [
        cwd / ".env",
        cwd / "config.ini",
        cwd / "config.json",
        cwd / "config.toml",
    ]


# ---------- normalization & coercion ----------

def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str | None:
    lv = _as_opt_str(val)
    if lv is None:
        return None
    up = lv.strip().upper()
    if up not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {lv!r}")
    return up


def as_delimiter(val: Any) -> str:
    """Cell delimiter; a literal backslash-t stands for a tab."""
    if val is None:
        raise ValueError("TABLE_DELIMITER must not be empty")
    s = str(val).replace("\\t", "\t")
    if s == "":
        raise ValueError("TABLE_DELIMITER must not be empty")
    return s


def _as_opt_path(val: Any, base: Path) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    p = Path(os.path.expandvars(os.path.expanduser(v)))
    return (p if p.is_absolute() else base / p).resolve()


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


# ---------- merge & load ----------

def _merge_sources(environ: Mapping[str, str], cwd: Path) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(cwd):
        if file.name == ".env":
            merged.update(_normalize_keys(_load_env_file(file)))
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override files; only recognized keys are taken
    env_overrides = {k: v for k, v in environ.items() if k in DEFAULTS}
    env_format = env_overrides.get("TABLE_FORMAT")
    if env_format is not None:
        try:
            parse_table_type(env_format)
        except UnknownStyleError:
            # an unrecognized environment style keeps the file/default one
            logger.warning("Ignoring unknown TABLE_FORMAT=%r; using %r",
                           env_format, merged["TABLE_FORMAT"])
            del env_overrides["TABLE_FORMAT"]
    merged.update(env_overrides)
    return merged


def _validate_and_build(config: dict[str, Any], cwd: Path) -> AppConfig:
    table_format = parse_table_type(
        str(config.get("TABLE_FORMAT", DEFAULTS["TABLE_FORMAT"])))
    delimiter = as_delimiter(config.get("TABLE_DELIMITER", DEFAULTS["TABLE_DELIMITER"]))
    log_level = _as_log_level(config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]))
    log_file_path = _as_opt_path(config.get("LOG_FILE_PATH", DEFAULTS["LOG_FILE_PATH"]), cwd)

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        table_format=table_format,
        delimiter=delimiter,
        log_level=log_level,
        log_file_path=log_file_path,
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    environ: Mapping[str, str] | None = None,
    cwd: Path | str | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    Raises ValueError (UnknownStyleError for a bad TABLE_FORMAT in a config
    file) on invalid values.
    """
    base = Path.cwd() if cwd is None else Path(cwd)
    raw = _merge_sources(os.environ if environ is None else environ, base)
    return _validate_and_build(raw, base)
