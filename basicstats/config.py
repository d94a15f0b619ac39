"""Load basicstats configuration from pyproject.toml and optional .basicstats.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .buffer import DEFAULT_INITIAL_CAPACITY


@dataclass
class BasicStatsConfig:
    """Runtime configuration for basicstats."""

    # Number of slots the buffer starts with before its first doubling
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    # Level name for the stderr log handler ("DEBUG", "INFO", ...)
    log_level: str = "WARNING"


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
        return {}


def _table(d: object, key: str) -> dict:
    """Return d[key] if it is a TOML table, else an empty dict."""
    value = d.get(key) if isinstance(d, dict) else None
    return value if isinstance(value, dict) else {}


def _apply(cfg: BasicStatsConfig, d: object) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys and non-table input."""
    if not isinstance(d, dict):
        return
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key in valid:
            setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> BasicStatsConfig:
    """Load config from pyproject.toml [tool.basicstats], then .basicstats.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = BasicStatsConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, _table(_table(pyproject, "tool"), "basicstats"))
    local = _read_toml(project_root / ".basicstats.toml")
    _apply(cfg, local)
    return cfg
