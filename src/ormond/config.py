"""Configuration loaded from the ``[tool.ormond]`` table of pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


@dataclass
class OrmondConfig:
    search_dirs: list[str] = field(default_factory=lambda: ["tests"])
    ends_with: list[str] = field(default_factory=lambda: [".test.py", ".spec.py"])
    exclude_dirs: list[str] = field(
        default_factory=lambda: ["__pycache__", ".git", ".venv", "node_modules"]
    )
    only_files: list[str] = field(default_factory=list)
    verbosity: int = 0
    addopts: list[str] = field(default_factory=list)
    save_logs: bool = True
    log_dir: str = "test-logs"
    watch_interval: float = 0.5


DEFAULT_CONFIG = OrmondConfig()

_LIST_KEYS = {"search_dirs", "ends_with", "exclude_dirs", "only_files", "addopts"}


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def _coerce(key: str, value: Any, default: Any) -> Any:
    if key in _LIST_KEYS:
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value)
        msg = f"'{key}' must be a string or a list of strings"
        raise TypeError(msg)
    if isinstance(default, bool):
        if not isinstance(value, bool):
            msg = f"'{key}' must be a boolean"
            raise TypeError(msg)
        return value
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"'{key}' must be an integer"
            raise TypeError(msg)
        return value
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"'{key}' must be a number"
            raise TypeError(msg)
        return float(value)
    if not isinstance(value, str):
        msg = f"'{key}' must be a string"
        raise TypeError(msg)
    return value


def parse_config(data: dict[str, Any]) -> OrmondConfig:
    """Build a config from a ``[tool.ormond]`` mapping. Raises TypeError on bad values."""
    known = {f.name: getattr(DEFAULT_CONFIG, f.name) for f in fields(OrmondConfig)}
    updates: dict[str, Any] = {}
    for key, value in data.items():
        name = key.replace("-", "_")
        if name not in known:
            logger.warning("Ignoring unknown [tool.ormond] option: %s", key)
            continue
        updates[name] = _coerce(name, value, known[name])
    return replace(OrmondConfig(), **updates)


def load_config(start: Path | None = None) -> OrmondConfig:
    """Load configuration, falling back to defaults when missing or invalid."""
    path = find_pyproject(start)
    if path is None:
        return OrmondConfig()

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Failed to read %s (%s). Using defaults.", path, exc)
        return OrmondConfig()

    section = data.get("tool", {}).get("ormond", {})
    if not isinstance(section, dict):
        logger.warning("[tool.ormond] in %s is not a table. Using defaults.", path)
        return OrmondConfig()

    try:
        return parse_config(section)
    except TypeError as exc:
        logger.warning("Invalid [tool.ormond] in %s: %s. Using defaults.", path, exc)
        return OrmondConfig()


__all__ = ["DEFAULT_CONFIG", "OrmondConfig", "find_pyproject", "load_config", "parse_config"]
