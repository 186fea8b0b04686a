"""Configuration: defaults, global config file (~/.streamkit/config.json), loading and saving."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from streamkit.copying import DEFAULT_BUFFER_SIZE
from streamkit.hashing import DEFAULT_ALGORITHM

CONFIG_FILENAME = "config.json"
COPY_MODES = ("byte", "block", "buffered", "line")


def _global_config_dir() -> Path:
    return Path.home() / ".streamkit"


def global_config_path() -> Path:
    """Path to global config file (~/.streamkit/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Built-in defaults used by the CLI when no config file overrides them."""
    return {
        "logging": {
            "level": "INFO",
            "file": None,
        },
        "copy": {
            "mode": "block",
            "buffer_size": DEFAULT_BUFFER_SIZE,
        },
        "text": {
            "encoding": "utf-8",
        },
        "compression": {
            "method": "gzip",
        },
        "hash": {
            "algorithm": DEFAULT_ALGORITHM,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON object from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + config file.

    path defaults to the global config file. A missing or invalid file yields the defaults.
    """
    data = _load_json(path if path is not None else global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config as pretty JSON, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
