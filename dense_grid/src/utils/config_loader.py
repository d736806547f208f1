"""Loads YAML/JSON configuration files and global grid settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package's grid configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


META_CONFIG: Dict[str, Any] = load_grid_config()
STRICT_BOUNDS: bool = bool(META_CONFIG.get("strict_bounds", True))
PRINT_DELIMITER: str = str(META_CONFIG.get("print_delimiter", ""))
PRINT_PAD: int = int(META_CONFIG.get("print_pad", 0))
LOG_LEVEL: str = str(META_CONFIG.get("log_level", "WARNING")).upper()
PACKAGE_LOGGER = "dense_grid"


def set_strict_bounds(value: bool) -> None:
    """Enable or disable bounds checks on unchecked grid operations."""
    global STRICT_BOUNDS
    STRICT_BOUNDS = value
    META_CONFIG["strict_bounds"] = value


def set_print_defaults(delimiter: str | None = None, pad: int | None = None) -> None:
    """Override the default delimiter and pad used when rendering grids."""
    global PRINT_DELIMITER, PRINT_PAD
    if delimiter is not None:
        PRINT_DELIMITER = delimiter
        META_CONFIG["print_delimiter"] = delimiter
    if pad is not None:
        PRINT_PAD = pad
        META_CONFIG["print_pad"] = pad


def set_log_level(value: str) -> None:
    """Override the level of the package logger and every module logger under it."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    META_CONFIG["log_level"] = LOG_LEVEL
    logging.getLogger(PACKAGE_LOGGER).setLevel(LOG_LEVEL)


def runtime_config() -> Dict[str, Any]:
    """Return a summary of the current runtime configuration."""
    return {
        "strict_bounds": STRICT_BOUNDS,
        "print_delimiter": PRINT_DELIMITER,
        "print_pad": PRINT_PAD,
        "log_level": LOG_LEVEL,
    }
