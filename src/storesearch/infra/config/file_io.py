"""
Locating and reading StoreSearch settings files.

A settings file is a TOML or JSON document whose root is a table. It is
looked up in this order:

1. the path given with ``--config``;
2. ``settings.toml`` then ``settings.json`` in the working directory;
3. ``settings.json`` in the per-user config directory.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

from storesearch.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_CONFIG_NAMES = ("settings.toml", "settings.json")


def _find_config_file(config_path: str | Path | None) -> Path | None:
    if config_path:
        path = Path(config_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("Config file not found: %s", path)
        return None

    cwd = Path.cwd()
    for name in LOCAL_CONFIG_NAMES:
        candidate = cwd / name
        if candidate.is_file():
            logger.debug("Using config from working directory: %s", candidate)
            return candidate.resolve()

    if SETTING_PATH.is_file():
        return SETTING_PATH.resolve()
    return None


def _read_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


# TOMLDecodeError and JSONDecodeError both subclass ValueError.
_DECODERS: dict[str, tuple[str, Callable[[Path], Any]]] = {
    ".toml": ("TOML", _read_toml),
    ".json": ("JSON", _read_json),
}


def _load_by_extension(path: Path) -> dict[str, Any]:
    """
    Parse a settings file, picking the decoder from its suffix.

    Raises:
        ValueError: For an unknown suffix, a syntax error, or a root that
            is not a table.
    """
    suffix = path.suffix.lower()
    if suffix not in _DECODERS:
        raise ValueError(f"Unsupported config file extension: {suffix}")

    fmt, decode = _DECODERS[suffix]
    try:
        data = decode(path)
    except (OSError, ValueError) as e:
        raise ValueError(f"Invalid {fmt} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")
    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load the settings mapping.

    Args:
        config_path: Explicit settings file. When given, the working
            directory and per-user locations are not consulted.

    Raises:
        FileNotFoundError: If no settings file could be located.
        ValueError: If the located file cannot be parsed.
    """
    path = _find_config_file(config_path)
    if path is None:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading configuration from: %s", path)
    return _load_by_extension(path)


def copy_default_config(target: Path) -> None:
    """Write the bundled ``settings.sample.toml`` to ``target``."""
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
