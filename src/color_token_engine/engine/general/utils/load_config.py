# src/color_token_engine/engine/general/utils/load_config.py

"""Read JSON objects (presets and other token tables) from the engine's data/ directory.

Resolution order for the data directory:
1. explicit ``base_dir`` argument
2. ``COLOR_TOKEN_DATA_DIR`` environment variable
3. first ``data/`` found walking up from this package

Parsed objects are cached per (path, mtime) unless a validator is supplied.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "COLOR_TOKEN_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data/ directory next to or above the package."""


class ConfigFileNotFound(FileNotFoundError):
    """Requested JSON file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """File is not valid JSON, or the validator rejected it."""


class ConfigTypeError(TypeError):
    """Top-level JSON value is not an object."""


log = logging.getLogger(__name__)
_LOCK = threading.RLock()
_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Drop every cached object (tests, hot reload)."""
    with _LOCK:
        _CACHE.clear()
    log.debug("[config] cache cleared")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    here = (start or Path(__file__)).resolve()
    return [p / "data" for p in (here, *here.parents)]


def _default_data_dir(start: Path | None = None) -> Path:
    tried = _candidate_data_dirs(start)
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found; tried:\n  " + "\n  ".join(map(str, tried)))


def _resolve_data_dir(base_dir: Path | None) -> Path:
    if base_dir is not None:
        return Path(base_dir).resolve()
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return _default_data_dir()


def _json_path(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if data_dir != path and data_dir not in path.parents:
        raise ConfigFileNotFound(f"{path} is outside the data dir {data_dir}")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, optionally passing it through ``validator``."""
    path = _json_path(_resolve_data_dir(base_dir), file)
    key = (path, path.stat().st_mtime)

    if validator is None:
        with _LOCK:
            hit = _CACHE.get(key)
        if hit is not None:
            log.debug("[config] cache hit %s", path.name)
            return hit

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    if validator is not None:
        try:
            return validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: {e}") from e

    with _LOCK:
        _CACHE[key] = data
    log.debug("[config] loaded %s (%d keys)", path.name, len(data))
    return data


@contextmanager
def temp_data_dir(path: os.PathLike[str] | str) -> Iterator[Path]:
    """Point COLOR_TOKEN_DATA_DIR at ``path`` for the block, then restore it."""
    previous = os.environ.get(DATA_DIR_ENV)
    os.environ[DATA_DIR_ENV] = os.fspath(path)
    clear_config_cache()
    try:
        yield Path(path)
    finally:
        if previous is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = previous
        clear_config_cache()
