# blockforge/config.py
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ._logging import resolve_logger
from .errors.config import ConfigError

DEFAULT_CONFIG_PATH = "config.json"


@dataclass(frozen=True)
class Config:
    """Run configuration. `root_path` is the base directory for every extracted file."""

    root_path: str
    backup_ext: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        root = data.get("RootPath")
        if root is None:
            raise ConfigError("Config is missing the required 'RootPath' field")
        if not isinstance(root, str):
            raise ConfigError(f"'RootPath' must be a string, got {type(root).__name__}")
        if not root.strip():
            raise ConfigError("'RootPath' must not be empty")

        backup = data.get("BackupExtension")
        if backup is not None and (not isinstance(backup, str) or not backup.strip()):
            raise ConfigError("'BackupExtension' must be a non-empty string when set")

        return cls(root_path=root, backup_ext=backup)


def load_config(
    path: str = DEFAULT_CONFIG_PATH,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> Config:
    """
    Load the JSON config at `path`.

    Expected shape:
        {"RootPath": "out/project", "BackupExtension": ".bak"}

    Raises ConfigError when the file is missing, unreadable, not valid JSON,
    not an object, or lacks a usable 'RootPath'.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: '{path}'")
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file '{path}' is not valid JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a JSON object")

    config = Config.from_dict(data)
    lg.debug("loaded config from %s: root_path=%s", path, config.root_path)
    return config
