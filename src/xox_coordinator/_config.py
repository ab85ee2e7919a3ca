# Area: Shared
"""
xox_coordinator._config — Coordinator Configuration
===================================================

Configuration loading and validation. Values come from, in order of
increasing priority: built-in defaults, an optional JSON file, and
environment variables (a ``.env`` file in the working directory is
loaded first).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ._shared.logging_config import resolve_level

logger = logging.getLogger("xox_coordinator.config")

DEFAULTS: Dict[str, Any] = {
    "board_width": 3,
    "board_height": 3,
    "store": "sqlite",
    "db_path": "xox.db",
    "creator_mark": "X",
    "joiner_mark": "O",
    "log_file": "xox_coordinator.log",
    "log_level": "INFO",
}

ENV_MAPPINGS = {
    "XOX_BOARD_WIDTH": "board_width",
    "XOX_BOARD_HEIGHT": "board_height",
    "XOX_STORE": "store",
    "XOX_DB_PATH": "db_path",
    "XOX_CREATOR_MARK": "creator_mark",
    "XOX_JOINER_MARK": "joiner_mark",
    "XOX_LOG_FILE": "log_file",
    "XOX_LOG_LEVEL": "log_level",
}

INT_KEYS = {"board_width", "board_height"}

STORES = ("sqlite", "memory")


def load_config(config_path: Optional[str] = None, use_dotenv: bool = True) -> Dict[str, Any]:
    """
    Load config from defaults, file and environment.

    Args:
        config_path: Optional path to a JSON config file
        use_dotenv: Load ``.env`` into the environment first

    Returns:
        Validated configuration dict
    """
    if use_dotenv:
        load_dotenv()

    config: Dict[str, Any] = dict(DEFAULTS)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    for key in INT_KEYS:
        try:
            config[key] = int(config[key])
        except (TypeError, ValueError):
            raise ValueError(f"Config key {key!r} must be an integer, got {config[key]!r}")

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration values.

    Raises:
        ValueError: If a value is missing or out of range
    """
    missing = [k for k in DEFAULTS if k not in config]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")
    for key in INT_KEYS:
        if not isinstance(config[key], int) or config[key] < 1:
            raise ValueError(f"Config key {key!r} must be a positive integer")
    if config["store"] not in STORES:
        raise ValueError(f"Unknown store {config['store']!r}, expected one of {STORES}")
    for key in ("creator_mark", "joiner_mark"):
        mark = config[key]
        if not isinstance(mark, str) or len(mark) != 1 or mark.isspace():
            raise ValueError(f"Config key {key!r} must be a single character")
    try:
        resolve_level(config["log_level"])
    except ValueError:
        raise ValueError(f"Config key 'log_level' is not a logging level: {config['log_level']!r}")
