"""
Configuration settings for infinite paper sessions and the demo host
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from infinite_paper.errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "paper": {
        "page_size": 20,
        "total_pages": 50,
        "window_size": 10,
        "initial_page": 1,
        "prefetch_threshold_pages": 1,
    },
    "demo": {
        "latency": 0.25,
        "failing_pages": [],
    },
    "logging": {
        "level": "INFO",
        "file": "logs/infinite_paper.log",
    },
}

CONFIG_FILE = os.path.expanduser("~/.infinite_paper_config.json")

# environment variable -> (section, key, parser)
ENV_OVERRIDES = {
    "INFINITE_PAPER_PAGE_SIZE": ("paper", "page_size", int),
    "INFINITE_PAPER_TOTAL_PAGES": ("paper", "total_pages", int),
    "INFINITE_PAPER_WINDOW_SIZE": ("paper", "window_size", int),
    "INFINITE_PAPER_INITIAL_PAGE": ("paper", "initial_page", int),
    "INFINITE_PAPER_PREFETCH_THRESHOLD": ("paper", "prefetch_threshold_pages", int),
    "INFINITE_PAPER_DEMO_LATENCY": ("demo", "latency", float),
    "INFINITE_PAPER_LOG_LEVEL": ("logging", "level", str),
    "INFINITE_PAPER_LOG_FILE": ("logging", "file", str),
}


@dataclass(frozen=True)
class PaperOptions:
    """Immutable per-session options.

    ``total_pages`` may be 0 (empty dataset); everything else must be at
    least 1, except the prefetch threshold which may be 0.
    """

    page_size: int
    total_pages: int
    window_size: int = 10
    initial_page: int = 1
    prefetch_threshold_pages: int = 1

    def __post_init__(self) -> None:
        minimums = {
            "page_size": 1,
            "total_pages": 0,
            "window_size": 1,
            "initial_page": 1,
            "prefetch_threshold_pages": 0,
        }
        for name, minimum in minimums.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < minimum:
                raise ConfigError(f"{name} must be >= {minimum}, got {value}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> PaperOptions:
        """Build options from the ``paper`` section of a loaded config."""
        section = config.get("paper", {})
        unknown = set(section) - set(DEFAULT_CONFIG["paper"])
        if unknown:
            raise ConfigError(f"Unknown paper options: {', '.join(sorted(unknown))}")
        merged = {**DEFAULT_CONFIG["paper"], **section}
        return cls(**merged)


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Overlay ``overrides`` onto ``base`` one section deep."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key].update(value)
        else:
            base[key] = value


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from defaults, a JSON file and environment variables.

    An explicitly given ``config_path`` must exist; the default file in the
    user's home directory is optional.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else Path(CONFIG_FILE)
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                file_config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigError(f"Error loading config file {path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        _merge(config, file_config)
        logger.info(f"Loaded configuration from {path}")
    elif config_path:
        raise ConfigError(f"Config file not found: {path}")

    for env_name, (section, key, parser) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            config.setdefault(section, {})[key] = parser(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {env_name}: {raw!r}") from e

    return config


def save_config(config: Dict[str, Any], config_path: Optional[Path] = None) -> bool:
    """
    Save configuration to file
    """
    path = Path(config_path) if config_path else Path(CONFIG_FILE)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        logger.error(f"Error saving config file {path}: {e}")
        return False
