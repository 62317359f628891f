"""
Configuration for dice-keypad.

Settings come from environment variables (optionally seeded from a ``.env``
file) with defaults that keep pathological rolls from exhausting memory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MAX_COUNT = 1000
DEFAULT_MAX_SIDES = 1_000_000
DEFAULT_MAX_TOTAL = 10_000


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value < 1:
        logger.warning(f"Ignoring {name}={value}: must be positive, using {default}")
        return default
    return value


class Config:
    """
    Runtime settings.

    Example:
        config = Config()
        print(config.max_count)  # 1000
    """

    def __init__(self, env_file: Optional[str] = None):
        if env_file:
            load_dotenv(env_file)
            logger.info(f"Loaded configuration from {env_file}")
        else:
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded configuration from {env_path}")

        # === Roll limits ===
        self.max_count = _int_env("DICE_MAX_COUNT", DEFAULT_MAX_COUNT)
        self.max_sides = _int_env("DICE_MAX_SIDES", DEFAULT_MAX_SIDES)
        self.max_total = _int_env("DICE_MAX_TOTAL", DEFAULT_MAX_TOTAL)

        # === Logging ===
        self.log_level = os.getenv("DICE_LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("DICE_LOG_FILE") or None

    def __repr__(self) -> str:
        return (
            f"Config(max_count={self.max_count}, max_sides={self.max_sides}, max_total={self.max_total}, "
            f"log_level={self.log_level})"
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """Return the process-wide config, creating it on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next ``get_config`` re-reads the environment."""
    global _config
    _config = None


__all__ = ["Config", "get_config", "reset_config"]
