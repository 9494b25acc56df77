"""Configuration loading from environment variables and defaults."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from poker_scorer.exceptions import ConfigError

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Hand the dealt hand is compared against by default
DEFAULT_OPPONENT = os.getenv("POKER_SCORER_OPPONENT", "Kh Kd Ks Tc Th")

DEFAULT_LOG_LEVEL = "WARNING"


def get_default_seed() -> Optional[int]:
    """Deck seed for the deal command; unset means a fresh shuffle every run.

    Raises:
        ConfigError: If POKER_SCORER_SEED is set but is not an integer.
    """
    raw = os.getenv("POKER_SCORER_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError("POKER_SCORER_SEED", raw, "expected an integer")


def get_log_level() -> str:
    """Logging level name from POKER_SCORER_LOG_LEVEL.

    Raises:
        ConfigError: If the value is not a known logging level name.
    """
    raw = os.getenv("POKER_SCORER_LOG_LEVEL", "").strip().upper()
    if not raw:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(raw), int):
        raise ConfigError("POKER_SCORER_LOG_LEVEL", raw,
                          "expected DEBUG, INFO, WARNING, ERROR or CRITICAL")
    return raw
