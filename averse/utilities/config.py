"""Configuration management for the Averse meal planner."""
import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Values from a local .env never override variables already set in the environment
_env_path = Path.cwd() / '.env'
if _env_path.exists():
    load_dotenv(_env_path)


def env_int(name: str, default: int) -> int:
    """Integer setting from the environment; a malformed value falls back to default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


# Storage locations
RECIPE_DIR: Final[str] = os.getenv('AVERSE_RECIPE_DIR', './recipes')
PLAN_DIR: Final[str] = os.getenv('AVERSE_PLAN_DIR', './plans')

# Behold
N_PLANS: Final[int] = env_int('AVERSE_N_PLANS', 5)

# Logging
LOG_LEVEL: Final[str] = os.getenv('AVERSE_LOG_LEVEL', 'WARNING').upper()
