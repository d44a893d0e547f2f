from pathlib import Path
from averse.utilities.config import RECIPE_DIR, PLAN_DIR

# Default storage directories (relative paths resolve against the working directory)
DEFAULT_RECIPE_DIR = Path(RECIPE_DIR)
DEFAULT_PLAN_DIR = Path(PLAN_DIR)

__all__ = ['DEFAULT_RECIPE_DIR', 'DEFAULT_PLAN_DIR']
