"""Configuration management for the weekly meal planner."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR: Final[Path] = Path(__file__).parent.parent

# Load environment variables from .env file if it exists
env_path = BASE_DIR / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# File Paths
DATA_DIR: Final[Path] = Path(os.getenv('MEALWEEK_DATA_DIR', str(BASE_DIR / 'data')))
SEED_DIR: Final[Path] = Path(os.getenv('MEALWEEK_SEED_DIR', str(BASE_DIR / 'data' / 'seed')))
