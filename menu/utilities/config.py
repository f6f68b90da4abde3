"""Configuration management for the Combo Menu Planner."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8080'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Plan defaults used when the caller does not override them
DEFAULT_NUM_DAYS: Final[int] = int(os.getenv('DEFAULT_NUM_DAYS', '7'))
DEFAULT_COMBOS_PER_DAY: Final[int] = int(os.getenv('DEFAULT_COMBOS_PER_DAY', '3'))
DEFAULT_MIN_CALORIES: Final[int] = int(os.getenv('DEFAULT_MIN_CALORIES', '550'))
DEFAULT_MAX_CALORIES: Final[int] = int(os.getenv('DEFAULT_MAX_CALORIES', '800'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
MENU_FILE: Final[Path] = Path(os.getenv('MENU_FILE', str(DATA_DIR / 'master_menu.json')))
