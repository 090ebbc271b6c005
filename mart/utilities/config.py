"""Configuration management for the Mart nutrition planner."""
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
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Bumping the version invalidates every stored plan (old shapes normalize to empty)
PLAN_STORAGE_VERSION: Final[int] = int(os.getenv('PLAN_STORAGE_VERSION', '5'))

# Checkout
FREE_DELIVERY_THRESHOLD: Final[float] = float(os.getenv('FREE_DELIVERY_THRESHOLD', '500'))
DELIVERY_FEE: Final[float] = float(os.getenv('DELIVERY_FEE', '35'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MART_DATA_DIR', str(BASE_DIR / 'data')))
