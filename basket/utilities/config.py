"""Configuration management for the basket application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('BASKET_DATA_DIR', str(BASE_DIR / 'data')))
STATE_FILE_NAME: Final[str] = os.getenv('BASKET_STATE_FILE', 'state.json')

# Backups
BACKUP_KEEP: Final[int] = int(os.getenv('BACKUP_KEEP', '10'))

# Logging
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO')
