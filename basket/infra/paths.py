from pathlib import Path

from basket.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR, STATE_FILE_NAME

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
STATE_FILE = DATA_DIR / STATE_FILE_NAME

__all__ = ['DATA_DIR', 'STATE_FILE']
