"""State repository: whole-state snapshot and restore (catalog + shopping lists) as one JSON file."""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from basket.domain.Catalog import Catalog
from basket.infra.paths import STATE_FILE
from basket.logic.shopping.list_service import ListService
from basket.utilities.backup import BackupManager

logger = logging.getLogger(__name__)

STATE_VERSION = "1.0"


def save_state(catalog: Catalog, lists: ListService, path: Optional[Path] = None, *, backup: bool = True) -> Path:
    """Write the catalog and every shopping list to ``path`` (default STATE_FILE).

    An existing state file is backed up first.
    """
    path = Path(path or STATE_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    if backup and path.exists():
        BackupManager(path.parent).create_backup(path.name)
    store = {
        "version": STATE_VERSION,
        "saved_at": datetime.now().isoformat(),
        "catalog": catalog.to_dict(),
        "lists": lists.to_dict(),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(store, f, indent=2, ensure_ascii=False)
    logger.info(f"Saved {len(catalog)} products and {len(lists.lists)} lists to {path}")
    return path


def load_state(path: Optional[Path] = None,
               clock: Optional[Callable[[], datetime]] = None) -> Tuple[Catalog, ListService]:
    """Read the catalog and the shopping lists back. A missing file gives an empty state."""
    path = Path(path or STATE_FILE)
    if not path.exists():
        logger.warning(f"State file not found: {path}. Starting with an empty state.")
        return Catalog(), ListService(clock=clock)
    with open(path, "r", encoding="utf-8") as f:
        store = json.load(f)
    catalog = Catalog.from_dict(store.get("catalog", {}))
    lists = ListService.from_dict(store.get("lists", []), catalog.as_mapping(), clock=clock)
    logger.info(f"Loaded {len(catalog)} products and {len(lists.lists)} lists from {path}")
    return catalog, lists
