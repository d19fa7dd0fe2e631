"""
Backup utility for the basket state file.
Keeps timestamped copies of the JSON state before it is overwritten.
"""
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

from basket.utilities.config import BACKUP_KEEP

logger = logging.getLogger(__name__)


class BackupManager:
    """Manages automatic backups of data files."""

    def __init__(self, data_dir: Path, backup_dir: Optional[Path] = None, keep: int = BACKUP_KEEP):
        self.data_dir = Path(data_dir)
        self.backup_dir = Path(backup_dir) if backup_dir else (self.data_dir / 'backups')
        self.backup_dir.mkdir(parents=True, exist_ok=True)
        self.keep = keep

    def create_backup(self, filename: str, cleanup: bool = True) -> bool:
        """Create a timestamped backup of a data file."""
        source = self.data_dir / filename
        if not source.exists():
            logger.warning(f"File not found for backup: {filename}")
            return False
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S%f")
        backup_name = f"{source.stem}_{timestamp}{source.suffix}"
        try:
            shutil.copy2(source, self.backup_dir / backup_name)
        except OSError as e:
            logger.error(f"Backup failed for {filename}: {e}")
            return False
        logger.info(f"Backup created: {backup_name}")
        if cleanup:
            self._cleanup_old_backups(source.name)
        return True

    def _backups_of(self, filename: str):
        pattern = f"{Path(filename).stem}_*{Path(filename).suffix}"
        # Timestamps sort lexicographically
        return sorted(self.backup_dir.glob(pattern), key=lambda p: p.name)

    def _cleanup_old_backups(self, filename: str):
        """Remove old backups, keeping only the most recent ones."""
        backups = self._backups_of(filename)
        for backup in backups[:-self.keep] if self.keep > 0 else backups:
            try:
                backup.unlink()
                logger.info(f"Removed old backup: {backup.name}")
            except OSError as e:
                logger.error(f"Failed to remove old backup {backup.name}: {e}")

    def restore_backup(self, backup_filename: str) -> bool:
        """Restore a specific backup file over the data file it was taken from."""
        backup_path = self.backup_dir / backup_filename
        if not backup_path.exists():
            logger.error(f"Backup not found: {backup_filename}")
            return False

        # <stem>_<YYYYmmdd>_<HHMMSSffffff><suffix>
        original_name = backup_path.stem.rsplit('_', 2)[0] + backup_path.suffix
        destination = self.data_dir / original_name

        # Create backup of current file before restoring
        if destination.exists():
            self.create_backup(destination.name, cleanup=False)

        shutil.copy2(backup_path, destination)
        logger.info(f"Restored backup: {backup_filename} -> {original_name}")
        return True

    def list_backups(self, filename: Optional[str] = None) -> list:
        """List all backups or backups for a specific file, newest first."""
        if filename:
            backups = self._backups_of(filename)
        else:
            backups = sorted(self.backup_dir.glob('*'), key=lambda p: p.name)

        return [
            {
                'name': b.name,
                'size': b.stat().st_size,
                'created': datetime.fromtimestamp(b.stat().st_mtime).strftime('%Y-%m-%d %H:%M:%S')
            }
            for b in reversed(backups)
        ]
