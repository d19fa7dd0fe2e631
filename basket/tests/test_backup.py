from pathlib import Path
import json, shutil, tempfile
import unittest
from basket.utilities.backup import BackupManager


class TestBackupManager(unittest.TestCase):

    def setUp(self):
        self.data_dir = Path(tempfile.mkdtemp())
        self.state_file = self.data_dir / 'state.json'
        self._write({"version": "1"})

    def tearDown(self):
        shutil.rmtree(self.data_dir, ignore_errors=True)

    def _write(self, content):
        with open(self.state_file, 'w', encoding='utf-8') as f:
            json.dump(content, f)

    def _read(self):
        with open(self.state_file, encoding='utf-8') as f:
            return json.load(f)

    def test_create_and_list(self):
        manager = BackupManager(self.data_dir)
        self.assertTrue(manager.create_backup('state.json'))
        self.assertTrue(manager.create_backup('state.json'))
        backups = manager.list_backups('state.json')
        self.assertEqual(len(backups), 2)
        self.assertTrue(all(b['name'].startswith('state_') for b in backups))
        self.assertGreater(backups[0]['name'], backups[1]['name'])

    def test_missing_file(self):
        manager = BackupManager(self.data_dir)
        self.assertFalse(manager.create_backup('other.json'))
        self.assertEqual(manager.list_backups(), [])

    def test_keeps_most_recent(self):
        manager = BackupManager(self.data_dir, keep=2)
        for _ in range(4):
            manager.create_backup('state.json')
        self.assertEqual(len(manager.list_backups('state.json')), 2)

    def test_restore(self):
        manager = BackupManager(self.data_dir, keep=1)
        manager.create_backup('state.json')
        backup_name = manager.list_backups('state.json')[0]['name']
        self._write({"version": "2"})
        self.assertTrue(manager.restore_backup(backup_name))
        self.assertEqual(self._read(), {"version": "1"})
        # The overwritten file was backed up too
        self.assertEqual(len(manager.list_backups('state.json')), 2)
        self.assertFalse(manager.restore_backup('state_19990101_000000000000.json'))
