from datetime import datetime
from io import StringIO
from pathlib import Path
import shutil, tempfile
import unittest
from basket.logic.system import ShoppingSystem
from basket.main import build_parser, run
from basket.utilities.backup import BackupManager


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = Path(tempfile.mkdtemp())
        self.state_file = self.tmp_dir / 'state.json'
        system = ShoppingSystem(clock=lambda: datetime(2024, 8, 5, 12, 0))
        rice = system.register_fixed_quantity("Arroz", "alimento industrializado", 1, "kg", "Extra", 6.0)
        system.register_by_unit("Esponja", "limpeza", 2, "Extra", 3.0)
        system.add_store_price(rice, "Assai", 5.5)
        system.create_list("agosto")
        system.add_purchase("agosto", 2, rice)
        system.save(self.state_file)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def _run(self, *argv):
        out = StringIO()
        code = run(build_parser().parse_args(['--state', str(self.state_file), *argv]), out=out)
        return code, out.getvalue().splitlines()

    def test_items(self):
        code, lines = self._run('items')
        self.assertEqual(code, 0)
        self.assertEqual(lines, [
            "1. Arroz, alimento industrializado, 1 kg, Preco: <Assai - R$ 5.50;Extra - R$ 6.00;>",
            "2. Esponja, limpeza, Preco: <Extra - R$ 3.00;>",
        ])

    def test_lists(self):
        self.assertEqual(self._run('lists'), (0, ["05/08/2024 - agosto"]))

    def test_recommend(self):
        self.assertEqual(self._run('recommend', 'agosto'), (0, ["Assai: R$ 11.00"]))
        self.assertEqual(self._run('recommend', 'agosto', '--store', '1', '--purchase', '1'),
                         (0, ["- 2 Arroz, alimento industrializado, 1 kg"]))
        self.assertEqual(self._run('recommend', 'agosto', '--store', '5'), (1, []))

    def test_backup(self):
        self.assertEqual(self._run('backup')[0], 0)
        code, lines = self._run('backups')
        self.assertEqual(code, 0)
        self.assertEqual(len(lines), 1)

    def test_items_by_lowest_price(self):
        code, lines = self._run('items', '--order', 'preco')
        self.assertEqual(code, 0)
        self.assertEqual([line.split(',')[0] for line in lines], ["2. Esponja", "1. Arroz"])

    def test_restore(self):
        self.assertEqual(self._run('backup')[0], 0)
        backup_name = BackupManager(self.tmp_dir).list_backups('state.json')[0]['name']
        system = ShoppingSystem.load(self.state_file)
        system.register_by_unit("Detergente", "limpeza", 1, "Extra", 2.5)
        system.save(self.state_file, backup=False)
        self.assertEqual(len(self._run('items')[1]), 3)
        self.assertEqual(self._run('restore', backup_name)[0], 0)
        self.assertEqual(len(self._run('items')[1]), 2)
        self.assertEqual(self._run('restore', 'state_19990101_000000000000.json')[0], 1)
