"""Command line access to a saved basket state.

    python -m basket.main items
    python -m basket.main items --order preco
    python -m basket.main lists
    python -m basket.main recommend "feira semanal" --store 0 --purchase 1
    python -m basket.main backup
    python -m basket.main restore state_20240601_120000000000.json
"""
import argparse
import logging
import sys
from pathlib import Path

from basket.infra.paths import STATE_FILE
from basket.logic.system import ShoppingSystem
from basket.utilities.backup import BackupManager
from basket.utilities.config import LOG_LEVEL
from basket.utilities.constants import ORDER_BY_CATEGORY, ORDER_BY_NAME, ORDER_BY_PRICE
from basket.utilities.errors import BasketError

logger = logging.getLogger("basket")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Household product catalog and shopping lists')
    parser.add_argument('--state', default=str(STATE_FILE), help='State file path')
    sub = parser.add_subparsers(dest='command', required=True)
    items = sub.add_parser('items', help='List every product')
    items.add_argument('--order', choices=(ORDER_BY_NAME, ORDER_BY_CATEGORY, ORDER_BY_PRICE),
                       default=ORDER_BY_NAME, help='Listing order')
    sub.add_parser('lists', help='List every shopping list ordered by date')
    rec = sub.add_parser('recommend', help='Cheapest establishments for a shopping list')
    rec.add_argument('descriptor')
    rec.add_argument('--store', type=int, default=0, help='Establishment rank (0 = cheapest)')
    rec.add_argument('--purchase', type=int, default=0, help='Purchase rank at that establishment (0 = summary)')
    sub.add_parser('backup', help='Back up the state file')
    sub.add_parser('backups', help='Show available backups of the state file')
    restore = sub.add_parser('restore', help='Restore the state file from a backup')
    restore.add_argument('name', help='Backup file name, as shown by "backups"')
    return parser


def run(args, out=sys.stdout) -> int:
    state = Path(args.state)
    if args.command in ('backup', 'backups', 'restore'):
        manager = BackupManager(state.parent)
        if args.command == 'backup':
            return 0 if manager.create_backup(state.name) else 1
        if args.command == 'restore':
            return 0 if manager.restore_backup(args.name) else 1
        for backup in manager.list_backups(state.name):
            print(f"  - {backup['name']} ({backup['size']} bytes) - {backup['created']}", file=out)
        return 0

    system = ShoppingSystem.load(state)
    if args.command == 'items':
        listing = system.list_all_items(args.order)
        if listing:
            print(listing, file=out)
    elif args.command == 'lists':
        for shopping_list in system.lists.all_lists():
            print(f"{shopping_list.date_text()} - {shopping_list.descriptor}", file=out)
    elif args.command == 'recommend':
        try:
            print(system.recommend_establishment(args.descriptor, args.store, args.purchase), file=out)
        except BasketError as e:
            logger.error(e.message)
            return 1
    return 0


def main(argv=None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
