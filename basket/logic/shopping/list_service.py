"""Shopping list service.

Owns every shopping list by descriptor and answers the list queries: lookups by
date or product, the best establishment for a list and the three automatic list
strategies (latest list, latest list with an item, most frequently bought items).
"""
import logging
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Optional

from basket.domain.Product import Product
from basket.domain.Purchase import Purchase
from basket.domain.ShoppingList import ShoppingList
from basket.logic.ranking import queries
from basket.logic.shopping.establishments import rank_establishments
from basket.utilities.constants import (
    DATE_FORMAT, STRATEGY_FREQUENT, STRATEGY_ITEM, STRATEGY_LATEST
)
from basket.utilities.errors import (
    DuplicateListError, InsufficientDataError, ListNotFoundError, NoSuchPurchaseError
)
from basket.utilities.validators import ListInput, validate

logger = logging.getLogger(__name__)


class ListService:
    def __init__(self, lists: Optional[Dict[str, ShoppingList]] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.lists: Dict[str, ShoppingList] = lists if lists is not None else {}
        self._clock = clock or datetime.now

    # --- Lists -------------------------------------------------------------
    def create_list(self, descriptor: str) -> str:
        descriptor = validate(ListInput, descriptor=descriptor).descriptor
        if descriptor in self.lists:
            raise DuplicateListError(descriptor)
        self.lists[descriptor] = ShoppingList(descriptor, self._clock())
        logger.info(f"Created shopping list '{descriptor}'")
        return descriptor

    def get_list(self, descriptor: str) -> ShoppingList:
        try:
            return self.lists[descriptor]
        except KeyError:
            raise ListNotFoundError(descriptor) from None

    def describe_list(self, descriptor: str) -> str:
        return self.get_list(descriptor).describe()

    def all_lists(self) -> List[ShoppingList]:
        return queries.sort_by_date(self.lists.values())

    # --- Purchases ---------------------------------------------------------
    def add_purchase(self, descriptor: str, quantity: int, product: Product):
        self.get_list(descriptor).add_purchase(quantity, product)

    def find_purchase(self, descriptor: str, product_id: int) -> str:
        return self.get_list(descriptor).find_purchase(product_id)

    def update_purchase(self, descriptor: str, product_id: int, operation: str, amount: int):
        self.get_list(descriptor).update_purchase(product_id, operation, amount)

    def remove_purchase(self, descriptor: str, product_id: int):
        self.get_list(descriptor).remove_purchase(product_id)

    def purchase_at(self, descriptor: str, position: int) -> str:
        return self.get_list(descriptor).purchase_at(position)

    def finalize(self, descriptor: str, location: str, final_value: float):
        shopping_list = self.get_list(descriptor)
        if shopping_list.is_finalized:
            logger.info(f"Shopping list '{descriptor}' finalized again, overwriting previous values")
        shopping_list.finalize(location, final_value)
        logger.info(f"Finalized shopping list '{descriptor}' at {location}: {final_value}")

    # --- Lookups -----------------------------------------------------------
    def list_on_date_at(self, day: date, position: int) -> str:
        return queries.list_on_date_at(self.lists.values(), day, position)

    def list_with_product_at(self, product_id: int, position: int) -> str:
        return queries.list_with_product_at(self.lists.values(), product_id, position)

    def search_lists_by_date(self, day: date) -> str:
        '''Items of the first list created on ``day``, or "" when there is none.'''
        found = queries.lists_created_on(self.lists.values(), day)
        return found[0].items_text() if found else ""

    def search_lists_by_product(self, product_id: int) -> str:
        found = queries.lists_containing(self.lists.values(), product_id)
        if not found:
            raise NoSuchPurchaseError(product_id)
        return "\n".join(sl.descriptor for sl in found)

    # --- Recommendation ----------------------------------------------------
    def recommend_establishment(self, descriptor: str, store_rank: int, purchase_rank: int) -> str:
        '''
        Ranks the stores by what the list would cost there.

        With ``purchase_rank == 0`` returns the summary of the ``store_rank``-th
        cheapest store; a store rank past the end is an error. Otherwise returns
        the ``purchase_rank``-th cheapest purchase (1-based) at that store, or ""
        when there is no such purchase.
        '''
        ranked = rank_establishments(self.get_list(descriptor))
        if not 0 <= store_rank < len(ranked):
            raise InsufficientDataError({"descriptor": descriptor, "store_rank": store_rank})
        establishment = ranked[store_rank]
        if purchase_rank == 0:
            return str(establishment)
        purchases = sorted(establishment.purchases)
        return queries.item_at(purchases, purchase_rank - 1, render=lambda p: f"- {p}")

    # --- Automatic lists ---------------------------------------------------
    def _store_generated(self, label: str, today: date, source: Optional[ShoppingList] = None,
                         purchases: Iterable[Purchase] = ()) -> str:
        # A same-day descriptor replaces the previous generated list
        descriptor = f"{label} {today.strftime(DATE_FORMAT)}"
        generated = ShoppingList(descriptor, self._clock())
        if source is not None:
            generated.copy_from(source)
        for purchase in purchases:
            generated.purchases[purchase.product_id] = purchase
        if descriptor in self.lists:
            logger.warning(f"Replacing automatic list '{descriptor}'")
        self.lists[descriptor] = generated
        logger.info(f"Generated automatic list '{descriptor}' with {len(generated.purchases)} purchases")
        return descriptor

    def auto_generate_latest(self, today: date) -> str:
        '''Copies the most recently created list.'''
        latest = queries.latest_list(self.lists.values())
        if latest is None:
            raise InsufficientDataError({"strategy": STRATEGY_LATEST})
        return self._store_generated(STRATEGY_LATEST, today, source=latest)

    def auto_generate_for_item(self, product_name: str, today: date) -> str:
        '''Copies the most recent list that bought a product with this name.'''
        latest = queries.latest_list_containing(self.lists.values(), product_name)
        if latest is None:
            raise NoSuchPurchaseError(product_name)
        return self._store_generated(STRATEGY_ITEM, today, source=latest)

    def frequent_purchases(self, products: Iterable[Product]) -> List[Purchase]:
        '''
        Products bought in at least half of the lists (floor division over the
        current list count), each at its average bought quantity rounded down.
        '''
        threshold = len(self.lists) // 2
        frequent: List[Purchase] = []
        for product in products:
            quantities = [sl.purchases[product.id].quantity
                          for sl in self.lists.values() if sl.contains_product(product.id)]
            if quantities and len(quantities) >= threshold:
                frequent.append(Purchase(product, sum(quantities) // len(quantities)))
        return frequent

    def auto_generate_frequent(self, products: Iterable[Product], today: date) -> str:
        if not self.lists:
            raise InsufficientDataError({"strategy": STRATEGY_FREQUENT})
        return self._store_generated(STRATEGY_FREQUENT, today, purchases=self.frequent_purchases(products))

    # --- Persistence -------------------------------------------------------
    def to_dict(self):
        return [sl.to_dict() for sl in self.lists.values()]

    @staticmethod
    def from_dict(data, products: Optional[Dict[int, Product]] = None,
                  clock: Optional[Callable[[], datetime]] = None):
        known = dict(products) if products else {}
        lists = {}
        for entry in data:
            shopping_list = ShoppingList.from_dict(entry, known)
            lists[shopping_list.descriptor] = shopping_list
        return ListService(lists, clock=clock)
