"""Shopping system facade.

Single entry point over the product catalog and the shopping lists. Every
operation re-raises domain errors with a prefix naming the operation, so the
caller can show the message to the user verbatim.
"""
from __future__ import annotations
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional

from basket.domain.Catalog import Catalog
from basket.infra.State_Repository import load_state, save_state
from basket.logic.ranking import queries
from basket.logic.shopping.list_service import ListService
from basket.utilities import constants as C
from basket.utilities.errors import BasketError, InvalidFieldError
from basket.utilities.validators import Category, FinalizeInput, check, validate


@contextmanager
def _operation(prefix: str):
    try:
        yield
    except BasketError as e:
        raise e.with_prefix(prefix) from e


def parse_day(text: str) -> date:
    """Parse a dd/mm/yyyy date."""
    try:
        return datetime.strptime(text, C.DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidFieldError("data", "em formato invalido, tente dd/MM/yyyy.") from None


class ShoppingSystem:
    def __init__(self, catalog: Optional[Catalog] = None, lists: Optional[ListService] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now
        self.catalog = catalog if catalog is not None else Catalog()
        self.lists = lists if lists is not None else ListService(clock=self._clock)

    def today(self) -> date:
        return self._clock().date()

    # --- Products ----------------------------------------------------------
    def register_fixed_quantity(self, name, category, quantity, unit, store, price) -> int:
        with _operation(C.MSG_REGISTER_ITEM):
            return self.catalog.register_fixed_quantity(name, category, quantity, unit, store, price)

    def register_by_weight(self, name, category, kg, store, price) -> int:
        with _operation(C.MSG_REGISTER_ITEM):
            return self.catalog.register_by_weight(name, category, kg, store, price)

    def register_by_unit(self, name, category, units, store, price) -> int:
        with _operation(C.MSG_REGISTER_ITEM):
            return self.catalog.register_by_unit(name, category, units, store, price)

    def describe_product(self, product_id: int) -> str:
        with _operation(C.MSG_SHOW_ITEM):
            return self.catalog.describe(product_id)

    def update_product(self, product_id: int, attribute: str, new_value: str) -> int:
        with _operation(C.MSG_UPDATE_ITEM):
            return self.catalog.update(product_id, attribute, new_value)

    def add_store_price(self, product_id: int, store: str, price: float):
        with _operation(C.MSG_ADD_PRICE):
            self.catalog.add_store_price(product_id, store, price)

    def delete_product(self, product_id: int):
        with _operation(C.MSG_REMOVE_ITEM):
            self.catalog.delete(product_id)

    def product_at(self, position: int) -> str:
        return queries.product_at(self.catalog.products(), position)

    def list_all_items(self, order: str = C.ORDER_BY_NAME) -> str:
        '''Every product, one per line, ordered by name, category or lowest price.'''
        orderings = {
            C.ORDER_BY_NAME: queries.sort_by_name,
            C.ORDER_BY_CATEGORY: queries.sort_by_category,
            C.ORDER_BY_PRICE: queries.sort_by_lowest_price,
        }
        with _operation(C.MSG_SHOW_ITEM):
            if order not in orderings:
                raise InvalidFieldError("ordem", "invalida.")
        return queries.products_text(orderings[order](self.catalog.products()))

    def product_by_category_at(self, category: str, position: int) -> str:
        with _operation(C.MSG_SHOW_ITEM):
            category = check("categoria", Category, category)
        return queries.product_by_category_at(self.catalog.products(), category, position)

    def product_by_lowest_price_at(self, position: int) -> str:
        return queries.product_by_lowest_price_at(self.catalog.products(), position)

    def product_by_search_at(self, term: str, position: int) -> str:
        return queries.product_by_search_at(self.catalog.products(), term, position)

    # --- Shopping lists ----------------------------------------------------
    def create_list(self, descriptor: str) -> str:
        with _operation(C.MSG_CREATE_LIST):
            return self.lists.create_list(descriptor)

    def describe_list(self, descriptor: str) -> str:
        with _operation(C.MSG_SEARCH_PURCHASE):
            return self.lists.describe_list(descriptor)

    def list_items(self, descriptor: str) -> str:
        with _operation(C.MSG_SEARCH_PURCHASE):
            return self.lists.get_list(descriptor).items_text()

    def add_purchase(self, descriptor: str, quantity: int, product_id: int):
        with _operation(C.MSG_ADD_PURCHASE):
            self.lists.add_purchase(descriptor, quantity, self.catalog.get(product_id))

    def find_purchase(self, descriptor: str, product_id: int) -> str:
        with _operation(C.MSG_SEARCH_PURCHASE):
            return self.lists.find_purchase(descriptor, product_id)

    def update_purchase(self, descriptor: str, product_id: int, operation: str, amount: int):
        with _operation(C.MSG_UPDATE_PURCHASE):
            self.lists.update_purchase(descriptor, product_id, operation, amount)

    def remove_purchase(self, descriptor: str, product_id: int):
        with _operation(C.MSG_REMOVE_PURCHASE):
            self.lists.remove_purchase(descriptor, product_id)

    def purchase_at(self, descriptor: str, position: int) -> str:
        with _operation(C.MSG_SEARCH_PURCHASE):
            return self.lists.purchase_at(descriptor, position)

    def finalize_list(self, descriptor: str, location: str, final_value: float):
        with _operation(C.MSG_FINALIZE_LIST):
            data = validate(FinalizeInput, location=location, final_value=final_value)
            self.lists.finalize(descriptor, data.location, data.final_value)

    def list_on_date_at(self, day: str, position: int) -> str:
        with _operation(C.MSG_SEARCH_PURCHASE):
            return self.lists.list_on_date_at(parse_day(day), position)

    def list_with_product_at(self, product_id: int, position: int) -> str:
        return self.lists.list_with_product_at(product_id, position)

    def search_lists_by_date(self, day: str) -> str:
        with _operation(C.MSG_SEARCH_PURCHASE):
            return self.lists.search_lists_by_date(parse_day(day))

    def search_lists_by_product(self, product_id: int) -> str:
        with _operation(C.MSG_SEARCH_PURCHASE):
            return self.lists.search_lists_by_product(product_id)

    # --- Recommendations ---------------------------------------------------
    def auto_generate_latest(self) -> str:
        with _operation(C.MSG_AUTOMATIC_LIST):
            return self.lists.auto_generate_latest(self.today())

    def auto_generate_for_item(self, product_name: str) -> str:
        with _operation(C.MSG_AUTOMATIC_LIST):
            return self.lists.auto_generate_for_item(product_name, self.today())

    def auto_generate_frequent(self) -> str:
        with _operation(C.MSG_AUTOMATIC_LIST):
            return self.lists.auto_generate_frequent(self.catalog.products(), self.today())

    def recommend_establishment(self, descriptor: str, store_rank: int, purchase_rank: int) -> str:
        with _operation(C.MSG_RECOMMENDATION):
            return self.lists.recommend_establishment(descriptor, store_rank, purchase_rank)

    # --- Persistence -------------------------------------------------------
    def save(self, path: Optional[Path] = None, *, backup: bool = True) -> Path:
        return save_state(self.catalog, self.lists, path, backup=backup)

    @classmethod
    def load(cls, path: Optional[Path] = None, clock: Optional[Callable[[], datetime]] = None) -> "ShoppingSystem":
        catalog, lists = load_state(path, clock=clock or datetime.now)
        return cls(catalog, lists, clock=clock)
