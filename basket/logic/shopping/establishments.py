"""Establishment aggregation.

Turns a shopping list into per-store cost totals using the prices recorded on
each purchased product. Provides build_establishments(shopping_list) and
rank_establishments(shopping_list).
"""
from typing import Dict, List

from basket.domain.Establishment import Establishment
from basket.domain.ShoppingList import ShoppingList


def build_establishments(shopping_list: ShoppingList) -> Dict[str, Establishment]:
    """Map every store priced on the list's products to what the list costs there.

    A purchase only counts at stores where its product has a price; a product
    with no prices at all is left out of every establishment.
    """
    stores: Dict[str, Establishment] = {}
    for purchase in shopping_list.purchases.values():
        for store, price in purchase.product.prices.items():
            establishment = stores.get(store)
            if establishment is None:
                establishment = stores[store] = Establishment(store)
            establishment.add(purchase, price * purchase.quantity)
    return stores


def rank_establishments(shopping_list: ShoppingList) -> List[Establishment]:
    """Establishments from cheapest to most expensive total."""
    return sorted(build_establishments(shopping_list).values())

__all__ = ['build_establishments', 'rank_establishments']
