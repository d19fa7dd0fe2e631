"""Ordering, filtering and positional lookup over products and shopping lists.

Every ``*_at`` helper follows the same contract: build the candidates, sort them
and return the text of the element at ``position``. A position outside the
candidates gives an empty string, never an error.
"""
from __future__ import annotations
from datetime import date
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from basket.domain.Product import Product
from basket.domain.ShoppingList import ShoppingList

T = TypeVar('T')

__all__ = [
    "item_at", "sort_by_name", "sort_by_lowest_price", "filter_by_category", "filter_by_search",
    "sort_by_category", "products_text",
    "product_at", "product_by_category_at", "product_by_lowest_price_at", "product_by_search_at",
    "sort_by_date", "lists_created_on", "lists_containing", "list_on_date_at", "list_with_product_at",
    "latest_list", "latest_list_containing",
]


def item_at(items: Sequence[T], position: int, render: Callable[[T], str] = str) -> str:
    if 0 <= position < len(items):
        return render(items[position])
    return ""


# --- Products -----------------------------------------------------------------
def sort_by_name(products: Iterable[Product]) -> List[Product]:
    return sorted(products, key=lambda p: p.name)


def sort_by_lowest_price(products: Iterable[Product]) -> List[Product]:
    return sorted(products, key=lambda p: p.lowest_price())


def sort_by_category(products: Iterable[Product]) -> List[Product]:
    return sorted(products, key=lambda p: (p.category, p.name))


def filter_by_category(products: Iterable[Product], category: str) -> List[Product]:
    return [p for p in products if p.category == category]


def filter_by_search(products: Iterable[Product], term: str) -> List[Product]:
    """Products whose name contains ``term``, ignoring case."""
    needle = (term or '').lower()
    return [p for p in products if needle in p.name.lower()]


def products_text(ordered: Iterable[Product]) -> str:
    return "\n".join(str(p) for p in ordered)


def product_at(products: Iterable[Product], position: int) -> str:
    return item_at(sort_by_name(products), position)


def product_by_category_at(products: Iterable[Product], category: str, position: int) -> str:
    return item_at(sort_by_name(filter_by_category(products, category)), position)


def product_by_lowest_price_at(products: Iterable[Product], position: int) -> str:
    return item_at(sort_by_lowest_price(products), position)


def product_by_search_at(products: Iterable[Product], term: str, position: int) -> str:
    return item_at(sort_by_name(filter_by_search(products, term)), position)


# --- Shopping lists -----------------------------------------------------------
def sort_by_date(lists: Iterable[ShoppingList]) -> List[ShoppingList]:
    return sorted(lists, key=lambda sl: sl.created)


def lists_created_on(lists: Iterable[ShoppingList], day: date) -> List[ShoppingList]:
    return sort_by_date(sl for sl in lists if sl.created.date() == day)


def lists_containing(lists: Iterable[ShoppingList], product_id: int) -> List[ShoppingList]:
    return sort_by_date(sl for sl in lists if sl.contains_product(product_id))


def list_on_date_at(lists: Iterable[ShoppingList], day: date, position: int) -> str:
    return item_at(lists_created_on(lists, day), position, render=lambda sl: sl.descriptor)


def list_with_product_at(lists: Iterable[ShoppingList], product_id: int, position: int) -> str:
    return item_at(lists_containing(lists, product_id), position,
                   render=lambda sl: f"{sl.date_text()} - {sl.descriptor}")


def latest_list(lists: Iterable[ShoppingList]) -> Optional[ShoppingList]:
    """Most recently created list; among equal dates the last one inserted."""
    ordered = sort_by_date(lists)
    return ordered[-1] if ordered else None


def latest_list_containing(lists: Iterable[ShoppingList], product_name: str) -> Optional[ShoppingList]:
    for shopping_list in reversed(sort_by_date(lists)):
        if shopping_list.contains_product_named(product_name):
            return shopping_list
    return None
