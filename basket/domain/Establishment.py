"""Establishment: a store ranked by what a shopping list would cost there. Built per query, never persisted."""
from functools import total_ordering
from typing import List

from basket.domain.Purchase import Purchase


@total_ordering
class PricedPurchase:
    """A purchase annotated with its line cost at one store."""

    def __init__(self, purchase: Purchase, cost: float):
        self.purchase = purchase
        self.cost = cost

    def __eq__(self, other):
        if not isinstance(other, PricedPurchase):
            return NotImplemented
        return self.cost == other.cost

    def __lt__(self, other):
        if not isinstance(other, PricedPurchase):
            return NotImplemented
        return self.cost < other.cost

    def __str__(self) -> str:
        return str(self.purchase)

    __repr__ = __str__


@total_ordering
class Establishment:
    def __init__(self, name: str):
        self.name = name
        self.total = 0.0
        self.purchases: List[PricedPurchase] = []

    def add(self, purchase: Purchase, cost: float):
        '''Counts a purchase bought here at the given line cost.'''
        self.total += cost
        self.purchases.append(PricedPurchase(purchase, cost))

    def __eq__(self, other):
        if not isinstance(other, Establishment):
            return NotImplemented
        return self.total == other.total

    def __lt__(self, other):
        if not isinstance(other, Establishment):
            return NotImplemented
        return self.total < other.total

    # Ordering compares totals only; identity stays usable as a dict key
    __hash__ = object.__hash__

    def __str__(self) -> str:
        return f"{self.name}: R$ {self.total:.2f}"

    __repr__ = __str__
