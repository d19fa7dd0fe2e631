"""ShoppingList aggregate: dated collection of purchases keyed by product id, open until finalized."""
from datetime import datetime
from typing import Dict, Optional

from basket.domain.Product import Product
from basket.domain.Purchase import Purchase
from basket.utilities.constants import ADD_OPERATION, DATE_FORMAT, REDUCE_OPERATION
from basket.utilities.errors import InvalidFieldError, PurchaseNotFoundError
from basket.utilities.validators import PurchaseInput, PurchaseUpdateInput, validate


class ShoppingList:
    def __init__(self, descriptor: str, created: Optional[datetime] = None):
        self.descriptor = descriptor
        self.created = created or datetime.now()
        self.purchases: Dict[int, Purchase] = {}
        self.final_location: Optional[str] = None
        self.final_value: Optional[float] = None

    # --- Purchases ---------------------------------------------------------
    def add_purchase(self, quantity: int, product: Product):
        '''
        Adds a purchase of the product, replacing any previous purchase of it.
        '''
        checked = validate(PurchaseInput, quantity=quantity)
        self.purchases[product.id] = Purchase(product, checked.quantity)

    def get_purchase(self, product_id: int) -> Purchase:
        try:
            return self.purchases[product_id]
        except KeyError:
            raise PurchaseNotFoundError(product_id) from None

    def find_purchase(self, product_id: int) -> str:
        return str(self.get_purchase(product_id))

    def update_purchase(self, product_id: int, operation: str, amount: int):
        '''
        Increases ("adiciona") or decreases ("diminui") the bought quantity.
        A purchase whose quantity drops to zero or below leaves the list.
        '''
        purchase = self.get_purchase(product_id)
        if operation not in (ADD_OPERATION, REDUCE_OPERATION):
            raise InvalidFieldError("operacao", "invalida para atualizacao.")
        delta = validate(PurchaseUpdateInput, amount=amount).amount
        if operation == REDUCE_OPERATION:
            delta = -delta
        if purchase.quantity + delta <= 0:
            del self.purchases[product_id]
            return
        purchase.change_quantity(delta)

    def remove_purchase(self, product_id: int):
        self.get_purchase(product_id)
        del self.purchases[product_id]

    def sorted_purchases(self):
        return sorted(self.purchases.values(), key=lambda p: p.sort_key())

    def purchase_at(self, position: int) -> str:
        '''Returns the purchase at ``position`` ordered by category then name, or "" when out of range.'''
        ordered = self.sorted_purchases()
        if 0 <= position < len(ordered):
            return str(ordered[position])
        return ""

    def contains_product(self, product_id: int) -> bool:
        return product_id in self.purchases

    def contains_product_named(self, name: str) -> bool:
        return any(p.product.name == name for p in self.purchases.values())

    # --- Lifecycle ---------------------------------------------------------
    def finalize(self, location: str, final_value: float):
        '''
        Records where the list was bought and how much it cost.
        Calling it again overwrites both values.
        '''
        self.final_location = location
        self.final_value = final_value

    @property
    def is_finalized(self) -> bool:
        return self.final_location is not None

    def copy_from(self, other: "ShoppingList"):
        '''
        Copies the purchases and the final value of another list.
        '''
        self.purchases = {pid: Purchase(p.product, p.quantity) for pid, p in other.purchases.items()}
        self.final_value = other.final_value

    # --- Display -----------------------------------------------------------
    def date_text(self) -> str:
        return self.created.strftime(DATE_FORMAT)

    def items_text(self) -> str:
        return "\n".join(str(p) for p in self.sorted_purchases())

    def describe(self) -> str:
        return self.descriptor

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"ShoppingList({self.descriptor!r}, {self.date_text()}, {len(self.purchases)} purchases)"

    def __lt__(self, other: "ShoppingList") -> bool:
        return self.created < other.created

    # --- Persistence -------------------------------------------------------
    def to_dict(self):
        '''Converts the ShoppingList object to a dictionary for JSON persistence.'''
        return {
            "descriptor": self.descriptor,
            "created": self.created.isoformat(),
            "purchases": [p.to_dict() for p in self.purchases.values()],
            "final_location": self.final_location,
            "final_value": self.final_value,
        }

    @staticmethod
    def from_dict(data, products: Optional[Dict[int, Product]] = None):
        '''
        Creates a ShoppingList from a dictionary. Purchases point to the catalog
        product with the same id when there is one, otherwise to a detached copy
        of the saved product.
        '''
        if products is None:
            products = {}
        shopping_list = ShoppingList(data["descriptor"], datetime.fromisoformat(data["created"]))
        for entry in data.get("purchases", []):
            saved = entry["product"]
            product = products.get(saved["id"])
            if product is None:
                product = products[saved["id"]] = Product.from_dict(saved)
            shopping_list.purchases[product.id] = Purchase(product, entry["quantity"])
        shopping_list.final_location = data.get("final_location")
        shopping_list.final_value = data.get("final_value")
        return shopping_list
