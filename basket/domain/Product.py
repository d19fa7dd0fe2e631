"""Product domain entity: name, category, prices per store and a quantity that depends on the product kind."""
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from basket.utilities.constants import (
    ATTR_CATEGORY, ATTR_KG, ATTR_NAME, ATTR_QUANTITY, ATTR_UNIT, ATTR_UNITS
)
from basket.utilities.errors import InvalidFieldError, UnknownAttributeError
from basket.utilities.validators import (
    FIELD_LABELS, Category, NonEmptyStr, PositiveFloat, PositiveInt, check
)


class ProductKind(str, Enum):
    """How a product is measured when it is sold."""
    FIXED_QUANTITY = "quantidade fixa"
    BY_WEIGHT = "por quilo"
    BY_UNIT = "por unidade"


# attribute name -> (Product field, validation type), per kind
_COMMON_ATTRIBUTES = {
    ATTR_NAME: ("name", NonEmptyStr),
    ATTR_CATEGORY: ("category", Category),
}
ATTRIBUTES: Dict[ProductKind, Dict[str, Tuple[str, Any]]] = {
    ProductKind.FIXED_QUANTITY: {
        **_COMMON_ATTRIBUTES,
        ATTR_QUANTITY: ("quantity", PositiveInt),
        ATTR_UNIT: ("unit", NonEmptyStr),
    },
    ProductKind.BY_WEIGHT: {**_COMMON_ATTRIBUTES, ATTR_KG: ("kg", PositiveFloat)},
    ProductKind.BY_UNIT: {**_COMMON_ATTRIBUTES, ATTR_UNITS: ("units", PositiveInt)},
}


class Product:
    def __init__(self, product_id: int, name: str, category: str, kind: ProductKind,
                 quantity: Optional[int] = None, unit: Optional[str] = None,
                 kg: Optional[float] = None, units: Optional[int] = None,
                 prices: Optional[Dict[str, float]] = None):
        self.id = product_id
        self.name = name
        self.category = category
        self.kind = ProductKind(kind)
        self.quantity = quantity
        self.unit = unit
        self.kg = kg
        self.units = units
        self.prices: Dict[str, float] = dict(prices) if prices else {}

    # --- Prices ------------------------------------------------------------
    def add_store_price(self, store: str, price: float):
        '''Registers (or overwrites) the price of the product at a store.'''
        self.prices[store] = price

    def lowest_price(self) -> float:
        return min(self.prices.values()) if self.prices else 0.0

    def price_list(self) -> str:
        entries = "".join(f"{store} - R$ {price:.2f};" for store, price in sorted(self.prices.items()))
        return f"<{entries}>"

    # --- Attributes --------------------------------------------------------
    def update_attribute(self, attribute: str, new_value: str) -> int:
        '''
        Updates one attribute from its textual value and returns the product id.
        Numeric values are parsed and must pass the same checks as at registration.
        '''
        table = ATTRIBUTES[self.kind]
        if attribute not in table:
            raise UnknownAttributeError(attribute)
        if new_value is None or not str(new_value).strip():
            raise InvalidFieldError("novo valor")
        field, annotation = table[attribute]
        setattr(self, field, check(FIELD_LABELS[field], annotation, new_value))
        return self.id

    def signature(self) -> tuple:
        '''Identity used to reject duplicate registrations.'''
        if self.kind is ProductKind.FIXED_QUANTITY:
            return self.name, self.category, self.kind, self.quantity, self.unit
        return self.name, self.category, self.kind

    def quantity_text(self) -> str:
        if self.kind is ProductKind.FIXED_QUANTITY:
            return f", {self.quantity} {self.unit}"
        return ""

    # --- Display -----------------------------------------------------------
    def describe(self) -> str:
        label = "Preco por quilo" if self.kind is ProductKind.BY_WEIGHT else "Preco"
        return f"{self.id}. {self.name}, {self.category}{self.quantity_text()}, {label}: {self.price_list()}"

    def __str__(self) -> str:
        return self.describe()

    __repr__ = __str__

    # --- Persistence -------------------------------------------------------
    def to_dict(self):
        '''Converts the Product object to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "kind": self.kind.value,
            "quantity": self.quantity,
            "unit": self.unit,
            "kg": self.kg,
            "units": self.units,
            "prices": dict(self.prices),
        }

    @staticmethod
    def from_dict(data):
        '''Creates a Product object from a dictionary. Ignores unknown keys.'''
        d = dict(data)
        return Product(
            product_id=d["id"],
            name=d.get("name", ""),
            category=d.get("category", ""),
            kind=ProductKind(d["kind"]),
            quantity=d.get("quantity"),
            unit=d.get("unit"),
            kg=d.get("kg"),
            units=d.get("units"),
            prices=d.get("prices") or {},
        )
