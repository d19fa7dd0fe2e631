"""Catalog aggregate: every registered product, keyed by a sequential id that is never reused."""
import logging
from typing import Dict, List

from basket.domain.Product import Product, ProductKind
from basket.utilities.errors import DuplicateProductError, ProductNotFoundError
from basket.utilities.validators import (
    ByUnitInput, ByWeightInput, FixedQuantityInput, StorePriceInput, validate
)

logger = logging.getLogger(__name__)


class Catalog:
    def __init__(self):
        self._products: Dict[int, Product] = {}
        self.next_id = 1

    # --- Registration ------------------------------------------------------
    def register_fixed_quantity(self, name: str, category: str, quantity: int, unit: str,
                                store: str, price: float) -> int:
        '''Registers a product sold in a fixed quantity (e.g. 1 kg of rice) and returns its id.'''
        data = validate(FixedQuantityInput, name=name, category=category, quantity=quantity,
                        unit=unit, store=store, price=price)
        return self._register(data, ProductKind.FIXED_QUANTITY, quantity=data.quantity, unit=data.unit)

    def register_by_weight(self, name: str, category: str, kg: float, store: str, price: float) -> int:
        '''Registers a bulk product priced per kilo and returns its id.'''
        data = validate(ByWeightInput, name=name, category=category, kg=kg, store=store, price=price)
        return self._register(data, ProductKind.BY_WEIGHT, kg=data.kg)

    def register_by_unit(self, name: str, category: str, units: int, store: str, price: float) -> int:
        '''Registers a product sold per unit and returns its id.'''
        data = validate(ByUnitInput, name=name, category=category, units=units, store=store, price=price)
        return self._register(data, ProductKind.BY_UNIT, units=data.units)

    def _register(self, data, kind: ProductKind, **quantity) -> int:
        product = Product(self.next_id, data.name, data.category, kind, **quantity)
        product.add_store_price(data.store, data.price)
        if any(p.signature() == product.signature() for p in self._products.values()):
            raise DuplicateProductError(data.name, data.category)
        self._products[product.id] = product
        self.next_id += 1
        logger.info(f"Registered product {product.id}: {product.name} ({kind.value})")
        return product.id

    # --- Lookup and mutation -----------------------------------------------
    def get(self, product_id: int) -> Product:
        try:
            return self._products[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    def describe(self, product_id: int) -> str:
        return self.get(product_id).describe()

    def update(self, product_id: int, attribute: str, new_value: str) -> int:
        return self.get(product_id).update_attribute(attribute, new_value)

    def add_store_price(self, product_id: int, store: str, price: float):
        product = self.get(product_id)
        data = validate(StorePriceInput, store=store, price=price)
        product.add_store_price(data.store, data.price)

    def delete(self, product_id: int):
        '''
        Removes a product. Shopping lists that bought it keep their purchase.
        '''
        product = self.get(product_id)
        del self._products[product_id]
        logger.info(f"Deleted product {product_id}: {product.name}")

    def products(self) -> List[Product]:
        '''Returns the products in registration order.'''
        return list(self._products.values())

    def as_mapping(self) -> Dict[int, Product]:
        return dict(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id) -> bool:
        return product_id in self._products

    # --- Persistence -------------------------------------------------------
    def to_dict(self):
        return {
            "next_id": self.next_id,
            "products": [p.to_dict() for p in self._products.values()],
        }

    @staticmethod
    def from_dict(data):
        catalog = Catalog()
        for entry in data.get("products", []):
            product = Product.from_dict(entry)
            catalog._products[product.id] = product
        catalog.next_id = data.get("next_id", max(catalog._products, default=0) + 1)
        return catalog
