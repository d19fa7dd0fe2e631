"""Purchase: a product bought in some quantity inside one shopping list."""
from basket.domain.Product import Product


class Purchase:
    def __init__(self, product: Product, quantity: int):
        # The product is shared with the catalog, never copied
        self.product = product
        self.quantity = quantity

    @property
    def product_id(self) -> int:
        return self.product.id

    def change_quantity(self, delta: int):
        '''Adjusts the quantity by the specified delta (can be negative).'''
        self.quantity += delta

    def sort_key(self):
        return self.product.category, self.product.name

    def __str__(self) -> str:
        return f"{self.quantity} {self.product.name}, {self.product.category}{self.product.quantity_text()}"

    __repr__ = __str__

    def to_dict(self):
        return {"quantity": self.quantity, "product": self.product.to_dict()}
