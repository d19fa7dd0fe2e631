"""Custom exceptions for the basket domain.

Every error carries a human readable message meant to be shown to the end user
as is, plus a details dict for logging. Facade methods re-raise errors with an
operation-specific prefix through ``with_prefix``.
"""

from typing import Any, Dict, Optional


class BasketError(Exception):
    """Base exception for basket errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def with_prefix(self, prefix: str) -> "BasketError":
        """Return an error of the same class whose message starts with ``prefix``."""
        error = self.__class__.__new__(self.__class__)
        error.__dict__.update(self.__dict__)
        error.message = prefix + self.message
        error.details = dict(self.details)
        error.args = (error.message,)
        return error


class InvalidFieldError(BasketError):
    """Raised when a creation or update input fails validation."""

    def __init__(self, field: str, reason: str = "nao pode ser vazio ou nulo."):
        super().__init__(f"{field} {reason}", details={"field": field})
        self.field = field


class UnknownAttributeError(BasketError):
    """Raised when an update targets an attribute the product does not have."""

    def __init__(self, attribute: str):
        super().__init__("atributo nao existe.", details={"attribute": attribute})


class DuplicateProductError(BasketError):
    """Raised when a product with the same signature is already registered."""

    def __init__(self, name: str, category: str):
        super().__init__(
            "item ja cadastrado no sistema.",
            details={"name": name, "category": category},
        )


class ProductNotFoundError(BasketError):
    """Raised when a product id is not in the catalog."""

    def __init__(self, product_id: int):
        super().__init__("item nao existe.", details={"product_id": product_id})


class DuplicateListError(BasketError):
    """Raised when a shopping list descriptor is already in use."""

    def __init__(self, descriptor: str):
        super().__init__("lista de compras ja existe.", details={"descriptor": descriptor})


class ListNotFoundError(BasketError):
    """Raised when no shopping list has the given descriptor."""

    def __init__(self, descriptor: str):
        super().__init__("lista de compras nao existe.", details={"descriptor": descriptor})


class PurchaseNotFoundError(BasketError):
    """Raised when a shopping list has no purchase for the given product."""

    def __init__(self, product_id: int):
        super().__init__("compra nao encontrada na lista.", details={"product_id": product_id})


class InsufficientDataError(BasketError):
    """Raised when a recommendation or automation query lacks the data it needs."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("dados insuficientes.", details=details)


class NoSuchPurchaseError(BasketError):
    """Raised when no shopping list holds a purchase of the requested product."""

    def __init__(self, item: Any):
        super().__init__("nao ha compras cadastradas com o item desejado.", details={"item": item})
