"""
Input validation schemas using Pydantic for better data integrity.

Validation failures are reported as InvalidFieldError naming the offending field
with the label the user sees (``nome``, ``preco``...), never as a raw pydantic error.
"""
from typing import Annotated, Any, Dict, Type, TypeVar

from pydantic import AfterValidator, BaseModel, Field, StringConstraints, TypeAdapter, ValidationError

from basket.utilities.constants import CATEGORIES
from basket.utilities.errors import InvalidFieldError

SchemaT = TypeVar('SchemaT', bound=BaseModel)


def _not_blank(v: str) -> str:
    """Reject whitespace-only text but keep the value as given."""
    if not v.strip():
        raise ValueError('nao pode ser vazio ou nulo.')
    return v


def _known_category(v: str) -> str:
    if v not in CATEGORIES:
        raise ValueError('nao existe.')
    return v


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
# Keys are stored verbatim
KeyStr = Annotated[str, AfterValidator(_not_blank)]
Category = Annotated[NonEmptyStr, AfterValidator(_known_category)]
PositiveInt = Annotated[int, Field(gt=0)]
PositiveFloat = Annotated[float, Field(gt=0)]
NonNegativeFloat = Annotated[float, Field(ge=0)]

# Labels shown to the user for each schema field
FIELD_LABELS: Dict[str, str] = {
    'name': 'nome',
    'category': 'categoria',
    'quantity': 'quantidade',
    'unit': 'unidade de medida',
    'kg': 'quilo',
    'units': 'unidade',
    'store': 'local de compra',
    'price': 'preco',
    'descriptor': 'descritor',
    'location': 'local da compra',
    'final_value': 'valor final da compra',
    'amount': 'quantidade',
}

_REASONS: Dict[str, str] = {
    'missing': 'nao pode ser vazio ou nulo.',
    'string_type': 'nao pode ser vazio ou nulo.',
    'string_too_short': 'nao pode ser vazio ou nulo.',
    'too_short': 'nao pode ser vazio ou nulo.',
    'greater_than': 'nao pode ser menor ou igual a zero.',
    'greater_than_equal': 'nao pode ser menor que zero.',
}


def _reason(error: Dict[str, Any]) -> str:
    if error['type'] == 'value_error':
        return str(error['ctx']['error'])
    return _REASONS.get(error['type'], 'invalido.')


class ProductInput(BaseModel):
    """Fields shared by every product registration form."""
    name: NonEmptyStr
    category: Category
    store: NonEmptyStr
    price: PositiveFloat


class FixedQuantityInput(ProductInput):
    """Schema for products sold in a fixed quantity (e.g. 5 kg of rice)."""
    quantity: PositiveInt
    unit: NonEmptyStr


class ByWeightInput(ProductInput):
    """Schema for bulk products sold by weight."""
    kg: PositiveFloat


class ByUnitInput(ProductInput):
    """Schema for products sold per unit."""
    units: PositiveInt


class StorePriceInput(BaseModel):
    store: NonEmptyStr
    price: PositiveFloat


class PurchaseInput(BaseModel):
    quantity: PositiveInt


class PurchaseUpdateInput(BaseModel):
    amount: PositiveInt


class FinalizeInput(BaseModel):
    """Schema for closing a shopping list."""
    location: NonEmptyStr
    final_value: NonNegativeFloat


class ListInput(BaseModel):
    descriptor: KeyStr


def validate(schema: Type[SchemaT], **data) -> SchemaT:
    """Build ``schema`` from ``data``; the first failing field raises InvalidFieldError."""
    try:
        return schema(**data)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error['loc'][0]) if error['loc'] else schema.__name__
        raise InvalidFieldError(FIELD_LABELS.get(field, field), _reason(error)) from e


def check(label: str, annotation: Any, value: Any):
    """Validate a single value (text is parsed for numeric annotations)."""
    try:
        return TypeAdapter(annotation).validate_python(value)
    except ValidationError as e:
        raise InvalidFieldError(label, _reason(e.errors()[0])) from e
