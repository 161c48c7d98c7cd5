"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  These are
the contracts between the API layer (input gate + views) and the
Service layer, and the entity the repository hands back.  DTOs are
immutable (``frozen=True``).

- ``ProductIdDTO``: input of the routes that only carry ``/:id``.
- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for the full (PUT) update.
- ``ProductOutputDTO``: a stored product, timestamps excluded.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product

PRICE_QUANTUM = Decimal("0.01")
# Product.name is VARCHAR(100)
NAME_MAX_LENGTH = 100
# Product.price is DECIMAL(10, 2)
PRICE_MAX = Decimal("99999999.99")

NAME_REQUIRED_MESSAGE = "Favor de proporcionar el nombre del producto"
NAME_TOO_LONG_MESSAGE = f"El nombre no puede exceder {NAME_MAX_LENGTH} caracteres"
PRICE_POSITIVE_MESSAGE = "Se esperaba un valor numérico mayor a 0"
PRICE_TOO_LARGE_MESSAGE = "El precio excede el máximo permitido"


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductIdDTO(BaseModel):
    """Input of PATCH/DELETE ``/:id``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int


class ProductFieldsDTO(BaseModel):
    """``name`` + ``price`` shared by creation and full update.

    Validates:
    - ``name`` is non-empty and at most 100 characters (non-string values
      are stringified).
    - ``price`` is a finite Decimal greater than zero, rounded to cents.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError(NAME_REQUIRED_MESSAGE)
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(NAME_TOO_LONG_MESSAGE)
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError(PRICE_POSITIVE_MESSAGE)
        if v > PRICE_MAX:
            raise ValueError(PRICE_TOO_LARGE_MESSAGE)
        v = v.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
        if v <= 0:
            raise ValueError(PRICE_POSITIVE_MESSAGE)
        return v


class CreateProductDTO(ProductFieldsDTO):
    """Immutable DTO for product creation requests.

    ``available`` is not accepted here: a new product is always available.
    """


class UpdateProductDTO(ProductFieldsDTO):
    """Immutable DTO for full product updates: every field is required."""

    id: int
    available: bool


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable product as returned by the repository."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal
    available: bool

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            available=product.available,
        )
