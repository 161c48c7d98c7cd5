"""Product service layer (Use Cases).

Orchestrates the product operations, delegating persistence to the
injected ``IProductRepository``.  Updates are an explicit
read-modify-write: fetch the entity, build the new value, hand it to
the repository.

Raises ``ProductNotFound`` for a well-formed id with no row behind it;
``InvalidProductReference`` from the repository propagates untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import (
        CreateProductDTO,
        ProductOutputDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def _require(self, id: str | int) -> ProductOutputDTO:
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=str(id))
            raise ProductNotFound(id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductOutputDTO]:
        """Return every product, newest id first."""
        return self._repo.list()

    def get_product(self, id: str | int) -> ProductOutputDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidProductReference: if the store cannot interpret ``id``.
        """
        product = self._require(id)
        logger.info("product.retrieved", product_id=product.id)
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Create a new, available product. Duplicates are allowed."""
        product = self._repo.create(dto)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: str | int, dto: UpdateProductDTO) -> ProductOutputDTO:
        """Overwrite name, price and availability.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        current = self._require(id)
        changed = current.model_copy(
            update={"name": dto.name, "price": dto.price, "available": dto.available}
        )
        product = self._repo.update(changed)
        if product is None:
            raise ProductNotFound(id)
        logger.info("product.updated", product_id=product.id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: str | int) -> ProductOutputDTO:
        """Flip ``available`` to its negation.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        current = self._require(id)
        product = self._repo.set_availability(current.id, not current.available)
        if product is None:
            raise ProductNotFound(id)
        logger.info(
            "product.availability_changed",
            product_id=product.id,
            available=product.available,
        )
        return product

    @transaction.atomic
    def delete_product(self, id: str | int) -> None:
        """Permanently delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        current = self._require(id)
        if not self._repo.delete(current.id):
            raise ProductNotFound(id)
        logger.info("product.deleted", product_id=current.id)
