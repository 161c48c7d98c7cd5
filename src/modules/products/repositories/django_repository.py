"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API and hands
back ``ProductOutputDTO`` instances, so callers never touch model rows.
A missing product is reported as ``None`` / ``False``; an id the
database cannot interpret raises ``InvalidProductReference``.
"""

from __future__ import annotations

from typing import List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.dtos import CreateProductDTO, ProductOutputDTO
from modules.products.exceptions import InvalidProductReference
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _get_row(self, id: str | int) -> Optional[Product]:
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError) as exc:
            raise InvalidProductReference(id) from exc

    def get_by_id(self, id: str | int) -> Optional[ProductOutputDTO]:
        """Retrieve a product by primary key, ``None`` when absent."""
        product = self._get_row(id)
        if product is None:
            return None
        return ProductOutputDTO.from_entity(product)

    def list(self) -> List[ProductOutputDTO]:
        """All products, newest id first."""
        queryset = Product.objects.only("id", "name", "price", "available").order_by(
            "-id"
        )
        return [ProductOutputDTO.from_entity(product) for product in queryset]

    @transaction.atomic
    def create(self, dto: CreateProductDTO) -> ProductOutputDTO:
        product = Product(name=dto.name, price=dto.price, available=True)
        product.save()
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def update(self, entity: ProductOutputDTO) -> Optional[ProductOutputDTO]:
        """Overwrite name, price and availability of an existing product."""
        product = self._get_row(entity.id)
        if product is None:
            return None
        product.name = entity.name
        product.price = entity.price
        product.available = entity.available
        product.save(update_fields=["name", "price", "available"])
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def set_availability(
        self, id: str | int, available: bool
    ) -> Optional[ProductOutputDTO]:
        product = self._get_row(id)
        if product is None:
            return None
        product.available = available
        product.save(update_fields=["available"])
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def delete(self, id: str | int) -> bool:
        """Permanently delete a product.

        Returns ``True`` if the product was found and removed,
        ``False`` if no product exists with the given ID.
        """
        product = self._get_row(id)
        if product is None:
            return False
        product.delete()
        return True
