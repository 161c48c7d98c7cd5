from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional

import pytest
from rest_framework.test import APIClient

from modules.products.dtos import CreateProductDTO, ProductOutputDTO
from modules.products.exceptions import InvalidProductReference
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory persisting a Product row through the ORM."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Monitor Curvo 42 pulgadas",
            "price": Decimal("300.00"),
        }
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return _make


class InMemoryProductRepository(IProductRepository):
    """Dict-backed store with the same contract as the Django repository."""

    def __init__(self) -> None:
        self.rows: Dict[int, ProductOutputDTO] = {}
        self._next_id = 1

    def _key(self, id) -> int:
        try:
            return int(id)
        except (TypeError, ValueError) as exc:
            raise InvalidProductReference(id) from exc

    def get_by_id(self, id) -> Optional[ProductOutputDTO]:
        return self.rows.get(self._key(id))

    def list(self) -> List[ProductOutputDTO]:
        return [self.rows[key] for key in sorted(self.rows, reverse=True)]

    def create(self, dto: CreateProductDTO) -> ProductOutputDTO:
        product = ProductOutputDTO(
            id=self._next_id, name=dto.name, price=dto.price, available=True
        )
        self.rows[product.id] = product
        self._next_id += 1
        return product

    def update(self, entity: ProductOutputDTO) -> Optional[ProductOutputDTO]:
        if entity.id not in self.rows:
            return None
        self.rows[entity.id] = entity
        return entity

    def set_availability(self, id, available: bool) -> Optional[ProductOutputDTO]:
        current = self.get_by_id(id)
        if current is None:
            return None
        product = current.model_copy(update={"available": available})
        self.rows[product.id] = product
        return product

    def delete(self, id) -> bool:
        return self.rows.pop(self._key(id), None) is not None


@pytest.fixture()
def memory_repo():
    return InMemoryProductRepository()
