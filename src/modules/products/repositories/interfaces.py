"""Product repository interface.

Extends ``IRepository[ProductOutputDTO]`` with creation and the
availability write used by the PATCH route.  Implementations return
``None`` / ``False`` for a missing product and raise
``InvalidProductReference`` when the id itself is unusable.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ProductOutputDTO


class IProductRepository(IRepository["ProductOutputDTO"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def create(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Insert a new, available product and return it with its id."""

    @abstractmethod
    def set_availability(
        self, id: str | int, available: bool
    ) -> Optional[ProductOutputDTO]:
        """Write only the ``available`` flag; ``None`` if the product is gone."""
