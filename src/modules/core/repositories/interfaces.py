"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that domain-specific
repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` is the entity handed back to callers
    (e.g. ``ProductOutputDTO``).
    """

    @abstractmethod
    def get_by_id(self, id: str | int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""

    @abstractmethod
    def update(self, entity: T) -> Optional[T]:
        """Persist a modified entity; ``None`` when it no longer exists."""

    @abstractmethod
    def delete(self, id: str | int) -> bool:
        """Permanently remove an entity by ID."""
