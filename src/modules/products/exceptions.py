"""Product domain exceptions.

Raised by the Service Layer (and by the repository at the store
boundary).  The API layer (Views) catches these and translates them
into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No product exists with the requested id."""

    def __init__(self, id: str | int) -> None:
        super().__init__(f"Product {id} not found.")
        self.id = id


class InvalidProductReference(Exception):
    """The store rejected the id itself (e.g. it is not an integer)."""

    def __init__(self, id: object) -> None:
        super().__init__(f"Invalid product id: {id!r}.")
        self.id = id
