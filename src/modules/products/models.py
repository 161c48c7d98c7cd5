"""Product model.

Business rules implemented:
- Price must be greater than zero (DB check constraint; the input DTOs
  reject it before it gets here).
- A product is available when created unless told otherwise.
- Deletion is physical: there is no soft delete.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """A catalogue product.

    ``id`` is the auto-increment primary key assigned by the database and
    is never reused.
    """

    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    available = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
