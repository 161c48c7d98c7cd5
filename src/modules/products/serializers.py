"""Product DRF serializer for API output.

Reads a ``ProductOutputDTO`` (or any object exposing the same
attributes).  Input is validated by the route chains and the pydantic
DTOs, not here.  ``created_at`` / ``updated_at`` are never exposed.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read-only representation of the Product resource."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True
    )
    available = serializers.BooleanField(read_only=True)
