"""Product DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import MAX_PRICE, MIN_PRICE, Product

_NAME_LENGTH = "Name must be between 2 and 255 characters"
_PRICE_RANGE = f"Price must be between {MIN_PRICE} and {MAX_PRICE}"


class ProductSerializer(serializers.ModelSerializer):
    ownerId = serializers.UUIDField(source="owner_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = ["id", "name", "price", "ownerId", "createdAt", "updatedAt"]


class ProductInputSerializer(serializers.Serializer):
    """Used for both create and PUT: name and price are always required."""

    name = serializers.CharField(
        min_length=2,
        max_length=255,
        error_messages={"min_length": _NAME_LENGTH, "max_length": _NAME_LENGTH},
    )
    price = serializers.IntegerField(
        min_value=MIN_PRICE,
        max_value=MAX_PRICE,
        error_messages={"min_value": _PRICE_RANGE, "max_value": _PRICE_RANGE},
    )
