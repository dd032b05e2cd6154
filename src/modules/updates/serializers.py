"""Update DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.updates.constants import UpdateStatus
from modules.updates.models import Update

_INVALID_STATUS = {"invalid_choice": "Invalid status value"}


class UpdateSerializer(serializers.ModelSerializer):
    productId = serializers.UUIDField(source="product_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Update
        fields = [
            "id",
            "title",
            "body",
            "status",
            "version",
            "asset",
            "productId",
            "createdAt",
            "updatedAt",
        ]


class CreateUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    body = serializers.CharField()
    status = serializers.ChoiceField(
        choices=UpdateStatus.choices, error_messages=_INVALID_STATUS
    )
    version = serializers.CharField(max_length=64)
    asset = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    productId = serializers.UUIDField(source="product_id")


class UpdateUpdateSerializer(serializers.Serializer):
    """Every field optional; the parent product cannot be changed."""

    title = serializers.CharField(max_length=255, required=False)
    body = serializers.CharField(required=False)
    status = serializers.ChoiceField(
        choices=UpdateStatus.choices, required=False, error_messages=_INVALID_STATUS
    )
    version = serializers.CharField(max_length=64, required=False)
    asset = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
