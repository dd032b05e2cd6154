"""UpdatePoint DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.update_points.models import UpdatePoint

_NAME_LENGTH = "Name must be between 2 and 255 characters"
_DESCRIPTION_LENGTH = "Description must be between 2 and 1000 characters"


def name_field(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        min_length=2,
        max_length=255,
        error_messages={"min_length": _NAME_LENGTH, "max_length": _NAME_LENGTH},
        **kwargs,
    )


def description_field(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        min_length=2,
        max_length=1000,
        error_messages={
            "min_length": _DESCRIPTION_LENGTH,
            "max_length": _DESCRIPTION_LENGTH,
        },
        **kwargs,
    )


class UpdatePointSerializer(serializers.ModelSerializer):
    updateId = serializers.UUIDField(source="update_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = UpdatePoint
        fields = ["id", "name", "description", "updateId", "createdAt", "updatedAt"]


class CreateUpdatePointSerializer(serializers.Serializer):
    name = name_field()
    description = description_field()
    updateId = serializers.UUIDField(source="update_id")


class UpdateUpdatePointSerializer(serializers.Serializer):
    name = name_field(required=False)
    description = description_field(required=False)
