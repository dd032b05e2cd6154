"""User and session DRF serializers.

Input serializers enforce the username/password rules; the output
serializer exposes camelCase fields and never the password hash.
"""

from __future__ import annotations

import re

from rest_framework import serializers

from modules.users.models import User

_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")


def validate_password_strength(value: str) -> str:
    if not _UPPERCASE.search(value):
        raise serializers.ValidationError(
            "Password must contain at least one uppercase letter"
        )
    if not _DIGIT.search(value):
        raise serializers.ValidationError("Password must contain at least one number")
    return value


def password_field(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        min_length=6,
        max_length=255,
        write_only=True,
        validators=[validate_password_strength],
        error_messages={
            "min_length": "Password must be between 6 and 255 characters",
            "max_length": "Password must be between 6 and 255 characters",
        },
        **kwargs,
    )


def username_field(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        min_length=2,
        max_length=255,
        error_messages={
            "min_length": "Username must be between 2 and 255 characters",
            "max_length": "Username must be between 2 and 255 characters",
        },
        **kwargs,
    )


class UserSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "createdAt", "updatedAt"]
        read_only_fields = ["id", "username"]


class SignUpSerializer(serializers.Serializer):
    username = username_field()
    password = password_field()


class UserUpdateSerializer(serializers.Serializer):
    username = username_field(required=False)
    password = password_field()


class SignInSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
