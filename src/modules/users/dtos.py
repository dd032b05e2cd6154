"""User and session DTOs for the Service Layer.

Passwords travel as ``SecretStr`` so a DTO that ends up in a log line
or a traceback never shows the plaintext.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, SecretStr


class CreateUserDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr


class UpdateUserDTO(BaseModel):
    """Only supplied fields are updated."""

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    password: SecretStr | None = None


class SignInDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr
