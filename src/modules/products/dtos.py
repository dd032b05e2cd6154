"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


def _check_price(v: int | None) -> int | None:
    if v is not None and v <= 0:
        raise ValueError("Price must be greater than zero.")
    return v


class CreateProductDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: int

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: int) -> int:
        return _check_price(v)


class UpdateProductDTO(BaseModel):
    """All fields optional; only supplied fields are updated."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    price: int | None = None

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: int | None) -> int | None:
        return _check_price(v)
