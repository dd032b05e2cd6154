"""UpdatePoint DTOs for the Service Layer."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreateUpdatePointDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    update_id: UUID


class UpdateUpdatePointDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
