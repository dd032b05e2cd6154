"""Update DTOs for the Service Layer.

``UpdateUpdateDTO`` is built from validated input holding only the keys
the client sent, so ``model_dump(exclude_unset=True)`` is exactly the
set of fields to change (``asset`` may be explicitly cleared).
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from modules.updates.constants import UpdateStatus


class CreateUpdateDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    status: UpdateStatus = UpdateStatus.IN_PROGRESS
    version: str
    asset: str | None = None
    product_id: UUID


class UpdateUpdateDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    body: str | None = None
    status: UpdateStatus | None = None
    version: str | None = None
    asset: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
