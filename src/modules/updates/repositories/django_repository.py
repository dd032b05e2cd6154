"""Django ORM implementation of the Update repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.db import models

from modules.core.ownership import OwnedRecord
from modules.core.repositories.django_repository import DjangoRepository
from modules.updates.models import Update
from modules.updates.repositories.interfaces import IUpdateRepository


class UpdateDjangoRepository(DjangoRepository[Update], IUpdateRepository):
    """Concrete Update repository backed by Django ORM."""

    model = Update

    def list_for_owner(
        self, owner_id: Any, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet:
        return self.list(filters).filter(product__owner_id=owner_id)

    def resolve_owner(self, id: Any) -> Optional[OwnedRecord[Update]]:
        update = self._first(Update.objects.select_related("product"), id=id)
        if update is None:
            return None
        return OwnedRecord(update, update.product.owner_id)

    def get_owned_for_update(self, id: Any, owner_id: Any) -> Optional[Update]:
        return self._first(
            Update.objects.select_for_update(), id=id, product__owner_id=owner_id
        )
