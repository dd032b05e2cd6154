"""Django ORM implementation of the UpdatePoint repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.db import models

from modules.core.ownership import OwnedRecord
from modules.core.repositories.django_repository import DjangoRepository
from modules.update_points.models import UpdatePoint
from modules.update_points.repositories.interfaces import IUpdatePointRepository


class UpdatePointDjangoRepository(DjangoRepository[UpdatePoint], IUpdatePointRepository):
    model = UpdatePoint

    def list_for_owner(
        self, owner_id: Any, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet:
        return self.list(filters).filter(update__product__owner_id=owner_id)

    def resolve_owner(self, id: Any) -> Optional[OwnedRecord[UpdatePoint]]:
        point = self._first(
            UpdatePoint.objects.select_related("update__product"), id=id
        )
        if point is None:
            return None
        return OwnedRecord(point, point.update.product.owner_id)

    def get_owned_for_update(self, id: Any, owner_id: Any) -> Optional[UpdatePoint]:
        return self._first(
            UpdatePoint.objects.select_for_update(),
            id=id,
            update__product__owner_id=owner_id,
        )
