"""Django ORM base repository.

Concrete repositories subclass ``DjangoRepository`` and set ``model``.
Error handling follows the Null Object pattern: look-ups return
``None`` for missing rows *and* for malformed ids (e.g. ``"abc"`` against
a UUID primary key) instead of raising; the Service Layer decides how
to translate a missing entity into an API error.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, Type, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import models

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


class DjangoRepository(Generic[M]):
    model: Type[M]

    def _first(self, queryset: models.QuerySet, **lookups: Any) -> Optional[M]:
        try:
            return queryset.filter(**lookups).first()
        except (ValueError, ValidationError):
            return None

    def get_by_id(self, id: Any) -> Optional[M]:
        return self._first(self.model.objects.all(), id=id)

    def exists(self, id: Any) -> bool:
        try:
            return self.model.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet:
        queryset = self.model.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def save(self, entity: M) -> M:
        entity.save()
        return entity

    def delete(self, entity: M) -> None:
        record_id = entity.pk
        entity.delete()
        logger.info(
            "record.deleted",
            model=self.model._meta.label,
            record_id=str(record_id),
        )
