"""UpdatePoint service layer (Use Cases).

Same contract as ``UpdateService`` one level deeper: the chain is
point → update → product → user, and creating a point requires the
caller to own the parent update.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

import structlog
from django.db import models, transaction

from modules.core.ownership import Resource, authorize, require_owned
from modules.update_points.models import UpdatePoint

if TYPE_CHECKING:
    from modules.core.authentication import Identity
    from modules.update_points.dtos import CreateUpdatePointDTO, UpdateUpdatePointDTO
    from modules.update_points.repositories.interfaces import IUpdatePointRepository
    from modules.updates.repositories.interfaces import IUpdateRepository

logger = structlog.get_logger(__name__)


class UpdatePointService:
    def __init__(
        self,
        repository: IUpdatePointRepository,
        update_repository: IUpdateRepository,
    ) -> None:
        self._repo = repository
        self._updates = update_repository

    @transaction.atomic
    def create_point(self, identity: Identity, dto: CreateUpdatePointDTO) -> UpdatePoint:
        update = require_owned(
            Resource.UPDATE,
            self._updates.get_owned_for_update(dto.update_id, identity.id),
            exists=lambda: self._updates.exists(dto.update_id),
        )
        point = UpdatePoint(
            name=dto.name,
            description=dto.description,
            update=update,
        )
        point = self._repo.save(point)
        logger.info(
            "update_point.created", point_id=str(point.id), update_id=str(update.id)
        )
        return point

    @transaction.atomic
    def update_point(
        self, identity: Identity, id: Any, dto: UpdateUpdatePointDTO
    ) -> UpdatePoint:
        point = self._owned(identity, id)
        for field, value in dto.changes().items():
            setattr(point, field, value)

        point = self._repo.save(point)
        logger.info("update_point.updated", point_id=str(point.id))
        return point

    @transaction.atomic
    def delete_point(self, identity: Identity, id: Any) -> UUID:
        point = self._owned(identity, id)
        point_id = point.id
        self._repo.delete(point)
        logger.info("update_point.deleted", point_id=str(point_id))
        return point_id

    def list_points(
        self, identity: Identity, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet:
        return self._repo.list_for_owner(identity.id, filters)

    def get_point(self, identity: Identity, id: Any) -> UpdatePoint:
        return authorize(Resource.UPDATE_POINT, self._repo.resolve_owner(id), identity)

    def _owned(self, identity: Identity, id: Any) -> UpdatePoint:
        return require_owned(
            Resource.UPDATE_POINT,
            self._repo.get_owned_for_update(id, identity.id),
            exists=lambda: self._repo.exists(id),
        )
