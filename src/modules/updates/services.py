"""Update service layer (Use Cases).

Every operation is scoped to the ownership chain update → product →
user:

- list only returns updates of the caller's products;
- get resolves the chain and compares the root owner with the caller;
- create locks the parent product and requires the caller to own it;
- update/delete fetch the row with a compound ``id + owner`` filter under
  a row lock, inside the transaction that writes it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

import structlog
from django.db import models, transaction

from modules.core.ownership import Resource, authorize, require_owned
from modules.updates.models import Update

if TYPE_CHECKING:
    from modules.core.authentication import Identity
    from modules.products.repositories.interfaces import IProductRepository
    from modules.updates.dtos import CreateUpdateDTO, UpdateUpdateDTO
    from modules.updates.repositories.interfaces import IUpdateRepository

logger = structlog.get_logger(__name__)


class UpdateService:
    """Application service for Update use-cases."""

    def __init__(
        self,
        repository: IUpdateRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._products = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_update(self, identity: Identity, dto: CreateUpdateDTO) -> Update:
        """Create an update for a product the caller owns.

        Raises:
            NotFound: the product does not exist (or is hidden by policy).
            Forbidden: the product belongs to someone else and the
                product policy reveals it.
        """
        product = require_owned(
            Resource.PRODUCT,
            self._products.get_owned_for_update(dto.product_id, identity.id),
            exists=lambda: self._products.exists(dto.product_id),
        )
        update = Update(
            title=dto.title,
            body=dto.body,
            status=dto.status,
            version=dto.version,
            asset=dto.asset,
            product=product,
        )
        update = self._repo.save(update)
        logger.info(
            "update.created", update_id=str(update.id), product_id=str(product.id)
        )
        return update

    @transaction.atomic
    def update_update(
        self, identity: Identity, id: Any, dto: UpdateUpdateDTO
    ) -> Update:
        update = self._owned(identity, id)
        changes = dto.changes()
        for field, value in changes.items():
            setattr(update, field, value)

        update = self._repo.save(update)
        logger.info("update.updated", update_id=str(update.id), fields=sorted(changes))
        return update

    @transaction.atomic
    def delete_update(self, identity: Identity, id: Any) -> UUID:
        update = self._owned(identity, id)
        update_id = update.id
        self._repo.delete(update)
        logger.info("update.deleted", update_id=str(update_id))
        return update_id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_updates(
        self, identity: Identity, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet:
        return self._repo.list_for_owner(identity.id, filters)

    def get_update(self, identity: Identity, id: Any) -> Update:
        return authorize(Resource.UPDATE, self._repo.resolve_owner(id), identity)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _owned(self, identity: Identity, id: Any) -> Update:
        return require_owned(
            Resource.UPDATE,
            self._repo.get_owned_for_update(id, identity.id),
            exists=lambda: self._repo.exists(id),
        )
