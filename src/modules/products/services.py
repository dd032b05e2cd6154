"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- The owner of a new product is the caller's identity.
- Only the owner may update or delete; the ownership check and the write
  happen on one locked row inside one transaction.
- Reads are public.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

import structlog
from django.db import models, transaction

from modules.core.ownership import Resource, not_found, require_owned
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.core.authentication import Identity
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, identity: Identity, dto: CreateProductDTO) -> Product:
        product = Product(name=dto.name, price=dto.price, owner_id=identity.id)
        product = self._repo.save(product)
        logger.info(
            "product.created",
            product_id=str(product.id),
            owner_id=str(identity.id),
        )
        return product

    @transaction.atomic
    def update_product(
        self, identity: Identity, id: Any, dto: UpdateProductDTO
    ) -> Product:
        """Apply the supplied fields to a product the caller owns."""
        product = self._owned(identity, id)

        for field in ("name", "price"):
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(product.id))
        return product

    @transaction.atomic
    def delete_product(self, identity: Identity, id: Any) -> UUID:
        product = self._owned(identity, id)
        product_id = product.id
        self._repo.delete(product)
        logger.info("product.deleted", product_id=str(product_id))
        return product_id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet:
        """Public catalogue: every product, optionally filtered."""
        return self._repo.list(filters)

    def get_product(self, id: Any) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise not_found(Resource.PRODUCT)
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _owned(self, identity: Identity, id: Any) -> Product:
        return require_owned(
            Resource.PRODUCT,
            self._repo.get_owned_for_update(id, identity.id),
            exists=lambda: self._repo.exists(id),
        )
