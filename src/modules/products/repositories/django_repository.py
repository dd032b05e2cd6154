"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from typing import Any, Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(DjangoRepository[Product], IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    model = Product

    def get_owned_for_update(self, id: Any, owner_id: Any) -> Optional[Product]:
        return self._first(
            Product.objects.select_for_update(), id=id, owner_id=owner_id
        )
