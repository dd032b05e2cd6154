"""Product repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_owned_for_update(self, id: Any, owner_id: Any) -> Optional["Product"]:
        """Lock and return product ``id`` only when ``owner_id`` owns it.

        The id and the owner are matched in one query (SELECT ... FOR
        UPDATE), so nothing can change hands between check and write.
        """
