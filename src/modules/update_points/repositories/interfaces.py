"""UpdatePoint repository interface.

Resolves the longest ownership chain: point → update → product → user.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.ownership import OwnedRecord
from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.update_points.models import UpdatePoint


class IUpdatePointRepository(IRepository["UpdatePoint"]):
    @abstractmethod
    def list_for_owner(
        self, owner_id: Any, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet:
        """Points whose update's product belongs to ``owner_id``."""

    @abstractmethod
    def resolve_owner(self, id: Any) -> Optional[OwnedRecord["UpdatePoint"]]:
        """Fetch a point with the id of the user at the root of its chain."""

    @abstractmethod
    def get_owned_for_update(self, id: Any, owner_id: Any) -> Optional["UpdatePoint"]:
        """Lock and return point ``id`` only when ``owner_id`` owns the chain."""
