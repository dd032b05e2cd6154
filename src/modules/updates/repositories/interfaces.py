"""Update repository interface.

Besides the generic contract, an update repository resolves the
ownership chain update → product → user.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.ownership import OwnedRecord
from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.updates.models import Update


class IUpdateRepository(IRepository["Update"]):
    """Repository contract for the Update aggregate."""

    @abstractmethod
    def list_for_owner(
        self, owner_id: Any, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet:
        """Updates whose product belongs to ``owner_id``."""

    @abstractmethod
    def resolve_owner(self, id: Any) -> Optional[OwnedRecord["Update"]]:
        """Fetch an update with the id of the user owning its product."""

    @abstractmethod
    def get_owned_for_update(self, id: Any, owner_id: Any) -> Optional["Update"]:
        """Lock and return update ``id`` only when ``owner_id`` owns its product."""
