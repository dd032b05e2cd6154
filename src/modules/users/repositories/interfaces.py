"""User repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.users.models import User


class IUserRepository(IRepository["User"]):
    """Repository contract for the User aggregate."""

    @abstractmethod
    def get_by_username(self, username: str) -> Optional["User"]:
        """Retrieve a user by its unique username."""

    @abstractmethod
    def get_self_for_update(self, id: Any, identity_id: Any) -> Optional["User"]:
        """Lock and return user ``id`` only when it *is* ``identity_id``.

        A single compound look-up: ``None`` covers both a missing user
        and someone else's account.
        """
