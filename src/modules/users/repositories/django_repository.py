"""Django ORM implementation of the User repository."""

from __future__ import annotations

from typing import Any, Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.users.models import User
from modules.users.repositories.interfaces import IUserRepository


class UserDjangoRepository(DjangoRepository[User], IUserRepository):
    """Concrete User repository backed by Django ORM."""

    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        return User.objects.filter(username=username).first()

    def get_self_for_update(self, id: Any, identity_id: Any) -> Optional[User]:
        return self._first(
            User.objects.select_for_update().filter(id=identity_id), id=id
        )
