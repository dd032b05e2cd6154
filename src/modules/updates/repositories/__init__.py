"""Update repositories package."""

from modules.updates.repositories.django_repository import UpdateDjangoRepository
from modules.updates.repositories.interfaces import IUpdateRepository

__all__ = ["IUpdateRepository", "UpdateDjangoRepository"]
