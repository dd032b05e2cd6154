"""UpdatePoint repositories package."""

from modules.update_points.repositories.django_repository import (
    UpdatePointDjangoRepository,
)
from modules.update_points.repositories.interfaces import IUpdatePointRepository

__all__ = ["IUpdatePointRepository", "UpdatePointDjangoRepository"]
