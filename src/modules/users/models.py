"""User model: owner of products.

The password column only ever holds a hash produced by
``modules.core.security.hash_password``.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class User(BaseModel):
    username = models.CharField(max_length=255, unique=True)
    password = models.CharField(max_length=255)

    class Meta:
        db_table = "users"
        ordering = ["created_at"]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info("user_created", user_id=str(self.id), username=self.username)

    def __str__(self) -> str:
        return self.username
