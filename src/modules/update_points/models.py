"""UpdatePoint model: one bullet of an update.

Effective owner: the owner of the update's product.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class UpdatePoint(BaseModel):
    name = models.CharField(max_length=255)
    description = models.CharField(max_length=1000)
    update = models.ForeignKey(
        "updates.Update",
        on_delete=models.CASCADE,
        related_name="points",
    )

    class Meta:
        db_table = "update_points"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.name
