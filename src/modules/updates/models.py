"""Update model: a change announced for a product.

The effective owner of an update is the owner of its product.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel
from modules.updates.constants import UpdateStatus

logger = structlog.get_logger(__name__)


class Update(BaseModel):
    title = models.CharField(max_length=255)
    body = models.TextField()
    status = models.CharField(
        max_length=20,
        choices=UpdateStatus.choices,
        default=UpdateStatus.IN_PROGRESS,
    )
    version = models.CharField(max_length=64)
    asset = models.CharField(max_length=255, null=True, blank=True, default=None)  # noqa: DJ01
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.CASCADE,
        related_name="updates",
    )

    class Meta:
        db_table = "updates"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["product", "status"], name="updates_product_status_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "update_created",
                update_id=str(self.id),
                product_id=str(self.product_id),
                status=self.status,
            )

    def __str__(self) -> str:
        return f"{self.title} ({self.version})"
