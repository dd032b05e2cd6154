"""Product model: root of every ownership chain.

Business rules implemented:
- Price is a positive integer (check constraint + validator).
- The owner is always the authenticated creator, never client input.
- Deleting a product cascades to its updates and their update points.
"""

from __future__ import annotations

import structlog
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)

MIN_PRICE = 1
MAX_PRICE = 999_999


class Product(BaseModel):
    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField(
        validators=[MinValueValidator(MIN_PRICE), MaxValueValidator(MAX_PRICE)],
    )
    owner = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["owner", "created_at"], name="products_owner_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=str(self.id),
                owner_id=str(self.owner_id),
                name=self.name,
            )

    def __str__(self) -> str:
        return self.name
