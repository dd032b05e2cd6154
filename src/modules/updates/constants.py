"""Update domain constants.

``status`` is a free-form enum: IN_PROGRESS → SHIPPED → DEPRECATED is the
intended direction, but any value may be set at any time.
"""

from django.db import models


class UpdateStatus(models.TextChoices):
    IN_PROGRESS = "IN_PROGRESS", "In progress"
    SHIPPED = "SHIPPED", "Shipped"
    DEPRECATED = "DEPRECATED", "Deprecated"
