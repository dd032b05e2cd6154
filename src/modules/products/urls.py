"""Product URL configuration."""

from __future__ import annotations

from modules.core.api import api_router
from modules.products.views import ProductViewSet

router = api_router()
router.register("product", ProductViewSet, basename="product")

urlpatterns = router.urls
