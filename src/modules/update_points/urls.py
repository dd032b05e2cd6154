"""UpdatePoint URL configuration."""

from __future__ import annotations

from modules.core.api import api_router
from modules.update_points.views import UpdatePointViewSet

router = api_router()
router.register("updatePoints", UpdatePointViewSet, basename="update-point")

urlpatterns = router.urls
