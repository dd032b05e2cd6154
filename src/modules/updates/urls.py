"""Update URL configuration."""

from __future__ import annotations

from modules.core.api import api_router
from modules.updates.views import UpdateViewSet

router = api_router()
router.register("updates", UpdateViewSet, basename="update")

urlpatterns = router.urls
