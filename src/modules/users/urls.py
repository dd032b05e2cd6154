"""User and session URL configuration."""

from __future__ import annotations

from modules.core.api import api_router
from modules.users.views import SessionViewSet, UserViewSet

router = api_router()
router.register("users", UserViewSet, basename="user")
router.register("session", SessionViewSet, basename="session")

urlpatterns = router.urls
