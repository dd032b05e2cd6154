"""Shared plumbing for the resource ViewSets.

Success responses are wrapped as ``{"data": ...}``; failures never pass
through here, they propagate to ``api_exception_handler``, which reads
``error_messages`` for the per-action fallback message.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict
from uuid import UUID

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response
from rest_framework.routers import SimpleRouter
from rest_framework.viewsets import GenericViewSet

from modules.core.authentication import Identity


def api_router() -> SimpleRouter:
    """Router producing ``/resource`` and ``/resource/<pk>`` (no trailing slash)."""
    return SimpleRouter(trailing_slash=False)


class ResourceViewSet(GenericViewSet):
    """Base ViewSet: envelope helpers and explicit identity access.

    Subclasses talk to their service only; they never touch the ORM.
    """

    error_messages: ClassVar[Dict[str, str]] = {}
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering = ["-created_at"]

    @property
    def identity(self) -> Identity:
        """The authenticated caller, passed explicitly to every service call."""
        return self.request.user

    def is_schema_request(self) -> bool:
        return getattr(self, "swagger_fake_view", False)

    @staticmethod
    def envelope(data: Any, status_code: int = status.HTTP_200_OK) -> Response:
        return Response({"data": data}, status=status_code)

    @classmethod
    def deleted(cls, id: UUID, message: str) -> Response:
        return cls.envelope({"id": str(id), "message": message})

    def validated(
        self, serializer_class, data: Any, partial: bool = False
    ) -> Dict[str, Any]:
        """Run input validation before any service (and store) call."""
        serializer = serializer_class(data=data, partial=partial)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data
