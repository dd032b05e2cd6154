"""UpdatePoint API views.  Every route requires a bearer token."""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.api import ResourceViewSet
from modules.update_points.dtos import CreateUpdatePointDTO, UpdateUpdatePointDTO
from modules.update_points.filters import UpdatePointFilter
from modules.update_points.models import UpdatePoint
from modules.update_points.repositories.django_repository import (
    UpdatePointDjangoRepository,
)
from modules.update_points.serializers import (
    CreateUpdatePointSerializer,
    UpdatePointSerializer,
    UpdateUpdatePointSerializer,
)
from modules.update_points.services import UpdatePointService
from modules.updates.repositories.django_repository import UpdateDjangoRepository


class UpdatePointViewSet(ResourceViewSet):
    serializer_class = UpdatePointSerializer
    filterset_class = UpdatePointFilter
    ordering_fields = ["created_at", "name"]
    ordering = ["created_at"]
    error_messages = {
        "list": "Error fetching update points",
        "retrieve": "Error fetching update point",
        "create": "Error creating update point",
        "update": "Error updating update point",
        "partial_update": "Error updating update point",
        "destroy": "Error deleting update point",
    }

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UpdatePointService(
            repository=UpdatePointDjangoRepository(),
            update_repository=UpdateDjangoRepository(),
        )

    def get_queryset(self):
        if self.is_schema_request():
            return UpdatePoint.objects.none()
        return self._service.list_points(self.identity)

    def list(self, request: Request) -> Response:
        """GET /api/updatePoints"""
        points = self.filter_queryset(self.get_queryset())
        return self.envelope(UpdatePointSerializer(points, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/updatePoints/{pk}"""
        point = self._service.get_point(self.identity, pk)
        return self.envelope(UpdatePointSerializer(point).data)

    def create(self, request: Request) -> Response:
        """POST /api/updatePoints"""
        data = self.validated(CreateUpdatePointSerializer, request.data)
        point = self._service.create_point(self.identity, CreateUpdatePointDTO(**data))
        return self.envelope(
            UpdatePointSerializer(point).data, status_code=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/updatePoints/{pk}"""
        data = self.validated(UpdateUpdatePointSerializer, request.data)
        point = self._service.update_point(
            self.identity, pk, UpdateUpdatePointDTO(**data)
        )
        return self.envelope(UpdatePointSerializer(point).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/updatePoints/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/updatePoints/{pk}"""
        point_id = self._service.delete_point(self.identity, pk)
        return self.deleted(point_id, "Update point deleted successfully")
