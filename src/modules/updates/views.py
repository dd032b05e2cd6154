"""Update API views.  Every route requires a bearer token."""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.api import ResourceViewSet
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.updates.dtos import CreateUpdateDTO, UpdateUpdateDTO
from modules.updates.filters import UpdateFilter
from modules.updates.models import Update
from modules.updates.repositories.django_repository import UpdateDjangoRepository
from modules.updates.serializers import (
    CreateUpdateSerializer,
    UpdateSerializer,
    UpdateUpdateSerializer,
)
from modules.updates.services import UpdateService


class UpdateViewSet(ResourceViewSet):
    serializer_class = UpdateSerializer
    filterset_class = UpdateFilter
    ordering_fields = ["created_at", "updated_at", "status", "version"]
    error_messages = {
        "list": "Error fetching updates",
        "retrieve": "Error fetching update",
        "create": "Error creating update",
        "update": "Error updating record",
        "partial_update": "Error updating record",
        "destroy": "Error deleting update",
    }

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UpdateService(
            repository=UpdateDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def get_queryset(self):
        if self.is_schema_request():
            return Update.objects.none()
        return self._service.list_updates(self.identity)

    def list(self, request: Request) -> Response:
        """GET /api/updates"""
        updates = self.filter_queryset(self.get_queryset())
        return self.envelope(UpdateSerializer(updates, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/updates/{pk}"""
        update = self._service.get_update(self.identity, pk)
        return self.envelope(UpdateSerializer(update).data)

    def create(self, request: Request) -> Response:
        """POST /api/updates"""
        data = self.validated(CreateUpdateSerializer, request.data)
        update = self._service.create_update(self.identity, CreateUpdateDTO(**data))
        return self.envelope(
            UpdateSerializer(update).data, status_code=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/updates/{pk}"""
        data = self.validated(UpdateUpdateSerializer, request.data)
        update = self._service.update_update(
            self.identity, pk, UpdateUpdateDTO(**data)
        )
        return self.envelope(UpdateSerializer(update).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/updates/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/updates/{pk}"""
        update_id = self._service.delete_update(self.identity, pk)
        return self.deleted(update_id, "Update deleted successfully")
