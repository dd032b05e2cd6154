"""User and session API views.

Signup (``POST /users``) and signin (``POST /session/signin``) are
public; every other user route requires a bearer token.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.api import ResourceViewSet
from modules.users.dtos import CreateUserDTO, SignInDTO, UpdateUserDTO
from modules.users.models import User
from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.serializers import (
    SignInSerializer,
    SignUpSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from modules.users.services import SessionService, UserService


def _session_payload(user: User, token: str) -> dict:
    return {"user": UserSerializer(user).data, "token": token}


class UserViewSet(ResourceViewSet):
    """CRUD over users.  ``list`` is unscoped but never exposes hashes."""

    serializer_class = UserSerializer
    ordering_fields = ["username", "created_at"]
    ordering = ["created_at"]
    error_messages = {
        "list": "Error fetching users",
        "retrieve": "Error fetching user",
        "create": "Error creating user",
        "update": "Error updating user",
        "partial_update": "Error updating user",
        "destroy": "Error deleting user",
    }

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UserService(repository=UserDjangoRepository())

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_queryset(self):
        if self.is_schema_request():
            return User.objects.none()
        return self._service.list_users()

    def list(self, request: Request) -> Response:
        """GET /api/users"""
        users = self.filter_queryset(self.get_queryset())
        return self.envelope(UserSerializer(users, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/users/{pk}"""
        user = self._service.get_user(pk)
        return self.envelope(UserSerializer(user).data)

    def create(self, request: Request) -> Response:
        """POST /api/users (signup)"""
        data = self.validated(SignUpSerializer, request.data)
        user, token = self._service.create_user(CreateUserDTO(**data))
        return Response(_session_payload(user, token), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/users/{pk}"""
        data = self.validated(UserUpdateSerializer, request.data)
        user = self._service.update_user(self.identity, pk, UpdateUserDTO(**data))
        return self.envelope(UserSerializer(user).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/users/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/users/{pk}"""
        user_id = self._service.delete_user(self.identity, pk)
        return self.deleted(user_id, "User deleted successfully")


class SessionViewSet(ResourceViewSet):
    """POST /api/session/signin"""

    authentication_classes: list = []
    permission_classes = [AllowAny]
    throttle_scope = "signin"
    error_messages = {"signin": "Internal server error"}

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = SessionService(repository=UserDjangoRepository())

    @action(detail=False, methods=["post"], url_path="signin")
    def signin(self, request: Request) -> Response:
        data = self.validated(SignInSerializer, request.data)
        user, token = self._service.sign_in(SignInDTO(**data))
        return Response(_session_payload(user, token))
