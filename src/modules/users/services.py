"""User and session services (Use Cases).

Signup and signin are the only places where passwords are hashed or
verified and where bearer tokens are minted.  A user can only modify
or delete their own account; anything else is denied according to the
``user`` ownership policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Tuple
from uuid import UUID

import structlog
from django.db import models, transaction

from modules.core.errors import Unauthorized
from modules.core.ownership import Resource, not_found, require_owned
from modules.core.security import create_token, hash_password, verify_password
from modules.users.models import User

if TYPE_CHECKING:
    from modules.core.authentication import Identity
    from modules.users.dtos import CreateUserDTO, SignInDTO, UpdateUserDTO
    from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class UserService:
    """Application service for User use-cases.

    Receives an ``IUserRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IUserRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_user(self, dto: CreateUserDTO) -> Tuple[User, str]:
        """Sign a new user up and return it with a fresh bearer token.

        A taken username surfaces as the store's unique-constraint error,
        normalized to ``400 "username already exists"``.
        """
        user = User(
            username=dto.username,
            password=hash_password(dto.password.get_secret_value()),
        )
        user = self._repo.save(user)
        logger.info("user.signed_up", user_id=str(user.id))
        return user, create_token(user)

    @transaction.atomic
    def update_user(self, identity: Identity, id: Any, dto: UpdateUserDTO) -> User:
        user = require_owned(
            Resource.USER,
            self._repo.get_self_for_update(id, identity.id),
            exists=lambda: self._repo.exists(id),
        )
        if dto.username is not None:
            user.username = dto.username
        if dto.password is not None:
            user.password = hash_password(dto.password.get_secret_value())

        user = self._repo.save(user)
        logger.info("user.updated", user_id=str(user.id))
        return user

    @transaction.atomic
    def delete_user(self, identity: Identity, id: Any) -> UUID:
        user = require_owned(
            Resource.USER,
            self._repo.get_self_for_update(id, identity.id),
            exists=lambda: self._repo.exists(id),
        )
        user_id = user.id
        self._repo.delete(user)
        logger.info("user.deleted", user_id=str(user_id))
        return user_id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_users(self) -> models.QuerySet:
        return self._repo.list()

    def get_user(self, id: Any) -> User:
        user = self._repo.get_by_id(id)
        if not user:
            raise not_found(Resource.USER)
        return user


class SessionService:
    """Signin: exchange username + password for a bearer token."""

    def __init__(self, repository: IUserRepository) -> None:
        self._repo = repository

    def sign_in(self, dto: SignInDTO) -> Tuple[User, str]:
        """Raises ``Unauthorized("Invalid credentials")`` for an unknown
        username and for a wrong password alike.
        """
        user = self._repo.get_by_username(dto.username)
        encoded = user.password if user else None
        if not verify_password(dto.password.get_secret_value(), encoded):
            logger.warning("session.signin_failed", username=dto.username)
            raise Unauthorized(INVALID_CREDENTIALS)

        logger.info("session.signed_in", user_id=str(user.id))
        return user, create_token(user)
