"""Ownership chain authorization.

Every product, update and update point ultimately belongs to the user
that owns the root product.  Repositories resolve that root owner
(``OwnedRecord``); this module decides what a mismatch looks like to
the caller.  The answer is an explicit per-resource
``AuthorizationPolicy`` read from ``settings.OWNERSHIP_POLICIES``:

* ``HIDE_EXISTENCE``: a foreign record is indistinguishable from a
  missing one (404).
* ``REVEAL_FORBIDDEN``: a foreign record answers 403.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, NamedTuple, TypeVar
from uuid import UUID

import structlog
from django.conf import settings

from modules.core.errors import ApiError, Forbidden, NotFound

if TYPE_CHECKING:
    from modules.core.authentication import Identity

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class AuthorizationPolicy(str, Enum):
    HIDE_EXISTENCE = "hide_existence"
    REVEAL_FORBIDDEN = "reveal_forbidden"


class Resource(str, Enum):
    USER = "user"
    PRODUCT = "product"
    UPDATE = "update"
    UPDATE_POINT = "update_point"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


class OwnedRecord(NamedTuple, Generic[T]):
    record: T
    root_owner_id: UUID


def policy_for(resource: Resource) -> AuthorizationPolicy:
    configured = getattr(settings, "OWNERSHIP_POLICIES", {}).get(resource.value)
    if configured is None:
        return AuthorizationPolicy.HIDE_EXISTENCE
    return AuthorizationPolicy(configured)


def not_found(resource: Resource) -> NotFound:
    return NotFound(f"{resource.label.capitalize()} not found")


def denial(resource: Resource, exists: bool) -> ApiError:
    """Error for a record the caller may not touch, honouring the policy."""
    if not exists or policy_for(resource) is AuthorizationPolicy.HIDE_EXISTENCE:
        return not_found(resource)
    return Forbidden(f"Not authorized to access this {resource.label}")


def authorize(
    resource: Resource, owned: OwnedRecord[T] | None, identity: Identity
) -> T:
    """Return the record when ``identity`` owns the chain root, raise otherwise."""
    if owned is None:
        raise not_found(resource)
    if owned.root_owner_id != identity.id:
        logger.warning(
            "ownership.denied",
            resource=resource.value,
            owner_id=str(owned.root_owner_id),
            user_id=str(identity.id),
        )
        raise denial(resource, exists=True)
    return owned.record


def require_owned(
    resource: Resource,
    record: T | None,
    exists: Callable[[], Any],
) -> T:
    """Guard for mutations fetched with a compound ``id + owner`` filter.

    ``record`` is ``None`` when no row matched both conditions;
    ``exists`` is only called then, to choose between 404 and 403.
    """
    if record is not None:
        return record
    if policy_for(resource) is AuthorizationPolicy.HIDE_EXISTENCE:
        raise not_found(resource)
    raise denial(resource, exists=bool(exists()))
