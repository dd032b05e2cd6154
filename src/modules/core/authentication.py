"""Bearer JWT authentication backend for Django REST Framework.

Verification is stateless: the token signature and expiry are checked
with PyJWT and the identity claim ``{id, username}`` becomes an
``Identity`` on ``request.user``.  The store is never queried here.

Security decisions
------------------
* **Fail Closed**: a malformed header, a bad signature, an expired
  token or a payload without a usable identity all return 401.
* A missing header is *not* an error at this level: the request is
  anonymous and ``IsAuthenticated`` turns it into a 401 on protected
  routes, while public routes still answer.
"""

from __future__ import annotations

from uuid import UUID

import structlog
from jwt.exceptions import PyJWTError
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from modules.core.security import decode_token

logger = structlog.get_logger(__name__)


class Identity:
    """The authenticated caller, decoded from the bearer token.

    Services receive it explicitly and compare ``id`` with the root owner
    of whatever resource is being touched.
    """

    def __init__(self, id: UUID, username: str):
        self.id = id
        self.username = username

    @classmethod
    def from_claims(cls, claims: dict) -> Identity:
        try:
            return cls(id=UUID(str(claims["id"])), username=str(claims["username"]))
        except (KeyError, ValueError) as exc:
            raise AuthenticationFailed("Token carries no valid identity.") from exc

    # DRF checks
    is_authenticated = True
    is_active = True

    @property
    def pk(self) -> UUID:
        return self.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self.id == other.id and self.username == other.username

    def __hash__(self) -> int:
        return hash((self.id, self.username))

    def __str__(self) -> str:  # pragma: no cover
        return self.username


class BearerTokenAuthentication(BaseAuthentication):
    """DRF authentication class that validates our own HS256 bearer tokens."""

    keyword = "Bearer"

    def authenticate(self, request):
        """Return ``(Identity, token)`` or ``None`` (no credentials)."""
        header = request.META.get("HTTP_AUTHORIZATION", "")
        if not header:
            return None

        token = self._extract_token(header)
        try:
            claims = decode_token(token)
        except PyJWTError as exc:
            logger.warning("jwt_validation_failed", error=str(exc))
            raise AuthenticationFailed("Invalid token.") from exc

        identity = Identity.from_claims(claims)
        structlog.contextvars.bind_contextvars(user_id=str(identity.id))
        return (identity, token)

    def authenticate_header(self, request):
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'{self.keyword} realm="api"'

    @classmethod
    def _extract_token(cls, header: str) -> str:
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != cls.keyword.lower():
            raise AuthenticationFailed("Invalid Authorization header format.")
        return parts[1]
