"""Password hashing and bearer-token minting/verification.

Passwords go through Django's hasher framework (bcrypt by default, see
``PASSWORD_HASHERS``).  Tokens are HS256 JWTs carrying the identity
claim ``{id, username}`` plus ``iat`` / ``exp``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Protocol

import jwt as pyjwt
from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password


class TokenSubject(Protocol):
    id: Any
    username: str


def hash_password(password: str) -> str:
    return make_password(password)


def verify_password(password: str, encoded: str | None) -> bool:
    """Check ``password`` against a stored hash.

    With ``encoded=None`` the default hasher still runs once, so a missing
    account costs as much time as a wrong password.
    """
    if encoded is None:
        make_password(password)
        return False
    return check_password(password, encoded)


def create_token(user: TokenSubject) -> str:
    conf = settings.JWT
    now = datetime.now(tz=timezone.utc)
    payload = {
        "id": str(user.id),
        "username": user.username,
        "iat": now,
        "exp": now + conf["ACCESS_TOKEN_LIFETIME"],
    }
    return pyjwt.encode(payload, conf["SIGNING_KEY"], algorithm=conf["ALGORITHM"])


def decode_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry; raises ``jwt.PyJWTError`` on failure.

    ``algorithms`` is pinned to the configured value, never taken from the
    token header.
    """
    conf = settings.JWT
    return pyjwt.decode(
        token,
        conf["SIGNING_KEY"],
        algorithms=[conf["ALGORITHM"]],
        options={"require": ["exp", "iat"]},
    )
