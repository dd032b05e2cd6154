"""Error model shared by every resource.

``ApiError`` is the single tagged error type raised by services: it
carries the HTTP status and the detail sent back to the client, which
is either a message or a list of field errors.

``normalize()`` is the only place where a status code is decided.  It
translates domain errors, DRF framework errors and raw store signals
(unique-constraint violations, missing records) into a
``NormalizedError`` whose ``body`` is always ``{"error": ...}``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, TypedDict

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions

DEFAULT_MESSAGE = "Internal server error"
RECORD_NOT_FOUND = "Record not found"
UNAUTHORIZED = "Unauthorized"


class FieldError(TypedDict):
    field: str
    message: str


Detail = str | list[FieldError]


class ApiError(Exception):
    """Domain error tagged with the HTTP status it should produce."""

    status_code = 500
    default_detail: str = DEFAULT_MESSAGE

    def __init__(self, detail: Detail | None = None, status_code: int | None = None):
        self.detail: Detail = detail if detail is not None else self.default_detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(str(self.detail))


class ValidationFailed(ApiError):
    status_code = 400
    default_detail = "Invalid input"


class Conflict(ApiError):
    """Unique-constraint violation; reported as 400 like validation errors."""

    status_code = 400
    default_detail = "Record already exists"


class Unauthorized(ApiError):
    status_code = 401
    default_detail = UNAUTHORIZED


class Forbidden(ApiError):
    status_code = 403
    default_detail = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_detail = RECORD_NOT_FOUND


@dataclass(frozen=True)
class NormalizedError:
    status_code: int
    body: dict[str, Any]
    expected: bool = True


# ---------------------------------------------------------------------------
# Store signals
# ---------------------------------------------------------------------------

_UNIQUE_FIELD_PATTERNS = (
    # SQLite: UNIQUE constraint failed: users.username
    re.compile(r"UNIQUE constraint failed: (?:\w+\.)?(\w+)"),
    # PostgreSQL: DETAIL:  Key (username)=(bob) already exists.
    re.compile(r"Key \((\w+)\)="),
    # MySQL: Duplicate entry 'bob' for key 'users.username'
    re.compile(r"for key '(?:\w+\.)?(\w+)'"),
)


def is_unique_violation(error: IntegrityError) -> bool:
    message = str(error).lower()
    return "unique" in message or "duplicate" in message


def unique_violation_field(error: IntegrityError) -> str:
    """Best-effort extraction of the offending column from the driver message."""
    message = str(error)
    for pattern in _UNIQUE_FIELD_PATTERNS:
        match = pattern.search(message)
        if match:
            return match.group(1)
    return "field"


# ---------------------------------------------------------------------------
# DRF errors
# ---------------------------------------------------------------------------


def flatten_field_errors(detail: Any, prefix: str = "") -> list[FieldError]:
    """Turn a DRF ``ValidationError.detail`` tree into ``[{field, message}]``."""
    errors: list[FieldError] = []
    if isinstance(detail, dict):
        for field, value in detail.items():
            name = f"{prefix}.{field}" if prefix else str(field)
            if field == "non_field_errors":
                name = prefix
            errors.extend(flatten_field_errors(value, name))
    elif isinstance(detail, list):
        for item in detail:
            errors.extend(flatten_field_errors(item, prefix))
    else:
        errors.append({"field": prefix, "message": str(detail)})
    return errors


def _normalize_drf(error: drf_exceptions.APIException) -> NormalizedError:
    if isinstance(error, drf_exceptions.ValidationError):
        failed = ValidationFailed(flatten_field_errors(error.detail))
        return NormalizedError(failed.status_code, {"error": failed.detail})
    if isinstance(
        error, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)
    ):
        return NormalizedError(401, {"error": UNAUTHORIZED})
    if isinstance(error, drf_exceptions.NotFound):
        return NormalizedError(404, {"error": RECORD_NOT_FOUND})
    return NormalizedError(error.status_code, {"error": str(error.detail)})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize(error: BaseException, default_message: str | None = None) -> NormalizedError:
    """Translate any raised error into ``(status_code, {"error": ...})``.

    Unknown errors become a 500 carrying ``default_message`` and are
    flagged ``expected=False`` so the caller logs them with a traceback.
    Nothing from the original exception leaks into a 500 body.
    """
    if isinstance(error, ApiError):
        return NormalizedError(error.status_code, {"error": error.detail})

    if isinstance(error, drf_exceptions.APIException):
        return _normalize_drf(error)

    if isinstance(error, IntegrityError) and is_unique_violation(error):
        conflict = Conflict(f"{unique_violation_field(error)} already exists")
        return NormalizedError(conflict.status_code, {"error": conflict.detail})

    if isinstance(error, (ObjectDoesNotExist, Http404)):
        return NormalizedError(404, {"error": RECORD_NOT_FOUND})

    if isinstance(error, DjangoPermissionDenied):
        return NormalizedError(403, {"error": "Forbidden"})

    return NormalizedError(
        500, {"error": default_message or DEFAULT_MESSAGE}, expected=False
    )
