"""DRF exception handler producing the ``{"error": ...}`` envelope.

Views never catch store or domain exceptions themselves: everything
propagates here, is logged, then handed to ``normalize()``.  The default
message for unexpected failures comes from the view's ``error_messages``
mapping, keyed by the current action.
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework.response import Response
from rest_framework.views import set_rollback

from modules.core.errors import normalize

logger = structlog.get_logger(__name__)


def _default_message(context: dict[str, Any]) -> str | None:
    view = context.get("view")
    messages = getattr(view, "error_messages", None) or {}
    return messages.get(getattr(view, "action", None))


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    view = context.get("view")
    request = context.get("request")
    log = logger.bind(
        view=type(view).__name__ if view is not None else None,
        action=getattr(view, "action", None),
        method=getattr(request, "method", None),
        error_type=type(exc).__name__,
    )

    normalized = normalize(exc, _default_message(context))

    if normalized.expected:
        log.warning("request.failed", status_code=normalized.status_code, error=str(exc))
    else:
        log.error("request.crashed", status_code=normalized.status_code, exc_info=exc)

    headers = {}
    auth_header = getattr(exc, "auth_header", None)
    if auth_header:
        headers["WWW-Authenticate"] = auth_header
    wait = getattr(exc, "wait", None)
    if wait:
        headers["Retry-After"] = str(int(wait))

    set_rollback()
    return Response(normalized.body, status=normalized.status_code, headers=headers)
