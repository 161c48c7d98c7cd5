"""DRF exception handler for faults no view translated itself.

Views map domain exceptions (not found, malformed id) to responses
locally.  Anything that still escapes is either a DRF ``APIException``
(malformed JSON, method not allowed...), which keeps DRF's standard
handling, or an unexpected fault, which is logged and answered with a
generic 500 body.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        "request.unhandled_fault",
        view=type(view).__name__ if view is not None else None,
        error=str(exc),
        exc_info=exc,
    )

    message = str(exc) if settings.DEBUG else INTERNAL_ERROR_MESSAGE
    return Response(
        {"error": message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
