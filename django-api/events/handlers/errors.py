"""Map exceptions to the API response envelope.

Domain errors become 4xx responses with their user-safe message. Anything
DRF does not recognize is logged and reported as a generic server error.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

DOMAIN_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TEAM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.COACH_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def envelope(message: str, data=None, error=None, status_code: int = status.HTTP_200_OK) -> Response:
    """Wrap a payload as ``{"message", "response": {"data"}, "error"}``."""
    response = {"data": data} if error is None and data is not None else None
    return Response(
        {"message": message, "response": response, "error": error},
        status=status_code,
    )


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def exception_handler(exc: Exception, context: dict) -> Response:
    if isinstance(exc, DomainError):
        logger.warning("Domain error: %s", exc)
        return envelope(exc.message, error=exc.message, status_code=DOMAIN_STATUS[exc.code])

    response = drf_exception_handler(exc, context)
    if response is not None:
        message = _first_message(response.data)
        return envelope(message, error=response.data, status_code=response.status_code)

    logger.exception("Unhandled error in %s", context.get("view").__class__.__name__)
    return envelope(
        "Internal server error",
        error="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
