import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


def api_exception_handler(exc, context):
    """DRF's default handler, plus a WARNING line for every rejected request."""
    response = exception_handler(exc, context)
    if response is not None:
        view = context.get("view")
        logger.warning(
            "%s rejected with %s: %s",
            view.__class__.__name__ if view else "unknown view",
            response.status_code,
            response.data,
        )
    return response
