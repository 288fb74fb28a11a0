"""API-wide exception handling."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler, set_rollback  # type: ignore

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong"


def api_exception_handler(exc, context):
    """Let DRF render its own errors and turn everything else into a 500.

    Views may set ``error_message`` to control the text returned to the
    client when an unexpected error escapes them.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown view"
    logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)

    set_rollback()
    message = getattr(view, "error_message", DEFAULT_ERROR_MESSAGE)
    return Response({"message": message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
