# core/exceptions.py

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource already exists.'
    default_code = 'conflict'


def _first_message(detail):
    """Digs the first human readable message out of a DRF error payload."""
    if isinstance(detail, dict):
        if 'detail' in detail:
            return _first_message(detail['detail'])
        for field, value in detail.items():
            message = _first_message(value)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def envelope_exception_handler(exc, context):
    """
    Renders every API error as {"success": false, "message": ...}.
    Field level validation errors are kept under "errors".
    Anything DRF does not know about becomes a generic 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}", exc_info=exc)
        return Response(
            {"success": False, "message": "An unexpected error occurred."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    payload = {"success": False, "message": _first_message(response.data)}
    if isinstance(response.data, dict) and 'detail' not in response.data:
        payload["errors"] = response.data
    response.data = payload
    return response
