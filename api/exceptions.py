"""
Custom exception handling for API.

Every API error is rendered as ``{"success": false, "message": ..., "errors": [...]}``
so the landing page can show ``message`` without inspecting status codes.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback
from rest_framework.exceptions import ValidationError, ParseError
import logging

logger = logging.getLogger("api")

INVALID_INPUT_MESSAGE = "Invalid input"
SERVER_ERROR_MESSAGE = "Internal Server Error"


def flatten_error_details(details, path=None):
    """
    Flatten DRF's nested ``get_full_details()`` output into a list.

    Args:
        details: dict/list/ErrorDetail-dict structure from ValidationError
        path: dotted field path of the current level (None at the top)

    Returns:
        list of {"field": "painPoints.1" | None, "message": str, "code": str}
    """
    if isinstance(details, dict) and "message" in details and "code" in details:
        return [{"field": path, "message": str(details["message"]), "code": details["code"]}]

    errors = []
    if isinstance(details, dict):
        for key, value in details.items():
            if key == "non_field_errors":
                child_path = path
            else:
                child_path = f"{path}.{key}" if path else str(key)
            errors.extend(flatten_error_details(value, child_path))
    elif isinstance(details, list):
        for index, value in enumerate(details):
            # A list of error dicts belongs to the current field; a list of
            # containers is indexed (ListField children report by position)
            if isinstance(value, dict) and "message" in value:
                errors.extend(flatten_error_details(value, path))
            else:
                child_path = f"{path}.{index}" if path else str(index)
                errors.extend(flatten_error_details(value, child_path))
    return errors


def custom_exception_handler(exc, context):
    """
    Custom exception handler for DRF.

    Validation and parse errors become 400 "Invalid input" with field-level
    details. Other API exceptions keep their status code and use their
    detail as the message. Anything unexpected (including database
    failures) is logged with its traceback and reported as an opaque 500.

    Args:
        exc: Exception instance
        context: Context dict with view and request info

    Returns:
        Response object with error details
    """
    request = context.get("request")
    view = context.get("view")

    log_data = {
        "error": str(exc),
        "path": request.path if request else None,
        "method": request.method if request else None,
        "view": view.__class__.__name__ if view else None,
    }

    # Call DRF's default exception handler first
    response = drf_exception_handler(exc, context)

    if response is None:
        logger.error(f"API Server Error: {log_data}", exc_info=exc)
        set_rollback()
        return Response(
            {"success": False, "message": SERVER_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    log_data["status_code"] = response.status_code
    if response.status_code >= 500:
        logger.error(f"API Server Error: {log_data}")
    elif response.status_code >= 400:
        logger.warning(f"API Client Error: {log_data}")

    if isinstance(exc, ValidationError):
        response.data = {
            "success": False,
            "message": INVALID_INPUT_MESSAGE,
            "errors": flatten_error_details(exc.get_full_details()),
        }
    elif isinstance(exc, ParseError):
        response.data = {
            "success": False,
            "message": INVALID_INPUT_MESSAGE,
            "errors": [{"field": None, "message": str(exc.detail), "code": exc.get_codes()}],
        }
    else:
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        response.data = {
            "success": False,
            "message": str(detail) or SERVER_ERROR_MESSAGE,
        }

    return response
