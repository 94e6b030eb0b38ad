"""
Standardized API response bodies.

Every HTTP endpoint returns either ``{"success": true, "data": ..., "message": ...}``
or ``{"success": false, "error": {"message": ..., "code": ..., "details": ...}}``.
"""

from typing import Any, Dict, Optional
from fastapi import status
from fastapi.responses import JSONResponse


def success_response(
    data: Any = None,
    message: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build a success body.

    Args:
        data: JSON-serializable payload
        message: Optional human-readable message

    Returns:
        Dict with the success envelope
    """
    response = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Build an error body.

    Args:
        message: Error message
        code: Machine-readable error code, e.g. ``employee_not_found``
        details: Additional error details

    Returns:
        Dict with the error envelope
    """
    error = {"message": message}

    if code:
        error["code"] = code

    if details:
        error["details"] = details

    return {
        "success": False,
        "error": error
    }


def json_success(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    """Wrap ``success_response`` in a JSONResponse with the given status code."""
    return JSONResponse(content=success_response(data, message), status_code=status_code)
