"""
Error handling for the HTTP API.

Maps the domain errors raised by the repositories, request validation errors
and MongoDB driver errors to consistent JSON error responses.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from portals.utils.api_response import error_response
from portals.exceptions import (
    DuplicateRecordError,
    InsufficientFundsError,
    InvalidInputError,
    PortalError,
    RecordNotFoundError
)

# Configure logging
logger = logging.getLogger(__name__)


def _error_code(exc: Exception, fallback: str) -> str:
    """Derive an error code from the exception class, e.g. ``employee_not_found``."""
    name = type(exc).__name__
    if name.endswith("Error"):
        name = name[:-len("Error")]
    code = "".join(f"_{c.lower()}" if c.isupper() else c for c in name).lstrip("_")
    return code or fallback


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(f"HTTP exception: {exc.detail} (status_code={exc.status_code})")
        return JSONResponse(
            content=error_response(message=str(exc.detail), code="http_error"),
            status_code=exc.status_code
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        error_messages = []

        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.warning(f"Validation error: {', '.join(error_messages)}")

        return JSONResponse(
            content=error_response(
                message="Validation error",
                code="validation_error",
                details={"errors": error_messages}
            ),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    @app.exception_handler(DuplicateRecordError)
    async def duplicate_record_handler(request: Request, exc: DuplicateRecordError) -> JSONResponse:
        """Handle unique key conflicts."""
        logger.warning(f"Duplicate record: {exc}")
        return JSONResponse(
            content=error_response(message=str(exc), code=_error_code(exc, "duplicate_record")),
            status_code=status.HTTP_409_CONFLICT
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        """Handle lookups of missing records."""
        logger.warning(f"Record not found: {exc}")
        return JSONResponse(
            content=error_response(message=str(exc), code=_error_code(exc, "record_not_found")),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        """Handle rejected arguments."""
        logger.warning(f"Invalid input: {exc}")
        details = None
        if isinstance(exc, InsufficientFundsError):
            details = {"balance": exc.balance}
        return JSONResponse(
            content=error_response(
                message=str(exc),
                code=_error_code(exc, "invalid_input"),
                details=details
            ),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
        """Handle any other domain error."""
        logger.error(f"Portal error: {exc}")
        return JSONResponse(
            content=error_response(message=str(exc) or "Request failed", code="portal_error"),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(PyMongoError)
    async def database_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        """Handle database errors."""
        logger.error(f"Database error: {str(exc)}")
        return JSONResponse(
            content=error_response(message="Database error occurred", code="database_error"),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all other exceptions."""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        return JSONResponse(
            content=error_response(
                message="An unexpected error occurred",
                code="server_error",
                details={"type": type(exc).__name__}
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
