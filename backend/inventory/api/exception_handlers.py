"""Exception handlers that turn errors into JSON responses.

Every error body has the same shape::

    {"detail": "Human-readable message", "code": "MACHINE_READABLE_CODE"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from inventory.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ErrorCode,
    InventoryError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Duplicate keys are reported as 400, like other bad input.
ERROR_STATUS: list[tuple[type[InventoryError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(exc: InventoryError) -> int:
    for exc_type, status_code in ERROR_STATUS:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InventoryError)
    async def inventory_error_handler(
        request: Request,
        exc: InventoryError,
    ) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(
                "Internal error on %s %s: %s (details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.details,
            )
        else:
            logger.warning(
                "Rejected %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )
        return _error_response(status_code, exc.message, exc.code.value)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = exc.errors()
        logger.warning(
            "Invalid request body on %s %s: %s",
            request.method,
            request.url.path,
            errors,
        )
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
        else:
            message = "Invalid request."
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            message,
            ErrorCode.VALIDATION_ERROR.value,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            ErrorCode.INTERNAL_ERROR.value,
        )
