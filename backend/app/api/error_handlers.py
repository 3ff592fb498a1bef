"""Error Handlers: global exception handlers mapping failures to ErrorBody.

Invariants:
    - ApiError → its own http_status with {"error": message}
    - RequestValidationError (body/param decoding) → 400 with {"error": message}
    - Exception (catch-all) → 500 {"error": "Internal Server Error"}, never leaks details

Design Decisions:
    - Three-layer handler: domain (ApiError), decoding (Pydantic), catch-all (Exception)
    - Decoding errors reuse the ErrorBody shape so clients parse one envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import ApiError, InternalServerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Handle all ApiError subclasses."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"ApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic decoding error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request bodies that could not be decoded."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "DECODE_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalServerError().to_response(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Summarize the first decoding error as a single message."""
    errors = exc.errors()
    if not errors:
        return {"error": "Invalid request data"}
    first = errors[0]
    field = ".".join(str(loc) for loc in first["loc"])
    return {"error": f"Invalid request data: {field}: {first['msg']}"}
