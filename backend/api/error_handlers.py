"""
Global exception handlers.

- CampusAidError → its status_code with {"error", "message", "details"}
- RequestValidationError → 400 with field-level details
- Exception (catch-all) → 500 without internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import CampusAidError

from .models.errors import ErrorResponse, FieldError, ValidationErrorResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CampusAidError)
    async def campus_aid_error_handler(request: Request, exc: CampusAidError):
        if exc.status_code >= 500:
            logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
        else:
            logger.info(f"{exc.code} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        body = ValidationErrorResponse(
            details=[
                FieldError(
                    field=".".join(str(loc) for loc in e["loc"]),
                    message=e["msg"],
                    type=e["type"],
                )
                for e in exc.errors()
            ],
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        body = ErrorResponse(error="INTERNAL_ERROR", message="An unexpected error occurred")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(),
        )
