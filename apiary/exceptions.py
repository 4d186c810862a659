"""
Error handling for the Apiary API.

Provides consistent error responses across all API endpoints.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel


logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""
    detail: str
    error_code: str | None = None


def format_validation_errors(errors: list[dict]) -> str:
    """Join validation errors into a single readable message."""
    error_messages = []
    for error in errors:
        loc = " -> ".join(str(l) for l in error["loc"])
        msg = error["msg"]
        error_messages.append(f"{loc}: {msg}")

    return "; ".join(error_messages) if error_messages else "Validation error"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    detail = format_validation_errors(list(exc.errors()))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(detail=detail, error_code="VALIDATION_ERROR").model_dump()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
