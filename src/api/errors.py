"""Exception handlers producing ``{"error": ...}`` bodies."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def describe_validation_error(errors: list[dict]) -> str:
    """Turn the first pydantic error into a short message for the client."""
    if not errors:
        return "Invalid request"

    error = errors[0]
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = location[-1] if location else "request body"

    if error.get("type") == "missing" or (
        error.get("type") == "string_too_short" and error.get("ctx", {}).get("min_length") == 1
    ):
        return f"{field[0].upper()}{field[1:]} is required"
    return f"Invalid {field}: {error.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers mapping errors to status codes and JSON bodies."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Debug level: request bodies can contain passwords
        logger.debug(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": describe_validation_error(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )
