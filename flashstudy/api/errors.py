"""
Error translation for the HTTP layer.

This is the single place where typed errors become HTTP responses.
Every failure leaves the API in the standard error envelope:

    { "success": false, "error": "...", "errors": {...} }

- FlashcardError subclasses map to their own status code.
- Request validation failures split by origin: path and query problems
  are bad requests (400), body problems are validation failures (422)
  with a field-keyed map, malformed JSON is a bad request.
- Anything else is an internal error (500). Exception detail is only
  included when debug mode is on.
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashstudy.config import settings
from flashstudy.models.envelope import ErrorResponse
from flashstudy.models.errors import FlashcardError

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    error: str,
    errors: dict[str, str] | None = None,
    debug: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render the error envelope."""
    body = ErrorResponse(error=error, errors=errors, debug=debug)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def flashcard_error_handler(_request: Request, exc: FlashcardError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, errors=exc.errors)


async def request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    body_errors: dict[str, str] = {}
    param_errors: dict[str, str] = {}

    for err in exc.errors():
        if err.get("type") == "json_invalid":
            return error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON payload")

        source, *rest = err.get("loc") or ("body",)
        field = ".".join(str(part) for part in rest) or str(source)
        target = body_errors if source == "body" else param_errors
        target.setdefault(field, err.get("msg", "Invalid value"))

    if param_errors:
        message = "Invalid ID parameter" if "card_id" in param_errors else "Invalid query parameter"
        return error_response(status.HTTP_400_BAD_REQUEST, message, errors=param_errors)

    # 422 Unprocessable Content
    return error_response(422, "Validation failed", errors=body_errors)


async def http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )

    debug = None
    if settings.debug:
        debug = {
            "type": type(exc).__name__,
            "message": str(exc),
            "trace": traceback.format_exception(exc),
        }

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", debug=debug
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app."""
    app.add_exception_handler(FlashcardError, flashcard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
