"""
Error mapping - one failure taxonomy for every student operation.

- Validation failure -> 400
- Not found          -> 404
- Store fault        -> 500 (details logged, never sent to the client)

Every failure is rendered as {"error": "<fixed message>"}.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
INVALID_BODY = "Invalid request body"

# pydantic error types that mean "value absent or falsy"
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class APIError(Exception):
    """An error with a fixed client-facing message."""

    status_code = 500

    def __init__(self, error: str, status_code: Optional[int] = None):
        super().__init__(error)
        self.error = error
        if status_code is not None:
            self.status_code = status_code


class RequestValidationFailed(APIError):
    status_code = 400


class StudentNotFound(APIError):
    status_code = 404

    def __init__(self, error: str = "Student not found"):
        super().__init__(error)


class StoreFault(APIError):
    status_code = 500


@contextmanager
def store_fault(error: str):
    """
    Wrap a single store call.

    Usage:
        with store_fault("Failed to fetch students"):
            rows = store.list_all()
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s: %s", error, exc.__class__.__name__)
        raise StoreFault(error) from exc


def validation_message(exc: RequestValidationError) -> str:
    """Pick the client message for a rejected request body."""
    for err in exc.errors():
        if err.get("type") in _MISSING_ERROR_TYPES:
            return MISSING_FIELDS
        # explicit null, empty string, false or zero
        value = err.get("input", ...)
        if not isinstance(value, (dict, list)) and not value:
            return MISSING_FIELDS
    return INVALID_BODY


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.error})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = RequestValidationFailed(validation_message(exc))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, error.error)
    return await api_error_handler(request, error)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
