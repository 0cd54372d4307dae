"""Error taxonomy shared by the services and the HTTP layer.

Services raise subclasses of :class:`PlacebookError`; the handlers installed
by :func:`install_error_handlers` turn them into the JSON envelope
``{"success": false, "response": <message>, "error": <kind>}``.
"""
from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

STORE_ERROR_MESSAGE = "Something went wrong, please try again."


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    STORE = "store_error"


class PlacebookError(Exception):
    """Base class for failures that are reported to API clients."""

    kind: ErrorKind = ErrorKind.STORE
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = STORE_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PlacebookError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid request"


class ConflictError(PlacebookError):
    kind = ErrorKind.CONFLICT
    default_message = "Could not create user"


class Unauthorized(PlacebookError):
    kind = ErrorKind.UNAUTHORIZED
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied, please sign in."


class NotFound(PlacebookError):
    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Location not found"


class StoreError(PlacebookError):
    kind = ErrorKind.STORE


def error_response(kind: ErrorKind, message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "response": message, "error": kind.value},
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(messages) or ValidationError.default_message


async def _handle_placebook_error(_: Request, exc: PlacebookError) -> JSONResponse:
    return error_response(exc.kind, exc.message, exc.status_code)


async def _handle_request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        ErrorKind.VALIDATION, _describe_validation_error(exc), status.HTTP_400_BAD_REQUEST
    )


async def _handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure during %s %s", request.method, request.url.path)
    error = StoreError()
    return error_response(error.kind, error.message, error.status_code)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error during %s %s", request.method, request.url.path)
    error = StoreError()
    return error_response(error.kind, error.message, error.status_code)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PlacebookError, _handle_placebook_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(SQLAlchemyError, _handle_store_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
