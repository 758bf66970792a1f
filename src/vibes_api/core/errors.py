"""Application exception hierarchy and the handlers that render it.

Every failure leaves the API in the same envelope shape used for success
responses: ``{"status": <http status>, "message": <text>, ...}``.

    AppError
    ├── ValidationError   400  malformed input, uniqueness conflicts
    ├── AuthError         401  missing or invalid requester identity
    ├── NotFoundError     404  no record matches
    ├── UpstreamError     xxx  escrow failure, status mirrored from upstream
    └── InternalError     500  anything else, message kept generic
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class AppError(Exception):
    """Base class for errors that map onto an HTTP response.

    Args:
        message: Client-facing description, safe to return in the body.
        status_code: HTTP status of the response.
        details: Extra structured information returned alongside the message.
    """

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"status": self.status_code, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    status_code = HTTP_400_BAD_REQUEST


class AuthError(AppError):
    status_code = HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    """No record matches. ``data`` is echoed as the empty placeholder."""

    status_code = HTTP_404_NOT_FOUND

    def __init__(self, message: str, *, data: dict | list | None = None) -> None:
        super().__init__(message)
        self.data = {} if data is None else data

    def to_body(self) -> dict[str, Any]:
        return {"status": self.status_code, "message": self.message, "data": self.data}


class UpstreamError(AppError):
    """A call to a third-party API failed."""


class InternalError(AppError):
    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)


def _field_path(loc: tuple[Any, ...]) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts first.
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"field": _field_path(tuple(error.get("loc", ()))), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"status": HTTP_400_BAD_REQUEST, "message": "Validation failed", "errors": errors},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_code, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
