"""Envelope-shaped error responses and the database error guard used by routes."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from videobelajar.services.errors import ServiceError

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
GENERIC_SERVER_ERROR_MESSAGE = "Terjadi kesalahan pada server"


def _error_body(message: str, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def format_validation_errors(raw_errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Flatten pydantic errors into {field, location, msg} entries.

    Messages raised from our own validators are passed through without the
    "Value error, " prefix pydantic adds.
    """
    formatted = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ())]
        location = loc[0] if loc else "body"
        field = ".".join(loc[1:]) if len(loc) > 1 else location
        ctx_error = (err.get("ctx") or {}).get("error")
        msg = str(ctx_error) if isinstance(ctx_error, ValueError) else err.get("msg", "")
        formatted.append({"field": field, "location": location, "msg": msg})
    return formatted


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(VALIDATION_FAILED_MESSAGE, format_validation_errors(exc.errors())),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(GENERIC_SERVER_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


@contextmanager
def db_errors(db: Session, message: str) -> Iterator[None]:
    """
    Roll back and collapse database failures into a 500 with a localized message.

    HTTPExceptions raised inside the block pass through unchanged.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("%s", message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        ) from exc
