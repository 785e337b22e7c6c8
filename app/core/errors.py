"""
Error kinds raised by the post services and the handlers that turn them,
and anything else escaping a route, into JSON error bodies.
"""

import logging
import traceback
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ServiceError(Exception):
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    kind = ErrorKind.VALIDATION


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND


class InternalError(ServiceError):
    kind = ErrorKind.INTERNAL


def error_body(message: str) -> dict:
    return {"error": message}


def _format_request_errors(errors) -> str:
    messages = []
    for err in errors:
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        msg = err.get("msg", "Invalid value")
        messages.append(f"{location}: {msg}" if location else msg)
    return ", ".join(messages) or "Invalid request"


async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=STATUS_BY_KIND[exc.kind], content=error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(_format_request_errors(exc.errors())),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Starlette signals an unmatched path with 404 and a matched path with
    # an unsupported method with 405; both are unknown routes here.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content=error_body("Route not found")
        )
    return JSONResponse(
        status_code=exc.status_code, content=error_body(str(exc.detail)), headers=exc.headers
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)

    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int) or status_code < 400:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    body = error_body(str(exc) or "Internal Server Error")
    if request.app.state.settings.is_development:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
