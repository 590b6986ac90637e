"""
Application errors and the FastAPI handlers that render them
"""

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class JoblyError(Exception):
    """Base error carrying an HTTP status.

    ``message`` is usually a string but may be a list of messages
    (validation failures).
    """

    status = 500

    def __init__(self, message: Any = "Internal Server Error", status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class NotFoundError(JoblyError):
    """404 NOT FOUND error"""

    status = 404

    def __init__(self, message: Any = "Not Found"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """401 UNAUTHORIZED error"""

    status = 401

    def __init__(self, message: Any = "Unauthorized"):
        super().__init__(message)


class BadRequestError(JoblyError):
    """400 BAD REQUEST error"""

    status = 400

    def __init__(self, message: Any = "Bad Request"):
        super().__init__(message)


class ForbiddenError(JoblyError):
    """403 FORBIDDEN error"""

    status = 403

    def __init__(self, message: Any = "Forbidden"):
        super().__init__(message)


def error_response(message: Any, status: int) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": {"message": message, "status": status}},
    )


def format_validation_errors(errors: List[dict]) -> List[str]:
    """Flatten pydantic error dicts into ``"loc: msg"`` strings"""
    messages = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
    return messages


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    if exc.status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"Rejected {request.method} {request.url.path} ({exc.status}): {exc.message}")
    return error_response(exc.message, exc.status)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = format_validation_errors(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {messages}")
    return error_response(messages, 400)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response("Internal Server Error", 500)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``"""
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
