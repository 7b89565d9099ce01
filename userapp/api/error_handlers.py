"""Error Handlers — global exception handlers for the user API.

Invariants:
    - UserAppError → its http_status (always 500) with the message as text/plain
    - Exception (catch-all) → 500 "Internal Server Error", never leaks internal details
    - A framework 405 (verb no route accepts) → 500 "unsupported method: <VERB>",
      the same response UserDispatch gives for a rejected verb
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapp.core.errors import UnsupportedMethodError, UserAppError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_app_error_handler(app)
    _register_method_not_allowed_handler(app)
    _register_generic_error_handler(app)


def _register_user_app_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserAppError)
    async def user_app_error_handler(request: Request, exc: UserAppError):
        """Handle all domain/infrastructure errors."""
        log = logger.warning if exc.severity in (
            ErrorSeverity.INFO, ErrorSeverity.WARNING,
        ) else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "method": request.method,
                "path": request.url.path,
                "username": exc.context.username,
            },
        )
        status_code, body = exc.to_response()
        return PlainTextResponse(body, status_code=status_code)


def _register_method_not_allowed_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Fold routing 405s into the unsupported-method failure."""
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            return await http_exception_handler(request, exc)
        error = UnsupportedMethodError(request.method)
        logger.warning(
            f"{type(error).__name__}: {error.message}",
            extra={
                "error_code": error.code,
                "method": request.method,
                "path": request.url.path,
            },
        )
        status_code, body = error.to_response()
        return PlainTextResponse(body, status_code=status_code)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
