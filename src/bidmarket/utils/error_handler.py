"""Global exception handlers for the application."""

from asyncio import CancelledError

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from bidmarket.common.app_error import AppError
from bidmarket.config.config import settings
from bidmarket.config.errors import ErrorCode, ErrorNames

from .error_path import get_error_path

__all__ = ["register_exception_handlers"]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI application.

    Application errors keep their own status code and headers, so ETag errors
    also report the current version. Anything else becomes a 500
    ``SERVER_ERROR``.

    Args:
        app: The FastAPI application instance to register handlers with.
    """

    @app.exception_handler(AppError)
    def _handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        logger.debug(
            "{}: {}",
            exc.error_code,
            exc.message,
            path=get_error_path(exc),
            url=request.url.path,
        )
        return _make_response(
            exc.status_code, exc.error_code, exc.message, exc.headers
        )

    @app.exception_handler(Exception)
    def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Handle any uncaught exceptions as 500 server errors.

        Raises:
            CancelledError: Re-raised outside of development.
        """
        if isinstance(exc, CancelledError) and settings.app_env != "development":
            raise exc

        logger.exception(
            "{}", str(exc), path=get_error_path(exc), url=request.url.path
        )
        return _make_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.SERVER_ERROR,
            ErrorNames.INTERNAL_SERVER_ERROR,
        )


def _make_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized JSON error response.

    Args:
        status_code: HTTP status code to return.
        code: Application-specific error code enum value.
        message: Human-readable error message.
        headers: Extra response headers, e.g. the current ETag.

    Returns:
        JSONResponse: A formatted JSON response with the error details.
    """
    return JSONResponse(
        status_code=status_code,
        content={"code": code, "message": message},
        headers=headers,
    )
