"""Generic application errors."""

from fastapi import status

from bidmarket.config.errors import ErrorCode

__all__ = ["AppError", "ETagError"]


class AppError(Exception):
    """Base exception for application errors.

    Subclasses set ``error_code``, ``message`` and ``status_code``. The global
    handler renders them as ``{"code", "message"}`` with :attr:`headers`.
    """

    error_code = ErrorCode.SERVER_ERROR
    message = "An unexpected error occurred"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        """Initialize with optional custom message."""
        if message:
            self.message = message
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str]:
        """Extra response headers, none by default."""
        return {}


class ETagError(AppError):
    """Error on a versioned resource, answered with its current ETag."""

    error_code = ErrorCode.VERSION_MISMATCH
    message = "ETag mismatch"
    status_code = status.HTTP_412_PRECONDITION_FAILED

    def __init__(self, version: int, message: str | None = None) -> None:
        """Initialize with the current version and an optional custom message."""
        self.version = version
        super().__init__(message)

    @property
    def headers(self) -> dict[str, str]:
        """The current version as strong ETag."""
        return {"ETag": f'"{self.version}"'}
