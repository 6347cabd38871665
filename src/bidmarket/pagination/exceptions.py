"""Pagination exceptions."""

from fastapi import status

from bidmarket.common.app_error import AppError
from bidmarket.config.errors import ErrorCode

__all__ = ["InvalidPageSizeError"]


class InvalidPageSizeError(AppError):
    """Exception raised when a page size outside the allowed set is requested."""

    error_code = ErrorCode.INVALID_PAGE_SIZE
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, size: int, allowed: list[int]) -> None:
        """Initialize with the requested and the allowed sizes."""
        allowed_str = ", ".join(str(s) for s in allowed)
        super().__init__(f"Page size {size} not allowed, choose one of: {allowed_str}")
