"""Common module for shared error handling.

Key Components:
- App errors: Application-specific error types with structured error codes
- HTTP exceptions: RESTful API error responses with proper status codes
- Version management: ETag-based versioning for products
"""

from .app_error import AppError, ETagError
from .exceptions import (
    InternalServerError,
    NotFoundError,
    VersionMismatchError,
    VersionMissingError,
)

__all__ = [
    "AppError",
    "ETagError",
    "InternalServerError",
    "NotFoundError",
    "VersionMismatchError",
    "VersionMissingError",
]
