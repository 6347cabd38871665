"""Category exceptions."""

from uuid import UUID

from fastapi import status

from bidmarket.common.app_error import AppError
from bidmarket.config.errors import ErrorCode

__all__ = [
    "CategoryAlreadyExistsError",
    "CategoryInUseError",
    "CategoryNotFoundError",
    "InvalidCategoryLevelError",
]


class CategoryNotFoundError(AppError):
    """Exception raised when the category is not found."""

    error_code = ErrorCode.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, category_id: UUID) -> None:
        """Initialize with the category ID."""
        super().__init__(f"Category with ID {category_id} not found")


class CategoryAlreadyExistsError(AppError):
    """Exception raised when a category with the same slug exists."""

    error_code = ErrorCode.CATEGORY_ALREADY_EXISTS
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, slug: str) -> None:
        """Initialize with the conflicting slug."""
        super().__init__(f"Category with slug '{slug}' already exists")


class CategoryInUseError(AppError):
    """Exception raised when deleting a category that still has dependents."""

    error_code = ErrorCode.CATEGORY_IN_USE
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, category_id: UUID) -> None:
        """Initialize with the category ID."""
        super().__init__(
            f"Category with ID {category_id} still has child categories or products"
        )


class InvalidCategoryLevelError(AppError):
    """Exception raised when nesting a category below a child category."""

    error_code = ErrorCode.INVALID_CATEGORY_LEVEL
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, parent_id: UUID) -> None:
        """Initialize with the parent ID."""
        super().__init__(
            f"Category {parent_id} is a child category and cannot have children"
        )
