"""Product exceptions."""

from uuid import UUID

from fastapi import status

from bidmarket.common.app_error import AppError
from bidmarket.config.errors import ErrorCode

__all__ = [
    "InvalidProductError",
    "InvalidSearchQueryError",
    "ProductHasBidsError",
    "ProductNotFoundError",
]


class ProductNotFoundError(AppError):
    """Exception raised when the product is not found."""

    error_code = ErrorCode.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, product_id: UUID | str) -> None:
        """Initialize with the product ID."""
        super().__init__(f"Product with ID {product_id} not found")


class InvalidProductError(AppError):
    """Exception raised when the auction terms of a product are invalid."""

    error_code = ErrorCode.INVALID_PRODUCT
    message = "Invalid product"
    status_code = status.HTTP_400_BAD_REQUEST


class ProductHasBidsError(AppError):
    """Exception raised when changing the price terms of an auction with bids."""

    error_code = ErrorCode.PRODUCT_HAS_BIDS
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, product_id: UUID) -> None:
        """Initialize with the product ID."""
        super().__init__(
            f"Product with ID {product_id} already has bids, "
            "price and schedule can no longer change"
        )


class InvalidSearchQueryError(AppError):
    """Exception raised when the search text is too short after trimming."""

    error_code = ErrorCode.INVALID_SEARCH_QUERY
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, min_length: int) -> None:
        """Initialize with the minimum search text length."""
        super().__init__(
            f"Search text must have at least {min_length} non-blank characters"
        )
