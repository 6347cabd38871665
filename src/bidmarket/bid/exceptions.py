"""Bid exceptions."""

from uuid import UUID

from fastapi import status

from bidmarket.common.app_error import AppError
from bidmarket.config.errors import ErrorCode, ErrorNames

__all__ = ["AuctionNotActiveError", "BidTooLowError"]


class AuctionNotActiveError(AppError):
    """Exception raised when bidding on an auction that is not running."""

    error_code = ErrorCode.AUCTION_NOT_ACTIVE
    message = ErrorNames.AUCTION_NOT_ACTIVE
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, product_id: UUID) -> None:
        """Initialize with the product ID."""
        super().__init__(f"{ErrorNames.AUCTION_NOT_ACTIVE}: {product_id}")


class BidTooLowError(AppError):
    """Exception raised when a bid is below the minimum allowed amount."""

    error_code = ErrorCode.BID_TOO_LOW
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, amount: int, minimum: int) -> None:
        """Initialize with the offered and the minimum amount."""
        super().__init__(f"Bid of {amount} is too low, the minimum is {minimum}")
