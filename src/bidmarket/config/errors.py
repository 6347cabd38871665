"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorCode", "ErrorNames"]


class ErrorCode(StrEnum):
    """Error codes for standardized error handling."""

    # General errors
    SERVER_ERROR = "SERVER_ERROR"
    NOT_FOUND = "NOT_FOUND"
    VERSION_MISMATCH = "VERSION_MISMATCH"
    VERSION_MISSING = "VERSION_MISSING"

    # Pagination errors
    INVALID_PAGE_SIZE = "INVALID_PAGE_SIZE"

    # Category errors
    CATEGORY_ALREADY_EXISTS = "CATEGORY_ALREADY_EXISTS"
    CATEGORY_IN_USE = "CATEGORY_IN_USE"
    INVALID_CATEGORY_LEVEL = "INVALID_CATEGORY_LEVEL"

    # Product errors
    INVALID_PRODUCT = "INVALID_PRODUCT"
    PRODUCT_HAS_BIDS = "PRODUCT_HAS_BIDS"
    INVALID_SEARCH_QUERY = "INVALID_SEARCH_QUERY"

    # Bid errors
    AUCTION_NOT_ACTIVE = "AUCTION_NOT_ACTIVE"
    BID_TOO_LOW = "BID_TOO_LOW"


class ErrorNames(StrEnum):
    """Error names for standardized error handling."""

    INTERNAL_SERVER_ERROR = "Internal server error"

    # Product validation errors
    START_PRICE_TOO_LOW = "Start price must be at least {value}"
    PRICE_STEP_TOO_LOW = "Price step must be at least {value}"
    BUY_NOW_TOO_LOW = "Buy-now price must be greater than the start price"
    DURATION_TOO_SHORT = "Auction must run for at least {value} hour(s)"
    DURATION_TOO_LONG = "Auction must not run longer than {value} days"
    END_IN_PAST = "Auction end must lie in the future"
    TOO_MANY_IMAGES = "A product may have at most {value} images"

    # Bid errors
    AUCTION_NOT_ACTIVE = "Auction has ended or is not active"
