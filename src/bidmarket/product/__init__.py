"""Product module."""

from .auction_status import AuctionStatus
from .exceptions import ProductNotFoundError
from .models import Product, ProductAll, ProductPublic
from .sort_option import ProductSort, SearchSort

__all__ = [
    "AuctionStatus",
    "Product",
    "ProductAll",
    "ProductNotFoundError",
    "ProductPublic",
    "ProductSort",
    "SearchSort",
]
