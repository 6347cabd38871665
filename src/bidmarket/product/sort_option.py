"""Sort options for product lists."""

from enum import StrEnum

__all__ = ["ProductSort", "SearchSort"]


class ProductSort(StrEnum):
    """Sort order of the product list view."""

    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    ENDING_SOON = "ending_soon"
    MOST_BIDS = "most_bids"


class SearchSort(StrEnum):
    """Sort order of the search results view."""

    RELEVANCE = "relevance"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    ENDING_SOON = "ending_soon"
    MOST_BIDS = "most_bids"
