"""Helpers for the product repository."""

from sqlalchemy import ColumnElement, case, func, or_
from sqlmodel import col

from .models import Product
from .schemas import ProductFilter
from .sort_option import ProductSort, SearchSort

__all__ = ["build_filters", "build_order"]


def build_filters(filters: ProductFilter) -> list[ColumnElement[bool]]:
    """Build the WHERE conditions for a product query.

    Args:
        filters: Requested status, categories, price range and search text.

    Returns:
        Conditions to AND together, empty when nothing is filtered.
    """
    conditions: list[ColumnElement[bool]] = []
    if filters.status is not None:
        conditions.append(col(Product.status) == filters.status)
    if filters.category_ids:
        conditions.append(col(Product.category_id).in_(filters.category_ids))
    if filters.min_price is not None:
        conditions.append(col(Product.current_price) >= filters.min_price)
    if filters.max_price is not None:
        conditions.append(col(Product.current_price) <= filters.max_price)
    if filters.query:
        conditions.append(_text_filter(filters.query))
    return conditions


def build_order(
    sort: ProductSort | SearchSort, query: str | None = None
) -> list[ColumnElement]:
    """Build the ORDER BY clause for a sort option.

    Every order ends with the product ID so pages never overlap.

    Args:
        sort: Requested sort option.
        query: Search text, used to rank title matches for relevance.

    Returns:
        Order expressions in priority order.
    """
    match sort:
        case ProductSort.PRICE_ASC | SearchSort.PRICE_ASC:
            order = [col(Product.current_price).asc()]
        case ProductSort.PRICE_DESC | SearchSort.PRICE_DESC:
            order = [col(Product.current_price).desc()]
        case ProductSort.ENDING_SOON | SearchSort.ENDING_SOON:
            order = [col(Product.end_at).asc()]
        case ProductSort.MOST_BIDS | SearchSort.MOST_BIDS:
            order = [col(Product.bid_count).desc()]
        case SearchSort.RELEVANCE if query:
            title_match = case((_title_filter(query), 0), else_=1)
            order = [title_match.asc(), col(Product.created_at).desc()]
        case _:
            order = [col(Product.created_at).desc()]
    return [*order, col(Product.id).asc()]


def _title_filter(query: str) -> ColumnElement[bool]:
    return func.lower(Product.title).contains(query.lower(), autoescape=True)


def _text_filter(query: str) -> ColumnElement[bool]:
    """Match the search text in title or description, ignoring case."""
    needle = query.lower()
    return or_(
        _title_filter(query),
        func.lower(func.coalesce(Product.description, "")).contains(
            needle, autoescape=True
        ),
    )
