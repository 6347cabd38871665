"""Product service."""

from datetime import datetime, timedelta
from typing import Any, Final
from uuid import UUID

from fastapi import Request
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.bid.models import BidPublic
from bidmarket.bid.repository import get_bids_db
from bidmarket.category.models import CategoryPublic
from bidmarket.category.repository import get_category_db
from bidmarket.config.config import settings
from bidmarket.config.errors import ErrorNames
from bidmarket.pagination import (
    PagedResponse,
    WindowPolicy,
    calculator_for,
    resolve_state,
    validate_page_size,
)
from bidmarket.utils.clock import as_utc, utc_now
from bidmarket.utils.etag_parser import parse_etag

from .auction_status import AuctionStatus
from .exceptions import (
    InvalidProductError,
    InvalidSearchQueryError,
    ProductHasBidsError,
)
from .models import Product, ProductAll, ProductCreate, ProductPublic, ProductUpdate
from .repository import (
    count_products_db,
    delete_product_db,
    get_category_filter_ids_db,
    get_product_db,
    get_products_db,
    get_related_products_db,
    get_top_products_db,
    save_product_db,
    sync_auction_status_db,
    update_product_db,
)
from .schemas import ProductFilter, TopProducts
from .sort_option import ProductSort, SearchSort

__all__ = [
    "create_product_svc",
    "delete_product_svc",
    "get_product_svc",
    "get_products_svc",
    "get_top_products_svc",
    "search_products_svc",
    "update_product_svc",
]


_LOCKED_FIELDS: Final = frozenset({
    "start_price",
    "price_step",
    "buy_now_price",
    "end_at",
})

_NULLABLE_FIELDS: Final = frozenset({"description", "buy_now_price"})


async def get_products_svc(  # noqa: PLR0913
    db: AsyncSession,
    *,
    page: int,
    size: int | None,
    sort: ProductSort,
    status: AuctionStatus | None,
    category_id: UUID | None,
    min_price: int | None,
    max_price: int | None,
    window: WindowPolicy | None,
) -> PagedResponse[ProductAll]:
    """Read one page of the product list.

    Args:
        db: Database session for persistence operations.
        page: Requested page, clamped to the result.
        size: Requested page size, or None for the default.
        sort: Sort order of the list.
        status: Auction status filter, None for every status.
        category_id: Category filter, a top-level category includes children.
        min_price: Lowest current price.
        max_price: Highest current price.
        window: Page window policy override.

    Returns:
        The requested page with its navigation block.

    Raises:
        InvalidPageSizeError: If the page size is not allowed.
        CategoryNotFoundError: If the category filter does not exist.
    """
    size = validate_page_size(size)
    await sync_auction_status_db(db)

    filters = ProductFilter(
        status=status,
        category_ids=await get_category_filter_ids_db(db, category_id),
        min_price=min_price,
        max_price=max_price,
    )
    return await _paged_products(
        db,
        filters,
        sort,
        page=page,
        size=size,
        window=window,
        default_window=settings.list_window_policy,
    )


async def search_products_svc(  # noqa: PLR0913
    db: AsyncSession,
    *,
    query: str,
    page: int,
    size: int | None,
    sort: SearchSort,
    category_id: UUID | None = None,
    min_price: int | None = None,
    max_price: int | None = None,
    window: WindowPolicy | None = None,
) -> PagedResponse[ProductAll]:
    """Search active auctions by title and description.

    Args:
        db: Database session for persistence operations.
        query: Search text, trimmed and matched case-insensitively.
        page: Requested page, clamped to the result.
        size: Requested page size, or None for the default.
        sort: Sort order of the results.
        category_id: Category filter, a top-level category includes children.
        min_price: Lowest current price.
        max_price: Highest current price.
        window: Page window policy override.

    Returns:
        The requested page of search results with its navigation block.

    Raises:
        InvalidSearchQueryError: If the trimmed search text is too short.
        InvalidPageSizeError: If the page size is not allowed.
        CategoryNotFoundError: If the category filter does not exist.
    """
    text = query.strip()
    if len(text) < settings.min_search_length:
        raise InvalidSearchQueryError(settings.min_search_length)
    size = validate_page_size(size)
    await sync_auction_status_db(db)

    filters = ProductFilter(
        query=text,
        category_ids=await get_category_filter_ids_db(db, category_id),
        min_price=min_price,
        max_price=max_price,
    )
    return await _paged_products(
        db,
        filters,
        sort,
        page=page,
        size=size,
        window=window,
        default_window=settings.search_window_policy,
    )


async def get_top_products_svc(db: AsyncSession) -> TopProducts:
    """Collect the highlight lists of the home page."""
    await sync_auction_status_db(db)
    limit = settings.top_products_limit

    async def _top(sort: ProductSort) -> list[ProductAll]:
        products = await get_top_products_db(db, sort, limit)
        return [ProductAll.model_validate(p, from_attributes=True) for p in products]

    return TopProducts(
        ending_soon=await _top(ProductSort.ENDING_SOON),
        most_bids=await _top(ProductSort.MOST_BIDS),
        highest_price=await _top(ProductSort.PRICE_DESC),
    )


async def get_product_svc(
    db: AsyncSession, product_id: UUID
) -> tuple[ProductPublic, int]:
    """Read a single product with its category, leading bids and related auctions.

    Returns:
        The product and its current version.

    Raises:
        ProductNotFoundError: If the product does not exist.
    """
    await sync_auction_status_db(db)
    product = await get_product_db(db, product_id)
    category = await get_category_db(db, product.category_id)
    bids = await get_bids_db(
        db, product_id, offset=0, limit=settings.top_bidders_limit
    )
    related = await get_related_products_db(
        db, product, settings.related_products_limit
    )

    public = ProductPublic.model_validate({
        **product.model_dump(),
        "category": CategoryPublic.model_validate(category, from_attributes=True),
        "top_bidders": [
            BidPublic.from_bid(bid, is_highest=index == 0)
            for index, bid in enumerate(bids)
        ],
        "related": [
            ProductAll.model_validate(p, from_attributes=True) for p in related
        ],
    })
    return public, product.version


async def create_product_svc(db: AsyncSession, data: ProductCreate) -> UUID:
    """List a new product for auction.

    Args:
        db: Database session for persistence operations.
        data: Product and auction terms.

    Returns:
        The ID of the new product.

    Raises:
        CategoryNotFoundError: If the category does not exist.
        InvalidProductError: If the auction terms are invalid.
    """
    now = utc_now()
    start_at = as_utc(data.start_at) if data.start_at else now
    end_at = as_utc(data.end_at)

    _validate_auction_terms(
        start_price=data.start_price,
        price_step=data.price_step,
        buy_now_price=data.buy_now_price,
        start_at=start_at,
        end_at=end_at,
        now=now,
    )
    _validate_images(data.image_urls)
    await get_category_db(db, data.category_id)

    product = Product(
        **data.model_dump(exclude={"start_at", "end_at"}),
        current_price=data.start_price,
        start_at=start_at,
        end_at=end_at,
        status=AuctionStatus.ACTIVE if start_at <= now else AuctionStatus.SCHEDULED,
        created_at=now,
        updated_at=now,
    )
    product_id = await save_product_db(db, product)
    logger.debug("Product created", product_id=product_id, status=product.status)
    return product_id


async def update_product_svc(
    db: AsyncSession, request: Request, product_id: UUID, data: ProductUpdate
) -> int:
    """Update a product with optimistic locking.

    Args:
        db: Database session for persistence operations.
        request: The HTTP request carrying the If-Match header.
        product_id: The ID of the product to update.
        data: Fields to change.

    Returns:
        The new version of the product.

    Raises:
        VersionMissingError: If the If-Match header is missing.
        ProductNotFoundError: If the product does not exist.
        VersionMismatchError: If the client's version is stale.
        ProductHasBidsError: If locked fields change after the first bid.
        InvalidProductError: If the merged auction terms are invalid.
    """
    expected_version = parse_etag(str(product_id), request)
    product = await get_product_db(db, product_id)

    changes: dict[str, Any] = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field in _NULLABLE_FIELDS
    }
    if "end_at" in changes:
        changes["end_at"] = as_utc(changes["end_at"])

    if product.version == expected_version:
        _validate_changes(product, changes)

    updated = await update_product_db(db, product, changes, expected_version)
    return updated.version


async def delete_product_svc(db: AsyncSession, product_id: UUID) -> None:
    """Delete a product and its bid history."""
    await delete_product_db(db, product_id)


async def _paged_products(
    db: AsyncSession,
    filters: ProductFilter,
    sort: ProductSort | SearchSort,
    *,
    page: int,
    size: int,
    window: WindowPolicy | None,
    default_window: str,
) -> PagedResponse[ProductAll]:
    total = await count_products_db(db, filters)
    state = resolve_state(page, size, total)

    products = await get_products_db(
        db, filters, sort, offset=state.offset, limit=state.items_per_page
    )
    items = [ProductAll.model_validate(p, from_attributes=True) for p in products]

    logger.debug(
        "Product page resolved",
        page=state.current_page,
        totalpages=state.total_pages,
        total=total,
        window=window or default_window,
    )
    return PagedResponse[ProductAll].from_state(
        items=items,
        state=state,
        calculator=calculator_for(window, default_window),
    )


def _validate_changes(product: Product, changes: dict[str, Any]) -> None:
    """Reject updates that break the auction terms of ``product``."""
    locked = {
        field
        for field in _LOCKED_FIELDS & changes.keys()
        if changes[field] != _stored_value(product, field)
    }
    if locked and product.bid_count > 0:
        raise ProductHasBidsError(product.id)

    if "image_urls" in changes and changes["image_urls"] is not None:
        _validate_images(changes["image_urls"])

    if not locked:
        return

    _validate_auction_terms(
        start_price=changes.get("start_price", product.start_price),
        price_step=changes.get("price_step", product.price_step),
        buy_now_price=changes.get("buy_now_price", product.buy_now_price),
        start_at=as_utc(product.start_at),
        end_at=changes.get("end_at", as_utc(product.end_at)),
        now=utc_now(),
        check_end=("end_at" in changes),
    )
    if "start_price" in changes:
        changes["current_price"] = changes["start_price"]


def _validate_auction_terms(  # noqa: PLR0913
    *,
    start_price: int,
    price_step: int,
    buy_now_price: int | None,
    start_at: datetime,
    end_at: datetime,
    now: datetime,
    check_end: bool = True,
) -> None:
    """Check prices and schedule of an auction.

    Raises:
        InvalidProductError: With the first violated rule as message.
    """
    if start_price < settings.min_start_price:
        raise InvalidProductError(
            ErrorNames.START_PRICE_TOO_LOW.format(value=settings.min_start_price)
        )
    if price_step < settings.min_price_step:
        raise InvalidProductError(
            ErrorNames.PRICE_STEP_TOO_LOW.format(value=settings.min_price_step)
        )
    if buy_now_price is not None and buy_now_price <= start_price:
        raise InvalidProductError(ErrorNames.BUY_NOW_TOO_LOW)
    if check_end and end_at <= now:
        raise InvalidProductError(ErrorNames.END_IN_PAST)

    duration = end_at - start_at
    if duration < timedelta(hours=settings.min_duration_hours):
        raise InvalidProductError(
            ErrorNames.DURATION_TOO_SHORT.format(value=settings.min_duration_hours)
        )
    if duration > timedelta(days=settings.max_duration_days):
        raise InvalidProductError(
            ErrorNames.DURATION_TOO_LONG.format(value=settings.max_duration_days)
        )


def _validate_images(image_urls: list[str]) -> None:
    if len(image_urls) > settings.max_images:
        raise InvalidProductError(
            ErrorNames.TOO_MANY_IMAGES.format(value=settings.max_images)
        )


def _stored_value(product: Product, field: str) -> Any:  # noqa: ANN401
    value = getattr(product, field)
    return as_utc(value) if isinstance(value, datetime) else value
