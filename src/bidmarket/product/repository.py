"""Product repository."""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from loguru import logger
from sqlmodel import col, delete, func, or_, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.bid.models import Bid
from bidmarket.category.repository import get_category_family_ids_db
from bidmarket.common.exceptions import VersionMismatchError
from bidmarket.utils.clock import utc_now

from .auction_status import AuctionStatus
from .exceptions import ProductNotFoundError
from .models import Product
from .query_builder import build_filters, build_order
from .schemas import ProductFilter
from .sort_option import ProductSort, SearchSort

__all__ = [
    "count_products_db",
    "count_products_in_category_db",
    "delete_product_db",
    "get_category_filter_ids_db",
    "get_product_db",
    "get_products_db",
    "get_related_products_db",
    "get_top_products_db",
    "save_product_db",
    "sync_auction_status_db",
    "update_product_db",
]


async def sync_auction_status_db(db: AsyncSession) -> None:
    """Move auctions whose start or end time has passed to their next status.

    Scheduled auctions become active once they start, active auctions end once
    their end time is reached. Each transition bumps the product version.

    Args:
        db: Database session instance.
    """
    now = utc_now()
    version = col(Product.version) + 1

    started = (
        update(Product)
        .where(col(Product.status) == AuctionStatus.SCHEDULED)
        .where(col(Product.start_at) <= now)
        .values(status=AuctionStatus.ACTIVE, version=version)
        .execution_options(synchronize_session=False)
    )
    ended = (
        update(Product)
        .where(
            or_(
                col(Product.status) == AuctionStatus.ACTIVE,
                col(Product.status) == AuctionStatus.SCHEDULED,
            )
        )
        .where(col(Product.end_at) <= now)
        .values(status=AuctionStatus.ENDED, version=version)
        .execution_options(synchronize_session=False)
    )
    await db.exec(started)  # type: ignore[call-overload]
    await db.exec(ended)  # type: ignore[call-overload]
    await db.commit()


async def count_products_db(db: AsyncSession, filters: ProductFilter) -> int:
    """Count the products matching the filters.

    Args:
        db: Database session instance.
        filters: Status, category, price and text filters.

    Returns:
        Number of matching products.
    """
    stmt = select(func.count()).select_from(Product).where(*build_filters(filters))
    return await db.scalar(stmt) or 0


async def get_products_db(
    db: AsyncSession,
    filters: ProductFilter,
    sort: ProductSort | SearchSort,
    *,
    offset: int,
    limit: int,
) -> Sequence[Product]:
    """Fetch a page of products.

    Args:
        db: Database session instance.
        filters: Status, category, price and text filters.
        sort: Sort option of the view.
        offset: Number of products to skip.
        limit: Maximum number of products to return.

    Returns:
        Products of the requested page in sort order.
    """
    stmt = (
        select(Product)
        .where(*build_filters(filters))
        .order_by(*build_order(sort, filters.query))
        .offset(offset)
        .limit(limit)
    )
    result = await db.exec(stmt)
    items = result.all()

    logger.debug(
        "Products retrieved", items_fetched=len(items), offset=offset, sort=sort
    )
    return items


async def get_top_products_db(
    db: AsyncSession, sort: ProductSort, limit: int
) -> Sequence[Product]:
    """Fetch the first active products for a highlight list."""
    return await get_products_db(db, ProductFilter(), sort, offset=0, limit=limit)


async def get_related_products_db(
    db: AsyncSession, product: Product, limit: int
) -> Sequence[Product]:
    """Fetch other active auctions of the same category, ending first.

    Args:
        db: Database session instance.
        product: The product whose category is looked up.
        limit: Maximum number of products to return.

    Returns:
        Related products, never including ``product`` itself.
    """
    stmt = (
        select(Product)
        .where(*build_filters(ProductFilter(category_ids=[product.category_id])))
        .where(col(Product.id) != product.id)
        .order_by(*build_order(ProductSort.ENDING_SOON))
        .limit(limit)
    )
    result = await db.exec(stmt)
    return result.all()


async def get_product_db(db: AsyncSession, product_id: UUID) -> Product:
    """Retrieve a product by its ID.

    Args:
        db: Database session instance.
        product_id: The ID of the product to retrieve.

    Returns:
        Product: The product with the given ID.

    Raises:
        ProductNotFoundError: If the product is not found.
    """
    product = await db.get(Product, product_id)
    if product is None:
        raise ProductNotFoundError(product_id)

    logger.debug("Product loaded from DB", product_id=product_id)
    return product


async def save_product_db(db: AsyncSession, product: Product) -> UUID:
    """Persist a new product.

    Args:
        db: Database session instance.
        product: The product to save.

    Returns:
        UUID: The ID of the saved product.
    """
    db.add(product)
    await db.commit()
    await db.refresh(product)

    logger.debug("Product saved to DB", product_id=product.id, title=product.title)
    return product.id


async def update_product_db(
    db: AsyncSession,
    product: Product,
    update_data: dict[str, Any],
    expected_version: int,
) -> Product:
    """Update a product using optimistic locking.

    Args:
        db: The database session instance.
        product: The product loaded in this session.
        update_data: Validated fields to change.
        expected_version: The version expected by the client.

    Returns:
        Product: The updated product.

    Raises:
        VersionMismatchError: If the version does not match (lost update).
    """
    if product.version != expected_version:
        raise VersionMismatchError(product.id, product.version)

    for field, value in update_data.items():
        setattr(product, field, value)

    product.version += 1

    await db.commit()
    await db.refresh(product)

    logger.debug("Product updated", product_id=product.id, version=product.version)
    return product


async def delete_product_db(db: AsyncSession, product_id: UUID) -> None:
    """Delete a product together with its bids.

    Args:
        db: Database session instance.
        product_id: The UUID of the product to delete.

    Raises:
        ProductNotFoundError: If no product with that ID exists.
    """
    product = await get_product_db(db, product_id)

    bids = delete(Bid).where(col(Bid.product_id) == product_id)
    await db.exec(bids)  # type: ignore[call-overload]
    await db.delete(product)
    await db.commit()
    logger.debug("Product deleted", product_id=product_id)


async def count_products_in_category_db(db: AsyncSession, category_id: UUID) -> int:
    """Count the products listed directly in a category."""
    stmt = (
        select(func.count())
        .select_from(Product)
        .where(col(Product.category_id) == category_id)
    )
    return await db.scalar(stmt) or 0


async def get_category_filter_ids_db(
    db: AsyncSession, category_id: UUID | None
) -> list[UUID] | None:
    """Resolve a category filter to the category and its children.

    Raises:
        CategoryNotFoundError: If the category does not exist.
    """
    if category_id is None:
        return None
    return await get_category_family_ids_db(db, category_id)
