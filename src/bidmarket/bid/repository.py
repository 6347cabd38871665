"""Bid repository."""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from loguru import logger
from sqlmodel import col, func, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.product.models import Product

from .models import Bid

__all__ = ["count_bids_db", "get_bids_db", "save_bid_db"]


async def count_bids_db(db: AsyncSession, product_id: UUID) -> int:
    """Count the bids placed on a product."""
    stmt = (
        select(func.count()).select_from(Bid).where(col(Bid.product_id) == product_id)
    )
    return await db.scalar(stmt) or 0


async def get_bids_db(
    db: AsyncSession, product_id: UUID, *, offset: int, limit: int
) -> Sequence[Bid]:
    """Fetch a page of the bid history, highest and latest bids first.

    Args:
        db: Database session instance.
        product_id: The product whose bids are read.
        offset: Number of bids to skip.
        limit: Maximum number of bids to return.

    Returns:
        Bids ordered by amount, then by time, both descending.
    """
    stmt = (
        select(Bid)
        .where(col(Bid.product_id) == product_id)
        .order_by(
            col(Bid.amount).desc(), col(Bid.created_at).desc(), col(Bid.id).asc()
        )
        .offset(offset)
        .limit(limit)
    )
    result = await db.exec(stmt)
    bids = result.all()

    logger.debug("Bids retrieved", product_id=product_id, items_fetched=len(bids))
    return bids


async def save_bid_db(
    db: AsyncSession,
    product: Product,
    changes: dict[str, Any],
    bid: Bid,
) -> Bid | None:
    """Persist a bid together with the new auction state.

    The product row is only written while it still has the version the bid was
    checked against. Both rows are written in one transaction.

    Args:
        db: Database session instance.
        product: The product as read before checking the bid.
        changes: New price, bid count, bidder, status and end time.
        bid: The bid to save.

    Returns:
        The saved bid, or None if a concurrent write changed the product first.
        In that case the transaction is rolled back.
    """
    product_id, version = product.id, product.version
    stmt = (
        update(Product)
        .where(col(Product.id) == product_id)
        .where(col(Product.version) == version)
        .values(**changes, version=version + 1)
        .execution_options(synchronize_session=False)
    )
    result = await db.exec(stmt)  # type: ignore[call-overload]
    if result.rowcount != 1:
        await db.rollback()
        logger.debug(
            "Product changed during bid", product_id=product_id, version=version
        )
        return None

    db.add(bid)
    await db.commit()
    await db.refresh(bid)
    await db.refresh(product)

    logger.debug("Bid saved to DB", bid_id=bid.id, product_id=product_id)
    return bid
