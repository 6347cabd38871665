"""Bid service."""

from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.common.exceptions import VersionMismatchError
from bidmarket.config.config import settings
from bidmarket.pagination import (
    PagedResponse,
    WindowPolicy,
    calculator_for,
    resolve_state,
    validate_page_size,
)
from bidmarket.product.auction_status import AuctionStatus
from bidmarket.product.models import Product
from bidmarket.product.repository import get_product_db, sync_auction_status_db
from bidmarket.utils.clock import as_utc, utc_now
from bidmarket.utils.prometheus import BIDS_PLACED

from .exceptions import AuctionNotActiveError, BidTooLowError
from .models import Bid, BidCreate, BidPlaced, BidPublic
from .repository import count_bids_db, get_bids_db, save_bid_db

__all__ = ["get_bids_svc", "minimum_bid", "place_bid_svc"]

_MAX_ATTEMPTS = 3


def minimum_bid(product: Product) -> int:
    """Return the lowest amount the next bid on ``product`` may offer.

    The first bid may match the start price, every later bid has to beat the
    current price by at least one price step.
    """
    if product.bid_count == 0:
        return product.start_price
    return product.current_price + product.price_step


async def place_bid_svc(
    db: AsyncSession, product_id: UUID, data: BidCreate
) -> BidPlaced:
    """Place a bid on a running auction.

    A bid reaching the buy-now price ends the auction at once. A late bid on
    an auction with auto-extend enabled moves its end further out. When a
    concurrent bid changes the product first, the bid is checked again against
    the new state.

    Args:
        db: Database session for persistence operations.
        product_id: The product to bid on.
        data: Bidder name and offered amount.

    Returns:
        The stored bid together with the new auction state.

    Raises:
        ProductNotFoundError: If the product does not exist.
        AuctionNotActiveError: If the auction is not running.
        BidTooLowError: If the amount is below the minimum bid.
        VersionMismatchError: If concurrent writes kept winning.
    """
    await sync_auction_status_db(db)
    bidder_name = data.bidder_name.strip()

    for attempt in range(1, _MAX_ATTEMPTS + 1):
        product = await get_product_db(db, product_id)
        version = product.version

        now = utc_now()
        end_at = as_utc(product.end_at)
        if product.status != AuctionStatus.ACTIVE or end_at <= now:
            raise AuctionNotActiveError(product_id)

        minimum = minimum_bid(product)
        if data.amount < minimum:
            raise BidTooLowError(data.amount, minimum)

        changes: dict[str, Any] = {
            "current_price": data.amount,
            "bid_count": product.bid_count + 1,
            "highest_bidder_name": bidder_name,
        }
        outcome = "bid"
        auto_extended = False
        if product.buy_now_price is not None and data.amount >= product.buy_now_price:
            changes["status"] = AuctionStatus.ENDED
            end_at = now
            outcome = "buy_now"
        elif _should_extend(product, end_at, now):
            end_at += timedelta(minutes=settings.auto_extend_minutes)
            changes["auto_extend_count"] = product.auto_extend_count + 1
            auto_extended = True
        changes["end_at"] = end_at

        bid = await save_bid_db(
            db,
            product,
            changes,
            Bid(
                product_id=product_id,
                bidder_name=bidder_name,
                amount=data.amount,
                created_at=now,
            ),
        )
        if bid is not None:
            break
        logger.debug("Retrying bid", product_id=product_id, attempt=attempt)
    else:
        raise VersionMismatchError(product_id, version)

    BIDS_PLACED.labels(outcome).inc()
    logger.debug(
        "Bid placed",
        product_id=product_id,
        amount=data.amount,
        bid_count=changes["bid_count"],
        outcome=outcome,
        auto_extended=auto_extended,
    )

    return BidPlaced(
        bid=BidPublic.from_bid(bid, is_highest=True),
        current_price=data.amount,
        end_at=end_at,
        auto_extended=auto_extended,
    )


async def get_bids_svc(
    db: AsyncSession,
    product_id: UUID,
    *,
    page: int,
    size: int | None,
    window: WindowPolicy | None,
) -> PagedResponse[BidPublic]:
    """Read one page of the bid history of a product.

    Args:
        db: Database session for persistence operations.
        product_id: The product whose bids are read.
        page: Requested page, clamped to the history.
        size: Requested page size, or None for the default.
        window: Page window policy override.

    Returns:
        Bids with masked bidder names, the leading bid flagged.

    Raises:
        InvalidPageSizeError: If the page size is not allowed.
        ProductNotFoundError: If the product does not exist.
    """
    size = validate_page_size(size)
    await get_product_db(db, product_id)

    total = await count_bids_db(db, product_id)
    state = resolve_state(page, size, total)
    bids = await get_bids_db(
        db, product_id, offset=state.offset, limit=state.items_per_page
    )

    items = [
        BidPublic.from_bid(bid, is_highest=state.current_page == 1 and index == 0)
        for index, bid in enumerate(bids)
    ]
    return PagedResponse[BidPublic].from_state(
        items=items,
        state=state,
        calculator=calculator_for(window, settings.list_window_policy),
    )


def _should_extend(product: Product, end_at: datetime, now: datetime) -> bool:
    if not (settings.auto_extend_enabled and product.auto_extend_enabled):
        return False
    return end_at - now <= timedelta(minutes=settings.auto_extend_threshold_minutes)

