"""Bid router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.config.db import get_session
from bidmarket.pagination import PagedResponse, WindowPolicy

from .models import BidCreate, BidPublic
from .service import get_bids_svc, place_bid_svc

__all__ = ["router"]


router = APIRouter(tags=["Bid"])


@router.get("", summary="Get the bid history of a product")
async def get_bids(
    product_id: UUID,
    db: Annotated[AsyncSession, Depends(get_session)],
    page: Annotated[int, Query(ge=1, description="Page number, starts at 1")] = 1,
    size: Annotated[int | None, Query(description="Items per page")] = None,
    window: Annotated[
        WindowPolicy | None, Query(description="Page window policy")
    ] = None,
) -> PagedResponse[BidPublic]:
    """Returns a paged bid history, highest bid first.

    Raises:
        InvalidPageSizeError: If the page size is not allowed.
        ProductNotFoundError: If the product does not exist.
    """
    response = await get_bids_svc(
        db, product_id, page=page, size=size, window=window
    )
    logger.debug(
        "Bids retrieved",
        product_id=product_id,
        page=response.page,
        total=response.total,
    )
    return response


@router.post("", summary="Place a bid")
async def place_bid(
    product_id: UUID,
    data: BidCreate,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Place a bid on a running auction.

    Args:
        product_id: The product to bid on.
        data: Bidder name and offered amount.
        request: The HTTP request object.
        db: Database session for persistence operations.

    Returns:
        201 Created with the new auction state and the bid URL in the
        Location header.

    Raises:
        ProductNotFoundError: If the product does not exist.
        AuctionNotActiveError: If the auction is not running.
        BidTooLowError: If the amount is below the minimum bid.
    """
    placed = await place_bid_svc(db, product_id, data)
    logger.debug("Bid created", product_id=product_id, bid_id=placed.bid.id)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=placed.model_dump(mode="json"),
        headers={"Location": f"{request.url}/{placed.bid.id}"},
    )
