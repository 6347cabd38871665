"""Product schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from .auction_status import AuctionStatus
from .models import ProductAll

__all__ = ["ProductFilter", "TopProducts"]


class ProductFilter(BaseModel):
    """Filters applied to a product list or search query."""

    status: AuctionStatus | None = Field(
        default=AuctionStatus.ACTIVE, description="Auction status to include"
    )
    category_ids: list[UUID] | None = Field(
        default=None, description="Category IDs the product must be listed in"
    )
    min_price: int | None = Field(default=None, ge=0, description="Lowest price")
    max_price: int | None = Field(default=None, ge=0, description="Highest price")
    query: str | None = Field(
        default=None, description="Case-insensitive text in title or description"
    )


class TopProducts(BaseModel):
    """Highlighted auctions shown on the home page."""

    ending_soon: list[ProductAll] = Field(description="Active auctions ending first")
    most_bids: list[ProductAll] = Field(description="Active auctions with most bids")
    highest_price: list[ProductAll] = Field(
        description="Active auctions with the highest current price"
    )
