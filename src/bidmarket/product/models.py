"""Product models."""

from datetime import datetime, timedelta
from typing import Final
from uuid import UUID, uuid4

from pydantic import computed_field, field_validator
from sqlmodel import JSON, Column, DateTime, Field, SQLModel, func

from bidmarket.bid.models import BidPublic
from bidmarket.category.models import CategoryPublic
from bidmarket.utils.clock import as_utc, utc_now

from .auction_status import AuctionStatus

__all__ = [
    "Product",
    "ProductAll",
    "ProductCreate",
    "ProductPublic",
    "ProductUpdate",
]


ENDING_SOON_WINDOW: Final = timedelta(hours=24)
HOT_BIDS_THRESHOLD: Final = 10


class _ProductBase(SQLModel):
    """Base Product model."""

    title: str = Field(
        min_length=1, max_length=200, description="Title of the product"
    )

    description: str | None = Field(
        default=None, description="HTML description of the product"
    )

    category_id: UUID = Field(description="Category the product is listed in")

    seller_name: str = Field(
        min_length=1, max_length=100, description="Display name of the seller"
    )

    image_urls: list[str] = Field(
        default_factory=list, description="Image URLs, the first one is the cover"
    )

    start_price: int = Field(ge=0, description="Opening price of the auction")

    price_step: int = Field(ge=1, description="Minimum bid increment")

    buy_now_price: int | None = Field(
        default=None, ge=0, description="Price that ends the auction immediately"
    )

    start_at: datetime | None = Field(
        default=None, description="Auction start, defaults to now"
    )

    end_at: datetime = Field(description="Auction end")

    auto_extend_enabled: bool = Field(
        default=False, description="Whether late bids extend the auction"
    )


class ProductCreate(_ProductBase):
    """Product creation model."""


class ProductUpdate(SQLModel):
    """Product update model with optional fields.

    Price and schedule fields may only change while the auction has no bids.
    """

    title: str | None = Field(default=None, min_length=1, max_length=200)

    description: str | None = Field(default=None)

    image_urls: list[str] | None = Field(default=None)

    auto_extend_enabled: bool | None = Field(default=None)

    start_price: int | None = Field(default=None, ge=0)

    price_step: int | None = Field(default=None, ge=1)

    buy_now_price: int | None = Field(default=None, ge=0)

    end_at: datetime | None = Field(default=None)


class ProductAll(SQLModel):
    """Product model for listing with limited fields."""

    id: UUID = Field(description="Unique identifier for the product")

    title: str = Field(description="Title of the product")

    category_id: UUID = Field(description="Category the product is listed in")

    image_urls: list[str] = Field(description="Image URLs")

    current_price: int = Field(description="Current highest price")

    buy_now_price: int | None = Field(description="Buy-now price")

    bid_count: int = Field(description="Number of bids placed")

    end_at: datetime = Field(description="Auction end")

    status: AuctionStatus = Field(description="Auction status")

    created_at: datetime = Field(description="Timestamp when the product was listed")

    @field_validator("end_at", "created_at", mode="after")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @computed_field
    @property
    def cover_image(self) -> str | None:
        """First image URL, used as the product thumbnail."""
        return self.image_urls[0] if self.image_urls else None

    @computed_field
    @property
    def is_ending_soon(self) -> bool:
        """Whether the auction ends within the next 24 hours."""
        remaining = as_utc(self.end_at) - utc_now()
        return timedelta(0) < remaining < ENDING_SOON_WINDOW

    @computed_field
    @property
    def is_hot(self) -> bool:
        """Whether the auction attracted more than ten bids."""
        return self.bid_count > HOT_BIDS_THRESHOLD


class ProductPublic(ProductAll):
    """Product model for detailed view with all fields."""

    version: int = Field(description="Version number of the product")

    description: str | None = Field(description="HTML description of the product")

    seller_name: str = Field(description="Display name of the seller")

    start_price: int = Field(description="Opening price of the auction")

    price_step: int = Field(description="Minimum bid increment")

    highest_bidder_name: str | None = Field(description="Current highest bidder")

    start_at: datetime = Field(description="Auction start")

    auto_extend_enabled: bool = Field(description="Whether late bids extend the end")

    auto_extend_count: int = Field(description="How often the end was extended")

    category: CategoryPublic | None = Field(
        default=None, description="Category the product is listed in"
    )

    updated_at: datetime = Field(
        description="Timestamp when the product was last updated"
    )

    top_bidders: list[BidPublic] = Field(
        default_factory=list, description="Leading bids, bidder names masked"
    )

    related: list[ProductAll] = Field(
        default_factory=list,
        description="Other active auctions in the same category",
    )

    @field_validator("start_at", "updated_at", mode="after")
    @classmethod
    def _detail_to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class Product(SQLModel, table=True):
    """Product model, holding the product together with its auction."""

    __tablename__ = "product"

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique identifier for the product.",
    )

    version: int = Field(default=0, description="Version number of the product.")

    title: str = Field(index=True, description="Title of the product.")

    description: str | None = Field(
        default=None, description="HTML description of the product."
    )

    category_id: UUID = Field(
        foreign_key="category.id", index=True, description="Category of the product."
    )

    seller_name: str = Field(description="Display name of the seller.")

    image_urls: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Image URLs, the first one is the cover.",
    )

    start_price: int = Field(description="Opening price of the auction.")

    current_price: int = Field(index=True, description="Current highest price.")

    price_step: int = Field(description="Minimum bid increment.")

    buy_now_price: int | None = Field(
        default=None, description="Price that ends the auction immediately."
    )

    bid_count: int = Field(default=0, index=True, description="Number of bids.")

    highest_bidder_name: str | None = Field(
        default=None, description="Name of the current highest bidder."
    )

    start_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Auction start.",
    )

    end_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Auction end.",
    )

    status: AuctionStatus = Field(
        default=AuctionStatus.ACTIVE, index=True, description="Auction status."
    )

    auto_extend_enabled: bool = Field(
        default=False, description="Whether late bids extend the auction."
    )

    auto_extend_count: int = Field(
        default=0, description="How often the auction end was extended."
    )

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), insert_default=func.now()),
        description="Timestamp when the product was created.",
    )

    updated_at: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True), onupdate=func.now(), insert_default=func.now()
        ),
        description="Timestamp when the product was last updated.",
    )
