"""Bid models."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import field_validator
from sqlmodel import Column, DateTime, Field, SQLModel, func

from bidmarket.utils.clock import as_utc

from .masking import mask_bidder_name

__all__ = ["Bid", "BidCreate", "BidPlaced", "BidPublic"]


class BidCreate(SQLModel):
    """Bid placement model."""

    bidder_name: str = Field(
        min_length=1, max_length=100, description="Display name of the bidder"
    )

    amount: int = Field(ge=1, description="Offered price")


class BidPublic(SQLModel):
    """Bid model for the public bid history.

    The bidder name is masked down to its last word.
    """

    id: UUID = Field(description="Unique identifier for the bid")

    bidder_name: str = Field(description="Masked display name of the bidder")

    amount: int = Field(description="Offered price")

    created_at: datetime = Field(description="Timestamp when the bid was placed")

    is_highest: bool = Field(
        default=False, description="Whether this is the leading bid"
    )

    @classmethod
    def from_bid(cls, bid: "Bid", *, is_highest: bool) -> "BidPublic":
        """Build the public view of a stored bid with the bidder name masked."""
        return cls(
            id=bid.id,
            bidder_name=mask_bidder_name(bid.bidder_name),
            amount=bid.amount,
            created_at=bid.created_at,
            is_highest=is_highest,
        )

    @field_validator("created_at", mode="after")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class BidPlaced(SQLModel):
    """Result of a successful bid."""

    bid: BidPublic = Field(description="The stored bid")

    current_price: int = Field(description="New current price of the auction")

    end_at: datetime = Field(description="Auction end after the bid")

    auto_extended: bool = Field(description="Whether the bid extended the auction")

    @field_validator("end_at", mode="after")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class Bid(SQLModel, table=True):
    """Bid model."""

    __tablename__ = "bid"

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique identifier for the bid.",
    )

    product_id: UUID = Field(
        foreign_key="product.id", index=True, description="Product the bid is for."
    )

    bidder_name: str = Field(description="Display name of the bidder.")

    amount: int = Field(index=True, description="Offered price.")

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), insert_default=func.now()),
        description="Timestamp when the bid was placed.",
    )
