"""AuctionStatus model for products."""

from enum import StrEnum

__all__ = ["AuctionStatus"]


class AuctionStatus(StrEnum):
    """Lifecycle state of a product's auction."""

    SCHEDULED = "scheduled"
    ACTIVE = "active"
    ENDED = "ended"
    CANCELLED = "cancelled"
