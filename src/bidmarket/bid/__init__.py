"""Bid module."""

from .exceptions import AuctionNotActiveError, BidTooLowError
from .masking import mask_bidder_name
from .models import Bid, BidCreate, BidPlaced, BidPublic

__all__ = [
    "AuctionNotActiveError",
    "Bid",
    "BidCreate",
    "BidPlaced",
    "BidPublic",
    "BidTooLowError",
    "mask_bidder_name",
]
