"""Bidder name masking for the public bid history."""

from typing import Final

__all__ = ["mask_bidder_name"]


_MASK: Final = "****"


def mask_bidder_name(name: str | None) -> str:
    """Hide all but the last word of a bidder's name.

    Args:
        name: Full display name of the bidder.

    Returns:
        ``****`` followed by the last word, e.g. ``****Anh`` for
        ``Nguyen Van Anh``, or only ``****`` for an empty name.
    """
    words = (name or "").split()
    if not words:
        return _MASK
    return f"{_MASK}{words[-1]}"
