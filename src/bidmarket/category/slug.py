"""Slug generation for category names."""

from typing import Final

from slugify import slugify

__all__ = ["category_slug"]


_FALLBACK: Final = "category"
_MAX_LENGTH: Final = 100


def category_slug(name: str) -> str:
    """Return a lowercase ASCII slug, ``Điện thoại`` becomes ``dien-thoai``."""
    return slugify(name.replace("&", "and"), max_length=_MAX_LENGTH) or _FALLBACK
