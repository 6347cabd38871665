"""Category module."""

from .exceptions import CategoryNotFoundError
from .models import Category, CategoryPublic, CategoryTree
from .repository import get_category_db, get_category_family_ids_db

__all__ = [
    "Category",
    "CategoryNotFoundError",
    "CategoryPublic",
    "CategoryTree",
    "get_category_db",
    "get_category_family_ids_db",
]
