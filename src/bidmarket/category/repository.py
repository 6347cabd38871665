"""Category repository."""

from collections.abc import Sequence
from uuid import UUID

from loguru import logger
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from .exceptions import CategoryNotFoundError
from .models import Category

__all__ = [
    "count_category_children_db",
    "delete_category_db",
    "get_categories_db",
    "get_category_by_slug_db",
    "get_category_db",
    "get_category_family_ids_db",
    "save_category_db",
]


async def get_categories_db(db: AsyncSession) -> Sequence[Category]:
    """Retrieve all categories ordered by level and name.

    Args:
        db: Database session instance.

    Returns:
        All categories, top-level categories first.
    """
    stmt = select(Category).order_by(col(Category.level), col(Category.name))
    result = await db.exec(stmt)
    categories = result.all()

    logger.debug("Categories loaded from DB", length=len(categories))
    return categories


async def get_category_db(db: AsyncSession, category_id: UUID) -> Category:
    """Retrieve a category by its ID.

    Args:
        db: Database session instance.
        category_id: The ID of the category to retrieve.

    Returns:
        Category: The category with the given ID.

    Raises:
        CategoryNotFoundError: If the category is not found.
    """
    category = await db.get(Category, category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return category


async def get_category_by_slug_db(db: AsyncSession, slug: str) -> Category | None:
    """Retrieve a category by its slug, or None if it does not exist."""
    result = await db.exec(select(Category).where(Category.slug == slug))
    return result.first()


async def get_category_family_ids_db(
    db: AsyncSession, category_id: UUID
) -> list[UUID]:
    """Return the category ID together with the IDs of its children.

    Args:
        db: Database session instance.
        category_id: ID of a top-level or child category.

    Returns:
        The given ID followed by its child IDs.

    Raises:
        CategoryNotFoundError: If the category is not found.
    """
    await get_category_db(db, category_id)
    result = await db.exec(select(Category.id).where(Category.parent_id == category_id))
    return [category_id, *result.all()]


async def count_category_children_db(db: AsyncSession, category_id: UUID) -> int:
    """Count the direct children of a category."""
    stmt = (
        select(func.count())
        .select_from(Category)
        .where(Category.parent_id == category_id)
    )
    return await db.scalar(stmt) or 0


async def save_category_db(db: AsyncSession, category: Category) -> Category:
    """Persist a new category.

    Args:
        db: Database session instance.
        category: The category to save.

    Returns:
        Category: The saved category with generated fields loaded.
    """
    db.add(category)
    await db.commit()
    await db.refresh(category)

    logger.debug("Category saved to DB", category=category)
    return category


async def delete_category_db(db: AsyncSession, category: Category) -> None:
    """Delete a category.

    Args:
        db: Database session instance.
        category: The category to delete.
    """
    await db.delete(category)
    await db.commit()
    logger.debug("Category deleted", category_id=category.id)
