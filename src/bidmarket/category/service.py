"""Category service."""

from uuid import UUID

from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.product.repository import count_products_in_category_db

from .exceptions import (
    CategoryAlreadyExistsError,
    CategoryInUseError,
    InvalidCategoryLevelError,
)
from .models import Category, CategoryCreate, CategoryPublic, CategoryTree
from .repository import (
    count_category_children_db,
    delete_category_db,
    get_categories_db,
    get_category_by_slug_db,
    get_category_db,
    save_category_db,
)
from .slug import category_slug

__all__ = [
    "create_category_svc",
    "delete_category_svc",
    "get_category_svc",
    "get_category_tree_svc",
]


async def get_category_tree_svc(db: AsyncSession) -> list[CategoryTree]:
    """Build the two-level category tree.

    Args:
        db: Database session for persistence operations.

    Returns:
        Top-level categories, each with its children.
    """
    categories = await get_categories_db(db)

    roots: dict[UUID, CategoryTree] = {
        c.id: CategoryTree.model_validate(c, from_attributes=True)
        for c in categories
        if c.parent_id is None
    }
    for category in categories:
        if category.parent_id is not None and category.parent_id in roots:
            roots[category.parent_id].children.append(
                CategoryPublic.model_validate(category, from_attributes=True)
            )

    return list(roots.values())


async def get_category_svc(db: AsyncSession, category_id: UUID) -> CategoryPublic:
    """Read a single category."""
    category = await get_category_db(db, category_id)
    return CategoryPublic.model_validate(category, from_attributes=True)


async def create_category_svc(db: AsyncSession, data: CategoryCreate) -> UUID:
    """Create a category below an optional top-level parent.

    Args:
        db: Database session for persistence operations.
        data: Name and optional parent of the category.

    Returns:
        The ID of the new category.

    Raises:
        CategoryNotFoundError: If the parent does not exist.
        InvalidCategoryLevelError: If the parent is itself a child category.
        CategoryAlreadyExistsError: If the slug is already taken.
    """
    level = 1
    if data.parent_id is not None:
        parent = await get_category_db(db, data.parent_id)
        if parent.level != 1:
            raise InvalidCategoryLevelError(data.parent_id)
        level = 2

    slug = category_slug(data.name)
    if await get_category_by_slug_db(db, slug) is not None:
        raise CategoryAlreadyExistsError(slug)

    category = await save_category_db(
        db,
        Category(
            name=data.name.strip(),
            slug=slug,
            parent_id=data.parent_id,
            level=level,
        ),
    )
    logger.debug("Category created", category_id=category.id, slug=slug)
    return category.id


async def delete_category_svc(db: AsyncSession, category_id: UUID) -> None:
    """Delete a category without children or products.

    Raises:
        CategoryNotFoundError: If the category does not exist.
        CategoryInUseError: If the category still has children or products.
    """
    category = await get_category_db(db, category_id)

    children = await count_category_children_db(db, category_id)
    products = await count_products_in_category_db(db, category_id)
    if children or products:
        raise CategoryInUseError(category_id)

    await delete_category_db(db, category)
