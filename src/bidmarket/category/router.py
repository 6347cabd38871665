"""Category router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.config.db import get_session

from .models import CategoryCreate, CategoryPublic, CategoryTree
from .service import (
    create_category_svc,
    delete_category_svc,
    get_category_svc,
    get_category_tree_svc,
)

__all__ = ["router"]


router = APIRouter(tags=["Category"])


@router.get("", summary="Get the category tree")
async def get_categories(
    db: Annotated[AsyncSession, Depends(get_session)],
) -> list[CategoryTree]:
    """Retrieve all top-level categories with their children."""
    tree = await get_category_tree_svc(db)
    logger.debug("Category tree retrieved", roots=len(tree))
    return tree


@router.get("/{category_id}", summary="Get category by ID")
async def get_category(
    category_id: UUID, db: Annotated[AsyncSession, Depends(get_session)]
) -> CategoryPublic:
    """Retrieve a single category.

    Raises:
        CategoryNotFoundError: If the category does not exist.
    """
    return await get_category_svc(db, category_id)


@router.post("", summary="Create a category")
async def create_category(
    data: CategoryCreate,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Create a top-level or child category.

    Args:
        data: Name and optional parent of the category.
        request: The HTTP request object.
        db: Database session for persistence operations.

    Returns:
        201 Created with the category URL in the Location header.
    """
    category_id = await create_category_svc(db, data)
    logger.debug("Category created", category_id=category_id)

    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{request.url}/{category_id}"},
    )


@router.delete("/{category_id}", summary="Delete category by ID")
async def delete_category(
    category_id: UUID, db: Annotated[AsyncSession, Depends(get_session)]
) -> Response:
    """Delete a category that has no children and no products.

    Raises:
        CategoryNotFoundError: If the category does not exist.
        CategoryInUseError: If the category still has children or products.
    """
    await delete_category_svc(db, category_id)
    logger.debug("Category deleted", category_id=category_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
