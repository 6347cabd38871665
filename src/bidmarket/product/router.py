"""Product router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.config.db import get_session
from bidmarket.pagination import PagedResponse, WindowPolicy
from bidmarket.utils.etag_parser import format_etag, matches_if_none_match

from .auction_status import AuctionStatus
from .models import ProductAll, ProductCreate, ProductPublic, ProductUpdate
from .schemas import TopProducts
from .service import (
    create_product_svc,
    delete_product_svc,
    get_product_svc,
    get_products_svc,
    get_top_products_svc,
    search_products_svc,
    update_product_svc,
)
from .sort_option import ProductSort, SearchSort

__all__ = ["router"]


router = APIRouter(tags=["Product"])


@router.get("", summary="Get paged products")
async def get_products(  # noqa: PLR0913, PLR0917
    db: Annotated[AsyncSession, Depends(get_session)],
    page: Annotated[int, Query(ge=1, description="Page number, starts at 1")] = 1,
    size: Annotated[int | None, Query(description="Items per page")] = None,
    sort: Annotated[ProductSort, Query(description="Sort order")] = ProductSort.NEWEST,
    status_filter: Annotated[
        AuctionStatus | None, Query(alias="status", description="Auction status")
    ] = AuctionStatus.ACTIVE,
    category_id: Annotated[UUID | None, Query(description="Category filter")] = None,
    min_price: Annotated[int | None, Query(ge=0, description="Lowest price")] = None,
    max_price: Annotated[int | None, Query(ge=0, description="Highest price")] = None,
    window: Annotated[
        WindowPolicy | None, Query(description="Page window policy")
    ] = None,
) -> PagedResponse[ProductAll]:
    """Returns a paged response of products.

    Args:
        db: Database session.
        page: The page number, clamped to the last page.
        size: The page size, one of the allowed sizes.
        sort: Sort order of the list.
        status_filter: Auction status, active by default.
        category_id: Category filter, a top-level category includes children.
        min_price: Lowest current price.
        max_price: Highest current price.
        window: Page window policy, the configured list policy by default.

    Returns:
        PagedResponse: Products of the requested page with navigation.

    Raises:
        InvalidPageSizeError: If the page size is not allowed.
        CategoryNotFoundError: If the category filter does not exist.
    """
    response = await get_products_svc(
        db,
        page=page,
        size=size,
        sort=sort,
        status=status_filter,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        window=window,
    )
    logger.debug(
        "Products retrieved",
        page=response.page,
        size=response.size,
        totalpages=response.totalpages,
        total=response.total,
    )
    return response


@router.get("/search", summary="Search active products")
async def search_products(  # noqa: PLR0913, PLR0917
    db: Annotated[AsyncSession, Depends(get_session)],
    q: Annotated[str, Query(description="Search text")],
    page: Annotated[int, Query(ge=1, description="Page number, starts at 1")] = 1,
    size: Annotated[int | None, Query(description="Items per page")] = None,
    sort: Annotated[
        SearchSort, Query(description="Sort order")
    ] = SearchSort.RELEVANCE,
    category_id: Annotated[UUID | None, Query(description="Category filter")] = None,
    min_price: Annotated[int | None, Query(ge=0, description="Lowest price")] = None,
    max_price: Annotated[int | None, Query(ge=0, description="Highest price")] = None,
    window: Annotated[
        WindowPolicy | None, Query(description="Page window policy")
    ] = None,
) -> PagedResponse[ProductAll]:
    """Search active auctions by title and description.

    The search text is trimmed before its length is checked.

    Raises:
        InvalidSearchQueryError: If the trimmed search text is too short.
        InvalidPageSizeError: If the page size is not allowed.
        CategoryNotFoundError: If the category filter does not exist.
    """
    response = await search_products_svc(
        db,
        query=q,
        page=page,
        size=size,
        sort=sort,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        window=window,
    )
    logger.debug("Products searched", q=q, total=response.total, page=response.page)
    return response


@router.get("/top", summary="Get highlighted products")
async def get_top_products(
    db: Annotated[AsyncSession, Depends(get_session)],
) -> TopProducts:
    """Active auctions ending soon, with most bids and with the highest price."""
    return await get_top_products_svc(db)


@router.get("/{product_id}", response_model=None, summary="Get product by ID")
async def get_product(
    product_id: UUID,
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> ProductPublic | Response:
    """Retrieve a single product by its ID.

    Args:
        product_id: The ID of the product to retrieve
        request: The HTTP request object
        response: FastAPI response object for setting headers
        db: Database session for persistence operations

    Returns:
        The product, or 304 Not Modified if the ETag matches the current version

    Raises:
        ProductNotFoundError: If the product with the specified ID doesn't exist
    """
    product, version = await get_product_svc(db, product_id)
    etag = format_etag(version)

    if matches_if_none_match(request, version):
        logger.debug("Product not modified", product_id=product_id, version=version)
        return Response(
            status_code=status.HTTP_304_NOT_MODIFIED, headers={"ETag": etag}
        )

    response.headers["ETag"] = etag
    logger.debug("Product retrieved", product_id=product_id, version=version)
    return product


@router.post("", summary="Create a product")
async def create_product(
    data: ProductCreate,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """List a new product for auction.

    Returns:
        201 Created with the product URL in the Location header.

    Raises:
        CategoryNotFoundError: If the category does not exist.
        InvalidProductError: If the auction terms are invalid.
    """
    product_id = await create_product_svc(db, data)
    logger.debug("Product created", product_id=product_id)

    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{request.url}/{product_id}"},
    )


@router.put("/{product_id}", summary="Update product by ID")
async def update_product(
    product_id: UUID,
    request: Request,
    data: ProductUpdate,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Update a product with version control using ETags.

    Args:
        product_id: The UUID of the product to update
        request: The HTTP request object containing If-Match header
        data: The fields to change
        db: Database session for persistence operations

    Returns:
        204 No Content response with Location and ETag headers

    Raises:
        VersionMismatchError: If the ETag doesn't match current version
        VersionMissingError: If the If-Match header is missing
        ProductNotFoundError: If the product doesn't exist
        ProductHasBidsError: If price or schedule change after the first bid
    """
    new_version = await update_product_svc(db, request, product_id, data)
    logger.debug("Product updated", product_id=product_id, version=new_version)

    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={"Location": f"{request.url.path}", "ETag": format_etag(new_version)},
    )


@router.delete("/{product_id}", summary="Delete product by ID")
async def delete_product(
    product_id: UUID, db: Annotated[AsyncSession, Depends(get_session)]
) -> Response:
    """Delete a product and its bids.

    Raises:
        ProductNotFoundError: If no product with that ID exists.
    """
    await delete_product_svc(db, product_id)
    logger.debug("Product deleted", product_id=product_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
