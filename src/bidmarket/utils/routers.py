"""Router Initializer."""

from fastapi import FastAPI

from bidmarket.bid.router import router as bid_router
from bidmarket.category.router import router as category_router
from bidmarket.common.router import router as common_router
from bidmarket.product.router import router as product_router

__all__ = ["register_routers"]


def register_routers(app: FastAPI) -> None:
    """Register all API routers with the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(common_router)
    app.include_router(category_router, prefix="/categories")
    app.include_router(bid_router, prefix="/products/{product_id}/bids")
    app.include_router(product_router, prefix="/products")
