"""Common router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from loguru import logger
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.config.db import get_session

__all__ = ["router"]


router = APIRouter(tags=["Common", "Health"])


@router.get("/", include_in_schema=False, summary="Root endpoint")
async def root() -> Response:
    """Root endpoint."""
    return Response("OK")


@router.get("/health", include_in_schema=False, summary="Health check endpoint")
async def health(db: Annotated[AsyncSession, Depends(get_session)]) -> Response:
    """Report 204 when the database answers, 503 otherwise."""
    try:
        await db.exec(text("SELECT 1"))  # type: ignore[call-overload]
    except Exception as e:
        logger.warning("Health check failed", error=str(e))
        return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
