"""Database engine and request-scoped sessions.

Bids and product updates rely on version-conditioned writes, so every request
works in its own session and SQLite enforces the product and bid foreign keys.
"""

from collections.abc import AsyncGenerator
from typing import Any, Final

from loguru import logger
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .config import settings

__all__ = ["create_db_engine", "engine", "get_session"]


def create_db_engine(url: str, **options: Any) -> AsyncEngine:  # noqa: ANN401
    """Create the async engine for a database URL.

    SQLite connections wait up to ``db_timeout`` seconds for the write lock
    held by a concurrent bid and have foreign keys switched on.

    Args:
        url: SQLAlchemy database URL.
        **options: Extra ``create_async_engine`` options, e.g. a pool class.

    Returns:
        The configured engine.
    """
    is_sqlite = make_url(url).get_backend_name() == "sqlite"
    connect_args = (
        {"check_same_thread": False, "timeout": settings.db_timeout}
        if is_sqlite
        else {}
    )
    db_engine = create_async_engine(
        url, connect_args=connect_args, echo=settings.db_logging, **options
    )

    if is_sqlite:

        @event.listens_for(db_engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection: Any, _: Any) -> None:  # noqa: ANN401
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine: Final = create_db_engine(
    settings.db_url,
    future=settings.db_future,
    pool_timeout=settings.db_pool_timeout,
    pool_size=settings.db_pool_size,
    pool_pre_ping=settings.db_pool_pre_ping,
    max_overflow=settings.db_max_overflow,
    pool_recycle=settings.db_pool_recycle,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Yield one session per request, committed on success.

    Errors roll the whole request back, including bids whose product update
    lost against a concurrent writer.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        try:
            yield session
            await session.commit()
        except Exception:
            logger.debug("Request session rolled back")
            await session.rollback()
            raise
