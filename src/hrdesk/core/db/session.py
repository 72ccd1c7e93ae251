"""Database session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.hrdesk.core.db.engine import get_engine
from src.hrdesk.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def unit_of_work(
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[AsyncSession]:
    """Open a request-scoped session that commits on success.

    Args:
        engine: Optional engine override for testing.

    Yields:
        AsyncSession shared by every manager serving the request.

    Note:
        Any exception raised inside the block rolls the transaction back and
        is re-raised unchanged. The session is closed on every exit path.
    """
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            logger.debug("Rolling back unit of work")
            await session.rollback()
            raise
