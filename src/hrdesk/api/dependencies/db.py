"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.hrdesk.core.db import unit_of_work


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """One unit of work per request.

    Commits when the endpoint returns, rolls back when it raises, and always
    releases the connection.
    """
    async with unit_of_work() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
