"""CCNL reference data. Shared by every tenant, so not tenant-scoped."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.hrdesk.core.logging import get_logger
from src.hrdesk.managers.base import BaseManager, validate_payload
from src.hrdesk.managers.query import Join, text_search
from src.hrdesk.models import CCNL, SalaryTable
from src.hrdesk.schemas.ccnl import CCNLCreate
from src.hrdesk.schemas.pagination import QueryPage

logger = get_logger(__name__)


def with_salary_table() -> Join:
    return Join(CCNL.salary_table, outer=True, fetch=True)


class CCNLManager:
    def __init__(self, session: AsyncSession):
        self.records = BaseManager(session)

    async def add(self, payload: CCNLCreate | Mapping[str, Any]) -> CCNL:
        """Load a CCNL and its salary table."""
        model = validate_payload(CCNLCreate, payload)
        ccnl = CCNL(name=model.name, code=model.code)
        ccnl.salary_table = [SalaryTable(**row.model_dump()) for row in model.salary_table]

        await self.records.save(ccnl, *ccnl.salary_table)
        logger.info("CCNL created", ccnl_id=ccnl.id, levels=len(ccnl.salary_table))
        return ccnl

    async def get_by_id(self, ccnl_id: int, with_salary: bool = False) -> CCNL | None:
        return await self.records.get_by_id(
            CCNL, ccnl_id, with_salary_table() if with_salary else None
        )

    async def list(
        self,
        with_salary: bool = False,
        search: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[CCNL]:
        """List CCNLs by name or code, optionally with their salary tables."""
        return await self.records.list(
            CCNL,
            with_salary_table() if with_salary else None,
            text_search(search, CCNL.name, CCNL.code),
            page=page,
            page_limit=page_limit,
        )

    async def list_levels(
        self,
        ccnl_id: int,
        search: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[SalaryTable]:
        """List the salary levels of one CCNL, searching the level label."""
        return await self.records.list(
            SalaryTable,
            Join(SalaryTable.ccnl, on=CCNL.id == ccnl_id, fetch=True),
            text_search(search, SalaryTable.level),
            page=page,
            page_limit=page_limit,
        )
