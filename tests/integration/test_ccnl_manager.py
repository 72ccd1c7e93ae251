"""Tests for CCNL reference data."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from src.hrdesk.core.db import unit_of_work
from src.hrdesk.core.errors import ValidationFailedError
from src.hrdesk.managers import CCNLManager

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

COMMERCIO = {
    "name": "Commercio Terziario",
    "code": "H011",
    "salary_table": [
        {"level": "Quadro", "base_salary": 2000, "contingency": 540.37, "hh": 40, "gg": 26},
        {"level": "1", "base_salary": 1800, "contingency": 537.52, "hh": 40, "gg": 26},
        {"level": "2", "base_salary": 1550, "contingency": 532.54, "hh": 40, "gg": 26},
        {"level": "2", "is_apprentice": True, "base_salary": 1300, "hh": 40, "gg": 26},
    ],
}


@pytest.fixture
async def commercio(engine: AsyncEngine):
    async with unit_of_work(engine) as session:
        ccnl = await CCNLManager(session).add(COMMERCIO)
        await CCNLManager(session).add({"name": "Metalmeccanici", "code": "C011"})
    return ccnl


async def test_add_with_salary_table(commercio):
    assert commercio.id is not None
    assert len(commercio.salary_table) == 4
    assert all(row.ccnl_id == commercio.id for row in commercio.salary_table)


async def test_get_by_id_with_and_without_salary(engine: AsyncEngine, commercio):
    async with unit_of_work(engine) as session:
        manager = CCNLManager(session)
        plain = await manager.get_by_id(commercio.id)
        full = await manager.get_by_id(commercio.id, with_salary=True)

    assert plain.name == "Commercio Terziario"
    assert [row.level for row in full.salary_table] == ["Quadro", "1", "2", "2"]


async def test_get_by_id_with_salary_for_empty_table(engine: AsyncEngine, commercio):
    async with unit_of_work(engine) as session:
        manager = CCNLManager(session)
        listed = await manager.list(search="metal")
        ccnl = await manager.get_by_id(listed.items[0].id, with_salary=True)

    assert ccnl.salary_table == []


async def test_list_with_salary(engine: AsyncEngine, commercio):
    async with unit_of_work(engine) as session:
        result = await CCNLManager(session).list(with_salary=True)

    assert result.total == 2
    assert [len(c.salary_table) for c in result.items] == [4, 0]


async def test_search_by_code(engine: AsyncEngine, commercio):
    async with unit_of_work(engine) as session:
        result = await CCNLManager(session).list(search="h011")

    assert [c.name for c in result.items] == ["Commercio Terziario"]


async def test_list_levels(engine: AsyncEngine, commercio):
    async with unit_of_work(engine) as session:
        manager = CCNLManager(session)
        levels = await manager.list_levels(commercio.id)
        second = await manager.list_levels(commercio.id, search="2")
        paged = await manager.list_levels(commercio.id, page=1, page_limit=3)

    assert levels.total == 4
    assert levels.items[0].ccnl.code == "H011"
    assert second.total == 2
    assert any(row.is_apprentice for row in second.items)
    assert len(paged.items) == 1


async def test_list_levels_of_unknown_ccnl(engine: AsyncEngine, commercio):
    async with unit_of_work(engine) as session:
        result = await CCNLManager(session).list_levels(999)

    assert result.items == []
    assert result.total == 0


async def test_add_rejects_negative_amounts(engine: AsyncEngine):
    async with unit_of_work(engine) as session:
        with pytest.raises(ValidationFailedError) as exc_info:
            await CCNLManager(session).add(
                {"name": "Bad", "salary_table": [{"level": "1", "base_salary": -1}]}
            )

    assert exc_info.value.errors == {
        "salary_table": {0: {"base_salary": ["Input should be greater than or equal to 0"]}}
    }
