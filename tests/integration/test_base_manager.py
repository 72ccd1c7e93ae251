"""Tests for the paginated CRUD primitive."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.hrdesk.core.db import unit_of_work
from src.hrdesk.core.errors import InvalidArgumentError
from src.hrdesk.managers import BaseCustomerManager, BaseManager, Join, Where
from src.hrdesk.models import CCNL, Company, Person, Tenant
from tests.factories import CCNLFactory
from tests.helpers import caller_for, create_company_with_bases, create_person

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def persons(engine: AsyncEngine, tenant: Tenant, other_tenant: Tenant) -> list[int]:
    """23 persons in `tenant`, 4 in `other_tenant`. Returns the ids in `tenant`."""
    async with unit_of_work(engine) as session:
        ids = [(await create_person(session, tenant, name=f"Person {i:02d}")).id for i in range(23)]
        for i in range(4):
            await create_person(session, other_tenant, name=f"Other {i}")
    return ids


async def test_pages_partition_all_rows(db_session: AsyncSession, tenant: Tenant, persons):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    seen: list[int] = []
    for page in range(6):
        result = await manager.list(Person, page=page, page_limit=5)
        assert result.total == 23
        seen.extend(p.id for p in result.items)

    assert seen == sorted(persons)


async def test_last_page_is_partial(db_session: AsyncSession, tenant: Tenant, persons):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    result = await manager.list(Person, page=4, page_limit=5)

    assert len(result.items) == 3
    assert result.total == 23


async def test_page_past_the_end_is_empty(db_session: AsyncSession, tenant: Tenant, persons):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    result = await manager.list(Person, page=100, page_limit=5)

    assert result.items == []
    assert result.total == 23


async def test_default_page_limit(db_session: AsyncSession, tenant: Tenant, persons):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    result = await manager.list(Person)

    assert len(result.items) == 10


async def test_zero_page_limit_counts_only(db_session: AsyncSession, tenant: Tenant, persons):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    result = await manager.list(Person, page_limit=0)

    assert result.items == []
    assert result.total == 23


@pytest.mark.parametrize(
    ("page", "page_limit"),
    [(-1, 5), (0, -1), ("0", 5), (True, 5), (10**18, 100), (0, 2**63)],
)
async def test_invalid_pagination(db_session: AsyncSession, tenant: Tenant, page, page_limit):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    with pytest.raises(InvalidArgumentError):
        await manager.list(Person, page=page, page_limit=page_limit)


async def test_huge_page_with_zero_limit_still_counts(
    db_session: AsyncSession, tenant: Tenant, persons
):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    result = await manager.list(Person, page=10**18, page_limit=0)

    assert result.items == []
    assert result.total == 23


async def test_fan_out_join_yields_distinct_rows(db_session: AsyncSession, tenant: Tenant):
    await create_company_with_bases(db_session, tenant, base_count=3)
    await create_company_with_bases(db_session, tenant, base_count=2)
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    result = await manager.list(Company, Join(Company.bases, outer=True, fetch=True))

    assert result.total == 2
    assert [len(c.bases) for c in result.items] == [3, 2]


async def test_find_one_and_get_by_id(db_session: AsyncSession, tenant: Tenant, persons):
    manager = BaseCustomerManager(db_session, caller_for(tenant))

    found = await manager.find_one(Person, Where(Person.name == "Person 07"))
    assert found is not None
    assert await manager.get_by_id(Person, found.id) is found
    assert await manager.get_by_id(Person, None) is None
    assert await manager.find_one(Person, Where(Person.name == "nobody")) is None


async def test_unscoped_manager_sees_shared_rows(db_session: AsyncSession):
    for _ in range(3):
        db_session.add(CCNLFactory.build())
    await db_session.flush()
    manager = BaseManager(db_session)

    result = await manager.list(CCNL)

    assert result.total == 3


async def test_delete_is_idempotent(engine: AsyncEngine, tenant: Tenant, persons):
    async with unit_of_work(engine) as session:
        manager = BaseCustomerManager(session, caller_for(tenant))
        await manager.delete(Person, persons[0])
        await manager.delete(Person, persons[0])
        await manager.delete(Person, 999_999)

    async with unit_of_work(engine) as session:
        manager = BaseCustomerManager(session, caller_for(tenant))
        assert await manager.get_by_id(Person, persons[0]) is None
        assert (await manager.list(Person)).total == 22


async def test_save_stamps_caller_tenant(db_session: AsyncSession, tenant: Tenant, other_tenant):
    manager = BaseCustomerManager(db_session, caller_for(tenant))
    person = Person(name="Ada", tenant_id=other_tenant.id)

    await manager.save(person)

    assert person.id is not None
    assert person.tenant_id == tenant.id
