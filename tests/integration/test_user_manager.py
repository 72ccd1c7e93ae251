"""Tests for tenant users."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from src.hrdesk.core.db import unit_of_work
from src.hrdesk.core.errors import ConflictError, NotFoundError
from src.hrdesk.managers import UserManager

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def ada(engine: AsyncEngine, caller):
    async with unit_of_work(engine) as session:
        return await UserManager(session, caller).add(
            {"email": "Ada@Example.com", "full_name": "Ada Lovelace"}
        )


async def test_add_lowercases_email(ada):
    assert ada.email == "ada@example.com"
    assert ada.is_active is True


async def test_duplicate_email_conflicts(engine: AsyncEngine, caller, ada):
    async with unit_of_work(engine) as session:
        with pytest.raises(ConflictError):
            await UserManager(session, caller).add(
                {"email": "ADA@example.com", "full_name": "Another Ada"}
            )


async def test_get_by_email(engine: AsyncEngine, caller, ada):
    async with unit_of_work(engine) as session:
        user = await UserManager(session, caller).get_by_email("ADA@EXAMPLE.COM")

    assert user.id == ada.id


async def test_partial_update(engine: AsyncEngine, caller, ada):
    async with unit_of_work(engine) as session:
        updated = await UserManager(session, caller).update(ada.id, {"is_active": False})

    assert updated.is_active is False
    assert updated.full_name == "Ada Lovelace"


async def test_update_email_conflict(engine: AsyncEngine, caller, ada):
    async with unit_of_work(engine) as session:
        manager = UserManager(session, caller)
        bob = await manager.add({"email": "bob@example.com", "full_name": "Bob"})
        with pytest.raises(ConflictError):
            await manager.update(bob.id, {"email": "ada@example.com"})


async def test_update_missing_user(engine: AsyncEngine, caller):
    async with unit_of_work(engine) as session:
        with pytest.raises(NotFoundError):
            await UserManager(session, caller).update(42, {"full_name": "Nobody"})


async def test_list_search_and_delete(engine: AsyncEngine, caller, ada):
    async with unit_of_work(engine) as session:
        manager = UserManager(session, caller)
        await manager.add({"email": "bob@example.com", "full_name": "Bob Builder"})
        assert (await manager.list(search="lovelace")).total == 1
        await manager.delete(ada.id)
        assert [u.full_name for u in (await manager.list()).items] == ["Bob Builder"]
